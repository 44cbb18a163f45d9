"""savevers: numbered revision history for saved files."""

__version__ = "0.1.0"
