"""Constants for savevers."""

# Revision numbering
DEFAULT_MAX_VERSION = 9999
DEFAULT_SCAN_FLOOR = 9999  # Purge always walks at least this many slots
DEFAULT_BACKUP_SUFFIX = ".clean"
DEFAULT_FILE_PATTERNS = "*"

# Purge
DEFAULT_PURGE_CUTOFF = 1

# Configuration
CONFIG_FILENAME = ".savevers.toml"

# Subprocess timeouts (seconds)
GIT_TIMEOUT = 30

# Diff selector tokens
SELECTOR_CLOSE = "-c"
SELECTOR_COMMITTED = "-cvs"
