"""CLI command implementations for savevers.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .diff import diff
from .init import init
from .purge import purge_cmd
from .revisions import list_cmd
from .save import restore, save

__all__ = [
    "diff",
    "init",
    "list_cmd",
    "purge_cmd",
    "restore",
    "save",
]
