"""Core engine for savevers.

This package contains the revision engine, free of console I/O:
- revisions: Revision naming, slot allocation and diff selectors
- interceptor: Save interception that moves old content into a revision
- retention: Retention scan and purge
- diff_session: The single diff view and its console state
"""

from .diff_session import close_for_parent, close_session, get_session, open_session, show_diff
from .interceptor import BackupSetting, SaveInterceptor, restore_revision, save_file
from .retention import PurgeError, expand_targets, parse_cutoff, purge, scan_retention
from .revisions import (
    RevisionError,
    allocate_slot,
    format_extension,
    is_revision_file,
    list_revisions,
    next_free_slot,
    parse_selector,
    resolve_target,
    revision_path,
)

__all__ = [
    "BackupSetting",
    "PurgeError",
    "RevisionError",
    "SaveInterceptor",
    "allocate_slot",
    "close_for_parent",
    "close_session",
    "expand_targets",
    "format_extension",
    "get_session",
    "is_revision_file",
    "list_revisions",
    "next_free_slot",
    "open_session",
    "parse_cutoff",
    "parse_selector",
    "purge",
    "resolve_target",
    "restore_revision",
    "revision_path",
    "save_file",
    "scan_retention",
    "show_diff",
]
