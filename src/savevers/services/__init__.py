"""External collaborators for savevers.

This package provides interfaces to things outside the engine:
- filesystem: Reading files and stdin
- git: The committed copy of a file, for diffs against HEAD
"""

from .filesystem import FileReadError, file_exists, read_file, read_source
from .git import GitError, get_committed_content, get_repo_root, run_git

__all__ = [
    "FileReadError",
    "GitError",
    "file_exists",
    "get_committed_content",
    "get_repo_root",
    "read_file",
    "read_source",
    "run_git",
]
