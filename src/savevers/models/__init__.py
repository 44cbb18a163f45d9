"""Pydantic data models for savevers.

This package defines the data structures used throughout savevers for:
- Numbered revisions of a file (Revision)
- Diff selectors and their resolved targets (Selector, DiffTarget)
- Purge counters (PurgeResult)

Example:
    >>> from savevers.models import Revision
    >>> Revision(slot=1, path="notes.txt.0001.clean").model_dump_json()
"""

from .purge import PurgeResult
from .revision import DiffTarget, Revision, Selector, SelectorKind

__all__ = [
    "DiffTarget",
    "PurgeResult",
    "Revision",
    "Selector",
    "SelectorKind",
]
