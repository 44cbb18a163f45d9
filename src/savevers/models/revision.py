"""Revision models.

A revision is one saved-off copy of a file, stored beside it as
``<file>.<zero-padded slot><suffix>``. Slots are never renumbered.
"""

from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class Revision(BaseModel):
    """A single numbered revision of a file.

    Attributes:
        slot: Revision number (1-indexed)
        path: Location of the revision file
        size: Size in bytes when listed
        modified_at: Modification time when listed
    """

    slot: int = Field(ge=1, description="Revision slot number")
    path: Path = Field(description="Revision file path")
    size: int | None = Field(default=None, description="File size in bytes")
    modified_at: datetime | None = Field(default=None, description="Last modification time")


class SelectorKind(str, Enum):
    """Kinds of diff selector."""

    SAVED = "saved"
    SLOT = "slot"
    RELATIVE = "relative"
    COMMITTED = "committed"
    CLOSE = "close"


class Selector(BaseModel):
    """Parsed diff selector.

    ``value`` is the slot for SLOT and the (negative) offset for RELATIVE.
    """

    kind: SelectorKind
    value: int = 0


class DiffTarget(BaseModel):
    """Resolved right-hand side of a diff."""

    label: str = Field(description="Human-readable name of the target")
    path: Path | None = Field(default=None, description="File to read, if on disk")
    content: str | None = Field(default=None, description="Content, if fetched elsewhere")
    slot: int | None = None
