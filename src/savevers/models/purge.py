"""Purge result model."""

from pathlib import Path

from pydantic import BaseModel, Field


class PurgeResult(BaseModel):
    """Counts accumulated by one or more retention scans.

    Attributes:
        purged: Number of revision files deleted
        retained: Number of revision files kept
        purged_paths: Deleted revision files, in deletion order
    """

    purged: int = Field(default=0, ge=0)
    retained: int = Field(default=0, ge=0)
    purged_paths: list[Path] = Field(default_factory=list)

    def add(self, other: "PurgeResult") -> None:
        """Fold another scan's counts into this one."""
        self.purged += other.purged
        self.retained += other.retained
        self.purged_paths.extend(other.purged_paths)

    def summary(self) -> str:
        """Return the one-line report shown after a purge."""
        return f"{self.purged} files purged; {self.retained} remain."
