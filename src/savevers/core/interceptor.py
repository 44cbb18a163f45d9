"""Save interception: move the previous content of a file into a new revision.

The active backup suffix is a single mutable setting. Before a save the
interceptor points it at the freshly allocated revision extension, the save
renames the old file using whatever suffix is active, and afterwards the
interceptor puts the original value back. Saved values are kept on a stack,
one entry per save in progress, so nested saves restore in order.
"""

import contextlib
import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from ..config import SaveversConfig
from ..services import file_exists, read_file
from .revisions import allocate_slot, revision_path

logger = logging.getLogger(__name__)


@dataclass
class BackupSetting:
    """The backup suffix in effect for the next save."""

    suffix: str


@dataclass
class SaveInterceptor:
    """Arms the backup suffix for exactly one save at a time."""

    config: SaveversConfig
    setting: BackupSetting
    # None marks a save that was not armed
    _saved: list[str | None] = field(default_factory=list, init=False, repr=False)

    @property
    def armed(self) -> bool:
        """Return True while a save is between before_save and after_save."""
        return any(value is not None for value in self._saved)

    def before_save(self, path: Path) -> int | None:
        """Point the backup suffix at the next free revision of path.

        Args:
            path: File about to be saved

        Returns:
            Allocated slot, or None when versioning does not apply
        """
        if not self.setting.suffix or not self.config.versions.matches(path):
            self._saved.append(None)
            return None

        # A failed probe must leave nothing on the stack
        extension, slot = allocate_slot(path, self.config.versions)
        self._saved.append(self.setting.suffix)
        self.setting.suffix = extension
        logger.debug("Armed %s for %s", extension, path)
        return slot

    def after_save(self, path: Path) -> None:
        """Restore the backup suffix saved by the matching before_save."""
        if not self._saved:
            return
        previous = self._saved.pop()
        if previous is None or not self.setting.suffix:
            return
        self.setting.suffix = previous
        logger.debug("Restored backup suffix %s after saving %s", previous, path)

    @contextlib.contextmanager
    def intercept(self, path: Path) -> Iterator[int | None]:
        """Run before_save, then after_save even if the save fails."""
        slot = self.before_save(path)
        try:
            yield slot
        finally:
            self.after_save(path)


def write_with_backup(path: Path, content: str, suffix: str) -> Path | None:
    """Rename path to path + suffix, then write content to path.

    If writing fails the backup is moved back before the error propagates.

    Args:
        path: File to write
        content: New content
        suffix: Backup suffix in effect (empty means no backup)

    Returns:
        Backup path, or None if no backup was made
    """
    backup: Path | None = None
    if suffix and path.exists():
        backup = Path(str(path) + suffix)
        os.replace(path, backup)

    try:
        path.write_text(content)
    except OSError:
        if backup is not None:
            os.replace(backup, path)
        raise
    return backup


def save_file(
    path: Path,
    content: str,
    config: SaveversConfig,
    interceptor: SaveInterceptor | None = None,
) -> Path | None:
    """Save content to path, keeping the previous content as a revision.

    Args:
        path: File to write
        content: New content
        config: Savevers configuration
        interceptor: Interceptor to use (default: a fresh one for this save)

    Returns:
        Revision written, or None if the file was new or not versioned
    """
    if interceptor is None:
        interceptor = SaveInterceptor(config, BackupSetting(config.versions.backup_suffix))

    with interceptor.intercept(path) as slot:
        suffix = interceptor.setting.suffix if slot is not None else ""
        backup = write_with_backup(path, content, suffix)

    if backup is not None:
        logger.info("Saved previous content of %s as %s", path.name, backup.name)
    return backup


def restore_revision(path: Path, slot: int, config: SaveversConfig) -> Path | None:
    """Write revision slot back to path, versioning the content it replaces.

    Args:
        path: File to restore
        slot: Revision to restore
        config: Savevers configuration

    Returns:
        Revision holding the replaced content, if any

    Raises:
        FileNotFoundError: If the revision does not exist
        FileReadError: If the revision cannot be read as text
    """
    source = revision_path(path, slot, config.versions)
    if not file_exists(source):
        raise FileNotFoundError(source)
    content = read_file(source)
    return save_file(path, content, config)
