"""Revision naming, slot allocation and diff selector resolution.

Revisions live beside their file as ``<file>.<NNNN><suffix>``, where NNNN is
the slot zero-padded to the digit count of max_version. There is no
manifest: a slot exists if and only if its file exists.

Slot numbering assumes density. Both allocation and listing walk up from
slot 1 and stop at the first gap, so deleting a middle revision by hand
makes the next save refill that gap instead of appending after the newest.
"""

import logging
import re
from datetime import datetime
from pathlib import Path

from ..config import VersionsConfig
from ..constants import SELECTOR_CLOSE, SELECTOR_COMMITTED
from ..models import DiffTarget, Revision, Selector, SelectorKind
from ..services import file_exists, get_committed_content

logger = logging.getLogger(__name__)

# ASCII digits only: str.isdigit() accepts superscripts that int() rejects
_COUNT_RE = re.compile(r"[0-9]+")


class RevisionError(Exception):
    """A diff selector is invalid or does not resolve to a revision."""


def format_extension(slot: int, width: int, suffix: str) -> str:
    """Return the filename extension for a revision slot.

    The caller guarantees ``1 <= slot <= 10**width - 1``.

    Example:
        >>> format_extension(7, 4, ".clean")
        '.0007.clean'
    """
    return f".{slot:0{width}d}{suffix}"


def revision_path(base: Path, slot: int, config: VersionsConfig) -> Path:
    """Get path of revision slot for base."""
    return Path(str(base) + format_extension(slot, config.width, config.backup_suffix))


def is_revision_file(path: Path, config: VersionsConfig) -> bool:
    """Return True if path is named like a revision of some other file."""
    pattern = rf"\.\d{{{config.width}}}{re.escape(config.backup_suffix)}$"
    return re.search(pattern, path.name) is not None


def allocate_slot(base: Path, config: VersionsConfig) -> tuple[str, int]:
    """Find the first free revision slot for base.

    Args:
        base: File being saved
        config: Versions configuration

    Returns:
        Tuple of (extension, slot). When every slot up to max_version is
        taken, the last slot is returned and the next save overwrites it.
    """
    for slot in range(1, config.max_version + 1):
        if not revision_path(base, slot, config).exists():
            break
    else:
        slot = config.max_version
        logger.debug("All %d slots taken for %s, reusing last", slot, base)

    extension = format_extension(slot, config.width, config.backup_suffix)
    logger.debug("Allocated slot %d (%s) for %s", slot, extension, base)
    return extension, slot


def next_free_slot(base: Path, config: VersionsConfig) -> int:
    """Return the slot after the newest revision (max_version + 1 when saturated)."""
    _, slot = allocate_slot(base, config)
    if revision_path(base, slot, config).exists():
        return slot + 1
    return slot


def list_revisions(base: Path, config: VersionsConfig) -> list[Revision]:
    """List revisions of base, oldest first, up to the first missing slot.

    Args:
        base: File whose revisions to list
        config: Versions configuration

    Returns:
        Revisions with size and modification time filled in
    """
    revisions = []
    for slot in range(1, config.max_version + 1):
        path = revision_path(base, slot, config)
        try:
            stat = path.stat()
        except FileNotFoundError:
            break
        revisions.append(
            Revision(
                slot=slot,
                path=path,
                size=stat.st_size,
                modified_at=datetime.fromtimestamp(stat.st_mtime),
            )
        )
    return revisions


def is_count(token: str) -> bool:
    """Return True if token is a non-empty run of ASCII digits."""
    return _COUNT_RE.fullmatch(token) is not None


def parse_selector(token: str | None) -> Selector:
    """Parse a diff selector token.

    Accepted forms: empty or ``0`` (saved copy), ``N`` (slot N), ``-N``
    (N-th revision counting back from the newest), ``-cvs`` (committed
    copy) and ``-c`` (close the diff view).

    Raises:
        RevisionError: If the token is none of the above
    """
    if token is None:
        return Selector(kind=SelectorKind.SAVED)
    token = token.strip()
    if token in ("", "0"):
        return Selector(kind=SelectorKind.SAVED)
    if token == SELECTOR_CLOSE:
        return Selector(kind=SelectorKind.CLOSE)
    if token == SELECTOR_COMMITTED:
        return Selector(kind=SelectorKind.COMMITTED)
    if is_count(token):
        value = int(token)
        if value == 0:
            return Selector(kind=SelectorKind.SAVED)
        return Selector(kind=SelectorKind.SLOT, value=value)
    if token.startswith("-") and is_count(token[1:]):
        value = -int(token[1:])
        if value == 0:
            return Selector(kind=SelectorKind.SAVED)
        return Selector(kind=SelectorKind.RELATIVE, value=value)
    raise RevisionError(f"Invalid revision selector: {token!r}")


def resolve_target(base: Path, selector: Selector, config: VersionsConfig) -> DiffTarget:
    """Resolve a parsed selector to the file or content to diff against.

    Args:
        base: File being compared
        selector: Parsed selector (not CLOSE)
        config: Versions configuration

    Returns:
        The diff target

    Raises:
        RevisionError: If the slot is out of range or does not exist
        GitError: If the committed copy cannot be fetched
    """
    if selector.kind == SelectorKind.SAVED:
        return DiffTarget(label=f"{base.name} (saved)", path=base)

    if selector.kind == SelectorKind.COMMITTED:
        content = get_committed_content(base)
        return DiffTarget(label=f"{base.name} (HEAD)", content=content)

    if selector.kind == SelectorKind.CLOSE:
        raise RevisionError("The close selector has no diff target")

    if selector.kind == SelectorKind.RELATIVE:
        slot = next_free_slot(base, config) + selector.value
        if slot <= 0:
            raise RevisionError(f"Not enough versions available for {selector.value}")
    else:
        slot = selector.value

    if slot > config.max_version:
        raise RevisionError(f"Revision {slot} is beyond max_version {config.max_version}")

    path = revision_path(base, slot, config)
    if not file_exists(path):
        raise RevisionError(f"Revision {slot} does not exist: {path}")
    return DiffTarget(label=path.name, path=path, slot=slot)
