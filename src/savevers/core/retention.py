"""Revision retention: counting, keeping and deleting numbered revisions.

A scan walks slots upward from 1. Slots at or below the cutoff are kept,
slots above it are deleted. The walk ends at the first missing slot or the
first deletion that fails, on the same density assumption the allocator
makes: a revision deleted by hand below the cutoff hides every revision
above it from purge.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from ..config import SaveversConfig
from ..models import PurgeResult
from .revisions import is_count, is_revision_file, revision_path

logger = logging.getLogger(__name__)


class PurgeError(Exception):
    """Invalid purge request; nothing was deleted."""


def parse_cutoff(token: str | None, default: int) -> int:
    """Parse the retention cutoff argument.

    Args:
        token: Command-line token, or None to use the default
        default: Configured default cutoff

    Returns:
        Non-negative cutoff

    Raises:
        PurgeError: If the token is not a non-negative integer
    """
    if token is None:
        return default
    if not is_count(token):
        raise PurgeError(f"Invalid revision count: {token!r}")
    return int(token)


def scan_retention(
    base: Path,
    cutoff: int,
    config: SaveversConfig,
    verbose: bool = False,
    report: Callable[[Path], None] | None = None,
) -> PurgeResult:
    """Keep the first cutoff revisions of base and delete the rest.

    Args:
        base: File whose revisions to scan
        cutoff: Highest slot to keep (0 deletes everything)
        config: Savevers configuration
        verbose: Pass each deleted path to report
        report: Callback for deleted paths in verbose mode

    Returns:
        Counts for this file
    """
    result = PurgeResult()

    for slot in range(1, config.scan_limit + 1):
        path = revision_path(base, slot, config.versions)
        if slot <= cutoff:
            if not path.exists():
                logger.debug("Slot %d missing for %s, stopping scan", slot, base)
                break
            result.retained += 1
            continue

        try:
            path.unlink()
        except FileNotFoundError:
            break
        except OSError as e:
            logger.warning("Failed to delete %s: %s", path, e)
            break

        result.purged += 1
        result.purged_paths.append(path)
        logger.debug("Deleted %s", path)
        if verbose and report is not None:
            report(path)

    return result


def expand_targets(directory: Path, config: SaveversConfig) -> list[Path]:
    """Find files in directory matching the configured patterns.

    Each file appears once even when several patterns match it. Directories
    and revision files themselves are skipped.

    Args:
        directory: Directory to search
        config: Savevers configuration

    Returns:
        Matching files, sorted by path
    """
    matched: set[Path] = set()
    for pattern in config.versions.patterns():
        for path in directory.glob(pattern):
            if path.is_dir() or is_revision_file(path, config.versions):
                continue
            matched.add(path)
    return sorted(matched)


def purge(
    current_file: Path,
    config: SaveversConfig,
    cutoff: int | None = None,
    all_files: bool = False,
    verbose: bool = False,
    report: Callable[[Path], None] | None = None,
) -> PurgeResult:
    """Purge revisions of one file, or of every matching file beside it.

    Args:
        current_file: File to purge, or whose directory to purge with all_files
            (a directory is accepted as-is in that case)
        config: Savevers configuration
        cutoff: Revisions to keep (default: purge.default_cutoff)
        all_files: Purge every file matching versions.file_patterns
        verbose: Report each deleted revision
        report: Callback for deleted paths in verbose mode

    Returns:
        Combined counts across all scanned files

    Raises:
        PurgeError: If cutoff is negative
    """
    if cutoff is None:
        cutoff = config.purge.default_cutoff
    if cutoff < 0:
        raise PurgeError(f"Invalid revision count: {cutoff}")

    total = PurgeResult()
    if not config.versions.enabled:
        logger.debug("Backup suffix is empty, skipping purge of %s", current_file)
        return total

    if not all_files:
        return scan_retention(current_file, cutoff, config, verbose, report)

    directory = current_file if current_file.is_dir() else current_file.parent
    targets = expand_targets(directory, config)
    logger.debug("Purging %d files in %s", len(targets), directory)
    for target in targets:
        total.add(scan_retention(target, cutoff, config, verbose, report))
    return total
