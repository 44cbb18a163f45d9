"""Diff view of a file against one of its revisions.

At most one diff session exists per process. A session remembers the
console settings it changed so that closing it puts them back exactly.
"""

import difflib
import logging
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from ..models import DiffTarget
from ..services import read_file

logger = logging.getLogger(__name__)

# Borders and padding of the side-by-side table
_TABLE_CHROME = 7


@dataclass
class ViewState:
    """Console settings captured before a session changed them."""

    width: int
    soft_wrap: bool


@dataclass
class DiffSession:
    """An open diff view."""

    parent: Path
    target: DiffTarget
    console: Console
    saved: ViewState
    side_by_side: bool = False


_session: DiffSession | None = None


def get_session() -> DiffSession | None:
    """Get the open diff session, if any."""
    return _session


def load_target(target: DiffTarget) -> str:
    """Return the text of a diff target.

    Raises:
        FileReadError: If the target file cannot be read
    """
    if target.content is not None:
        return target.content
    if target.path is None:
        return ""
    return read_file(target.path)


def unified_diff(current: str, other: str, current_label: str, other_label: str) -> str:
    """Return a unified diff turning other into current."""
    lines = difflib.unified_diff(
        other.splitlines(keepends=True),
        current.splitlines(keepends=True),
        fromfile=other_label,
        tofile=current_label,
    )
    return "".join(line if line.endswith("\n") else line + "\n" for line in lines)


def side_by_side_table(current: str, other: str, current_label: str, other_label: str) -> Table:
    """Build a two-column table aligning other (left) with current (right)."""
    left = other.splitlines()
    right = current.splitlines()
    table = Table(show_lines=False, expand=False)
    table.add_column(other_label, overflow="fold")
    table.add_column(current_label, overflow="fold")

    matcher = difflib.SequenceMatcher(a=left, b=right, autojunk=False)
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            for a, b in zip(left[i1:i2], right[j1:j2], strict=True):
                table.add_row(Text(a), Text(b))
            continue
        old = left[i1:i2]
        new = right[j1:j2]
        for row in range(max(len(old), len(new))):
            a = Text(old[row], style="red") if row < len(old) else Text("")
            b = Text(new[row], style="green") if row < len(new) else Text("")
            table.add_row(a, b)
    return table


def required_width(current: str, other: str) -> int:
    """Console width needed to show both texts side by side without folding."""
    longest = max((len(line) for line in (current + "\n" + other).splitlines()), default=0)
    return 2 * longest + _TABLE_CHROME


def open_session(
    parent: Path,
    target: DiffTarget,
    console: Console,
    side_by_side: bool = False,
    width: int | None = None,
) -> DiffSession:
    """Open a diff session, replacing any open one.

    Args:
        parent: File being compared
        target: What it is compared against
        console: Console the view is drawn on
        side_by_side: Whether the view uses two columns
        width: Console width to use while the session is open (None keeps it)

    Returns:
        The new session
    """
    global _session
    if _session is not None:
        if _session.parent != parent:
            logger.debug("Closing diff of %s before opening %s", _session.parent, parent)
        close_session()

    saved = ViewState(width=console.width, soft_wrap=console.soft_wrap)
    if side_by_side:
        console.soft_wrap = False
    if width is not None and width > console.width:
        console.width = width

    _session = DiffSession(
        parent=parent,
        target=target,
        console=console,
        saved=saved,
        side_by_side=side_by_side,
    )
    logger.debug("Opened diff of %s against %s", parent, target.label)
    return _session


def close_session() -> bool:
    """Close the open diff session, restoring the console settings it changed.

    Returns:
        True if a session was open
    """
    global _session
    if _session is None:
        return False
    session = _session
    _session = None
    session.console.width = session.saved.width
    session.console.soft_wrap = session.saved.soft_wrap
    logger.debug("Closed diff of %s", session.parent)
    return True


def close_for_parent(parent: Path) -> bool:
    """Close the open session if it belongs to parent."""
    if _session is None or _session.parent != parent:
        return False
    return close_session()


def show_diff(
    parent: Path,
    current: str,
    target: DiffTarget,
    console: Console,
    side_by_side: bool = False,
    disable_resize: bool = False,
) -> DiffSession:
    """Open a session for target and draw the diff of current against it.

    Args:
        parent: File being compared
        current: Current content of the file (buffer or disk)
        target: Resolved diff target
        console: Console to draw on
        side_by_side: Two-column view instead of a unified diff
        disable_resize: Keep the console width for the two-column view

    Returns:
        The open session

    Raises:
        FileReadError: If the target cannot be read; no session is opened
    """
    other = load_target(target)
    current_label = f"{parent.name} (current)"

    width = None
    if side_by_side and not disable_resize:
        width = required_width(current, other)
    session = open_session(parent, target, console, side_by_side=side_by_side, width=width)

    if current == other:
        console.print(f"No differences between {current_label} and {target.label}")
    elif side_by_side:
        console.print(side_by_side_table(current, other, current_label, target.label))
    else:
        diff = unified_diff(current, other, current_label, target.label)
        console.print(Syntax(diff, "diff", theme="ansi_dark", background_color="default"))
    return session
