"""Console and JSON reporting for savevers commands.

Human-readable output goes to a rich Console. With --json a command writes
exactly one JSON document to stdout instead: its result payload, or an
object keyed "error" or "success". Progress lines and notices are dropped
in JSON mode so the document stays parseable.
"""

import json
from dataclasses import dataclass, field
from typing import Any

from rich.console import Console, RenderableType


def _default_console() -> Console:
    return Console(highlight=False, soft_wrap=True)


@dataclass
class OutputContext:
    """Where and how a command reports."""

    console: Console = field(default_factory=_default_console)
    json_mode: bool = False

    def print(self, message: RenderableType, style: str | None = None) -> None:
        """Print text or a rich renderable; silent in JSON mode."""
        if not self.json_mode:
            self.console.print(message, style=style)

    def notice(self, message: str) -> None:
        """Print a yellow notice about something that was skipped."""
        if not self.json_mode:
            self.console.print(message, style="yellow", markup=False)

    def result(self, data: Any, message: str = "") -> None:
        """Report a command's result: data in JSON mode, message otherwise."""
        if self.json_mode:
            _dump(data)
        elif message:
            self.console.print(message, markup=False)

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Report a failure."""
        self._status("error", message, data, f"Error: {message}", "red")

    def success(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Report a completed action."""
        self._status("success", message, data, message, "green")

    def _status(
        self, key: str, message: str, data: dict[str, Any] | None, text: str, style: str
    ) -> None:
        if self.json_mode:
            _dump({key: message, **(data or {})})
        else:
            # Paths may contain brackets; never read them as markup
            self.console.print(text, style=style, markup=False)


def _dump(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str))


# Global output context (set by cli.py main callback)
_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Get the current output context, or a plain console one before the CLI sets it."""
    if _ctx is None:
        return OutputContext()
    return _ctx


def set_output_context(ctx: OutputContext | None) -> None:
    """Set the global output context. Called by CLI main callback."""
    global _ctx
    _ctx = ctx
