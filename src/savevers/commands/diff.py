"""Diff command implementation."""

from pathlib import Path
from typing import Annotated

import typer

from ..completions import complete_selector
from ..core import (
    RevisionError,
    close_for_parent,
    close_session,
    parse_selector,
    resolve_target,
    show_diff,
)
from ..models import SelectorKind
from ..output import get_output_context
from ..services import FileReadError, GitError, read_file, read_source
from .common import EXIT_INVALID, EXIT_NOT_GIT, load_config_or_exit


def diff(
    file: Annotated[Path, typer.Argument(help="File to compare")],
    selector: Annotated[
        str | None,
        typer.Argument(
            help="0 = saved copy, N = revision N, -N = N back from newest, "
            "-cvs = committed copy, -c = close the diff view",
            autocompletion=complete_selector,
        ),
    ] = None,
    side_by_side: Annotated[
        bool,
        typer.Option("--side-by-side", help="Show the two versions in columns"),
    ] = False,
    buffer: Annotated[
        str | None,
        typer.Option("--buffer", help="Read current content from this file ('-' for stdin)"),
    ] = None,
) -> None:
    """Compare a file with its saved copy, a revision, or the committed copy."""
    ctx = get_output_context()
    config = load_config_or_exit(ctx)

    try:
        parsed = parse_selector(selector)
    except RevisionError as e:
        ctx.error(str(e), {"token": selector})
        raise typer.Exit(EXIT_INVALID) from None

    if parsed.kind == SelectorKind.CLOSE:
        if close_session():
            ctx.success("Closed diff view")
        else:
            ctx.notice("No diff view is open")
        return

    path = file.absolute()
    try:
        target = resolve_target(path, parsed, config.versions)
    except RevisionError as e:
        ctx.error(str(e))
        raise typer.Exit(EXIT_INVALID) from None
    except GitError as e:
        ctx.error(f"No committed copy: {e}")
        raise typer.Exit(EXIT_NOT_GIT) from None

    try:
        current = read_source(buffer) if buffer is not None else read_file(path)
        show_diff(
            path,
            current,
            target,
            ctx.console,
            side_by_side=side_by_side,
            disable_resize=config.diff.disable_window_resize,
        )
    except FileReadError as e:
        ctx.error(str(e))
        raise typer.Exit(EXIT_INVALID) from None
    finally:
        close_for_parent(path)
