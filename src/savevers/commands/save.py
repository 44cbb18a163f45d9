"""Save and restore command implementations."""

from pathlib import Path
from typing import Annotated

import typer

from ..core import restore_revision, save_file
from ..output import get_output_context
from ..services import FileReadError, read_source
from .common import EXIT_INVALID, load_config_or_exit


def save(
    file: Annotated[Path, typer.Argument(help="File to write")],
    source: Annotated[
        str,
        typer.Option("--from", help="Read new content from this file ('-' for stdin)"),
    ] = "-",
) -> None:
    """Write new content to FILE, keeping its previous content as a revision."""
    ctx = get_output_context()
    config = load_config_or_exit(ctx)

    try:
        content = read_source(source)
    except FileReadError as e:
        ctx.error(str(e))
        raise typer.Exit(EXIT_INVALID) from None

    backup = save_file(file.absolute(), content, config)
    if backup is None:
        ctx.result({"file": str(file), "revision": None}, f"Saved {file} (no revision)")
    else:
        ctx.result(
            {"file": str(file), "revision": str(backup)},
            f"Saved {file}; previous content in {backup.name}",
        )


def restore(
    file: Annotated[Path, typer.Argument(help="File to restore")],
    slot: Annotated[int, typer.Argument(min=1, help="Revision to restore")],
) -> None:
    """Replace FILE with revision SLOT, keeping the replaced content as a revision."""
    ctx = get_output_context()
    config = load_config_or_exit(ctx)

    try:
        backup = restore_revision(file.absolute(), slot, config)
    except FileNotFoundError:
        ctx.error(f"Revision {slot} of {file} does not exist")
        raise typer.Exit(EXIT_INVALID) from None
    except FileReadError as e:
        ctx.error(f"Cannot restore revision {slot}: {e}")
        raise typer.Exit(EXIT_INVALID) from None

    data = {"file": str(file), "restored": slot, "revision": str(backup) if backup else None}
    ctx.success(f"Restored {file} from revision {slot}", data)
