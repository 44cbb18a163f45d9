"""Revision listing command."""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from ..core import list_revisions
from ..output import get_output_context
from .common import load_config_or_exit


def list_cmd(
    file: Annotated[Path, typer.Argument(help="File whose revisions to list")],
) -> None:
    """List the numbered revisions of FILE, oldest first."""
    ctx = get_output_context()
    config = load_config_or_exit(ctx)

    revisions = list_revisions(file.absolute(), config.versions)

    if ctx.json_mode:
        ctx.result([r.model_dump(mode="json") for r in revisions])
        return

    if not revisions:
        ctx.print(f"No revisions of {file}")
        return

    table = Table(title=f"Revisions of {file}")
    table.add_column("Slot", justify="right")
    table.add_column("File")
    table.add_column("Size", justify="right")
    table.add_column("Modified")
    for r in revisions:
        modified = r.modified_at.strftime("%Y-%m-%d %H:%M") if r.modified_at else ""
        table.add_row(str(r.slot), r.path.name, str(r.size), modified)
    ctx.print(table)
