"""Purge command implementation."""

from pathlib import Path
from typing import Annotated

import typer

from ..core import PurgeError, parse_cutoff, purge
from ..output import get_output_context
from .common import EXIT_INVALID, load_config_or_exit


def purge_cmd(
    file: Annotated[
        Path,
        typer.Argument(help="File whose revisions to purge (its directory with --all)"),
    ],
    count: Annotated[
        str | None,
        typer.Argument(help="Number of revisions to keep (default: purge.default_cutoff)"),
    ] = None,
    all_files: Annotated[
        bool,
        typer.Option(
            "--all",
            "-a",
            help="Purge every file in the directory matching versions.file_patterns",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="List each revision as it is deleted"),
    ] = False,
) -> None:
    """Delete old revisions, keeping the first COUNT of each file."""
    ctx = get_output_context()
    config = load_config_or_exit(ctx)

    try:
        cutoff = parse_cutoff(count, config.purge.default_cutoff)
    except PurgeError as e:
        ctx.error(str(e), {"token": count})
        raise typer.Exit(EXIT_INVALID) from None

    if not config.versions.enabled:
        ctx.notice("Backup suffix is empty; savevers is disabled")

    result = purge(
        file.absolute(),
        config,
        cutoff=cutoff,
        all_files=all_files,
        verbose=verbose,
        report=lambda path: ctx.print(f"Purged {path}"),
    )

    ctx.result(
        {
            "purged": result.purged,
            "retained": result.retained,
            "purged_paths": [str(p) for p in result.purged_paths],
        },
        result.summary(),
    )
