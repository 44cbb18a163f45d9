"""savevers CLI: numbered revision history for saved files."""

from pathlib import Path

import typer
from rich.console import Console

from savevers import __version__

from .commands import diff, init, list_cmd, purge_cmd, restore, save
from .config import set_config_path
from .logging import configure_logging
from .output import OutputContext, set_output_context


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"savevers {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="savevers",
    help="Keep numbered revisions of saved files, purge them, and diff against them",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: ./.savevers.toml)",
    ),
) -> None:
    """savevers - numbered revision history for saved files."""
    configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
    )
    console = Console(no_color=no_color, highlight=False, soft_wrap=True)
    set_output_context(OutputContext(console=console, json_mode=json_output))
    set_config_path(config)


app.command(name="save")(save)
app.command(name="restore")(restore)
app.command(name="list")(list_cmd)
app.command(name="purge")(purge_cmd)
# Selectors such as -1, -c and -cvs are positional, not options
app.command(name="diff", context_settings={"ignore_unknown_options": True})(diff)
app.command(name="init")(init)


if __name__ == "__main__":
    app()
