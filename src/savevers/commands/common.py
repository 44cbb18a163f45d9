"""Helpers shared by command implementations."""

import typer

from ..config import ConfigError, SaveversConfig, get_config_path, load_config
from ..output import OutputContext

# Exit codes
EXIT_INVALID = 1
EXIT_DISABLED = 2
EXIT_NOT_GIT = 3


def load_config_or_exit(ctx: OutputContext) -> SaveversConfig:
    """Load configuration, or report why savevers is disabled and exit."""
    try:
        return load_config(get_config_path())
    except ConfigError as e:
        ctx.error(f"savevers disabled: {e}")
        raise typer.Exit(EXIT_DISABLED) from None
