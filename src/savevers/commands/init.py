"""Init command implementation."""

from pathlib import Path

from ..config import write_config_template
from ..constants import CONFIG_FILENAME
from ..output import get_output_context


def init() -> None:
    """Write a default .savevers.toml in the current directory."""
    ctx = get_output_context()
    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        ctx.notice(f"Config already exists: {config_path}")
        return

    write_config_template(Path.cwd())
    ctx.success(f"Created config template: {config_path}", {"config": str(config_path)})
