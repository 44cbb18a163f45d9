"""Configuration management for savevers."""

import fnmatch
import re
import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import (
    CONFIG_FILENAME,
    DEFAULT_BACKUP_SUFFIX,
    DEFAULT_FILE_PATTERNS,
    DEFAULT_MAX_VERSION,
    DEFAULT_PURGE_CUTOFF,
    DEFAULT_SCAN_FLOOR,
)

# Characters allowed in a single filename pattern
_PATTERN_RE = re.compile(r"^[A-Za-z0-9_.+~*?\[\]!-]+$")


class ConfigError(Exception):
    """Configuration could not be loaded; the engine stays disabled."""


class VersionsConfig(BaseModel):
    """Revision naming and which files get versioned."""

    backup_suffix: str = Field(
        default=DEFAULT_BACKUP_SUFFIX,
        description="Suffix after the zero-padded slot number. Empty disables savevers.",
    )
    max_version: int = Field(default=DEFAULT_MAX_VERSION, ge=1, description="Highest slot number")
    file_patterns: str = Field(
        default=DEFAULT_FILE_PATTERNS,
        description="Comma-separated glob list of files to version",
    )

    @field_validator("file_patterns")
    @classmethod
    def validate_file_patterns(cls, value: str) -> str:
        """Reject pattern lists containing anything but filename-pattern syntax."""
        for pattern in value.split(","):
            pattern = pattern.strip()
            if not pattern:
                raise ValueError(f"empty entry in file pattern list {value!r}")
            if not _PATTERN_RE.match(pattern):
                raise ValueError(f"invalid file pattern {pattern!r}")
        return value

    @property
    def width(self) -> int:
        """Zero-padding width: digit count of max_version."""
        return len(str(self.max_version))

    @property
    def enabled(self) -> bool:
        """Return True unless the backup suffix is empty."""
        return bool(self.backup_suffix)

    def patterns(self) -> list[str]:
        """Return file_patterns split into individual globs."""
        return [p.strip() for p in self.file_patterns.split(",")]

    def matches(self, path: Path) -> bool:
        """Return True if the file name matches any configured pattern."""
        return any(fnmatch.fnmatch(path.name, p) for p in self.patterns())


class PurgeConfig(BaseModel):
    """Defaults for the purge command."""

    default_cutoff: int = Field(default=DEFAULT_PURGE_CUTOFF, ge=0)
    scan_floor: int = Field(
        default=DEFAULT_SCAN_FLOOR,
        ge=1,
        description="Minimum number of slots purge walks, regardless of max_version",
    )


class DiffConfig(BaseModel):
    """Configuration for the diff command."""

    disable_window_resize: bool = False


class SaveversConfig(BaseModel):
    """Root configuration for savevers."""

    versions: VersionsConfig = Field(default_factory=VersionsConfig)
    purge: PurgeConfig = Field(default_factory=PurgeConfig)
    diff: DiffConfig = Field(default_factory=DiffConfig)

    @property
    def scan_limit(self) -> int:
        """Upper slot bound used by the retention scan."""
        return max(self.versions.max_version, self.purge.scan_floor)


def load_config(config_path: Path | None = None) -> SaveversConfig:
    """Load config from a TOML file.

    Args:
        config_path: Path to the config file (default: .savevers.toml in cwd)

    Returns:
        Loaded configuration, or defaults if the file doesn't exist

    Raises:
        ConfigError: If the file is unreadable, not valid TOML, or fails validation
    """
    if config_path is None:
        config_path = Path.cwd() / CONFIG_FILENAME
    if not config_path.exists():
        return SaveversConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        return SaveversConfig.model_validate(data)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{config_path}: invalid TOML: {e}") from e
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ConfigError(f"{config_path}: {location}: {first['msg']}") from e
    except OSError as e:
        raise ConfigError(f"{config_path}: {e}") from e


def write_config_template(directory: Path) -> Path:
    """Write default .savevers.toml template.

    Args:
        directory: Directory to write the template into

    Returns:
        Path to the written config file
    """
    config_path = directory / CONFIG_FILENAME
    template = {
        "versions": {
            "backup_suffix": DEFAULT_BACKUP_SUFFIX,
            "max_version": DEFAULT_MAX_VERSION,
            "file_patterns": DEFAULT_FILE_PATTERNS,
        },
        "purge": {
            "default_cutoff": DEFAULT_PURGE_CUTOFF,
            "scan_floor": DEFAULT_SCAN_FLOOR,
        },
        "diff": {"disable_window_resize": False},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path


# Config path selected by the CLI main callback (None = default location)
_config_path: Path | None = None


def get_config_path() -> Path | None:
    """Get the config path chosen on the command line."""
    return _config_path


def set_config_path(path: Path | None) -> None:
    """Set the config path. Called by CLI main callback."""
    global _config_path
    _config_path = path
