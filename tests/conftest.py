"""Shared test fixtures for savevers tests."""

import os
import subprocess
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from savevers.config import SaveversConfig, VersionsConfig
from savevers.core import close_session


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_open_diff_session() -> Generator[None, None, None]:
    """Make sure no diff session leaks between tests."""
    yield
    close_session()


@pytest.fixture
def config() -> SaveversConfig:
    """Default configuration with the .clean suffix and 4-digit slots."""
    return SaveversConfig()


@pytest.fixture
def small_config() -> SaveversConfig:
    """Configuration with max_version=9 (1-digit slots) for saturation tests."""
    return SaveversConfig(versions=VersionsConfig(max_version=9))


@pytest.fixture
def base_file(tmp_path: Path) -> Path:
    """A file to version, with some content."""
    path = tmp_path / "notes.txt"
    path.write_text("current\n")
    return path


@pytest.fixture
def make_revisions() -> Callable[..., list[Path]]:
    """Return a helper creating revision files for the given slots.

    Usage: make_revisions(base, [1, 2, 4], width=4, suffix=".clean")
    """

    def _make(
        base: Path, slots: list[int], width: int = 4, suffix: str = ".clean"
    ) -> list[Path]:
        paths = []
        for slot in slots:
            path = Path(f"{base}.{slot:0{width}d}{suffix}")
            path.write_text(f"revision {slot}\n")
            paths.append(path)
        return paths

    return _make


@pytest.fixture
def temp_git_repo(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary git repository.

    Initializes a git repo with user config and an initial commit of
    notes.txt. Changes cwd to the repo directory for the duration of the test.
    """
    subprocess.run(["git", "init"], cwd=tmp_path, check=True, capture_output=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path,
        check=True,
        capture_output=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test User"],
        cwd=tmp_path,
        check=True,
        capture_output=True,
    )

    (tmp_path / "notes.txt").write_text("committed\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, check=True, capture_output=True)
    subprocess.run(
        ["git", "commit", "-m", "Initial commit"],
        cwd=tmp_path,
        check=True,
        capture_output=True,
    )

    original_cwd = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)
