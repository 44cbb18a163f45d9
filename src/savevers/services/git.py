"""Git operations used as the committed-copy source."""

import subprocess
from pathlib import Path

from ..constants import GIT_TIMEOUT


class GitError(Exception):
    """Git command failed."""


def run_git(*args: str, cwd: Path | None = None) -> str:
    """Run a git command and return stdout.

    Args:
        *args: Arguments passed to git
        cwd: Working directory

    Returns:
        Command stdout

    Raises:
        GitError: If git is missing, times out, or exits non-zero
    """
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT,
        )
    except subprocess.TimeoutExpired as e:
        raise GitError(f"git {args[0]} timed out after {GIT_TIMEOUT} seconds") from e
    except FileNotFoundError:
        raise GitError("git not found in PATH") from None

    if result.returncode != 0:
        raise GitError(f"git {' '.join(args)} failed: {result.stderr.strip()}")
    return result.stdout


def get_repo_root(cwd: Path | None = None) -> Path:
    """Get the root of the git repository containing cwd."""
    return Path(run_git("rev-parse", "--show-toplevel", cwd=cwd).strip())


def get_committed_content(path: Path) -> str:
    """Return the content of path as committed at HEAD.

    Args:
        path: File inside a git work tree

    Returns:
        File content from the HEAD commit

    Raises:
        GitError: If not in a repository or the file is not committed
    """
    path = path.resolve()
    repo_root = get_repo_root(path.parent).resolve()
    relative = path.relative_to(repo_root).as_posix()
    return run_git("show", f"HEAD:{relative}", cwd=repo_root)
