"""Shell completion helpers for savevers CLI."""

from .constants import SELECTOR_CLOSE, SELECTOR_COMMITTED

# Static suggestions: saved copy, newest revision, close, committed copy
_SELECTOR_TOKENS = ["0", "-1", SELECTOR_CLOSE, SELECTOR_COMMITTED]


def complete_selector(incomplete: str) -> list[str]:
    """Return diff selector tokens that start with the given prefix.

    Used for shell completion of the diff command's selector argument.

    Args:
        incomplete: The partial string typed by the user

    Returns:
        List of matching selector tokens
    """
    return [t for t in _SELECTOR_TOKENS if t.startswith(incomplete)]
