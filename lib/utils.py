# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import re
from datetime import datetime, timezone


# =============================================================================
# Id Utilities
# =============================================================================

_TODO_ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_todo_id(value: str | int) -> int | None:
    """
    Parse a todo id taken from a URL path segment.

    Only a plain base-10 integer is accepted. Anything else returns None,
    which callers treat exactly like an id that does not exist.

    Args:
        value: Raw path segment (or an int already)

    Returns:
        The integer id, or None if the value does not parse

    Example:
        parse_todo_id("42")    # 42
        parse_todo_id("abc")   # None
        parse_todo_id("4.2")   # None
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value

    match = _TODO_ID_PATTERN.fullmatch(value.strip())
    if match is None:
        return None
    try:
        return int(match.group(0))
    except ValueError:
        # Longer than the interpreter's int-from-string digit limit
        return None


# =============================================================================
# Time Utilities
# =============================================================================

def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
