# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - utils.py: Shared utilities (id parsing, UTC timestamps)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.utils import parse_todo_id, utc_now

__all__ = [
    "parse_todo_id",
    "utc_now",
]
