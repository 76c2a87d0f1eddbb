# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - todos.py: Todo list/create/update/delete endpoints
# - health.py: Health check endpoints
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import todos

__all__ = [
    "health",
    "todos",
]
