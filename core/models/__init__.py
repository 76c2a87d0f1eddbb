# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - todo.py: Todo record, create/update requests, error body
#
# These models define the "contract" between API and clients.
# =============================================================================

from .todo import (
    ErrorResponse,
    Todo,
    TodoCreate,
    TodoUpdate,
)

__all__ = [
    "ErrorResponse",
    "Todo",
    "TodoCreate",
    "TodoUpdate",
]
