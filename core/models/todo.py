# =============================================================================
# core/models/todo.py - Todo Schemas
# =============================================================================
# These models define the API contract for todo operations:
# - Todo: A stored todo record, also the response body for single todos
# - TodoCreate: Input for POST /api/todos
# - TodoUpdate: Input for PATCH /api/todos/{id}
# - ErrorResponse: Body returned for every handled error
#
# Field names are snake_case in Python; the timestamp is exposed to
# clients as "createdAt".
# =============================================================================

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Todo(BaseModel):
    """
    A single todo record.

    Returned by:
    - GET /api/todos (as list items)
    - POST /api/todos
    - PATCH /api/todos/{id}

    Example:
        {
            "id": 1,
            "text": "Buy milk",
            "completed": false,
            "createdAt": "2024-01-15T10:30:00.000000Z"
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    # Sequential identifier, never reused
    id: int = Field(
        ...,
        ge=1,
        description="Unique todo identifier"
    )

    # Trimmed, never blank
    text: str = Field(
        ...,
        min_length=1,
        description="Todo text"
    )

    completed: bool = Field(
        default=False,
        description="Whether the todo is done"
    )

    created_at: datetime = Field(
        ...,
        alias="createdAt",
        description="Timestamp when the todo was created (UTC)"
    )


class TodoCreate(BaseModel):
    """
    Schema for creating a todo.

    `text` is optional at the schema level so a missing value reaches the
    store and is answered with the domain error ("Todo text is required").
    Non-string values are passed through for the same reason.

    Example:
        {
            "text": "Buy milk"
        }
    """

    text: Any = Field(
        default=None,
        examples=["Buy milk"],
        description="Todo text (trimmed; must not be blank)"
    )

    @classmethod
    def from_payload(cls, payload: Any) -> "TodoCreate":
        """Build from a decoded JSON body; anything but an object has no text."""
        return cls.model_validate(payload) if isinstance(payload, dict) else cls()


class TodoUpdate(BaseModel):
    """
    Schema for updating a todo's completion flag.

    Only `completed` can change. Any JSON value is accepted here; the store
    rejects non-booleans after it has resolved the todo id, so an unknown
    id is reported as not found whatever the body holds.

    Example:
        {
            "completed": true
        }
    """

    completed: Any = Field(
        default=None,
        examples=[True],
        description="New completion state (must be true or false)"
    )

    @classmethod
    def from_payload(cls, payload: Any) -> "TodoUpdate":
        """Build from a decoded JSON body; anything but an object has no flag."""
        return cls.model_validate(payload) if isinstance(payload, dict) else cls()


class ErrorResponse(BaseModel):
    """Error body returned for 400/404 responses."""
    error: str = Field(..., examples=["Todo not found"])
    code: str = Field(..., examples=["TODO_NOT_FOUND"])
