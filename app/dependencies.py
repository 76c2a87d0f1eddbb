# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

import json
from typing import Annotated, Any

from fastapi import Depends, Request

from app.config import Settings
from app.exceptions import InvalidRequestBodyError
from core.services.todo_store import TodoStore


def get_todo_store(request: Request) -> TodoStore:
    """
    Get the todo store owned by the running application.

    The store is created by create_app() and kept on app.state, so every
    request against one app sees the same collection.
    """
    return request.app.state.todo_store


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was built with."""
    return request.app.state.settings


# Type aliases for dependency injection
TodoStoreDep = Annotated[TodoStore, Depends(get_todo_store)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]


# =============================================================================
# Request Body
# =============================================================================

async def read_json_body(request: Request) -> Any:
    """
    Read and decode a JSON request body.

    Handlers call this themselves (instead of declaring a body model) so
    they decide what runs first - PATCH resolves the todo id before the
    body is looked at.

    Returns:
        The decoded JSON value, or None when there is no body or the
        body is not sent as JSON

    Raises:
        InvalidRequestBodyError: If a JSON body cannot be decoded
    """
    content_type = request.headers.get("content-type", "")
    if not content_type.split(";")[0].strip().lower().endswith("json"):
        return None

    raw = await request.body()
    if not raw.strip():
        return None

    try:
        return json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise InvalidRequestBodyError(str(e)[:100])
