# =============================================================================
# app/routers/todos.py - Todo CRUD Endpoints
# =============================================================================
# Handles listing, creating, completing and deleting todos.
# Validation and id rules live in the store; this layer maps them to HTTP.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path, Request, Response, status

from app.dependencies import TodoStoreDep, read_json_body
from core.models.todo import ErrorResponse, Todo, TodoCreate, TodoUpdate

router = APIRouter()

# Kept as a string so unparseable ids reach the store and come back as 404
TodoIdPath = Annotated[str, Path(description="Todo id")]


def _json_request_body(model: type[TodoCreate] | type[TodoUpdate]) -> dict:
    """OpenAPI requestBody for handlers that read the body themselves."""
    return {
        "requestBody": {
            "required": False,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=list[Todo])
async def list_todos(store: TodoStoreDep):
    """
    List all todos.

    Returns every todo in the order it was created. No filtering or paging.
    """
    return store.list_todos()


@router.post(
    "",
    response_model=Todo,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    openapi_extra=_json_request_body(TodoCreate),
)
async def create_todo(
    request: Request,
    store: TodoStoreDep,
):
    """
    Create a new todo.

    The text is trimmed. Missing, empty or whitespace-only text is
    rejected with 400 "Todo text is required", as is a body that is not
    a JSON object.
    """
    payload = TodoCreate.from_payload(await read_json_body(request))
    return store.create_todo(payload.text)


@router.patch(
    "/{todo_id}",
    response_model=Todo,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    openapi_extra=_json_request_body(TodoUpdate),
)
async def update_todo(
    todo_id: TodoIdPath,
    request: Request,
    store: TodoStoreDep,
):
    """
    Mark a todo as completed or not completed.

    Only the completed flag can change. Unknown or non-numeric ids
    return 404 "Todo not found" whatever the body contains.
    """
    # Resolve the id before reading the body
    store.get_todo(todo_id)

    payload = TodoUpdate.from_payload(await read_json_body(request))
    return store.update_completion(todo_id, payload.completed)


@router.delete(
    "/{todo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"model": ErrorResponse}},
)
async def delete_todo(
    todo_id: TodoIdPath,
    store: TodoStoreDep,
):
    """
    Delete a todo.

    Returns 204 with an empty body. The remaining todos keep their order
    and their ids; deleted ids are never handed out again.
    """
    store.delete_todo(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
