# =============================================================================
# core/services/todo_store.py - In-Memory Todo Store
# =============================================================================
# Owns the ordered todo collection and the next-id counter.
# Separates HTTP concerns from the storage rules:
# - ids start at 1 and are never reused, even after deletes
# - text is trimmed and never blank at rest
# - only the completed flag can change after creation
#
# Every operation holds the store lock, so concurrent requests never see a
# half-built record or receive the same id.
# =============================================================================

import logging
import threading
from typing import Any

from app.exceptions import TodoNotFoundError, TodoValidationError
from core.models.todo import Todo
from lib.utils import parse_todo_id, utc_now

logger = logging.getLogger(__name__)


class TodoStore:
    """
    In-memory store for todo records.

    One instance is created per application and injected into the route
    handlers; tests build their own instance or call reset().
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._todos: list[Todo] = []
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_todos(self) -> list[Todo]:
        """
        Return all todos in insertion order.

        Returns copies; changing them does not touch the store.
        """
        with self._lock:
            return [todo.model_copy() for todo in self._todos]

    def get_todo(self, todo_id: str | int) -> Todo:
        """
        Get a todo by id.

        Args:
            todo_id: The todo id (unparseable values count as unknown)

        Returns:
            A copy of the stored todo

        Raises:
            TodoNotFoundError: If no todo has this id
        """
        with self._lock:
            return self._find(todo_id).model_copy()

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def create_todo(self, text: Any) -> Todo:
        """
        Create a new todo at the end of the list.

        Args:
            text: Raw todo text; surrounding whitespace is removed

        Returns:
            The created todo

        Raises:
            TodoValidationError: If text is missing, not a string, or blank
        """
        if not isinstance(text, str) or not text.strip():
            logger.warning("Rejected todo create: text missing or blank")
            raise TodoValidationError("Todo text is required")

        with self._lock:
            todo = Todo(
                id=self._next_id,
                text=text.strip(),
                completed=False,
                created_at=utc_now(),
            )
            self._next_id += 1
            self._todos.append(todo)

        logger.info(f"Created todo: {todo.id}")
        return todo.model_copy()

    def update_completion(self, todo_id: str | int, completed: Any) -> Todo:
        """
        Set the completed flag of a todo.

        The id is resolved before the flag is checked, so an unknown id is
        always reported as not found.

        Args:
            todo_id: The todo id
            completed: New completion state (must be a bool)

        Returns:
            The updated todo

        Raises:
            TodoNotFoundError: If no todo has this id
            TodoValidationError: If completed is not a bool
        """
        with self._lock:
            todo = self._find(todo_id)
            if not isinstance(completed, bool):
                logger.warning(f"Rejected update of todo {todo.id}: completed is not a boolean")
                raise TodoValidationError("Todo completed flag must be a boolean")
            todo.completed = completed
            updated = todo.model_copy()

        logger.info(f"Updated todo {updated.id}: completed={completed}")
        return updated

    def delete_todo(self, todo_id: str | int) -> None:
        """
        Remove a todo, keeping the order of the others.

        Raises:
            TodoNotFoundError: If no todo has this id
        """
        with self._lock:
            index = self._index_of(todo_id)
            todo = self._todos.pop(index)

        logger.info(f"Deleted todo: {todo.id}")

    def reset(self) -> None:
        """Drop every todo and restart ids at 1."""
        with self._lock:
            self._todos = []
            self._next_id = 1

        logger.debug("Todo store reset")

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _index_of(self, todo_id: str | int) -> int:
        # Caller must hold self._lock
        parsed = parse_todo_id(todo_id)
        if parsed is not None:
            for index, todo in enumerate(self._todos):
                if todo.id == parsed:
                    return index

        error = TodoNotFoundError(todo_id)
        # Path segments can be arbitrarily long
        logger.warning(f"Todo not found: {str(error.todo_id)[:50]}")
        raise error

    def _find(self, todo_id: str | int) -> Todo:
        return self._todos[self._index_of(todo_id)]
