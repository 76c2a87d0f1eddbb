# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .todo_store import TodoStore

__all__ = [
    "TodoStore",
]
