# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Todo API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_utils.py: Tests for id parsing and timestamps
# - test_todo_store.py: Tests for the in-memory store
# - test_todos_api.py: HTTP tests for /api/todos
# - test_app.py: Health, root, config and error handler tests
#
# Run tests with: pytest
# =============================================================================
