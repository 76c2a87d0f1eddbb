# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the todo logic behind the HTTP layer:
# - models/: Pydantic schemas for data validation
# - services/: The in-memory todo store
#
# Code in this package should NOT import from FastAPI routers.
# This keeps the logic testable without an HTTP client.
# =============================================================================
