# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Todo API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   todo-api                      (console script, uses API_HOST / API_PORT)
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.exceptions import (
    TodoApiException,
    todo_api_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.routers import health, todos
from core.services.todo_store import TodoStore

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Nothing to connect or clean up; the store lives as long as the app.
    """
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.APP_NAME} in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {_allowed_origins(settings)}")

    yield

    logger.info(f"Shutting down {settings.APP_NAME} ({len(app.state.todo_store)} todos in memory)")


def _allowed_origins(settings: Settings) -> list[str]:
    return settings.cors_origins_list if settings.is_production else ["*"]


def create_app(
    settings: Settings | None = None,
    store: TodoStore | None = None,
) -> FastAPI:
    """
    Build a configured FastAPI application.

    Args:
        settings: Settings to use (defaults to the cached env settings)
        store: Todo store to serve (defaults to a new, empty store)

    Returns:
        The FastAPI application, with its store on app.state.todo_store
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        description="""
## In-Memory Todo API

Create, list, complete and delete short todo items.

| Method | Path | Result |
|--------|------|--------|
| GET | /api/todos | All todos in creation order |
| POST | /api/todos | Create a todo from `{"text": "..."}` |
| PATCH | /api/todos/{id} | Set `{"completed": true/false}` |
| DELETE | /api/todos/{id} | Remove a todo |

Todos live in memory only and are lost on restart.
""",
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Todos",
                "description": "Create, list, complete and delete todos",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
        ],
    )

    app.state.settings = settings
    app.state.todo_store = store if store is not None else TodoStore()

    # =========================================================================
    # Middleware
    # =========================================================================

    allowed_origins = _allowed_origins(settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        # Browsers reject credentials with a wildcard origin
        allow_credentials="*" not in allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(TodoApiException, todo_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    # Todo CRUD endpoints
    app.include_router(
        todos.router,
        prefix="/api/todos",
        tags=["Todos"]
    )

    # Health check endpoints
    app.include_router(
        health.router,
        prefix="/api",
        tags=["Health"]
    )

    # =========================================================================
    # Root Endpoint
    # =========================================================================

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


# Default application for `uvicorn app.main:app`
app = create_app()


def run() -> None:
    """Run the API with uvicorn using API_HOST / API_PORT."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.log_level.lower(),
        reload=settings.DEBUG and settings.is_development,
    )


if __name__ == "__main__":
    run()
