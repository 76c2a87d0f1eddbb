# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Health checks for process managers and load balancers. The only component to
# check is the in-memory todo store.
# =============================================================================

from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import SettingsDep, TodoStoreDep
from lib.utils import utc_now

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Service identity plus a fixed "healthy" status."""
    status: str
    service: str
    timestamp: str
    environment: str
    version: str


class StoreCheck(BaseModel):
    """State of the todo store."""
    store: str
    todo_count: int


class ReadinessResponse(BaseModel):
    status: str
    checks: StoreCheck
    timestamp: str


class LivenessResponse(BaseModel):
    status: str
    timestamp: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep):
    """
    Report which todo service is answering and in which environment.
    """
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME,
        timestamp=utc_now().isoformat(),
        environment=settings.ENVIRONMENT,
        version=settings.APP_VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
async def readiness_check(store: TodoStoreDep):
    """
    Report whether todo requests can be served.

    Counting the todos takes the store lock, so a ready answer also means
    the store is not stuck.
    """
    return ReadinessResponse(
        status="ready",
        checks=StoreCheck(store="healthy", todo_count=len(store)),
        timestamp=utc_now().isoformat(),
    )


@router.get("/health/live", response_model=LivenessResponse)
async def liveness_check():
    """Answer as long as the event loop is running."""
    return LivenessResponse(
        status="alive",
        timestamp=utc_now().isoformat(),
    )
