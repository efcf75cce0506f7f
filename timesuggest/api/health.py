"""Health check endpoints for monitoring and orchestration."""

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

from timesuggest.calendar.engine import CalendarEngine, CalendarParseError
from timesuggest.config import settings

router = APIRouter(prefix="/health", tags=["health"])

READINESS_CHECK_PHRASE = "tomorrow 8 am"


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    timestamp: datetime
    version: str
    environment: str


class LivenessResponse(BaseModel):
    """Response model for liveness probe."""

    status: str


class ReadinessResponse(BaseModel):
    """Response model for readiness probe."""

    status: str
    checks: dict[str, str]


@router.get("/", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(UTC),
        version=settings.app_version,
        environment=settings.app_env,
    )


@router.get("/live", response_model=LivenessResponse)
async def liveness() -> LivenessResponse:
    """Liveness probe - app is running."""
    return LivenessResponse(status="alive")


@router.get("/ready", response_model=ReadinessResponse)
async def readiness(request: Request) -> ReadinessResponse:
    """Readiness probe - app can serve traffic.

    Checks:
    - API is responding
    - Suggester is initialized
    - Calendar engine resolves a sample phrase
    """
    checks: dict[str, str] = {"api": "ok"}

    checks["suggester"] = (
        "ok" if getattr(request.app.state, "suggester", None) else "not_configured"
    )

    try:
        CalendarEngine(datetime.now()).parse(READINESS_CHECK_PHRASE)
        checks["calendar"] = "ok"
    except CalendarParseError:
        checks["calendar"] = "failed"

    status = "ready" if all(v == "ok" for v in checks.values()) else "not_ready"
    return ReadinessResponse(status=status, checks=checks)
