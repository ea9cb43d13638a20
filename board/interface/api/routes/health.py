"""Liveness endpoint."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from board.config import Settings
from board.domain.model.common import utc_now
from board.util.observability import SERVICE_VERSION

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    environment: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up, with its build and environment.

    Needs no credential and does not touch the database.
    """
    return HealthResponse(
        status="healthy",
        timestamp=utc_now(),
        version=SERVICE_VERSION,
        environment=settings.environment,
        git_sha=settings.git_sha,
    )
