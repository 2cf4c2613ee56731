"""Health check routes."""

from datetime import datetime, timezone

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from study.config import Settings
from study.domain.service import ProfileService


router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str


class KeepAliveResponse(BaseModel):
    """Keep-alive response."""

    status: str
    message: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version="0.1.0",
        git_sha=settings.git_sha,
    )


@router.get("/health/keep-alive", response_model=KeepAliveResponse)
async def keep_alive(profile_service: FromDishka[ProfileService]) -> KeepAliveResponse:
    """Run the lightest possible query so a hosted store does not idle out.

    Meant to be hit by an external scheduler.

    Raises:
        HTTPException: 500 if the store cannot be reached
    """
    try:
        await profile_service.ping()
    except Exception as e:
        logfire.error("Keep-alive query failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
    return KeepAliveResponse(status="ok", message="Database is awake")
