"""Health check endpoints for monitoring application status."""

from datetime import datetime
from datetime import timezone

from fastapi import APIRouter
from fastapi import Request
from fastapi import status
from fastapi.responses import JSONResponse
from loguru import logger

ROUTER_HEALTH = APIRouter(tags=["Health"])


@ROUTER_HEALTH.get(
    "/health",
    summary="Health check endpoint",
    description="Basic health check that returns application status and metadata",
    responses={
        status.HTTP_200_OK: {
            "description": "Application is healthy",
            "content": {
                "application/json": {
                    "example": {
                        "status": "healthy",
                        "timestamp": "2026-01-05T12:00:00.000000Z",
                        "service": "Hackathon API",
                        "version": "v1",
                        "tables": ["projects", "registrations"],
                    }
                }
            },
        }
    },
)
async def health_check(request: Request):
    """
    Basic health check endpoint.

    Returns application status, the configured service name and the tabs the
    store serves. Does not read any rows.
    """
    settings = request.app.state.settings
    store = request.app.state.store

    response_data = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": settings.service_name,
        "version": "v1",
        "tables": [
            store.projects.table,
            store.registrations.table,
            store.team_members.table,
            store.judgings.table,
            store.hackathons.table,
            store.hackers.table,
        ],
    }

    logger.debug("Health check requested", status="healthy")

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=response_data,
    )
