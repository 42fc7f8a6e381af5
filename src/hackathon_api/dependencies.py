"""FastAPI dependencies for accessing app state."""

from typing import Optional

from fastapi import Depends
from fastapi import Header
from fastapi import HTTPException
from fastapi import Request
from fastapi import status
from loguru import logger

from hackathon_api.exceptions import NotFoundError
from hackathon_api.models.hackathon import Hackathon
from hackathon_api.models.hacker import Hacker
from hackathon_api.settings import Settings
from hackathon_api.store import HackathonStore


def get_settings(request: Request) -> Settings:
    """
    Get application settings from request state.

    Parameters
    ----------
    request : Request
        FastAPI request object

    Returns
    -------
    Settings
        Application settings instance
    """
    return request.app.state.settings


def get_store(request: Request) -> HackathonStore:
    """
    Get the hackathon store handle from request state.

    Parameters
    ----------
    request : Request
        FastAPI request object

    Returns
    -------
    HackathonStore
        Store bundling every typed collection
    """
    return request.app.state.store


def get_current_hacker(
    x_hacker_id: Optional[str] = Header(
        default=None,
        alias="X-Hacker-Id",
        description="Id of the acting hacker (row id in the hackers tab)",
    ),
    store: HackathonStore = Depends(get_store),
) -> Hacker:
    """
    Resolve the acting hacker from the X-Hacker-Id header.

    Raises
    ------
    HTTPException
        401 if the header is missing, 403 if no such hacker exists
    """
    if not x_hacker_id or not x_hacker_id.strip():
        logger.warning("Missing X-Hacker-Id header", http_status=401)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing required header: X-Hacker-Id",
        )

    try:
        return store.hackers.get(x_hacker_id.strip())
    except NotFoundError:
        logger.warning("Unknown hacker", hacker_id=x_hacker_id, http_status=403)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Unknown hacker: {x_hacker_id}",
        )


def get_current_hackathon(
    store: HackathonStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> Optional[Hackathon]:
    """The hackathon the app is running for, or None when none is configured."""
    return store.hackathons.current(settings.default_hackathon_id)
