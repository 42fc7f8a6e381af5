from typing import Optional

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Query
from fastapi import Request
from fastapi import status
from loguru import logger

from hackathon_api.dependencies import get_current_hackathon
from hackathon_api.dependencies import get_current_hacker
from hackathon_api.dependencies import get_store
from hackathon_api.lifecycle.service import register
from hackathon_api.models.hackathon import Hackathon
from hackathon_api.models.hacker import Hacker
from hackathon_api.schemas.schemas import GetRegistrationsResponse
from hackathon_api.schemas.schemas import RegistrationResponse
from hackathon_api.store import HackathonStore

ROUTER_REGISTRATIONS = APIRouter(tags=["Registrations"])


@ROUTER_REGISTRATIONS.get(
    "/registrations",
    responses={
        status.HTTP_200_OK: {
            "description": "Registrations fetched successfully",
            "content": {
                "application/json": {"example": {"Message": "Fetched 12 registrations!", "Registration": []}}
            },
        },
    },
)
async def list_registrations(
    hackathon_id: Optional[str] = Query(
        default=None,
        description="Only registrations for this hackathon (defaults to the current hackathon)",
    ),
    store: HackathonStore = Depends(get_store),
    hackathon: Optional[Hackathon] = Depends(get_current_hackathon),
) -> GetRegistrationsResponse:
    """List hackathon registrations."""
    scope = hackathon_id or (hackathon.id if hackathon else None)
    registrations = store.registrations.for_hackathon(scope) if scope else store.registrations.list()

    logger.info("Registrations retrieved successfully", count=len(registrations), hackathon_id=scope)
    return GetRegistrationsResponse(
        Message=f"Fetched {len(registrations)} registrations!",
        Registration=[RegistrationResponse.from_registration(registration) for registration in registrations],
    )


@ROUTER_REGISTRATIONS.post(
    "/registrations",
    responses={
        status.HTTP_404_NOT_FOUND: {
            "description": "No hackathon is configured",
            "content": {"application/json": {"example": {"detail": "No current hackathon"}}},
        },
    },
)
async def register_for_current_hackathon(
    request: Request,
    store: HackathonStore = Depends(get_store),
    hacker: Hacker = Depends(get_current_hacker),
    hackathon: Optional[Hackathon] = Depends(get_current_hackathon),
) -> RegistrationResponse:
    """
    Register the acting hacker for the current hackathon.

    Registering twice returns the existing registration.
    """
    if hackathon is None:
        logger.warning(
            "No current hackathon to register for",
            hacker_id=hacker.id,
            http_status=404,
            http_method=request.method,
            url_path=str(request.url.path),
        )
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No current hackathon",
        )

    registration = register(store, hacker, hackathon)
    return RegistrationResponse.from_registration(registration)
