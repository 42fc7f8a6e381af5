from typing import Optional

from fastapi import APIRouter
from fastapi import Depends
from fastapi import Query
from fastapi import Response
from fastapi import status
from loguru import logger

from hackathon_api.dependencies import get_current_hackathon
from hackathon_api.dependencies import get_current_hacker
from hackathon_api.dependencies import get_store
from hackathon_api.lifecycle.access import ProjectContext
from hackathon_api.lifecycle.membership import MembershipAction
from hackathon_api.lifecycle.membership import membership_action
from hackathon_api.lifecycle.service import change_membership
from hackathon_api.lifecycle.service import delete_project
from hackathon_api.lifecycle.service import save_project
from hackathon_api.models.hackathon import Hackathon
from hackathon_api.models.hacker import Hacker
from hackathon_api.schemas.schemas import GetProjectsResponse
from hackathon_api.schemas.schemas import MembershipResponse
from hackathon_api.schemas.schemas import ProjectPayload
from hackathon_api.schemas.schemas import ProjectResponse
from hackathon_api.schemas.schemas import ProjectUpdatePayload
from hackathon_api.store import HackathonStore

ROUTER_PROJECTS = APIRouter(tags=["Projects"])

_NOT_FOUND = {
    "description": "Project not found",
    "content": {
        "application/json": {"example": {"detail": "Row 3f2a not found in projects", "error_type": "NotFoundError"}}
    },
}
_CONFLICT = {
    "description": "Project changed since it was read",
    "content": {
        "application/json": {
            "example": {
                "detail": "Row 3f2a in projects was modified by someone else (read version 6, stored version 7)",
                "error_type": "ConflictError",
                "current_version": "7",
            }
        }
    },
}
_FORBIDDEN = {
    "description": "Acting hacker may not perform this action",
    "content": {
        "application/json": {
            "example": {
                "detail": "Hacker 9c1e is not allowed to update project: project is locked",
                "error_type": "AuthorizationError",
            }
        }
    },
}


@ROUTER_PROJECTS.get(
    "/projects",
    responses={
        status.HTTP_200_OK: {
            "description": "Projects fetched successfully",
            "content": {"application/json": {"example": {"Message": "Fetched 5 projects!", "Project": []}}},
        },
    },
)
async def list_projects(
    hackathon_id: Optional[str] = Query(
        default=None,
        description="Only projects of this hackathon (defaults to the current hackathon)",
    ),
    store: HackathonStore = Depends(get_store),
    hackathon: Optional[Hackathon] = Depends(get_current_hackathon),
) -> GetProjectsResponse:
    """List the projects of a hackathon with their members and judges."""
    scope = hackathon_id or (hackathon.id if hackathon else None)
    logger.info("Listing projects", hackathon_id=scope)

    projects = store.projects.for_hackathon(scope) if scope else store.projects.list()
    projects = store.hydrate_all(projects)

    logger.info("Projects retrieved successfully", count=len(projects), hackathon_id=scope)
    return GetProjectsResponse(
        Message=f"Fetched {len(projects)} projects!",
        Project=[ProjectResponse.from_project(project) for project in projects],
    )


@ROUTER_PROJECTS.get(
    "/projects/{project_id}",
    responses={status.HTTP_404_NOT_FOUND: _NOT_FOUND},
)
async def get_project(
    project_id: str,
    store: HackathonStore = Depends(get_store),
) -> ProjectResponse:
    """Retrieve one project, including the version token needed to edit or delete it."""
    logger.info("Getting project", project_id=project_id)
    project = store.hydrate(store.projects.get(project_id))
    return ProjectResponse.from_project(project)


@ROUTER_PROJECTS.post(
    "/projects",
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_403_FORBIDDEN: _FORBIDDEN,
        status.HTTP_422_UNPROCESSABLE_CONTENT: {
            "description": "A field failed validation",
            "content": {
                "application/json": {
                    "example": {
                        "detail": [{"field": "more_info", "msg": "More info must be a URL"}],
                        "error_type": "ValidationError",
                    }
                }
            },
        },
    },
)
async def create_project(
    payload: ProjectPayload,
    store: HackathonStore = Depends(get_store),
    hacker: Hacker = Depends(get_current_hacker),
    hackathon: Optional[Hackathon] = Depends(get_current_hackathon),
) -> ProjectResponse:
    """Create a project owned by the acting hacker in the current hackathon."""
    logger.info("Creating project", title=payload.title, hacker_id=hacker.id)
    project = save_project(
        store,
        hacker,
        payload.to_project(),
        context=ProjectContext.NEW,
        judge_names=payload.judges,
        hackathon=hackathon,
    )
    logger.success("Project created", project_id=project.id, hacker_id=hacker.id)
    return ProjectResponse.from_project(project)


@ROUTER_PROJECTS.put(
    "/projects/{project_id}",
    responses={
        status.HTTP_404_NOT_FOUND: _NOT_FOUND,
        status.HTTP_409_CONFLICT: _CONFLICT,
        status.HTTP_403_FORBIDDEN: _FORBIDDEN,
    },
)
async def update_project(
    project_id: str,
    payload: ProjectUpdatePayload,
    store: HackathonStore = Depends(get_store),
    hacker: Hacker = Depends(get_current_hacker),
    hackathon: Optional[Hackathon] = Depends(get_current_hackathon),
) -> ProjectResponse:
    """
    Update a project from the form.

    The body must carry the version returned by the last read. Passing judges
    replaces the judge assignment (administrators only); omitting it leaves the
    judges as they are.
    """
    logger.info("Updating project", project_id=project_id, version=payload.version, hacker_id=hacker.id)
    submitted = payload.to_project()
    submitted.id = project_id
    submitted.version = payload.version

    project = save_project(
        store,
        hacker,
        submitted,
        context=ProjectContext.EDIT,
        judge_names=payload.judges,
        hackathon=hackathon,
    )
    return ProjectResponse.from_project(project)


@ROUTER_PROJECTS.delete(
    "/projects/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        status.HTTP_404_NOT_FOUND: _NOT_FOUND,
        status.HTTP_409_CONFLICT: _CONFLICT,
        status.HTTP_403_FORBIDDEN: _FORBIDDEN,
    },
)
async def delete_project_by_id(
    project_id: str,
    version: str = Query(description="Version token from the last read of this project"),
    store: HackathonStore = Depends(get_store),
    hacker: Hacker = Depends(get_current_hacker),
):
    """Delete a project along with its team member and judging rows."""
    logger.info("Deleting project", project_id=project_id, version=version, hacker_id=hacker.id)
    project = store.projects.get(project_id)
    project.version = version

    delete_project(store, hacker, project)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@ROUTER_PROJECTS.get(
    "/projects/{project_id}/membership",
    responses={status.HTTP_404_NOT_FOUND: _NOT_FOUND},
)
async def get_membership_action(
    project_id: str,
    store: HackathonStore = Depends(get_store),
    hacker: Hacker = Depends(get_current_hacker),
    hackathon: Optional[Hackathon] = Depends(get_current_hackathon),
) -> MembershipResponse:
    """What the membership button would do for the acting hacker (join, leave or nochange)."""
    project = store.hydrate(store.projects.get(project_id))
    action = membership_action(hacker, hackathon, project)
    return MembershipResponse(project_id=project.id, action=action)


@ROUTER_PROJECTS.post(
    "/projects/{project_id}/membership",
    responses={status.HTTP_404_NOT_FOUND: _NOT_FOUND},
)
async def post_membership_change(
    project_id: str,
    store: HackathonStore = Depends(get_store),
    hacker: Hacker = Depends(get_current_hacker),
    hackathon: Optional[Hackathon] = Depends(get_current_hackathon),
) -> MembershipResponse:
    """Join or leave the project, whichever the acting hacker currently can."""
    project = store.projects.get(project_id)
    action = change_membership(store, hacker, hackathon, project)
    return MembershipResponse(
        project_id=project.id,
        action=action,
        applied=action != MembershipAction.NO_CHANGE,
    )
