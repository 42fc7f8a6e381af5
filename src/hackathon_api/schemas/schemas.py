####################################
# --- Request/response schemas --- #
####################################

from datetime import datetime
from typing import Any
from typing import Dict
from typing import List
from typing import Optional

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator

from hackathon_api.lifecycle.membership import MembershipAction
from hackathon_api.models.project import Project
from hackathon_api.models.registration import Registration
from hackathon_api.sheets.schema import SheetRow


# create (Crud)
class ProjectPayload(BaseModel):
    """Editable project fields as submitted by the project form."""

    title: str
    description: str = ""
    project_type: str = "Open"
    contestant: bool = True
    locked: bool = False
    technologies: List[str] = Field(default_factory=list)
    more_info: Optional[str] = None
    hackathon_id: Optional[str] = None
    judges: Optional[List[str]] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        """Validate that the title is not blank."""
        if not v.strip():
            raise ValueError("title must not be blank")
        return v

    def to_project(self) -> Project:
        return Project(
            title=self.title,
            description=self.description,
            project_type=self.project_type,
            contestant=self.contestant,
            locked=self.locked,
            technologies=self.technologies,
            more_info=self.more_info,
            hackathon_id=self.hackathon_id or "",
        )


# update (crUd)
class ProjectUpdatePayload(ProjectPayload):
    """Project form submission for an existing project."""

    version: str = Field(description="Version token from the last read of this project")


# read (cRud)
def _parsed(row: SheetRow, column: str, value: Any) -> Any:
    """Value of a typed cell, or None when the stored cell did not parse."""
    return None if column in row.parse_errors else value


def _raw_cells(row: SheetRow) -> Dict[str, str]:
    return {column: error.value for column, error in row.parse_errors.items()}


class ProjectResponse(BaseModel):
    """One project with its derived members and judges."""

    id: str
    version: str
    user_id: str
    hackathon_id: str
    title: str
    description: str
    date_created: Optional[datetime] = None
    project_type: str
    contestant: Optional[bool] = None
    locked: Optional[bool] = None
    technologies: Optional[List[str]] = None
    more_info: Optional[str] = None
    members: List[str]
    judges: List[str]
    parse_errors: Dict[str, str] = Field(
        default_factory=dict,
        description="Raw value of each stored cell that could not be read; its typed field is null",
    )

    @classmethod
    def from_project(cls, project: Project) -> "ProjectResponse":
        return cls(
            id=project.id,
            version=project.version,
            user_id=project.user_id,
            hackathon_id=project.hackathon_id,
            title=project.title,
            description=project.description,
            date_created=_parsed(project, "date_created", project.date_created),
            project_type=project.project_type,
            contestant=_parsed(project, "contestant", project.contestant),
            locked=_parsed(project, "locked", project.locked),
            technologies=_parsed(project, "technologies", project.technologies),
            more_info=project.more_info,
            members=project.members,
            judges=project.judges,
            parse_errors=_raw_cells(project),
        )


class GetProjectsResponse(BaseModel):
    """Response model for listing projects."""

    Message: str
    Project: List[ProjectResponse]


class MembershipResponse(BaseModel):
    """Membership action for the acting hacker on one project."""

    project_id: str
    action: MembershipAction
    applied: bool = False


class RegistrationResponse(BaseModel):
    """One registration row."""

    id: str
    version: str
    user_id: str
    hackathon_id: str
    date_registered: Optional[datetime] = None
    attended: Optional[bool] = None
    parse_errors: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_registration(cls, registration: Registration) -> "RegistrationResponse":
        return cls(
            id=registration.id,
            version=registration.version,
            user_id=registration.user_id,
            hackathon_id=registration.hackathon_id,
            date_registered=_parsed(registration, "date_registered", registration.date_registered),
            attended=_parsed(registration, "attended", registration.attended),
            parse_errors=_raw_cells(registration),
        )


class GetRegistrationsResponse(BaseModel):
    """Response model for listing registrations."""

    Message: str
    Registration: List[RegistrationResponse]
