"""
Project Model

Sheet row for a hackathon project. Members and judges are derived from the
team_members and judgings tabs and are never persisted on the project row.
"""

from datetime import datetime
from datetime import timezone
from typing import ClassVar
from typing import Dict
from typing import List
from typing import Optional
from typing import Tuple

from pydantic import Field

from hackathon_api.lifecycle.validators import validate_more_info
from hackathon_api.sheets.schema import Column
from hackathon_api.sheets.schema import ColumnKind
from hackathon_api.sheets.schema import SheetRow


class Project(SheetRow):
    """Project sheet row."""

    TABLE: ClassVar[str] = "projects"
    # IMPORTANT: tab columnar order, not attribute order
    COLUMNS: ClassVar[Tuple[Column, ...]] = (
        Column("_user_id", attr="user_id"),
        Column("_hackathon_id", attr="hackathon_id"),
        Column("title"),
        Column("description"),
        Column("date_created", ColumnKind.DATETIME),
        Column("project_type"),
        Column("contestant", ColumnKind.BOOLEAN),
        Column("locked", ColumnKind.BOOLEAN),
        Column("technologies", ColumnKind.LIST),
        Column("more_info", nullable=True),
    )

    title: str = ""
    description: str = ""
    project_type: str = "Open"
    contestant: bool = True
    locked: bool = False
    technologies: List[str] = Field(default_factory=list)
    more_info: Optional[str] = None
    user_id: str = ""
    hackathon_id: str = ""
    date_created: Optional[datetime] = None

    # derived
    members: List[str] = Field(default_factory=list, exclude=True)
    judges: List[str] = Field(default_factory=list, exclude=True)

    def prepare(self, creating: bool) -> None:
        if self.date_created is None:
            self.date_created = datetime.now(timezone.utc)

    def validate_fields(self) -> Dict[str, str]:
        return validate_more_info(self.more_info) or {}

    def is_owner(self, hacker_id: str) -> bool:
        return bool(hacker_id) and self.user_id == hacker_id

    def has_member(self, hacker_id: str) -> bool:
        return hacker_id in self.members
