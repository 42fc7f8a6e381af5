"""
Team Member Model

One row per (project, hacker) membership.
"""

from typing import ClassVar
from typing import Optional
from typing import Tuple

from hackathon_api.sheets.schema import Column
from hackathon_api.sheets.schema import SheetRow


class TeamMember(SheetRow):
    """Team member sheet row."""

    TABLE: ClassVar[str] = "team_members"
    COLUMNS: ClassVar[Tuple[Column, ...]] = (
        Column("_user_id", attr="user_id"),
        Column("project_id"),
        Column("responsibilities", nullable=True),
    )

    user_id: str = ""
    project_id: str = ""
    responsibilities: Optional[str] = None
