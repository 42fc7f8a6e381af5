"""Team Members Collection"""

from typing import List
from typing import Optional

from hackathon_api.models.team_member import TeamMember
from hackathon_api.sheets.backend import TabularBackend
from hackathon_api.sheets.table import SheetTable


class TeamMembers(SheetTable[TeamMember]):
    """Team members tab."""

    def __init__(self, backend: TabularBackend):
        super().__init__(backend, TeamMember)

    def for_project(self, project_id: str) -> List[TeamMember]:
        return self.filter(lambda member: member.project_id == project_id)

    def find(self, project_id: str, user_id: str) -> Optional[TeamMember]:
        for member in self.for_project(project_id):
            if member.user_id == user_id:
                return member
        return None
