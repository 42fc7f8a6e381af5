"""
Projects Collection

Project rows with hackathon-scoped queries.
"""

from typing import List

from hackathon_api.models.project import Project
from hackathon_api.sheets.backend import TabularBackend
from hackathon_api.sheets.table import SheetTable


class Projects(SheetTable[Project]):
    """Projects tab."""

    def __init__(self, backend: TabularBackend):
        super().__init__(backend, Project)

    def for_hackathon(self, hackathon_id: str) -> List[Project]:
        """Projects entered in one hackathon."""
        return self.filter(lambda project: project.hackathon_id == hackathon_id)

    def owned_by(self, hacker_id: str) -> List[Project]:
        return self.filter(lambda project: project.user_id == hacker_id)
