"""Judgings Collection"""

from typing import List
from typing import Optional

from hackathon_api.models.judging import Judging
from hackathon_api.sheets.backend import TabularBackend
from hackathon_api.sheets.table import SheetTable


class Judgings(SheetTable[Judging]):
    """Judgings tab."""

    def __init__(self, backend: TabularBackend):
        super().__init__(backend, Judging)

    def for_project(self, project_id: str) -> List[Judging]:
        return self.filter(lambda judging: judging.project_id == project_id)

    def find(self, project_id: str, user_id: str) -> Optional[Judging]:
        for judging in self.for_project(project_id):
            if judging.user_id == user_id:
                return judging
        return None
