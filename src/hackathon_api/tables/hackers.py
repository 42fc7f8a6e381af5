"""
Hackers Collection

Read-only from the core's point of view. Supplies the judge pool used when
reconciling a project's judges.
"""

from typing import List
from typing import Optional

from hackathon_api.models.hacker import Hacker
from hackathon_api.sheets.backend import TabularBackend
from hackathon_api.sheets.table import SheetTable


class Hackers(SheetTable[Hacker]):
    """Hackers tab."""

    def __init__(self, backend: TabularBackend):
        super().__init__(backend, Hacker)

    def judges(self) -> List[Hacker]:
        """Hackers holding judge capability."""
        return self.filter(lambda hacker: hacker.can_judge())

    def by_name(self, name: str) -> Optional[Hacker]:
        for hacker in self.list():
            if hacker.name == name:
                return hacker
        return None
