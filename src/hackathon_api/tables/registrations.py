"""
Registrations Collection

Registration rows with hackathon-scoped queries.
"""

from typing import List
from typing import Optional

from hackathon_api.models.registration import Registration
from hackathon_api.sheets.backend import TabularBackend
from hackathon_api.sheets.table import SheetTable


class Registrations(SheetTable[Registration]):
    """Registrations tab."""

    def __init__(self, backend: TabularBackend):
        super().__init__(backend, Registration)

    def for_hackathon(self, hackathon_id: str) -> List[Registration]:
        """Registrations for one hackathon."""
        return self.filter(lambda registration: registration.hackathon_id == hackathon_id)

    def find(self, user_id: str, hackathon_id: str) -> Optional[Registration]:
        """A hacker's registration for one hackathon, if any."""
        matches = self.filter(
            lambda registration: registration.user_id == user_id and registration.hackathon_id == hackathon_id
        )
        return matches[0] if matches else None
