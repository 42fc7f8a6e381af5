"""
Hackathons Collection

Read-only from the core's point of view.
"""

from datetime import datetime
from datetime import timezone
from typing import Optional

from hackathon_api.models.hackathon import Hackathon
from hackathon_api.sheets.backend import TabularBackend
from hackathon_api.sheets.table import SheetTable

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


class Hackathons(SheetTable[Hackathon]):
    """Hackathons tab."""

    def __init__(self, backend: TabularBackend):
        super().__init__(backend, Hackathon)

    def current(self, default_id: Optional[str] = None) -> Optional[Hackathon]:
        """
        The hackathon the app is running for.

        Args:
            default_id: Explicitly configured hackathon id, takes precedence

        Returns:
            The configured hackathon, else the one flagged default, else the
            latest by date, rows whose date did not parse counting as
            earliest; None when the tab is empty
        """
        hackathons = self.list()
        if default_id:
            for hackathon in hackathons:
                if hackathon.id == default_id:
                    return hackathon
        for hackathon in hackathons:
            if hackathon.default is True:
                return hackathon
        if not hackathons:
            return None
        return max(hackathons, key=_event_date)


def _event_date(hackathon: Hackathon) -> datetime:
    # unset or unparsed dates sort first
    return hackathon.date if isinstance(hackathon.date, datetime) else _EARLIEST
