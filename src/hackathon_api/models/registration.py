"""
Registration Model

A hacker's registration for one hackathon.
"""

from datetime import datetime
from datetime import timezone
from typing import ClassVar
from typing import Optional
from typing import Tuple

from hackathon_api.sheets.schema import Column
from hackathon_api.sheets.schema import ColumnKind
from hackathon_api.sheets.schema import SheetRow


class Registration(SheetRow):
    """Registration sheet row."""

    TABLE: ClassVar[str] = "registrations"
    COLUMNS: ClassVar[Tuple[Column, ...]] = (
        Column("_user_id", attr="user_id"),
        Column("hackathon_id"),
        Column("date_registered", ColumnKind.DATETIME),
        Column("attended", ColumnKind.BOOLEAN),
    )

    user_id: str = ""
    hackathon_id: str = ""
    date_registered: Optional[datetime] = None
    attended: bool = False

    def prepare(self, creating: bool) -> None:
        if self.date_registered is None:
            self.date_registered = datetime.now(timezone.utc)
        # a registration record only exists for hackers using the app, so they attended
        self.attended = True
