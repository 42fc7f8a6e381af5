"""
Hackathon Model

Consumed, not owned: the core only reads hackathons (for max_team_size and
for picking the current event).
"""

from datetime import datetime
from typing import ClassVar
from typing import Optional
from typing import Tuple

from hackathon_api.sheets.schema import Column
from hackathon_api.sheets.schema import ColumnKind
from hackathon_api.sheets.schema import SheetRow


class Hackathon(SheetRow):
    """Hackathon sheet row."""

    TABLE: ClassVar[str] = "hackathons"
    COLUMNS: ClassVar[Tuple[Column, ...]] = (
        Column("name"),
        Column("description"),
        Column("location"),
        Column("date", ColumnKind.DATETIME),
        Column("duration_in_days", ColumnKind.INTEGER),
        Column("max_team_size", ColumnKind.INTEGER),
        Column("judging_starts", ColumnKind.DATETIME),
        Column("judging_stops", ColumnKind.DATETIME),
        Column("default", ColumnKind.BOOLEAN),
    )

    name: str = ""
    description: str = ""
    location: str = ""
    date: Optional[datetime] = None
    duration_in_days: int = 1
    max_team_size: int = 5
    judging_starts: Optional[datetime] = None
    judging_stops: Optional[datetime] = None
    default: bool = False
