"""
Judging Model

One row per (project, judge) assignment, holding that judge's scores.
"""

from typing import ClassVar
from typing import Optional
from typing import Tuple

from hackathon_api.sheets.schema import Column
from hackathon_api.sheets.schema import ColumnKind
from hackathon_api.sheets.schema import SheetRow


class Judging(SheetRow):
    """Judging sheet row."""

    TABLE: ClassVar[str] = "judgings"
    COLUMNS: ClassVar[Tuple[Column, ...]] = (
        Column("_user_id", attr="user_id"),
        Column("project_id"),
        Column("execution", ColumnKind.INTEGER),
        Column("ambition", ColumnKind.INTEGER),
        Column("coolness", ColumnKind.INTEGER),
        Column("impact", ColumnKind.INTEGER),
        Column("score", ColumnKind.INTEGER),
        Column("notes", nullable=True),
    )

    user_id: str = ""
    project_id: str = ""
    execution: int = 0
    ambition: int = 0
    coolness: int = 0
    impact: int = 0
    score: int = 0
    notes: Optional[str] = None
