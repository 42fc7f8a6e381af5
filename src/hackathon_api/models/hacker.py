"""
Hacker Model

Consumed, not owned: hackers supply the capability flags (administrator,
judge, staff) that the access predicates check.
"""

from enum import Enum
from typing import ClassVar
from typing import List
from typing import Tuple

from pydantic import Field

from hackathon_api.sheets.schema import Column
from hackathon_api.sheets.schema import ColumnKind
from hackathon_api.sheets.schema import SheetRow


class HackerRole(str, Enum):
    """Role names stored in the hackers tab."""

    ADMIN = "admin"
    JUDGE = "judge"
    STAFF = "staff"
    USER = "user"


class Hacker(SheetRow):
    """Hacker sheet row."""

    TABLE: ClassVar[str] = "hackers"
    COLUMNS: ClassVar[Tuple[Column, ...]] = (
        Column("name"),
        Column("roles", ColumnKind.LIST),
    )

    name: str = ""
    roles: List[str] = Field(default_factory=list)

    def has_role(self, role: HackerRole) -> bool:
        return role.value in self.roles

    def can_admin(self) -> bool:
        return self.has_role(HackerRole.ADMIN)

    def can_judge(self) -> bool:
        return self.has_role(HackerRole.JUDGE)

    def can_staff(self) -> bool:
        return self.has_role(HackerRole.STAFF)

    def is_elevated(self) -> bool:
        """Administrator, judge or staff."""
        return self.can_admin() or self.can_judge() or self.can_staff()
