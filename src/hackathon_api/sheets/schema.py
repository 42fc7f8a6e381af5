"""
Row Schema

Column definitions and the base model every sheet record type derives from.

A record type is Identifiable (id), Versioned (version) and Serializable: it
declares its persisted columns explicitly in COLUMNS, in the tab's columnar
order. That order is what the codec reads and writes; the order in which the
pydantic fields happen to be declared is irrelevant.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any
from typing import ClassVar
from typing import Dict
from typing import Optional
from typing import Tuple

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

# Reserved cell value meaning "intentionally unset", distinct from ""
NIL = "\0"

# The one delimiter used for list-valued cells
LIST_DELIMITER = ","


class ColumnKind(str, Enum):
    """Cell coercion applied by the codec."""

    TEXT = "text"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    DATETIME = "datetime"
    LIST = "list"


@dataclass(frozen=True)
class Column:
    """One persisted column: its header name, coercion and model attribute."""

    name: str
    kind: ColumnKind = ColumnKind.TEXT
    attr: Optional[str] = None
    nullable: bool = False

    @property
    def field(self) -> str:
        """Model attribute holding this column's value."""
        return self.attr or self.name


class SheetRow(BaseModel):
    """Base model for a typed row."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    TABLE: ClassVar[str] = ""
    COLUMNS: ClassVar[Tuple[Column, ...]] = ()

    id: Optional[str] = None
    version: Optional[str] = None

    # column name -> ParseError for cells kept raw during decoding
    parse_errors: Dict[str, Any] = Field(default_factory=dict, exclude=True, repr=False)

    def prepare(self, creating: bool) -> None:
        """Fill defaults immediately before the row is written."""

    def validate_fields(self) -> Dict[str, str]:
        """Return field-keyed domain rule failures; empty when the row may be written."""
        return {}

    @property
    def is_new(self) -> bool:
        return self.id is None
