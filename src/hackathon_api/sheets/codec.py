"""
Row Codec

Converts between the ordered string cells of one tab and a typed row model.

Coercion is per cell. When a cell cannot be coerced the raw string is kept on
that field, a ParseError is recorded on the row and the rest of the row is
still decoded. Values kept raw are written back verbatim by encode(), so a
save never destroys data the codec could not understand.
"""

from datetime import datetime
from datetime import timezone
from typing import Any
from typing import Callable
from typing import Dict
from typing import Generic
from typing import List
from typing import Type
from typing import TypeVar

from loguru import logger

from hackathon_api.exceptions import ParseError
from hackathon_api.sheets.backend import RawRow
from hackathon_api.sheets.schema import LIST_DELIMITER
from hackathon_api.sheets.schema import NIL
from hackathon_api.sheets.schema import Column
from hackathon_api.sheets.schema import ColumnKind
from hackathon_api.sheets.schema import SheetRow

T = TypeVar("T", bound=SheetRow)

_TRUE_VALUES = {"true", "1", "yes"}
_FALSE_VALUES = {"false", "0", "no"}

# Returned by a decoder when the model default should apply
_DEFAULT = object()


def _is_blank(cell: str) -> bool:
    return cell == NIL or cell.strip() == ""


def decode_text(cell: str, column: Column) -> Any:
    if cell == NIL:
        return None if column.nullable else ""
    return cell


def decode_boolean(cell: str, column: Column) -> Any:
    if _is_blank(cell):
        return _DEFAULT
    value = cell.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError("not a boolean")


def decode_integer(cell: str, column: Column) -> Any:
    if _is_blank(cell):
        return _DEFAULT
    return int(cell.strip())


def decode_datetime(cell: str, column: Column) -> Any:
    if _is_blank(cell):
        return None
    text = cell.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    value = datetime.fromisoformat(text)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def decode_list(cell: str, column: Column) -> Any:
    if _is_blank(cell):
        return []
    return [item.strip() for item in cell.split(LIST_DELIMITER) if item.strip()]


def encode_text(value: Any) -> str:
    return NIL if value is None else str(value)


def encode_boolean(value: Any) -> str:
    return "TRUE" if value else "FALSE"


def encode_integer(value: Any) -> str:
    return str(int(value))


def encode_datetime(value: Any) -> str:
    if value is None:
        return NIL
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def encode_list(value: Any) -> str:
    return LIST_DELIMITER.join(str(item) for item in value or [])


DECODERS: Dict[ColumnKind, Callable[[str, Column], Any]] = {
    ColumnKind.TEXT: decode_text,
    ColumnKind.BOOLEAN: decode_boolean,
    ColumnKind.INTEGER: decode_integer,
    ColumnKind.DATETIME: decode_datetime,
    ColumnKind.LIST: decode_list,
}

ENCODERS: Dict[ColumnKind, Callable[[Any], str]] = {
    ColumnKind.TEXT: encode_text,
    ColumnKind.BOOLEAN: encode_boolean,
    ColumnKind.INTEGER: encode_integer,
    ColumnKind.DATETIME: encode_datetime,
    ColumnKind.LIST: encode_list,
}


class RowCodec(Generic[T]):
    """Bidirectional mapping between RawRow cells and one row model."""

    def __init__(self, row_type: Type[T], table: str = ""):
        """
        Initialize codec.

        Args:
            row_type: SheetRow subclass declaring COLUMNS
            table: Tab name (defaults to row_type.TABLE), used in logs and errors
        """
        if not row_type.COLUMNS:
            raise ValueError(f"{row_type.__name__} declares no COLUMNS")
        self.row_type = row_type
        self.table = table or row_type.TABLE
        self.columns = row_type.COLUMNS

    def header(self) -> List[str]:
        """Column names in persisted order."""
        return [column.name for column in self.columns]

    def decode(self, raw: RawRow) -> T:
        """
        Decode one raw row into a typed row.

        Missing trailing cells read as the unset sentinel. Extra cells past the
        schema are ignored.
        """
        cells = list(raw.cells)
        if len(cells) > len(self.columns):
            logger.warning(
                "Ignoring cells beyond the table schema",
                table=self.table,
                row_id=raw.row_id,
                extra_cells=len(cells) - len(self.columns),
            )

        values: Dict[str, Any] = {"id": raw.row_id, "version": raw.version}
        errors: Dict[str, ParseError] = {}

        for index, column in enumerate(self.columns):
            cell = cells[index] if index < len(cells) else NIL
            try:
                value = DECODERS[column.kind](cell, column)
            except (ValueError, TypeError) as e:
                error = ParseError(self.table, column.name, cell, str(e))
                logger.warning(
                    "Keeping raw cell value after coercion failure",
                    table=self.table,
                    row_id=raw.row_id,
                    column=column.name,
                    value=cell,
                    reason=str(e),
                )
                errors[column.name] = error
                values[column.field] = cell
                continue
            if value is not _DEFAULT:
                values[column.field] = value

        if errors:
            # raw strings would not pass field validation
            row = self.row_type.model_construct(**values)
        else:
            row = self.row_type.model_validate(values)
        row.parse_errors = errors
        return row

    def encode(self, row: T) -> List[str]:
        """Encode a typed row into its ordered cells."""
        cells: List[str] = []
        for column in self.columns:
            value = getattr(row, column.field)
            if column.name in row.parse_errors and isinstance(value, str):
                cells.append(value)
                continue
            cells.append(ENCODERS[column.kind](value))
        return cells
