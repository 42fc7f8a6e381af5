"""
Sheet Table

Generic versioned CRUD store over the rows of one tab.

Every write is guarded by the version token the caller read: update and delete
re-read the persisted row and refuse to proceed when its version differs
(ConflictError). Nothing is merged and nothing is retried; the losing writer
re-reads and decides again.
"""

import threading
import uuid
from typing import Callable
from typing import Dict
from typing import Generic
from typing import List
from typing import Optional
from typing import Type
from typing import TypeVar

from loguru import logger

from hackathon_api.exceptions import ConflictError
from hackathon_api.exceptions import NotFoundError
from hackathon_api.exceptions import ValidationError
from hackathon_api.sheets.backend import RawRow
from hackathon_api.sheets.backend import TabularBackend
from hackathon_api.sheets.codec import RowCodec
from hackathon_api.sheets.schema import SheetRow

T = TypeVar("T", bound=SheetRow)


class SheetTable(Generic[T]):
    """
    Versioned store for one record type.

    Concrete collections (Projects, Registrations, ...) inherit from this and
    add read-only domain queries.
    """

    def __init__(self, backend: TabularBackend, row_type: Type[T], table_name: Optional[str] = None):
        """
        Initialize table.

        Args:
            backend: Tabular backend holding the rows
            row_type: SheetRow subclass for this tab
            table_name: Tab name (defaults to row_type.TABLE)
        """
        self.backend = backend
        self.row_type = row_type
        self.table = table_name or row_type.TABLE
        self.codec: RowCodec[T] = RowCodec(row_type, self.table)
        # row id -> last version seen by this table
        self._index: Dict[str, str] = {}
        self._lock = threading.RLock()

    def _remember(self, raw: RawRow) -> None:
        self._index[raw.row_id] = raw.version

    def _check_fields(self, row: T) -> None:
        errors = row.validate_fields()
        if errors:
            logger.warning(
                "Row failed validation, nothing persisted",
                table=self.table,
                row_id=row.id,
                fields=sorted(errors),
            )
            raise ValidationError(errors)

    def _current(self, row_id: Optional[str]) -> RawRow:
        raw = self.backend.read_row(self.table, row_id) if row_id else None
        if raw is None:
            self._index.pop(row_id, None)
            raise NotFoundError(self.table, row_id)
        return raw

    def _check_version(self, row: T, current: RawRow) -> None:
        if row.version != current.version:
            logger.warning(
                "Version conflict",
                table=self.table,
                row_id=row.id,
                read_version=row.version,
                stored_version=current.version,
            )
            raise ConflictError(self.table, row.id, row.version, current.version)

    def create(self, row: T) -> T:
        """
        Persist a new row under a fresh identity.

        Args:
            row: Row without an identity

        Returns:
            The stored row, carrying its identity and initial version

        Raises:
            ConflictError: If the row already carries an identity
            ValidationError: If the row fails its domain rules
        """
        if not row.is_new:
            raise ConflictError(self.table, row.id, message=f"Row {row.id} already exists in {self.table}")
        row.prepare(creating=True)
        self._check_fields(row)

        with self._lock:
            row_id = uuid.uuid4().hex
            raw = self.backend.append_row(self.table, row_id, self.codec.encode(row))
            self._remember(raw)

        logger.info("Row created", table=self.table, row_id=raw.row_id, version=raw.version)
        return self.codec.decode(raw)

    def get(self, row_id: str) -> T:
        """Fresh read of one row. Raises NotFoundError if absent."""
        with self._lock:
            raw = self._current(row_id)
            self._remember(raw)
        return self.codec.decode(raw)

    def update(self, row: T) -> T:
        """
        Replace the whole row, provided nobody wrote it since it was read.

        Content equality does not bypass the version check.

        Raises:
            NotFoundError: If the row identity is absent
            ConflictError: If the stored version differs from row.version
            ValidationError: If the row fails its domain rules
        """
        row.prepare(creating=False)
        self._check_fields(row)

        with self._lock:
            current = self._current(row.id)
            self._check_version(row, current)
            raw = self.backend.write_row(self.table, current.row_id, self.codec.encode(row), current.version)
            self._remember(raw)

        logger.info(
            "Row updated",
            table=self.table,
            row_id=raw.row_id,
            from_version=current.version,
            version=raw.version,
        )
        return self.codec.decode(raw)

    def delete(self, row: T) -> None:
        """
        Remove the row, provided nobody wrote it since it was read.

        Raises:
            NotFoundError: If the row identity is absent
            ConflictError: If the stored version differs from row.version
        """
        with self._lock:
            current = self._current(row.id)
            self._check_version(row, current)
            self.backend.delete_row(self.table, current.row_id, current.version)
            self._index.pop(current.row_id, None)

        logger.info("Row deleted", table=self.table, row_id=current.row_id, version=current.version)

    def list(self) -> List[T]:
        """Snapshot of all rows. Later writes are not visible until re-fetched."""
        with self._lock:
            raws = self.backend.read_rows(self.table)
            self._index = {raw.row_id: raw.version for raw in raws}
        return [self.codec.decode(raw) for raw in raws]

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        """Snapshot of the rows matching predicate."""
        return [row for row in self.list() if predicate(row)]

    def count(self) -> int:
        return len(self.list())

    def known_version(self, row_id: str) -> Optional[str]:
        """Last version this table observed for row_id, if any."""
        with self._lock:
            return self._index.get(row_id)
