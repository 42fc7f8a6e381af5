"""
Tabular Backend Boundary

The store reaches its rows through this narrow interface: whole-row reads that
return the ordered cells plus a version token, and row-level writes/deletes
that must present the version token obtained from the last read.

InMemoryBackend is the reference implementation used by the application
factory and the tests. A spreadsheet-backed implementation only needs to honour
the same compare-on-write contract.
"""

import itertools
import threading
from dataclasses import dataclass
from typing import Dict
from typing import List
from typing import Optional
from typing import Protocol
from typing import Sequence
from typing import Set
from typing import Tuple

from loguru import logger

from hackathon_api.exceptions import ConflictError
from hackathon_api.exceptions import NotFoundError


@dataclass(frozen=True)
class RawRow:
    """One persisted row exactly as the backend holds it."""

    row_id: str
    cells: Tuple[str, ...]
    version: str


class TabularBackend(Protocol):
    """Row-level access to named tables of string cells."""

    def read_rows(self, table: str) -> List[RawRow]:
        ...

    def read_row(self, table: str, row_id: str) -> Optional[RawRow]:
        ...

    def append_row(self, table: str, row_id: str, cells: Sequence[str]) -> RawRow:
        ...

    def write_row(self, table: str, row_id: str, cells: Sequence[str], version: str) -> RawRow:
        ...

    def delete_row(self, table: str, row_id: str, version: str) -> None:
        ...


class InMemoryBackend:
    """
    Thread-safe in-memory tables.

    Version tokens come from one counter shared by all tables, so a token is
    never handed out twice. Deleted identities are remembered per table and
    cannot be appended again.
    """

    def __init__(self):
        self._tables: Dict[str, Dict[str, RawRow]] = {}
        self._deleted: Dict[str, Set[str]] = {}
        self._versions = itertools.count(1)
        self._lock = threading.Lock()

    def _next_version(self) -> str:
        return str(next(self._versions))

    def read_rows(self, table: str) -> List[RawRow]:
        with self._lock:
            return list(self._tables.get(table, {}).values())

    def read_row(self, table: str, row_id: str) -> Optional[RawRow]:
        with self._lock:
            return self._tables.get(table, {}).get(row_id)

    def append_row(self, table: str, row_id: str, cells: Sequence[str]) -> RawRow:
        with self._lock:
            rows = self._tables.setdefault(table, {})
            if row_id in rows or row_id in self._deleted.get(table, set()):
                raise ConflictError(table, row_id, message=f"Row identity {row_id} already used in {table}")
            raw = RawRow(row_id=row_id, cells=tuple(cells), version=self._next_version())
            rows[row_id] = raw
            return raw

    def write_row(self, table: str, row_id: str, cells: Sequence[str], version: str) -> RawRow:
        with self._lock:
            current = self._tables.get(table, {}).get(row_id)
            if current is None:
                raise NotFoundError(table, row_id)
            if current.version != version:
                raise ConflictError(table, row_id, expected_version=version, actual_version=current.version)
            raw = RawRow(row_id=row_id, cells=tuple(cells), version=self._next_version())
            self._tables[table][row_id] = raw
            return raw

    def delete_row(self, table: str, row_id: str, version: str) -> None:
        with self._lock:
            current = self._tables.get(table, {}).get(row_id)
            if current is None:
                raise NotFoundError(table, row_id)
            if current.version != version:
                raise ConflictError(table, row_id, expected_version=version, actual_version=current.version)
            del self._tables[table][row_id]
            self._deleted.setdefault(table, set()).add(row_id)

    def load(self, table: str, rows: Sequence[Tuple[str, Sequence[str]]]) -> List[RawRow]:
        """
        Seed a table with already-encoded rows.

        Args:
            table: Table name
            rows: (row_id, cells) pairs in sheet order

        Returns:
            The stored raw rows with their initial versions
        """
        stored = [self.append_row(table, row_id, cells) for row_id, cells in rows]
        logger.debug("Seeded table", table=table, rows=len(stored))
        return stored
