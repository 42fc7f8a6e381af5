"""
Sheet Store Exceptions

Error taxonomy shared by the codec, the versioned table store and the
project lifecycle functions. The HTTP layer maps these onto status codes
in errors.py.
"""

from typing import Dict
from typing import Optional


class SheetError(Exception):
    """Base class for all sheet store errors."""


class ParseError(SheetError):
    """
    A single cell failed type coercion.

    Non-fatal: the codec records it on the decoded row, keeps the raw cell
    value for that field and carries on with the rest of the row.
    """

    def __init__(self, table: str, column: str, value: str, reason: str):
        self.table = table
        self.column = column
        self.value = value
        self.reason = reason
        super().__init__(f"{table}.{column}: cannot parse {value!r} ({reason})")


class ConflictError(SheetError):
    """The row changed since it was read (version mismatch), or its identity already exists."""

    def __init__(
        self,
        table: str,
        row_id: Optional[str],
        expected_version: Optional[str] = None,
        actual_version: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.table = table
        self.row_id = row_id
        self.expected_version = expected_version
        self.actual_version = actual_version
        if message is None:
            message = (
                f"Row {row_id} in {table} was modified by someone else "
                f"(read version {expected_version}, stored version {actual_version})"
            )
        super().__init__(message)


class NotFoundError(SheetError):
    """The row identity is absent from its table."""

    def __init__(self, table: str, row_id: Optional[str]):
        self.table = table
        self.row_id = row_id
        super().__init__(f"Row {row_id} not found in {table}")


class ValidationError(SheetError):
    """
    One or more fields failed a domain rule. Nothing was persisted.

    Attributes
    ----------
    errors : Dict[str, str]
        Field name -> human readable message
    """

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        fields = ", ".join(sorted(self.errors))
        super().__init__(f"Validation failed for: {fields}")


class AuthorizationError(SheetError):
    """An access predicate denied the action before it reached the store."""

    def __init__(self, action: str, actor_id: Optional[str] = None, reason: str = ""):
        self.action = action
        self.actor_id = actor_id
        self.reason = reason
        message = f"Hacker {actor_id} is not allowed to {action}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
