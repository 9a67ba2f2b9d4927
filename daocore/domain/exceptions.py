"""
Error taxonomy shared by every data-access adapter.

Each adapter translates its backend's native failures (HTTP status codes,
httpx errors, JSON/pydantic errors, SQLAlchemy errors, row counts) into one of
these types, so callers never see backend-specific exceptions.
"""

from typing import Optional


class DataAccessError(Exception):
    """Base class for all data-access failures."""


class InvalidInputError(DataAccessError, ValueError):
    """A caller-supplied entity or id failed local validation.

    Raised before any backend call is made.
    """


class TransportError(DataAccessError):
    """The backend call could not complete, or its body could not be read."""


class BackendRequestError(DataAccessError):
    """The backend answered with an unexpected status or an empty body."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class CodecError(DataAccessError):
    """A backend body could not be decoded into the expected entity shape."""


class UpdateConflictError(DataAccessError):
    """An update affected a row count other than exactly one."""

    def __init__(self, message: str, affected_rows: Optional[int] = None) -> None:
        super().__init__(message)
        self.affected_rows = affected_rows


class InsertFailedError(DataAccessError):
    """An insert affected a row count other than exactly one, or hit a duplicate key."""

    def __init__(self, message: str, affected_rows: Optional[int] = None) -> None:
        super().__init__(message)
        self.affected_rows = affected_rows
