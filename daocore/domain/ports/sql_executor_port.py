"""
Port (interface) for the relational transport collaborator.
Infrastructure adapters (e.g. SqlAlchemyTableExecutor) must implement this interface.

Every executor is bound to one table and its primary-key column; `insert`
writes a full row into that table.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class ISqlExecutor(ABC):
    table_name: str
    id_column: str

    @abstractmethod
    def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> int:
        """Run a parameterized write statement and return the affected row count."""
        ...

    @abstractmethod
    def query(
        self, sql: str, params: Optional[Mapping[str, Any]] = None
    ) -> list[dict[str, Any]]:
        """Run a parameterized read statement and return rows as column -> value dicts."""
        ...

    @abstractmethod
    def insert(self, row: Mapping[str, Any]) -> int:
        """Insert one full row into the bound table and return the affected row count.

        Raises:
            InsertFailedError: on a primary-key / unique violation.
        """
        ...
