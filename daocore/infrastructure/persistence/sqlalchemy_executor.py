"""
Infrastructure adapter: SQLAlchemy Engine → ISqlExecutor.

Each call runs in its own transaction (`engine.begin()`), so the executor holds
no connection state between calls and can be shared across threads.
"""

import logging
from typing import Any, Mapping, Optional

from sqlalchemy import Table, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from daocore.domain.exceptions import InsertFailedError, TransportError
from daocore.domain.ports.sql_executor_port import ISqlExecutor

logger = logging.getLogger(__name__)


class SqlAlchemyTableExecutor(ISqlExecutor):
    """Parameterized statement execution plus a full-row insert bound to *table*."""

    def __init__(self, engine: Engine, table: Table) -> None:
        primary_key = list(table.primary_key.columns)
        if len(primary_key) != 1:
            raise ValueError(f"table {table.name!r} must have a single-column primary key")
        self._engine = engine
        self._table = table
        self.table_name = table.name
        self.id_column = primary_key[0].name

    def execute(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> int:
        try:
            with self._engine.begin() as conn:
                result = conn.execute(text(sql), dict(params or {}))
                return result.rowcount
        except SQLAlchemyError as exc:
            logger.error("Statement on %s failed: %s", self.table_name, exc)
            raise TransportError(f"Statement failed: {exc}") from exc

    def query(
        self, sql: str, params: Optional[Mapping[str, Any]] = None
    ) -> list[dict[str, Any]]:
        try:
            with self._engine.connect() as conn:
                result = conn.execute(text(sql), dict(params or {}))
                return [dict(row) for row in result.mappings()]
        except SQLAlchemyError as exc:
            logger.error("Query on %s failed: %s", self.table_name, exc)
            raise TransportError(f"Query failed: {exc}") from exc

    def insert(self, row: Mapping[str, Any]) -> int:
        try:
            with self._engine.begin() as conn:
                result = conn.execute(self._table.insert().values(**row))
                return result.rowcount
        except IntegrityError as exc:
            logger.error(
                "Insert into %s rejected for %s=%r: %s",
                self.table_name,
                self.id_column,
                row.get(self.id_column),
                exc.orig,
            )
            raise InsertFailedError(
                f"Failed to insert into {self.table_name}: {exc.orig}", affected_rows=0
            ) from exc
        except SQLAlchemyError as exc:
            logger.error("Insert into %s failed: %s", self.table_name, exc)
            raise TransportError(f"Insert into {self.table_name} failed: {exc}") from exc
