"""
Infrastructure adapter: quote rows over a relational table → ICrudRepository.

`save` is an upsert keyed by ticker: an existence check decides between
UPDATE and INSERT, and both must touch exactly one row. The check and the
write are not atomic; under concurrent inserts of the same new ticker the
backend's primary key rejects the loser with InsertFailedError.
"""

import dataclasses
import logging
from typing import Iterable, Optional

from daocore.domain.entities.quote import Quote
from daocore.domain.exceptions import InsertFailedError, InvalidInputError, UpdateConflictError
from daocore.domain.ports.dao_port import ICrudRepository
from daocore.domain.ports.sql_executor_port import ISqlExecutor

logger = logging.getLogger(__name__)

_VALUE_COLUMNS = ("last_price", "bid_price", "bid_size", "ask_price", "ask_size")


class QuoteDao(ICrudRepository[Quote, str]):
    """Upserts and looks up Quote rows through an ISqlExecutor."""

    def __init__(self, executor: ISqlExecutor) -> None:
        self._executor = executor
        table, id_col = executor.table_name, executor.id_column
        columns = ", ".join((id_col,) + _VALUE_COLUMNS)
        assignments = ", ".join(f"{col}=:{col}" for col in _VALUE_COLUMNS)

        self._select_one_sql = f"SELECT {columns} FROM {table} WHERE {id_col}=:id"
        self._select_all_sql = f"SELECT {columns} FROM {table}"
        self._exists_sql = f"SELECT 1 FROM {table} WHERE {id_col}=:id"
        self._count_sql = f"SELECT COUNT(*) AS total FROM {table}"
        self._update_sql = f"UPDATE {table} SET {assignments} WHERE {id_col}=:{id_col}"
        self._delete_sql = f"DELETE FROM {table} WHERE {id_col}=:id"

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def save(self, entity: Quote) -> Quote:
        """Insert *entity* if its ticker is absent, otherwise update it in place.

        Returns:
            *entity* unchanged; the table has no server-generated fields.

        Raises:
            InvalidInputError:   blank ticker.
            UpdateConflictError: the UPDATE touched zero or several rows.
            InsertFailedError:   the INSERT touched zero or several rows, or
                                 lost a race on the primary key.
        """
        _check_ticker(entity.ticker)
        if self.exists_by_id(entity.ticker):
            self._update_one(entity)
        else:
            self._add_one(entity)
        return entity

    def save_all(self, entities: Iterable[Quote]) -> list[Quote]:
        return [self.save(entity) for entity in entities]

    def delete_by_id(self, id: str) -> None:
        rows = self._executor.execute(self._delete_sql, {"id": _check_ticker(id)})
        if rows == 0:
            logger.debug("No quote row to delete for ticker %r", id)

    def _update_one(self, quote: Quote) -> None:
        rows = self._executor.execute(self._update_sql, self._make_update_values(quote))
        if rows != 1:
            logger.error("Update of quote %r affected %s rows, expected 1", quote.ticker, rows)
            raise UpdateConflictError(
                f"Unable to update quote {quote.ticker!r}: {rows} rows affected",
                affected_rows=rows,
            )
        logger.debug("Updated quote %r", quote.ticker)

    def _add_one(self, quote: Quote) -> None:
        rows = self._executor.insert(dataclasses.asdict(quote))
        if rows != 1:
            logger.error("Insert of quote %r affected %s rows, expected 1", quote.ticker, rows)
            raise InsertFailedError(
                f"Failed to insert quote {quote.ticker!r}: {rows} rows affected",
                affected_rows=rows,
            )
        logger.debug("Inserted quote %r", quote.ticker)

    def _make_update_values(self, quote: Quote) -> dict:
        values = {col: getattr(quote, col) for col in _VALUE_COLUMNS}
        values[self._executor.id_column] = quote.ticker
        return values

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def exists_by_id(self, id: str) -> bool:
        return bool(self._executor.query(self._exists_sql, {"id": _check_ticker(id)}))

    def find_by_id(self, id: str) -> Optional[Quote]:
        rows = self._executor.query(self._select_one_sql, {"id": _check_ticker(id)})
        if not rows:
            return None
        return self._to_entity(rows[0])

    def find_all(self) -> list[Quote]:
        return [self._to_entity(row) for row in self._executor.query(self._select_all_sql)]

    def count(self) -> int:
        rows = self._executor.query(self._count_sql)
        return int(rows[0]["total"]) if rows else 0

    def _to_entity(self, row: dict) -> Quote:
        return Quote(
            ticker=row[self._executor.id_column],
            last_price=float(row["last_price"]),
            bid_price=float(row["bid_price"]),
            bid_size=int(row["bid_size"]),
            ask_price=float(row["ask_price"]),
            ask_size=int(row["ask_size"]),
        )


def _check_ticker(ticker: str) -> str:
    if not isinstance(ticker, str) or not ticker.strip():
        raise InvalidInputError("ticker must be a non-empty string")
    return ticker
