"""
SQL record storage (SQLAlchemy).

One table per record set (``accounts``, ``books``, ``ledger``).  A persist
deletes the table's rows and re-inserts the full set inside one
transaction, so each record set is replaced all-or-nothing.  Ledger rows
carry their append position in ``seq`` and load in that order.
"""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, select

from bookstore_kernel.db.engine import (
    create_session_factory,
    create_storage_engine,
    create_tables,
    session_scope,
)
from bookstore_kernel.domain.records import Account, Book, LedgerEntry, RecordKind
from bookstore_kernel.logging_config import get_logger
from bookstore_kernel.models import AccountRow, BookRow, LedgerRow
from bookstore_kernel.storage.base import Record, RecordStorage

logger = get_logger("storage.sql")


def _to_row(kind: RecordKind, record: Record, position: int):
    if kind is RecordKind.ACCOUNTS:
        return AccountRow(
            user_id=record.user_id,
            password=record.password,
            privilege=record.privilege,
            username=record.username,
        )
    if kind is RecordKind.BOOKS:
        return BookRow(
            isbn=record.isbn,
            name=record.name,
            author=record.author,
            keyword=record.keyword,
            price=record.price,
            stock=record.stock,
        )
    return LedgerRow(seq=position, amount=record.amount)


def _from_row(kind: RecordKind, row) -> Record:
    if kind is RecordKind.ACCOUNTS:
        return Account(row.user_id, row.password, row.privilege, row.username)
    if kind is RecordKind.BOOKS:
        return Book(row.isbn, row.name, row.author, row.keyword, row.price, row.stock)
    return LedgerEntry(row.amount)


_TABLES = {
    RecordKind.ACCOUNTS: (AccountRow, AccountRow.user_id),
    RecordKind.BOOKS: (BookRow, BookRow.isbn),
    RecordKind.LEDGER: (LedgerRow, LedgerRow.seq),
}


class SqlRecordStorage(RecordStorage):
    """Storage over a SQLAlchemy engine; tables are created on construction."""

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self._engine = create_storage_engine(database_url, echo=echo)
        self._factory = create_session_factory(self._engine)
        create_tables(self._engine)

    def load_all(self, kind: RecordKind) -> list[Record]:
        model, order = _TABLES[kind]
        with session_scope(self._factory) as session:
            rows = session.scalars(select(model).order_by(order)).all()
            records = [_from_row(kind, row) for row in rows]
        logger.debug(
            "records_loaded", extra={"kind": kind.value, "count": len(records)}
        )
        return records

    def persist_all(self, kind: RecordKind, records: Sequence[Record]) -> None:
        model, _ = _TABLES[kind]
        with session_scope(self._factory) as session:
            session.execute(delete(model))
            session.add_all(
                _to_row(kind, record, position)
                for position, record in enumerate(records)
            )
        logger.debug(
            "records_persisted", extra={"kind": kind.value, "count": len(records)}
        )

    def close(self) -> None:
        self._engine.dispose()
