"""
Field codec for tab-separated record files.

Each record kind has a fixed arity: accounts 4, books 6, ledger 1.  Money is
written with ``str(Decimal)`` so the exact typed value survives a reload.
"""

from __future__ import annotations

from decimal import Decimal

from bookstore_kernel.domain.records import Account, Book, LedgerEntry, RecordKind
from bookstore_kernel.storage.base import Record

ARITY: dict[RecordKind, int] = {
    RecordKind.ACCOUNTS: 4,
    RecordKind.BOOKS: 6,
    RecordKind.LEDGER: 1,
}


def encode(kind: RecordKind, record: Record) -> list[str]:
    if kind is RecordKind.ACCOUNTS:
        return [
            record.user_id,
            record.password,
            str(record.privilege),
            record.username,
        ]
    if kind is RecordKind.BOOKS:
        return [
            record.isbn,
            record.name,
            record.author,
            record.keyword,
            str(record.price),
            str(record.stock),
        ]
    return [str(record.amount)]


def decode(kind: RecordKind, fields: list[str]) -> Record:
    """
    Build a record from its fields.

    Raises:
        ValueError: wrong arity or a non-numeric numeric field.
    """
    if len(fields) != ARITY[kind]:
        raise ValueError(f"{kind.value}: expected {ARITY[kind]} fields, got {len(fields)}")
    try:
        if kind is RecordKind.ACCOUNTS:
            user_id, password, privilege, username = fields
            return Account(user_id, password, int(privilege), username)
        if kind is RecordKind.BOOKS:
            isbn, name, author, keyword, price, stock = fields
            return Book(isbn, name, author, keyword, Decimal(price), int(stock))
        return LedgerEntry(Decimal(fields[0]))
    except ArithmeticError as exc:
        raise ValueError(f"{kind.value}: bad number in {fields!r}") from exc
