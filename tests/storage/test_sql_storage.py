"""Tests for the SQLAlchemy storage backend over a SQLite file."""

from decimal import Decimal

import pytest

from bookstore_kernel.domain.records import Account, Book, LedgerEntry, RecordKind
from bookstore_kernel.storage import SqlRecordStorage

pytestmark = pytest.mark.sql


class TestSqlRecordStorage:
    def test_empty_tables(self, sql_storage):
        for kind in RecordKind:
            assert sql_storage.load_all(kind) == []

    def test_accounts_round_trip(self, sql_storage):
        accounts = [Account("alice", "pw", 1, "Alice"), Account("root", "sjtu", 7, "root")]
        sql_storage.persist_all(RecordKind.ACCOUNTS, accounts)
        assert sql_storage.load_all(RecordKind.ACCOUNTS) == accounts

    def test_books_keep_exact_price(self, sql_storage):
        books = [Book("001", "Name", "Author", "a|b", Decimal("9.990"), 12)]
        sql_storage.persist_all(RecordKind.BOOKS, books)
        (book,) = sql_storage.load_all(RecordKind.BOOKS)
        assert book == books[0]
        assert str(book.price) == "9.990"

    def test_ledger_append_order(self, sql_storage):
        entries = [LedgerEntry(Decimal(v)) for v in ("5.00", "-1.00", "3.00")]
        sql_storage.persist_all(RecordKind.LEDGER, entries)
        assert sql_storage.load_all(RecordKind.LEDGER) == entries

    def test_persist_replaces_whole_set(self, sql_storage):
        sql_storage.persist_all(RecordKind.BOOKS, [Book("001"), Book("002")])
        sql_storage.persist_all(RecordKind.BOOKS, [Book("003")])
        assert [b.isbn for b in sql_storage.load_all(RecordKind.BOOKS)] == ["003"]

    def test_survives_reopen(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'reopen.db'}"
        first = SqlRecordStorage(url)
        first.persist_all(RecordKind.ACCOUNTS, [Account("root", "sjtu", 7, "root")])
        first.close()

        second = SqlRecordStorage(url)
        try:
            assert second.load_all(RecordKind.ACCOUNTS) == [Account("root", "sjtu", 7, "root")]
        finally:
            second.close()
