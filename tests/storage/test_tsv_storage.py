"""
Tests for tab-separated storage.

Verifies:
- File names and line layout
- Full rewrite with no temporary files left behind
- Malformed lines skipped on load
"""

from decimal import Decimal

import pytest

from bookstore_kernel.domain.records import Account, Book, LedgerEntry, RecordKind
from bookstore_kernel.storage import TsvRecordStorage
from bookstore_kernel.storage.tsv import FILE_NAMES


class TestLayout:
    def test_file_names(self, tsv_storage, data_dir):
        assert tsv_storage.path_for(RecordKind.ACCOUNTS) == data_dir / "accounts.tsv"
        assert tsv_storage.path_for(RecordKind.BOOKS) == data_dir / "books.tsv"
        assert tsv_storage.path_for(RecordKind.LEDGER) == data_dir / "finance.tsv"
        assert set(FILE_NAMES) == set(RecordKind)

    def test_creates_data_dir(self, tmp_path):
        target = tmp_path / "nested" / "dir"
        TsvRecordStorage(target)
        assert target.is_dir()

    def test_book_line(self, tsv_storage):
        tsv_storage.persist_all(
            RecordKind.BOOKS,
            [Book("001", "Book One", "", "a|b", Decimal("9.99"), 3)],
        )
        text = tsv_storage.path_for(RecordKind.BOOKS).read_text(encoding="utf-8")
        assert text == "001\tBook One\t\ta|b\t9.99\t3\n"

    def test_account_line(self, tsv_storage):
        tsv_storage.persist_all(RecordKind.ACCOUNTS, [Account("root", "sjtu", 7, "root")])
        text = tsv_storage.path_for(RecordKind.ACCOUNTS).read_text(encoding="utf-8")
        assert text == "root\tsjtu\t7\troot\n"


class TestRoundTrip:
    def test_missing_file_is_empty(self, tsv_storage):
        for kind in RecordKind:
            assert tsv_storage.load_all(kind) == []

    def test_empty_fields_survive(self, tsv_storage):
        books = [Book("001"), Book("002", "", "Author", "", Decimal("0"), 0)]
        tsv_storage.persist_all(RecordKind.BOOKS, books)
        assert tsv_storage.load_all(RecordKind.BOOKS) == books

    def test_typed_price_kept_exactly(self, tsv_storage):
        tsv_storage.persist_all(RecordKind.BOOKS, [Book("001", price=Decimal("1.005"))])
        (book,) = tsv_storage.load_all(RecordKind.BOOKS)
        assert str(book.price) == "1.005"

    def test_ledger_order(self, tsv_storage):
        entries = [LedgerEntry(Decimal("1.00")), LedgerEntry(Decimal("-2.00"))]
        tsv_storage.persist_all(RecordKind.LEDGER, entries)
        assert tsv_storage.load_all(RecordKind.LEDGER) == entries

    def test_rewrite_replaces_previous_content(self, tsv_storage, data_dir):
        tsv_storage.persist_all(RecordKind.LEDGER, [LedgerEntry(Decimal("1.00"))])
        tsv_storage.persist_all(RecordKind.LEDGER, [])
        assert tsv_storage.load_all(RecordKind.LEDGER) == []
        assert [p.name for p in data_dir.iterdir()] == ["finance.tsv"]


class TestMalformedLines:
    def test_wrong_arity_skipped(self, tsv_storage, captured_logs):
        path = tsv_storage.path_for(RecordKind.ACCOUNTS)
        path.write_text("root\tsjtu\t7\troot\nbroken\tline\n", encoding="utf-8")
        assert tsv_storage.load_all(RecordKind.ACCOUNTS) == [Account("root", "sjtu", 7, "root")]
        assert any(r["message"] == "record_skipped" for r in captured_logs())

    @pytest.mark.parametrize("line", ["001\ta\tb\tc\tnot-a-price\t1", "001\ta\tb\tc\t1.00\tmany"])
    def test_bad_numbers_skipped(self, tsv_storage, line):
        tsv_storage.path_for(RecordKind.BOOKS).write_text(line + "\n", encoding="utf-8")
        assert tsv_storage.load_all(RecordKind.BOOKS) == []

    def test_blank_lines_ignored(self, tsv_storage):
        tsv_storage.path_for(RecordKind.LEDGER).write_text("1.00\n\n-2.00\n", encoding="utf-8")
        assert len(tsv_storage.load_all(RecordKind.LEDGER)) == 2
