"""Tests for the append-only ledger."""

from decimal import Decimal

from bookstore_kernel.domain.records import LedgerEntry, RecordKind
from bookstore_kernel.services import Ledger


class TestLedger:
    def test_signs(self, tsv_storage):
        ledger = Ledger(tsv_storage)
        ledger.record_income(Decimal("29.97"))
        ledger.record_expenditure(Decimal("50"))
        assert ledger.entries() == (
            LedgerEntry(Decimal("29.97")),
            LedgerEntry(Decimal("-50.00")),
        )

    def test_rounded_to_cents_on_append(self, tsv_storage):
        ledger = Ledger(tsv_storage)
        entry = ledger.record_expenditure(Decimal("0.005"))
        assert entry.amount == Decimal("-0.01")

    def test_order_survives_reload(self, tsv_storage):
        ledger = Ledger(tsv_storage)
        amounts = [Decimal("1.00"), Decimal("2.00"), Decimal("3.00")]
        for amount in amounts:
            ledger.record_income(amount)
        reloaded = Ledger(tsv_storage)
        assert [e.amount for e in reloaded.entries()] == amounts
        assert len(tsv_storage.load_all(RecordKind.LEDGER)) == 3

    def test_entries_is_a_snapshot(self, tsv_storage):
        ledger = Ledger(tsv_storage)
        snapshot = ledger.entries()
        ledger.record_income(Decimal("1"))
        assert snapshot == ()
        assert len(ledger) == 1
