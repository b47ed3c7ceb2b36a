"""
Ledger -- append-only sequence of signed amounts.

Income (a sale) is appended as a positive amount, expenditure (a restock)
as a negative one.  Amounts are rounded to cents before they are appended,
so what is summed in memory is exactly what a reload reads back.  Entries
are never edited, removed or reordered.
"""

from decimal import Decimal

from bookstore_kernel.db.types import round_money
from bookstore_kernel.domain.records import LedgerEntry, RecordKind
from bookstore_kernel.logging_config import get_logger
from bookstore_kernel.services.base import RecordStore
from bookstore_kernel.storage.base import RecordStorage

logger = get_logger("services.ledger")


class Ledger(RecordStore):
    kind = RecordKind.LEDGER

    def __init__(self, storage: RecordStorage):
        super().__init__(storage)
        self._entries: list[LedgerEntry] = list(storage.load_all(self.kind))

    def _records(self) -> list[LedgerEntry]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def entries(self) -> tuple[LedgerEntry, ...]:
        return tuple(self._entries)

    def record_income(self, amount: Decimal) -> LedgerEntry:
        return self._append(round_money(amount))

    def record_expenditure(self, amount: Decimal) -> LedgerEntry:
        return self._append(-round_money(amount))

    def _append(self, amount: Decimal) -> LedgerEntry:
        entry = LedgerEntry(amount)
        self._entries.append(entry)
        self._persist()
        logger.info(
            "ledger_appended",
            extra={"amount": amount, "position": len(self._entries)},
        )
        return entry
