"""
Module: bookstore_kernel.selectors.ledger_selector
Responsibility: Read-only ledger aggregation for ``show finance``: total
    income and total expenditure over the whole ledger or its last k
    entries.
Architecture position: Kernel > Selectors.  Reads Ledger; never mutates.

Invariants enforced:
    - No stored totals.  Every summary is derived from the entries at query
      time, in append order.
    - summarize() with no count equals summarize(len(ledger)).

Failure modes:
    - LedgerRangeError when k exceeds the number of entries.
"""

from dataclasses import dataclass
from decimal import Decimal

from bookstore_kernel.db.types import ZERO, format_money
from bookstore_kernel.exceptions import LedgerRangeError
from bookstore_kernel.services.ledger import Ledger


@dataclass(frozen=True)
class FinanceSummary:
    income: Decimal
    expenditure: Decimal

    def render(self) -> str:
        return f"+ {format_money(self.income)} - {format_money(self.expenditure)}"


class LedgerSelector:
    def __init__(self, ledger: Ledger):
        self.ledger = ledger

    def summarize(self, count: int | None = None) -> FinanceSummary:
        """
        Sum income and expenditure.

        Args:
            count: Number of trailing entries to include; None for all.
        """
        entries = self.ledger.entries()
        if count is not None:
            if count > len(entries):
                raise LedgerRangeError(count, len(entries))
            entries = entries[len(entries) - count:]

        income = ZERO
        expenditure = ZERO
        for entry in entries:
            if entry.is_income:
                income += entry.amount
            else:
                expenditure -= entry.amount
        return FinanceSummary(income=income, expenditure=expenditure)
