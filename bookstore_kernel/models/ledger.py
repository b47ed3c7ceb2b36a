"""
Module: bookstore_kernel.models.ledger
Responsibility: ORM persistence for the append-only ledger.
Architecture position: Kernel > Models.  May import from db/ only.

Invariants enforced:
    - seq is the append position; loading ordered by seq reproduces append
      order exactly.
"""

from decimal import Decimal

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column

from bookstore_kernel.db.base import Base, DecimalString


class LedgerRow(Base):
    """One signed ledger amount (+ income, - expenditure)."""

    __tablename__ = "ledger"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)

    amount: Mapped[Decimal] = mapped_column(DecimalString(), nullable=False)

    def __repr__(self) -> str:
        return f"<LedgerRow #{self.seq} {self.amount}>"
