"""
Module: bookstore_kernel.models.book
Responsibility: ORM persistence for the book catalog.
Architecture position: Kernel > Models.  May import from db/ only.

Invariants enforced:
    - isbn is the primary key, so ISBNs are unique in storage.
    - stock is non-negative (CHECK constraint).
    - price keeps the exact Decimal it was typed as (DecimalString).
"""

from decimal import Decimal

from sqlalchemy import BigInteger, CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from bookstore_kernel.db.base import Base, DecimalString


class BookRow(Base):
    """One persisted catalog entry."""

    __tablename__ = "books"

    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_book_stock_non_negative"),
    )

    isbn: Mapped[str] = mapped_column(String(20), primary_key=True)

    name: Mapped[str] = mapped_column(String(60), nullable=False, default="")

    author: Mapped[str] = mapped_column(String(60), nullable=False, default="")

    # Raw "a|b|c" keyword field
    keyword: Mapped[str] = mapped_column(String(60), nullable=False, default="")

    price: Mapped[Decimal] = mapped_column(DecimalString(), nullable=False)

    stock: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<BookRow {self.isbn} stock={self.stock}>"
