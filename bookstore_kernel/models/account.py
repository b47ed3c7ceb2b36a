"""
Module: bookstore_kernel.models.account
Responsibility: ORM persistence for operator accounts.
Architecture position: Kernel > Models.  May import from db/ only.

Invariants enforced:
    - user_id is the primary key, so identifiers are unique in storage.
    - privilege is one of 1, 3, 7 (checked by a CHECK constraint; the
      command layer never produces anything else).
"""

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bookstore_kernel.db.base import Base


class AccountRow(Base):
    """One persisted account."""

    __tablename__ = "accounts"

    __table_args__ = (
        CheckConstraint("privilege IN (1, 3, 7)", name="ck_account_privilege"),
    )

    user_id: Mapped[str] = mapped_column(String(30), primary_key=True)

    password: Mapped[str] = mapped_column(String(30), nullable=False)

    privilege: Mapped[int] = mapped_column(Integer, nullable=False)

    # Display name
    username: Mapped[str] = mapped_column(String(30), nullable=False)

    def __repr__(self) -> str:
        return f"<AccountRow {self.user_id} privilege={self.privilege}>"
