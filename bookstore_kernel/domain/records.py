"""
Records -- Immutable in-memory record types.

Responsibility:
    Defines the three record types the stores hold: Account, Book and
    LedgerEntry.  Mutations never edit a record in place; they build a new
    record with ``dataclasses.replace`` and swap it into the store, which is
    what makes multi-field updates (``modify``) all-or-nothing.

Architecture position:
    Kernel > Domain -- pure data, zero I/O.

Invariants enforced:
    - Records are frozen; a session frame's account snapshot can never be
      changed behind its back.
    - Book.keywords() never yields empty tokens.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, IntEnum

from bookstore_kernel.db.types import ZERO


class Privilege(IntEnum):
    """Privilege levels.  GUEST is never stored; it means "nobody logged in"."""

    GUEST = 0
    CUSTOMER = 1
    CLERK = 3
    OWNER = 7


class RecordKind(str, Enum):
    """The three persisted record sets."""

    ACCOUNTS = "accounts"
    BOOKS = "books"
    LEDGER = "ledger"


@dataclass(frozen=True, slots=True)
class Account:
    user_id: str
    password: str
    privilege: int
    username: str


@dataclass(frozen=True, slots=True)
class Book:
    """
    A catalog entry.

    A freshly selected ISBN yields a Book with every other field empty or
    zero.
    """

    isbn: str
    name: str = ""
    author: str = ""
    keyword: str = ""
    price: Decimal = ZERO
    stock: int = 0

    def keywords(self) -> list[str]:
        """Split the raw keyword field into its non-empty tokens."""
        return [token for token in self.keyword.split("|") if token]


@dataclass(frozen=True, slots=True)
class LedgerEntry:
    """One signed amount: positive for income, negative for expenditure."""

    amount: Decimal

    @property
    def is_income(self) -> bool:
        return self.amount >= 0
