"""
RecordStorage -- abstract persistence contract for the record stores.

Responsibility:
    Defines the two operations every store needs from durable storage:
    load every record of one kind, and replace every record of one kind.
    Stores call ``persist_all`` synchronously after each successful
    mutation, so storage always mirrors the in-memory set as of the last
    completed command.

Architecture position:
    Kernel > Storage.  Implemented by ``TsvRecordStorage`` (flat files) and
    ``SqlRecordStorage`` (SQLAlchemy).  Stores depend only on this class.

Invariants enforced:
    - ``persist_all(kind, records)`` followed by ``load_all(kind)`` returns
      equal records.  Ledger records come back in append order; accounts
      and books come back ordered by key, which is the order stores persist
      them in.
    - Each call touches exactly one record set; there is no cross-set
      transaction.

Failure modes:
    - Backend I/O errors (OSError, SQLAlchemyError) propagate unchanged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from bookstore_kernel.domain.records import Account, Book, LedgerEntry, RecordKind

Record = Account | Book | LedgerEntry


class RecordStorage(ABC):
    """Load-all / persist-all storage for the three record sets."""

    @abstractmethod
    def load_all(self, kind: RecordKind) -> list[Record]:
        """Return every stored record of ``kind`` in stored order."""
        ...

    @abstractmethod
    def persist_all(self, kind: RecordKind, records: Sequence[Record]) -> None:
        """Replace the stored set of ``kind`` with ``records``."""
        ...

    def close(self) -> None:
        """Release backend resources.  Default: nothing to release."""
