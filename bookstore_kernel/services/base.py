"""
RecordStore -- base for the three in-memory record stores.

Responsibility:
    Holds the storage backend and the record kind a store mirrors, and
    provides the single ``_persist()`` hook every mutation ends with.

Architecture position:
    Kernel > Services.  Every store in ``bookstore_kernel/services/``
    extends this class.

Invariants enforced:
    - A mutation changes memory first and then calls ``_persist()`` exactly
      once, rewriting the whole record set.  Validation happens before the
      in-memory change, so a rejected command never reaches storage.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from bookstore_kernel.domain.records import RecordKind
from bookstore_kernel.storage.base import Record, RecordStorage


class RecordStore(ABC):
    kind: RecordKind

    def __init__(self, storage: RecordStorage):
        self.storage = storage

    @abstractmethod
    def _records(self) -> Sequence[Record]:
        """Records in the order they are persisted."""
        ...

    def _persist(self) -> None:
        self.storage.persist_all(self.kind, self._records())
