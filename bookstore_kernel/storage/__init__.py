"""Record storage backends and the factory that picks one from config."""

from __future__ import annotations

from pathlib import Path

from bookstore_kernel.storage.base import Record, RecordStorage
from bookstore_kernel.storage.sql import SqlRecordStorage
from bookstore_kernel.storage.tsv import TsvRecordStorage

__all__ = [
    "Record",
    "RecordStorage",
    "SqlRecordStorage",
    "TsvRecordStorage",
    "open_storage",
]


def open_storage(storage_config) -> RecordStorage:
    """Build the backend named by a ``bookstore_config.StorageConfig``."""
    if storage_config.backend == "sql":
        if not storage_config.database_url:
            # default SQLite file lives in data_dir
            Path(storage_config.data_dir).mkdir(parents=True, exist_ok=True)
        return SqlRecordStorage(storage_config.resolved_database_url())
    return TsvRecordStorage(storage_config.data_dir)
