"""
Bookstore configuration schema.

Typed, frozen view of the YAML configuration.  The loader parses YAML
fragments into these types; everything else in the process receives a
``BookstoreConfig`` and never reads YAML itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

STORAGE_BACKENDS = ("tsv", "sql")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class StorageConfig:
    """Where and how the record sets are persisted."""

    backend: str = "tsv"
    data_dir: Path = Path(".data")
    database_url: str | None = None

    def resolved_database_url(self) -> str:
        """SQLAlchemy URL for the sql backend; a SQLite file in data_dir by default."""
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.data_dir / 'bookstore.db'}"


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"
    file: Path | None = None


@dataclass(frozen=True)
class BootstrapConfig:
    """The owner account guaranteed to exist at startup."""

    root_user_id: str = "root"
    root_password: str = "sjtu"
    root_username: str = "root"


@dataclass(frozen=True)
class BookstoreConfig:
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    bootstrap: BootstrapConfig = field(default_factory=BootstrapConfig)
