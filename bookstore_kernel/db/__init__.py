"""Database layer - engine, base classes and money types."""

from bookstore_kernel.db.base import Base, DecimalString
from bookstore_kernel.db.engine import (
    create_session_factory,
    create_storage_engine,
    create_tables,
    session_scope,
)
from bookstore_kernel.db.types import (
    MAX_STOCK,
    format_money,
    money_from_str,
    round_money,
)

__all__ = [
    "Base",
    "DecimalString",
    "create_storage_engine",
    "create_session_factory",
    "create_tables",
    "session_scope",
    "MAX_STOCK",
    "format_money",
    "money_from_str",
    "round_money",
]
