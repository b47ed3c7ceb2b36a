"""
Module: bookstore_kernel.db.base
Responsibility: Declarative base for the SQL record-storage tables.  Provides
    the type annotation map for consistent column types and the DecimalString
    column type that keeps money values exact on every backend.
Architecture position: Kernel > DB.  This is the lowest-level import target
    for models/.  MUST NOT import from models/, services/, storage/ or
    commands/.

Invariants enforced:
    - Decimal precision: money columns round-trip the exact Decimal that was
      stored (no float coercion, no implicit rescaling), so a reload from
      storage reproduces the in-memory stores byte for byte.
"""

from decimal import Decimal
from typing import ClassVar

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator


class DecimalString(TypeDecorator):
    """
    Decimal stored as its canonical string form.

    Contract:
        Transparently converts between Python Decimal objects and their
        ``str()`` representation (e.g., "9.99", "-50.00").

    Guarantees:
        - process_bind_param: Decimal -> str on INSERT/UPDATE.
        - process_result_value: str -> Decimal on SELECT.
        - Exponent is preserved, so Decimal("9.90") reloads as "9.90".
    """

    impl = String(40)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None:
            return str(value)
        return None

    def process_result_value(self, value, dialect):
        if value is not None:
            return Decimal(value)
        return None


class Base(DeclarativeBase):
    """
    Declarative base for all record-storage tables.

    Guarantees:
        - Decimal maps to DecimalString -- exact money round trips.
        - int maps to BigInteger -- stock and ledger sequence numbers.
    """

    type_annotation_map: ClassVar[dict] = {
        Decimal: DecimalString(),
        int: BigInteger,
    }
