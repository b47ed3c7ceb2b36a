"""
Validation -- Pure field-syntax predicates.

Responsibility:
    One predicate per field kind (identifier, password, username, privilege
    code, ISBN, name/author, keyword field, quantity, money).  Predicates
    return ``bool``; ``parse_*`` functions return the parsed value or None;
    ``expect_*`` functions return the parsed value or raise
    ``InvalidFieldError`` and are what command handlers call.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O, no state.

Invariants enforced:
    - "Printable" means code point 32 or above; only control characters fail.
    - Length limits on free-text fields count UTF-8 bytes, not characters.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from bookstore_kernel.db.types import MAX_STOCK, money_from_str
from bookstore_kernel.domain.records import Privilege
from bookstore_kernel.exceptions import DuplicateKeywordError, InvalidFieldError

_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z0-9_]{1,30}")
_QUANTITY_PATTERN = re.compile(r"[0-9]{1,10}")
_MONEY_PATTERN = re.compile(r"[0-9]*\.?[0-9]*")

MAX_USERNAME_LENGTH = 30
MAX_ISBN_LENGTH = 20
MAX_TEXT_LENGTH = 60
MAX_MONEY_LENGTH = 13

GRANTABLE_PRIVILEGES = frozenset(
    {Privilege.CUSTOMER, Privilege.CLERK, Privilege.OWNER}
)


def _printable(value: str) -> bool:
    return all(ord(ch) >= 32 for ch in value)


def _byte_length(value: str) -> int:
    return len(value.encode("utf-8", "replace"))


def _printable_without_quote(value: str) -> bool:
    return _printable(value) and '"' not in value


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def is_user_id(value: str) -> bool:
    return _IDENTIFIER_PATTERN.fullmatch(value) is not None


def is_password(value: str) -> bool:
    return _IDENTIFIER_PATTERN.fullmatch(value) is not None


def is_username(value: str) -> bool:
    return 1 <= _byte_length(value) <= MAX_USERNAME_LENGTH and _printable(value)


def is_isbn(value: str) -> bool:
    return 1 <= _byte_length(value) <= MAX_ISBN_LENGTH and _printable(value)


def is_book_text(value: str) -> bool:
    """Book name or author."""
    return 1 <= _byte_length(value) <= MAX_TEXT_LENGTH and _printable_without_quote(value)


def is_keyword_field(value: str) -> bool:
    """Raw keyword field; the ``|`` token split is checked separately."""
    return 1 <= _byte_length(value) <= MAX_TEXT_LENGTH and _printable_without_quote(value)


def is_single_keyword(value: str) -> bool:
    """A keyword usable as a ``show -keyword=`` filter."""
    return is_keyword_field(value) and "|" not in value


# ---------------------------------------------------------------------------
# Parsers (value or None)
# ---------------------------------------------------------------------------


def parse_privilege(value: str) -> int | None:
    if len(value) != 1 or value not in "0123456789":
        return None
    level = int(value)
    return level if level in GRANTABLE_PRIVILEGES else None


def parse_quantity(value: str) -> int | None:
    """Parse a 1-10 digit count in the signed 32-bit range (zero allowed)."""
    if _QUANTITY_PATTERN.fullmatch(value) is None:
        return None
    number = int(value)
    return number if number <= MAX_STOCK else None


def parse_money(value: str) -> Decimal | None:
    """Parse a non-negative amount of at most 13 characters."""
    if not 1 <= len(value) <= MAX_MONEY_LENGTH:
        return None
    if _MONEY_PATTERN.fullmatch(value) is None:
        return None
    if not any(ch.isdigit() for ch in value):
        return None
    try:
        return money_from_str(value)
    except InvalidOperation:
        return None


def parse_keyword_set(value: str) -> list[str] | None:
    """
    Split a keyword field into tokens.

    Returns None when the field is malformed or any token is empty.
    Duplicates are returned as-is; see ``expect_keyword_set``.
    """
    if not is_keyword_field(value):
        return None
    tokens = value.split("|")
    if any(not token for token in tokens):
        return None
    return tokens


# ---------------------------------------------------------------------------
# Raising forms used by command handlers
# ---------------------------------------------------------------------------


def _expect(field: str, value: str, ok: bool) -> str:
    if not ok:
        raise InvalidFieldError(field, value)
    return value


def expect_user_id(value: str) -> str:
    return _expect("user_id", value, is_user_id(value))


def expect_password(value: str) -> str:
    return _expect("password", value, is_password(value))


def expect_username(value: str) -> str:
    return _expect("username", value, is_username(value))


def expect_isbn(value: str) -> str:
    return _expect("isbn", value, is_isbn(value))


def expect_book_text(field: str, value: str) -> str:
    return _expect(field, value, is_book_text(value))


def expect_single_keyword(value: str) -> str:
    return _expect("keyword", value, is_single_keyword(value))


def expect_privilege(value: str) -> int:
    level = parse_privilege(value)
    if level is None:
        raise InvalidFieldError("privilege", value)
    return level


def expect_quantity(value: str, *, positive: bool = False) -> int:
    number = parse_quantity(value)
    if number is None or (positive and number == 0):
        raise InvalidFieldError("quantity", value)
    return number


def expect_money(value: str, *, positive: bool = False) -> Decimal:
    amount = parse_money(value)
    if amount is None or (positive and amount <= 0):
        raise InvalidFieldError("money", value)
    return amount


def expect_keyword_set(value: str) -> str:
    """Validate a keyword field for ``modify``; returns the raw field."""
    tokens = parse_keyword_set(value)
    if tokens is None:
        raise InvalidFieldError("keyword", value)
    seen: set[str] = set()
    for token in tokens:
        if token in seen:
            raise DuplicateKeywordError(token)
        seen.add(token)
    return value
