"""
Domain layer - records, validation, tokenizer and session stack.

Pure in-memory code: nothing in this package touches storage.
"""

from bookstore_kernel.domain.records import (
    Account,
    Book,
    LedgerEntry,
    Privilege,
    RecordKind,
)
from bookstore_kernel.domain.session import SessionFrame, SessionStack
from bookstore_kernel.domain.tokenizer import split_command_line

__all__ = [
    "Account",
    "Book",
    "LedgerEntry",
    "Privilege",
    "RecordKind",
    "SessionFrame",
    "SessionStack",
    "split_command_line",
]
