"""Record stores: in-memory sets mirrored to storage after every mutation."""

from bookstore_kernel.services.account_store import AccountStore
from bookstore_kernel.services.base import RecordStore
from bookstore_kernel.services.book_store import BookStore
from bookstore_kernel.services.ledger import Ledger

__all__ = [
    "AccountStore",
    "BookStore",
    "Ledger",
    "RecordStore",
]
