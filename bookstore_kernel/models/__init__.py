"""ORM tables backing the SQL record storage."""

from bookstore_kernel.models.account import AccountRow
from bookstore_kernel.models.book import BookRow
from bookstore_kernel.models.ledger import LedgerRow

__all__ = [
    "AccountRow",
    "BookRow",
    "LedgerRow",
]
