"""Read-only queries over the record stores."""

from bookstore_kernel.selectors.catalog_selector import (
    CatalogField,
    CatalogFilter,
    CatalogSelector,
    format_book,
)
from bookstore_kernel.selectors.ledger_selector import FinanceSummary, LedgerSelector

__all__ = [
    "CatalogField",
    "CatalogFilter",
    "CatalogSelector",
    "FinanceSummary",
    "LedgerSelector",
    "format_book",
]
