"""
Module: bookstore_kernel.selectors.catalog_selector
Responsibility: Read-only catalog queries for the ``show`` command: filter
    books by exactly one field and render them as tab-separated lines.
Architecture position: Kernel > Selectors.  Reads BookStore; never mutates.

Invariants enforced:
    - Results are ordered by ISBN ascending.
    - A keyword filter matches when it equals any one token of the book's
      ``|``-separated keyword field.
"""

from dataclasses import dataclass
from enum import Enum

from bookstore_kernel.db.types import format_money
from bookstore_kernel.domain.records import Book
from bookstore_kernel.services.book_store import BookStore


class CatalogField(str, Enum):
    ISBN = "ISBN"
    NAME = "name"
    AUTHOR = "author"
    KEYWORD = "keyword"


@dataclass(frozen=True)
class CatalogFilter:
    """A single ``-field=value`` constraint."""

    field: CatalogField
    value: str

    def matches(self, book: Book) -> bool:
        if self.field is CatalogField.ISBN:
            return book.isbn == self.value
        if self.field is CatalogField.NAME:
            return book.name == self.value
        if self.field is CatalogField.AUTHOR:
            return book.author == self.value
        return self.value in book.keywords()


def format_book(book: Book) -> str:
    """ISBN, name, author, keyword, price (2 dp) and stock, tab-separated."""
    return "\t".join(
        (
            book.isbn,
            book.name,
            book.author,
            book.keyword,
            format_money(book.price),
            str(book.stock),
        )
    )


class CatalogSelector:
    def __init__(self, books: BookStore):
        self.books = books

    def search(self, criteria: CatalogFilter | None = None) -> list[Book]:
        books = self.books.all_books()
        if criteria is None:
            return books
        return [book for book in books if criteria.matches(book)]
