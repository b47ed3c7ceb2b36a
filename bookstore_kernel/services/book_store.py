"""
BookStore -- the catalog, keyed by ISBN.

Responsibility:
    In-memory map of books mirrored to storage.  Supports implicit creation
    on first selection, whole-record replacement, and ISBN rename.

Architecture position:
    Kernel > Services.  Read by CatalogSelector; mutated by the select,
    modify, import and buy commands.

Invariants enforced:
    - ISBNs are unique.  rename() refuses a target that already exists.
    - rename() is a single in-memory delete+insert followed by a single
      persist; storage never observes the book under both keys or neither.
    - Persisted order is ISBN order.

Failure modes:
    - BookNotFoundError from get(), replace() and rename().
    - DuplicateIsbnError from rename().
"""

from bookstore_kernel.domain.records import Book, RecordKind
from bookstore_kernel.exceptions import BookNotFoundError, DuplicateIsbnError
from bookstore_kernel.logging_config import get_logger
from bookstore_kernel.services.base import RecordStore
from bookstore_kernel.storage.base import RecordStorage

logger = get_logger("services.books")


class BookStore(RecordStore):
    kind = RecordKind.BOOKS

    def __init__(self, storage: RecordStorage):
        super().__init__(storage)
        self._books: dict[str, Book] = {
            book.isbn: book for book in storage.load_all(self.kind)
        }

    def _records(self) -> list[Book]:
        return self.all_books()

    def __len__(self) -> int:
        return len(self._books)

    def exists(self, isbn: str) -> bool:
        return isbn in self._books

    def get(self, isbn: str) -> Book:
        try:
            return self._books[isbn]
        except KeyError:
            raise BookNotFoundError(isbn) from None

    def all_books(self) -> list[Book]:
        """Every book, sorted by ISBN."""
        return [self._books[key] for key in sorted(self._books)]

    def get_or_create(self, isbn: str) -> Book:
        """Return the book, creating and persisting an empty one if new."""
        book = self._books.get(isbn)
        if book is None:
            book = Book(isbn=isbn)
            self._books[isbn] = book
            self._persist()
            logger.info("book_created", extra={"isbn": isbn})
        return book

    def replace(self, book: Book) -> None:
        """Swap in a new version of an existing book (same ISBN)."""
        if book.isbn not in self._books:
            raise BookNotFoundError(book.isbn)
        self._books[book.isbn] = book
        self._persist()

    def rename(self, old_isbn: str, book: Book) -> None:
        """Store ``book`` under its new ISBN and drop ``old_isbn``."""
        if old_isbn not in self._books:
            raise BookNotFoundError(old_isbn)
        if book.isbn != old_isbn and book.isbn in self._books:
            raise DuplicateIsbnError(book.isbn)
        del self._books[old_isbn]
        self._books[book.isbn] = book
        self._persist()
        logger.info(
            "book_renamed", extra={"old_isbn": old_isbn, "new_isbn": book.isbn}
        )
