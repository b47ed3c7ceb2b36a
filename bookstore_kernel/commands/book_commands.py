"""
Catalog commands: show, buy, select, modify, import.

``select`` sets the acting frame's selection; ``modify`` and ``import``
operate on that selection.  ``buy`` and ``import`` touch two record sets
(books, then ledger), each persisted by its own store.
"""

from dataclasses import replace
from typing import Any, Sequence

from bookstore_kernel.commands.base import Command, CommandContext, CommandResult
from bookstore_kernel.db.types import MAX_STOCK, format_money, round_money
from bookstore_kernel.domain import validation
from bookstore_kernel.domain.records import Book, Privilege
from bookstore_kernel.exceptions import (
    DuplicateFlagError,
    DuplicateIsbnError,
    InsufficientStockError,
    MalformedCommandError,
    NoBookSelectedError,
    StockOverflowError,
    UnchangedIsbnError,
)
from bookstore_kernel.logging_config import get_logger
from bookstore_kernel.selectors.catalog_selector import (
    CatalogField,
    CatalogFilter,
    CatalogSelector,
    format_book,
)

logger = get_logger("commands.books")


def split_flag(command: str, token: str) -> tuple[str, str]:
    """Split ``-key=value`` at the first ``=``."""
    key, sep, value = token.partition("=")
    if not sep:
        raise MalformedCommandError(command, f"expected -key=value, got {token!r}")
    return key, value


def _selected_book(ctx: CommandContext) -> Book:
    isbn = ctx.session.selected_isbn
    if isbn is None:
        raise NoBookSelectedError()
    return ctx.books.get(isbn)


class ShowCommand(Command):
    """``show [-ISBN=x | -name=x | -author=x | -keyword=x]``"""

    name = "show"
    min_privilege = Privilege.CUSTOMER
    max_args = 1

    _FILTER_KEYS = {
        "-ISBN": CatalogField.ISBN,
        "-name": CatalogField.NAME,
        "-author": CatalogField.AUTHOR,
        "-keyword": CatalogField.KEYWORD,
    }

    def parse_filter(self, token: str) -> CatalogFilter:
        key, value = split_flag(self.name, token)
        field = self._FILTER_KEYS.get(key)
        if field is None:
            raise MalformedCommandError(self.name, f"unknown filter {key!r}")
        if field is CatalogField.ISBN:
            validation.expect_isbn(value)
        elif field is CatalogField.KEYWORD:
            validation.expect_single_keyword(value)
        else:
            validation.expect_book_text(field.value, value)
        return CatalogFilter(field, value)

    def execute(self, ctx: CommandContext, args: Sequence[str]) -> CommandResult:
        criteria = self.parse_filter(args[0]) if args else None
        books = CatalogSelector(ctx.books).search(criteria)
        if not books:
            return CommandResult.line("")
        return CommandResult(lines=tuple(format_book(book) for book in books))


class BuyCommand(Command):
    """``buy ISBN quantity`` -- prints the total cost."""

    name = "buy"
    min_privilege = Privilege.CUSTOMER
    min_args = 2
    max_args = 2

    def execute(self, ctx: CommandContext, args: Sequence[str]) -> CommandResult:
        isbn = validation.expect_isbn(args[0])
        quantity = validation.expect_quantity(args[1], positive=True)
        book = ctx.books.get(isbn)
        if book.stock < quantity:
            raise InsufficientStockError(isbn, book.stock, quantity)

        cost = round_money(book.price * quantity)
        ctx.books.replace(replace(book, stock=book.stock - quantity))
        ctx.ledger.record_income(cost)
        logger.info(
            "book_sold",
            extra={"isbn": isbn, "quantity": quantity, "cost": cost},
        )
        return CommandResult.line(format_money(cost))


class SelectCommand(Command):
    """``select ISBN`` -- creates an empty book if the ISBN is new."""

    name = "select"
    min_privilege = Privilege.CLERK
    min_args = 1
    max_args = 1

    def execute(self, ctx: CommandContext, args: Sequence[str]) -> CommandResult:
        isbn = validation.expect_isbn(args[0])
        ctx.books.get_or_create(isbn)
        ctx.session.select(isbn)
        return CommandResult.silent()


class ModifyCommand(Command):
    """
    ``modify -ISBN=x -name=x -author=x -keyword=x -price=x`` (any subset)

    Every flag is validated and staged before anything is applied, so one
    bad flag rejects the whole command.  An ISBN change moves the book to
    its new key and moves the acting frame's selection with it.
    """

    name = "modify"
    min_privilege = Privilege.CLERK
    min_args = 1
    max_args = None

    def stage(self, ctx: CommandContext, book: Book, args: Sequence[str]) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        seen: set[str] = set()
        for token in args:
            key, value = split_flag(self.name, token)
            if key in seen:
                raise DuplicateFlagError(key)
            seen.add(key)

            if key == "-ISBN":
                validation.expect_isbn(value)
                if value == book.isbn:
                    raise UnchangedIsbnError(value)
                if ctx.books.exists(value):
                    raise DuplicateIsbnError(value)
                changes["isbn"] = value
            elif key == "-name":
                changes["name"] = validation.expect_book_text("name", value)
            elif key == "-author":
                changes["author"] = validation.expect_book_text("author", value)
            elif key == "-keyword":
                changes["keyword"] = validation.expect_keyword_set(value)
            elif key == "-price":
                changes["price"] = validation.expect_money(value)
            else:
                raise MalformedCommandError(self.name, f"unknown flag {key!r}")
        return changes

    def execute(self, ctx: CommandContext, args: Sequence[str]) -> CommandResult:
        book = _selected_book(ctx)
        updated = replace(book, **self.stage(ctx, book, args))

        if updated.isbn != book.isbn:
            ctx.books.rename(book.isbn, updated)
            ctx.session.select(updated.isbn)
        else:
            ctx.books.replace(updated)
        logger.info("book_modified", extra={"isbn": updated.isbn, "flags": len(args)})
        return CommandResult.silent()


class ImportCommand(Command):
    """``import quantity total_cost`` -- restock the selected book."""

    name = "import"
    min_privilege = Privilege.CLERK
    min_args = 2
    max_args = 2

    def execute(self, ctx: CommandContext, args: Sequence[str]) -> CommandResult:
        if ctx.session.selected_isbn is None:
            raise NoBookSelectedError()
        quantity = validation.expect_quantity(args[0], positive=True)
        total = validation.expect_money(args[1], positive=True)
        book = _selected_book(ctx)
        if book.stock + quantity > MAX_STOCK:
            raise StockOverflowError(book.isbn, book.stock, quantity)

        ctx.books.replace(replace(book, stock=book.stock + quantity))
        ctx.ledger.record_expenditure(total)
        logger.info(
            "book_imported",
            extra={"isbn": book.isbn, "quantity": quantity, "total": total},
        )
        return CommandResult.silent()
