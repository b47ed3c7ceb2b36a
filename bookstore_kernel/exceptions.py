"""
Typed Exception Hierarchy for the Bookstore Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

The command loop prints exactly one failure literal ("Invalid") no matter
why a command was rejected. Internally, however, every rejection is raised
as a typed exception with a stable ``code`` so that:
  - Tests can assert the precise reason a command failed.
  - Structured logs record a machine-readable cause for every rejection.
  - Handlers stay linear: validate, raise, and let the dispatcher convert.

Example - WRONG way to reject a command:
    if book.stock < quantity:
        return "Invalid"        # cause lost, caller cannot tell why

Example - RIGHT way (what this module enables):
    if book.stock < quantity:
        raise InsufficientStockError(book.isbn, book.stock, quantity)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

All exceptions inherit from BookstoreError:

    BookstoreError (base)
    |
    +-- CommandError
    |   +-- UnknownCommandError
    |   +-- MalformedCommandError
    |   +-- DuplicateFlagError
    |
    +-- InvalidFieldError
    |
    +-- AuthorizationError
    |   +-- InsufficientPrivilegeError
    |   +-- PrivilegeEscalationError
    |
    +-- SessionError
    |   +-- NotLoggedInError
    |   +-- PasswordMismatchError
    |   +-- PasswordRequiredError
    |
    +-- AccountError
    |   +-- AccountNotFoundError
    |   +-- AccountAlreadyExistsError
    |   +-- AccountInSessionError
    |
    +-- BookError
    |   +-- BookNotFoundError
    |   +-- NoBookSelectedError
    |   +-- DuplicateIsbnError
    |   +-- UnchangedIsbnError
    |   +-- DuplicateKeywordError
    |   +-- InsufficientStockError
    |   +-- StockOverflowError
    |
    +-- LedgerError
    |   +-- LedgerRangeError
    |
    +-- ConfigError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Command         | UNKNOWN_COMMAND             | First token names no command
                | MALFORMED_COMMAND           | Wrong argument count or shape
                | DUPLICATE_FLAG              | Same -flag= given twice to modify
----------------|-----------------------------|-----------------------------------------
Field           | INVALID_FIELD               | A field fails its syntax rule
----------------|-----------------------------|-----------------------------------------
Authorization   | INSUFFICIENT_PRIVILEGE      | Effective privilege below command gate
                | PRIVILEGE_ESCALATION        | useradd with privilege >= creator's
----------------|-----------------------------|-----------------------------------------
Session         | NOT_LOGGED_IN               | Session stack is empty
                | PASSWORD_MISMATCH           | Supplied password differs from stored
                | PASSWORD_REQUIRED           | Password omitted without elevation
----------------|-----------------------------|-----------------------------------------
Account         | ACCOUNT_NOT_FOUND           | No account with that identifier
                | ACCOUNT_ALREADY_EXISTS      | Identifier already registered
                | ACCOUNT_IN_SESSION          | delete of a logged-in account
----------------|-----------------------------|-----------------------------------------
Book            | BOOK_NOT_FOUND              | No book with that ISBN
                | NO_BOOK_SELECTED            | modify/import without select
                | DUPLICATE_ISBN              | Rename onto an existing ISBN
                | UNCHANGED_ISBN              | Rename onto the current ISBN
                | DUPLICATE_KEYWORD           | Keyword field repeats a token
                | INSUFFICIENT_STOCK          | buy more than in stock
                | STOCK_OVERFLOW              | import beyond 2^31-1
----------------|-----------------------------|-----------------------------------------
Ledger          | LEDGER_RANGE                | show finance k with k > ledger size
----------------|-----------------------------|-----------------------------------------
Config          | CONFIG_ERROR                | Bad configuration at startup

===============================================================================
DESIGN DECISIONS
===============================================================================

1. WHY INHERIT FROM Exception (not ValueError, etc.)?
   The dispatcher converts BookstoreError and nothing else. Programming
   errors and storage I/O failures must not be silently turned into
   "Invalid".

2. WHY code CLASS ATTRIBUTE (not instance)?
   Codes are static per exception type, readable without instantiation.

===============================================================================
"""


class BookstoreError(Exception):
    """
    Base exception for all bookstore kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "BOOKSTORE_ERROR"


# Command-shape exceptions


class CommandError(BookstoreError):
    """Base exception for command-shape errors."""

    code: str = "COMMAND_ERROR"


class UnknownCommandError(CommandError):
    """First token does not name a registered command."""

    code: str = "UNKNOWN_COMMAND"

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Unknown command: {command}")


class MalformedCommandError(CommandError):
    """Command has the wrong number or shape of arguments."""

    code: str = "MALFORMED_COMMAND"

    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Malformed {command}: {reason}")


class DuplicateFlagError(CommandError):
    """The same -flag= key appears more than once."""

    code: str = "DUPLICATE_FLAG"

    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"Duplicate flag: {flag}")


# Field validation


class InvalidFieldError(BookstoreError):
    """A field value fails its syntax rule."""

    code: str = "INVALID_FIELD"

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value!r}")


# Authorization


class AuthorizationError(BookstoreError):
    """Base exception for authorization failures."""

    code: str = "AUTHORIZATION_ERROR"


class InsufficientPrivilegeError(AuthorizationError):
    """Effective privilege is below the command's minimum."""

    code: str = "INSUFFICIENT_PRIVILEGE"

    def __init__(self, command: str, required: int, actual: int):
        self.command = command
        self.required = required
        self.actual = actual
        super().__init__(
            f"{command} requires privilege {required}, current is {actual}"
        )


class PrivilegeEscalationError(AuthorizationError):
    """Attempt to create an account at or above the creator's privilege."""

    code: str = "PRIVILEGE_ESCALATION"

    def __init__(self, requested: int, creator: int):
        self.requested = requested
        self.creator = creator
        super().__init__(
            f"Cannot grant privilege {requested} from privilege {creator}"
        )


# Session


class SessionError(BookstoreError):
    """Base exception for login/logout errors."""

    code: str = "SESSION_ERROR"


class NotLoggedInError(SessionError):
    """No session frame is active."""

    code: str = "NOT_LOGGED_IN"

    def __init__(self):
        super().__init__("No account is logged in")


class PasswordMismatchError(SessionError):
    """Supplied password does not match the stored one."""

    code: str = "PASSWORD_MISMATCH"

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Password mismatch for {user_id}")


class PasswordRequiredError(SessionError):
    """Password omitted where the current privilege does not allow it."""

    code: str = "PASSWORD_REQUIRED"

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Password required for {user_id}")


# Accounts


class AccountError(BookstoreError):
    """Base exception for account errors."""

    code: str = "ACCOUNT_ERROR"


class AccountNotFoundError(AccountError):
    """Account with given identifier was not found."""

    code: str = "ACCOUNT_NOT_FOUND"

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Account not found: {user_id}")


class AccountAlreadyExistsError(AccountError):
    """Account with given identifier already exists."""

    code: str = "ACCOUNT_ALREADY_EXISTS"

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Account already exists: {user_id}")


class AccountInSessionError(AccountError):
    """Account cannot be deleted while it is in an active session frame."""

    code: str = "ACCOUNT_IN_SESSION"

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"Account is logged in: {user_id}")


# Books


class BookError(BookstoreError):
    """Base exception for catalog errors."""

    code: str = "BOOK_ERROR"


class BookNotFoundError(BookError):
    """Book with given ISBN was not found."""

    code: str = "BOOK_NOT_FOUND"

    def __init__(self, isbn: str):
        self.isbn = isbn
        super().__init__(f"Book not found: {isbn}")


class NoBookSelectedError(BookError):
    """The current session frame has no selected book."""

    code: str = "NO_BOOK_SELECTED"

    def __init__(self):
        super().__init__("No book selected")


class DuplicateIsbnError(BookError):
    """Target ISBN of a rename already belongs to another book."""

    code: str = "DUPLICATE_ISBN"

    def __init__(self, isbn: str):
        self.isbn = isbn
        super().__init__(f"ISBN already exists: {isbn}")


class UnchangedIsbnError(BookError):
    """Rename target equals the current ISBN."""

    code: str = "UNCHANGED_ISBN"

    def __init__(self, isbn: str):
        self.isbn = isbn
        super().__init__(f"ISBN unchanged: {isbn}")


class DuplicateKeywordError(BookError):
    """Keyword field contains the same token twice."""

    code: str = "DUPLICATE_KEYWORD"

    def __init__(self, keyword: str):
        self.keyword = keyword
        super().__init__(f"Duplicate keyword: {keyword}")


class InsufficientStockError(BookError):
    """Requested quantity exceeds stock on hand."""

    code: str = "INSUFFICIENT_STOCK"

    def __init__(self, isbn: str, stock: int, requested: int):
        self.isbn = isbn
        self.stock = stock
        self.requested = requested
        super().__init__(
            f"Insufficient stock for {isbn}: have {stock}, requested {requested}"
        )


class StockOverflowError(BookError):
    """Import would push stock beyond the 32-bit signed range."""

    code: str = "STOCK_OVERFLOW"

    def __init__(self, isbn: str, stock: int, added: int):
        self.isbn = isbn
        self.stock = stock
        self.added = added
        super().__init__(f"Stock overflow for {isbn}: {stock} + {added}")


# Ledger


class LedgerError(BookstoreError):
    """Base exception for ledger errors."""

    code: str = "LEDGER_ERROR"


class LedgerRangeError(LedgerError):
    """Requested more trailing entries than the ledger holds."""

    code: str = "LEDGER_RANGE"

    def __init__(self, requested: int, size: int):
        self.requested = requested
        self.size = size
        super().__init__(f"Requested {requested} entries, ledger has {size}")


# Configuration


class ConfigError(BookstoreError):
    """Configuration could not be loaded or is inconsistent."""

    code: str = "CONFIG_ERROR"

    def __init__(self, key: str, reason: str):
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid configuration {key}: {reason}")
