"""
Module: bookstore_kernel.kernel
Responsibility: Wire storage, the three record stores, the session stack
    and the dispatcher into one object that executes input lines.
Architecture position: Kernel root.  Built once per process by the shell
    entry point (or by tests); owns the storage backend and closes it.

Invariants enforced:
    - The owner account from the bootstrap configuration exists before the
      first line is executed.
    - The session stack starts empty on every start, whatever is on disk.
    - A blank or whitespace-only line produces no output and no effect.
"""

from __future__ import annotations

from bookstore_config.schema import BookstoreConfig
from bookstore_kernel.commands import CommandContext, CommandDispatcher, CommandResult
from bookstore_kernel.domain.session import SessionStack
from bookstore_kernel.domain.tokenizer import split_command_line
from bookstore_kernel.logging_config import LogContext, get_logger
from bookstore_kernel.services import AccountStore, BookStore, Ledger
from bookstore_kernel.storage import RecordStorage, open_storage

logger = get_logger("kernel")


class BookstoreKernel:
    def __init__(self, storage: RecordStorage, config: BookstoreConfig | None = None):
        config = config or BookstoreConfig()
        self.storage = storage
        self.accounts = AccountStore(storage)
        self.books = BookStore(storage)
        self.ledger = Ledger(storage)
        self.accounts.ensure_root(
            config.bootstrap.root_user_id,
            config.bootstrap.root_password,
            config.bootstrap.root_username,
        )
        self.session = SessionStack()
        self.context = CommandContext(
            accounts=self.accounts,
            books=self.books,
            ledger=self.ledger,
            session=self.session,
        )
        self.dispatcher = CommandDispatcher(self.context)
        self._line_no = 0
        logger.info(
            "kernel_started",
            extra={
                "accounts": len(self.accounts),
                "books": len(self.books),
                "ledger_entries": len(self.ledger),
            },
        )

    def execute_line(self, line: str) -> CommandResult | None:
        """Run one input line; None for a blank line."""
        self._line_no += 1
        tokens = split_command_line(line)
        if not tokens:
            return None
        with LogContext.bind(line_no=str(self._line_no)):
            return self.dispatcher.dispatch(tokens)

    def close(self) -> None:
        self.storage.close()

    def __enter__(self) -> "BookstoreKernel":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def build_kernel(config: BookstoreConfig) -> BookstoreKernel:
    """Open the configured storage backend and build a kernel over it."""
    return BookstoreKernel(open_storage(config.storage), config)
