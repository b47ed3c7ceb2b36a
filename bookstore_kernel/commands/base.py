"""
Command -- base class for every command handler.

Responsibility:
    Declares the contract each handler fulfils: its name, the minimum
    effective privilege that may run it, and how many arguments it accepts.
    The dispatcher enforces the privilege gate and the argument count before
    ``execute()`` is ever called; ``execute()`` does field validation,
    business rules, mutation and output, in that order.

Architecture position:
    Kernel > Commands.  Handlers receive a ``CommandContext`` holding the
    stores and the session stack; nothing is reached through globals.

Invariants enforced:
    - A handler raises a ``BookstoreError`` before its first mutation when a
      command is rejected, so a rejected command has no effect.
    - Output is returned as a ``CommandResult``; handlers never write to a
      stream.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Sequence

from bookstore_kernel.domain.records import Privilege
from bookstore_kernel.domain.session import SessionStack
from bookstore_kernel.exceptions import MalformedCommandError
from bookstore_kernel.services.account_store import AccountStore
from bookstore_kernel.services.book_store import BookStore
from bookstore_kernel.services.ledger import Ledger


@dataclass
class CommandContext:
    """The state every command runs against, built once per kernel."""

    accounts: AccountStore
    books: BookStore
    ledger: Ledger
    session: SessionStack


@dataclass(frozen=True)
class CommandResult:
    """
    Output of one command.

    ``lines`` is what gets printed, one entry per output line; an empty
    tuple prints nothing.  ``terminate`` ends the command loop.
    """

    lines: tuple[str, ...] = ()
    terminate: bool = False

    @classmethod
    def silent(cls) -> "CommandResult":
        return cls()

    @classmethod
    def line(cls, text: str) -> "CommandResult":
        return cls(lines=(text,))


class Command(ABC):
    """
    A single command handler.

    Subclasses set ``name``, ``min_privilege``, ``min_args`` and
    ``max_args`` (None for unbounded) and implement ``execute()``.
    """

    name: ClassVar[str]
    min_privilege: ClassVar[int] = Privilege.GUEST
    min_args: ClassVar[int] = 0
    max_args: ClassVar[int | None] = 0

    def check_shape(self, args: Sequence[str]) -> None:
        if len(args) < self.min_args:
            raise MalformedCommandError(self.name, f"expected at least {self.min_args} arguments")
        if self.max_args is not None and len(args) > self.max_args:
            raise MalformedCommandError(self.name, f"expected at most {self.max_args} arguments")

    @abstractmethod
    def execute(self, ctx: CommandContext, args: Sequence[str]) -> CommandResult:
        ...
