"""
Command registry.

Manages registration and lookup of command handlers by command word.
"""

from typing import Dict, Sequence

from bookstore_kernel.commands.account_commands import (
    DeleteCommand,
    PasswdCommand,
    RegisterCommand,
    UseraddCommand,
)
from bookstore_kernel.commands.base import Command
from bookstore_kernel.commands.book_commands import (
    BuyCommand,
    ImportCommand,
    ModifyCommand,
    SelectCommand,
    ShowCommand,
)
from bookstore_kernel.commands.finance_commands import (
    ReservedReportCommand,
    ShowFinanceCommand,
)
from bookstore_kernel.commands.session_commands import (
    LogoutCommand,
    QuitCommand,
    SuCommand,
)
from bookstore_kernel.exceptions import UnknownCommandError


class CommandRegistry:
    """
    Registry for command handlers.

    Names may be one word (``buy``) or two (``show finance``).  Two-word
    names are matched before one-word names, so ``show finance 3`` reaches
    the finance handler and ``show -ISBN=x`` reaches the catalog handler.
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._commands: Dict[str, Command] = {}

    def register(self, command: Command) -> None:
        """
        Register a command handler.

        Raises:
            ValueError: If a handler with the same name is already registered.
        """
        if command.name in self._commands:
            raise ValueError(f"Command already registered: {command.name}")
        self._commands[command.name] = command

    def get(self, name: str) -> Command | None:
        return self._commands.get(name)

    def resolve(self, tokens: Sequence[str]) -> tuple[Command, list[str]]:
        """
        Find the handler for a tokenized line.

        Args:
            tokens: Non-empty token list from the tokenizer.

        Returns:
            The handler and the remaining argument tokens.

        Raises:
            UnknownCommandError: If no handler matches the leading token(s).
        """
        if len(tokens) >= 2:
            command = self._commands.get(f"{tokens[0]} {tokens[1]}")
            if command is not None:
                return command, list(tokens[2:])

        command = self._commands.get(tokens[0])
        if command is None:
            raise UnknownCommandError(tokens[0])
        return command, list(tokens[1:])

    def list_commands(self) -> list[str]:
        return sorted(self._commands)

    def __contains__(self, name: str) -> bool:
        return name in self._commands


def default_registry() -> CommandRegistry:
    """Build a registry holding every bookstore command."""
    registry = CommandRegistry()
    for command in (
        SuCommand(),
        LogoutCommand(),
        QuitCommand("quit"),
        QuitCommand("exit"),
        RegisterCommand(),
        PasswdCommand(),
        UseraddCommand(),
        DeleteCommand(),
        ShowCommand(),
        BuyCommand(),
        SelectCommand(),
        ModifyCommand(),
        ImportCommand(),
        ShowFinanceCommand(),
        ReservedReportCommand("log"),
        ReservedReportCommand("report"),
    ):
        registry.register(command)
    return registry
