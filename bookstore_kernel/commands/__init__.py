"""Command handlers, their registry and the dispatcher that runs them."""

from bookstore_kernel.commands.base import Command, CommandContext, CommandResult
from bookstore_kernel.commands.dispatcher import FAILURE_LITERAL, CommandDispatcher
from bookstore_kernel.commands.registry import CommandRegistry, default_registry

__all__ = [
    "FAILURE_LITERAL",
    "Command",
    "CommandContext",
    "CommandDispatcher",
    "CommandRegistry",
    "CommandResult",
    "default_registry",
]
