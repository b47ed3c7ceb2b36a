"""Owner-only finance queries and the reserved ``log`` / ``report`` commands."""

from typing import Sequence

from bookstore_kernel.commands.base import Command, CommandContext, CommandResult
from bookstore_kernel.domain import validation
from bookstore_kernel.domain.records import Privilege
from bookstore_kernel.selectors.ledger_selector import LedgerSelector


class ShowFinanceCommand(Command):
    """``show finance [count]`` -- ``count`` of 0 prints an empty line."""

    name = "show finance"
    min_privilege = Privilege.OWNER
    max_args = 1

    def execute(self, ctx: CommandContext, args: Sequence[str]) -> CommandResult:
        count = validation.expect_quantity(args[0]) if args else None
        if count == 0:
            return CommandResult.line("")
        summary = LedgerSelector(ctx.ledger).summarize(count)
        return CommandResult.line(summary.render())


class ReservedReportCommand(Command):
    """Placeholder for ``log`` and ``report``; always prints one empty line."""

    min_privilege = Privilege.OWNER
    max_args = None

    def __init__(self, name: str):
        self.name = name

    def execute(self, ctx: CommandContext, args: Sequence[str]) -> CommandResult:
        return CommandResult.line("")
