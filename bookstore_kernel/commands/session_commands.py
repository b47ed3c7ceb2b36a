"""Login, logout and loop termination."""

from typing import Sequence

from bookstore_kernel.commands.base import Command, CommandContext, CommandResult
from bookstore_kernel.domain import validation
from bookstore_kernel.domain.records import Privilege


class SuCommand(Command):
    """``su id [password]``"""

    name = "su"
    min_args = 1
    max_args = 2

    def execute(self, ctx: CommandContext, args: Sequence[str]) -> CommandResult:
        user_id = validation.expect_user_id(args[0])
        password = args[1] if len(args) == 2 else None
        account = ctx.accounts.get(user_id)
        ctx.session.login(account, password)
        return CommandResult.silent()


class LogoutCommand(Command):
    name = "logout"
    min_privilege = Privilege.CUSTOMER

    def execute(self, ctx: CommandContext, args: Sequence[str]) -> CommandResult:
        ctx.session.logout()
        return CommandResult.silent()


class QuitCommand(Command):
    """``quit`` / ``exit``; trailing arguments are ignored."""

    max_args = None

    def __init__(self, name: str):
        self.name = name

    def execute(self, ctx: CommandContext, args: Sequence[str]) -> CommandResult:
        return CommandResult(terminate=True)
