"""
Account administration commands: register, passwd, useradd, delete.

Each validates all of its fields before touching the AccountStore, and the
store persists the full account set on success.
"""

from typing import Sequence

from bookstore_kernel.commands.base import Command, CommandContext, CommandResult
from bookstore_kernel.domain import validation
from bookstore_kernel.domain.records import Account, Privilege
from bookstore_kernel.exceptions import (
    AccountAlreadyExistsError,
    AccountInSessionError,
    MalformedCommandError,
    PasswordMismatchError,
    PrivilegeEscalationError,
)
from bookstore_kernel.logging_config import get_logger

logger = get_logger("commands.accounts")


class RegisterCommand(Command):
    """``register id password username`` -- self-service, privilege 1."""

    name = "register"
    min_args = 3
    max_args = 3

    def execute(self, ctx: CommandContext, args: Sequence[str]) -> CommandResult:
        user_id = validation.expect_user_id(args[0])
        password = validation.expect_password(args[1])
        username = validation.expect_username(args[2])
        if ctx.accounts.exists(user_id):
            raise AccountAlreadyExistsError(user_id)

        ctx.accounts.add(Account(user_id, password, int(Privilege.CUSTOMER), username))
        logger.info("account_registered", extra={"user_id": user_id})
        return CommandResult.silent()


class PasswdCommand(Command):
    """
    ``passwd id [current] new``

    The owner (privilege 7) may omit the current password; if one is given
    anyway it is not checked.  Everyone else must give it and it must match.
    """

    name = "passwd"
    min_privilege = Privilege.CUSTOMER
    min_args = 2
    max_args = 3

    def execute(self, ctx: CommandContext, args: Sequence[str]) -> CommandResult:
        user_id = validation.expect_user_id(args[0])
        account = ctx.accounts.get(user_id)

        if ctx.session.privilege == Privilege.OWNER:
            new_password = validation.expect_password(args[-1])
        else:
            if len(args) != 3:
                raise MalformedCommandError(self.name, "current password required")
            current = validation.expect_password(args[1])
            new_password = validation.expect_password(args[2])
            if current != account.password:
                raise PasswordMismatchError(user_id)

        ctx.accounts.update_password(user_id, new_password)
        logger.info("password_changed", extra={"user_id": user_id})
        return CommandResult.silent()


class UseraddCommand(Command):
    """``useradd id password privilege username``"""

    name = "useradd"
    min_privilege = Privilege.CLERK
    min_args = 4
    max_args = 4

    def execute(self, ctx: CommandContext, args: Sequence[str]) -> CommandResult:
        user_id = validation.expect_user_id(args[0])
        password = validation.expect_password(args[1])
        privilege = validation.expect_privilege(args[2])
        username = validation.expect_username(args[3])

        creator = ctx.session.privilege
        if privilege >= creator:
            raise PrivilegeEscalationError(privilege, creator)
        if ctx.accounts.exists(user_id):
            raise AccountAlreadyExistsError(user_id)

        ctx.accounts.add(Account(user_id, password, privilege, username))
        logger.info(
            "account_created",
            extra={"user_id": user_id, "privilege": privilege},
        )
        return CommandResult.silent()


class DeleteCommand(Command):
    """``delete id`` -- refused while the account is in any session frame."""

    name = "delete"
    min_privilege = Privilege.OWNER
    min_args = 1
    max_args = 1

    def execute(self, ctx: CommandContext, args: Sequence[str]) -> CommandResult:
        user_id = validation.expect_user_id(args[0])
        ctx.accounts.get(user_id)
        if ctx.session.is_logged_in(user_id):
            raise AccountInSessionError(user_id)

        ctx.accounts.remove(user_id)
        logger.info("account_deleted", extra={"user_id": user_id})
        return CommandResult.silent()
