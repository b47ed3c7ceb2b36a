"""
Module: bookstore_kernel.commands.dispatcher
Responsibility: Route one tokenized line to its handler and turn any
    rejection into the single failure literal.
Architecture position: Kernel > Commands.  Called by the kernel once per
    non-blank input line.

Invariants enforced:
    - Gate order is fixed: privilege, then argument count, then whatever
      the handler validates.  A guest typing ``buy`` with no arguments is
      rejected for privilege, not shape.
    - Every BookstoreError becomes exactly one ``Invalid`` line; the typed
      cause is only visible in the structured log.

Failure modes:
    - Anything that is not a BookstoreError (storage I/O, database errors)
      propagates to the caller unchanged.
"""

from typing import Sequence

from bookstore_kernel.commands.base import CommandContext, CommandResult
from bookstore_kernel.commands.registry import CommandRegistry, default_registry
from bookstore_kernel.exceptions import BookstoreError, InsufficientPrivilegeError
from bookstore_kernel.logging_config import LogContext, get_logger

logger = get_logger("commands.dispatcher")

FAILURE_LITERAL = "Invalid"


class CommandDispatcher:
    def __init__(self, ctx: CommandContext, registry: CommandRegistry | None = None):
        self.ctx = ctx
        self.registry = registry if registry is not None else default_registry()

    def dispatch(self, tokens: Sequence[str]) -> CommandResult:
        actor = self.ctx.session.current_account
        actor_id = actor.user_id if actor is not None else None
        with LogContext.bind(command=tokens[0], actor_id=actor_id):
            try:
                result = self._run(tokens)
            except BookstoreError as exc:
                logger.info(
                    "command_rejected",
                    extra={"reason": exc.code},
                    exc_info=True,
                )
                return CommandResult.line(FAILURE_LITERAL)
            logger.info("command_applied", extra={"output_lines": len(result.lines)})
            return result

    def _run(self, tokens: Sequence[str]) -> CommandResult:
        command, args = self.registry.resolve(tokens)
        privilege = self.ctx.session.privilege
        if privilege < command.min_privilege:
            raise InsufficientPrivilegeError(command.name, command.min_privilege, privilege)
        command.check_shape(args)
        return command.execute(self.ctx, args)
