"""
Session -- the login stack.

Responsibility:
    Holds the ordered stack of logged-in accounts.  Each frame carries an
    account snapshot and its own selected ISBN, so nested logins neither see
    nor disturb the selection of the frame below them.

Architecture position:
    Kernel > Domain -- in-memory state only.  Constructed once per kernel and
    passed explicitly to the command handlers.

Invariants enforced:
    - Depth never goes negative: pop() on an empty stack raises
      NotLoggedInError and changes nothing.
    - Effective privilege is the top frame's privilege, or GUEST (0) when
      the stack is empty.
    - A new frame always starts with no selection.

Failure modes:
    - PasswordRequiredError when a password is omitted and the current
      privilege is not strictly above the target account's.
    - PasswordMismatchError when a supplied password differs.
    - NotLoggedInError on logout with no frame.
"""

from __future__ import annotations

from dataclasses import dataclass

from bookstore_kernel.domain.records import Account, Privilege
from bookstore_kernel.exceptions import (
    NotLoggedInError,
    PasswordMismatchError,
    PasswordRequiredError,
)
from bookstore_kernel.logging_config import get_logger

logger = get_logger("domain.session")


@dataclass
class SessionFrame:
    account: Account
    selected_isbn: str | None = None


class SessionStack:
    """Stack of session frames; the top frame is the acting operator."""

    def __init__(self) -> None:
        self._frames: list[SessionFrame] = []

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def privilege(self) -> int:
        if not self._frames:
            return Privilege.GUEST
        return self._frames[-1].account.privilege

    @property
    def current_account(self) -> Account | None:
        if not self._frames:
            return None
        return self._frames[-1].account

    @property
    def selected_isbn(self) -> str | None:
        if not self._frames:
            return None
        return self._frames[-1].selected_isbn

    def select(self, isbn: str) -> None:
        if not self._frames:
            raise NotLoggedInError()
        self._frames[-1].selected_isbn = isbn

    def is_logged_in(self, user_id: str) -> bool:
        """True if ``user_id`` appears in any frame, not just the top one."""
        return any(frame.account.user_id == user_id for frame in self._frames)

    def login(self, account: Account, password: str | None) -> None:
        """
        Push a frame for ``account``.

        The password may be omitted only when the current privilege is
        strictly greater than the account's privilege.
        """
        if password is None:
            if self.privilege <= account.privilege:
                raise PasswordRequiredError(account.user_id)
        elif password != account.password:
            raise PasswordMismatchError(account.user_id)

        self._frames.append(SessionFrame(account=account))
        logger.info(
            "session_pushed",
            extra={"user_id": account.user_id, "depth": len(self._frames)},
        )

    def logout(self) -> Account:
        """Pop the top frame, discarding its selection."""
        if not self._frames:
            raise NotLoggedInError()
        frame = self._frames.pop()
        logger.info(
            "session_popped",
            extra={"user_id": frame.account.user_id, "depth": len(self._frames)},
        )
        return frame.account
