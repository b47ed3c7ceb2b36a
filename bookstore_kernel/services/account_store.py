"""
AccountStore -- operator accounts keyed by identifier.

Responsibility:
    In-memory map of accounts mirrored to storage, plus the startup
    guarantee that the distinguished owner account exists.

Architecture position:
    Kernel > Services.  Used by the session and account-admin commands.

Invariants enforced:
    - Identifiers are unique: add() refuses an existing id.
    - Every stored account has privilege 1, 3 or 7 (callers validate the
      code; the bootstrap account is always 7).
    - Persisted order is identifier order.

Failure modes:
    - AccountAlreadyExistsError from add().
    - AccountNotFoundError from get(), remove() and update_password().
"""

from dataclasses import replace

from bookstore_kernel.domain.records import Account, Privilege, RecordKind
from bookstore_kernel.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
)
from bookstore_kernel.logging_config import get_logger
from bookstore_kernel.services.base import RecordStore
from bookstore_kernel.storage.base import RecordStorage

logger = get_logger("services.accounts")


class AccountStore(RecordStore):
    kind = RecordKind.ACCOUNTS

    def __init__(self, storage: RecordStorage):
        super().__init__(storage)
        self._accounts: dict[str, Account] = {
            account.user_id: account for account in storage.load_all(self.kind)
        }

    def _records(self) -> list[Account]:
        return [self._accounts[key] for key in sorted(self._accounts)]

    def __len__(self) -> int:
        return len(self._accounts)

    def exists(self, user_id: str) -> bool:
        return user_id in self._accounts

    def get(self, user_id: str) -> Account:
        try:
            return self._accounts[user_id]
        except KeyError:
            raise AccountNotFoundError(user_id) from None

    def ensure_root(self, user_id: str, password: str, username: str) -> bool:
        """
        Create the owner account if absent.

        Returns True if the account was created (and persisted).
        """
        if user_id in self._accounts:
            return False
        self.add(Account(user_id, password, int(Privilege.OWNER), username))
        logger.info("root_account_bootstrapped", extra={"user_id": user_id})
        return True

    def add(self, account: Account) -> None:
        if account.user_id in self._accounts:
            raise AccountAlreadyExistsError(account.user_id)
        self._accounts[account.user_id] = account
        self._persist()

    def remove(self, user_id: str) -> None:
        if user_id not in self._accounts:
            raise AccountNotFoundError(user_id)
        del self._accounts[user_id]
        self._persist()

    def update_password(self, user_id: str, password: str) -> None:
        account = self.get(user_id)
        self._accounts[user_id] = replace(account, password=password)
        self._persist()
