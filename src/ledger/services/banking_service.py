"""Banking service: resolves owners and runs account operations."""

import logging
import threading
from typing import Optional, Union

from ledger.core.exceptions import (
    AccountNotFoundError,
    UnsupportedCapabilityError,
)
from ledger.core.money import AmountLike, to_money
from ledger.domain.capabilities import InterestBearing
from ledger.domain.models import Account, AccountKind, OperationResult
from ledger.repositories.protocols import AccountCollection
from ledger.services.account_factory import create_account

logger = logging.getLogger(__name__)


class BankingService:
    """
    Operation dispatcher over an account collection.

    Looks accounts up by owner name and lets each account mutate its own
    balance and log. Balance-changing operations return an OperationResult;
    lookups that must produce an account raise AccountNotFoundError.
    Every lookup and mutation runs under one reentrant lock, so HTTP
    handlers on worker threads see each check-then-update as a unit.
    """

    def __init__(self, accounts: AccountCollection):
        self._accounts = accounts
        self._lock = threading.RLock()

    @property
    def accounts(self) -> AccountCollection:
        return self._accounts

    # ------------------------------------------------------------------
    # Collection management
    # ------------------------------------------------------------------

    def open_account(
        self,
        kind: Union[str, AccountKind],
        owner: str,
        balance: AmountLike,
        extra: AmountLike = 0,
    ) -> Account:
        """Create an account and hand it to the collection."""
        account = create_account(kind, owner, balance, extra)
        with self._lock:
            self._accounts.add(account)
        logger.info("Opened %s for %s", account.kind.label.lower(), owner)
        return account

    def find_account(self, name: str) -> Optional[Account]:
        """Most recently added account owned by ``name``, or None."""
        with self._lock:
            return self._accounts.find(name)

    def get_account(self, name: str) -> Account:
        """Like find_account, but raises AccountNotFoundError on a miss."""
        account = self.find_account(name)
        if account is None:
            raise AccountNotFoundError(name)
        return account

    def list_accounts(self) -> list[Account]:
        """All accounts, newest first."""
        with self._lock:
            return self._accounts.list_all()

    def close_account(self, name: str) -> None:
        """Remove one account owned by ``name``."""
        with self._lock:
            removed = self._accounts.remove(name)
        if not removed:
            raise AccountNotFoundError(name)
        logger.info("Closed account for %s", name)

    # ------------------------------------------------------------------
    # Account operations
    # ------------------------------------------------------------------

    def deposit(self, name: str, amount: AmountLike) -> OperationResult:
        value = to_money(amount)
        with self._lock:
            account = self._accounts.find(name)
            if account is None:
                return self._not_found(name)
            result = account.deposit(value)
        logger.info("Deposit of %s for %s, balance %s", result.amount, name, result.balance)
        return result

    def withdraw(self, name: str, amount: AmountLike) -> OperationResult:
        value = to_money(amount)
        with self._lock:
            account = self._accounts.find(name)
            if account is None:
                return self._not_found(name)
            result = account.withdraw(value)
        if result.ok:
            logger.info("Withdrawal of %s for %s, balance %s", result.amount, name, result.balance)
        else:
            logger.warning("Withdrawal refused for %s: %s", name, result.message)
        return result

    def apply_interest(self, name: str) -> OperationResult:
        """Apply interest if the account supports it."""
        with self._lock:
            account = self._accounts.find(name)
            if account is None:
                return self._not_found(name)
            if not isinstance(account, InterestBearing):
                logger.warning("Interest requested on %s account of %s", account.kind.value, name)
                return OperationResult.failure(
                    UnsupportedCapabilityError(name),
                    balance=account.balance,
                )
            result = account.apply_interest()
        logger.info("Interest of %s applied for %s, balance %s", result.amount, name, result.balance)
        return result

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def describe(self, name: str) -> str:
        with self._lock:
            return self.get_account(name).display()

    def history(self, name: str) -> tuple[str, ...]:
        """Narrative entries for the account, oldest first."""
        with self._lock:
            return self.get_account(name).transaction_history()

    def history_report(self, name: str) -> list[str]:
        """History lines headed by the owner name, ready for printing."""
        with self._lock:
            account = self.get_account(name)
            return [f"Transaction History for {account.owner}:", *account.transaction_history()]

    def summaries(self) -> list[str]:
        with self._lock:
            return [account.display() for account in self._accounts]

    @staticmethod
    def _not_found(name: str) -> OperationResult:
        logger.warning("Account not found: %s", name)
        return OperationResult.failure(AccountNotFoundError(name))
