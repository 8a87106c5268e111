"""Account domain models."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from ledger.core.exceptions import (
    AppError,
    InsufficientFundsError,
    OverdraftExceededError,
)
from ledger.core.money import as_decimal, format_amount
from ledger.domain.models.enums import AccountKind
from ledger.domain.models.results import OperationResult
from ledger.domain.rules import calculate_interest, can_withdraw


class Account(ABC):
    """
    Bank account held under an owner name.

    Owns its balance and an append-only log of narrative strings. Every
    successful deposit or withdrawal appends exactly one entry; failed
    operations leave both balance and log untouched. Subclasses only decide
    whether a withdrawal is allowed and how the account is summarised.
    """

    kind: AccountKind

    def __init__(self, owner: str, balance: Decimal):
        self._owner = owner
        self._balance = as_decimal(balance)
        self._transactions: list[str] = []

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def balance(self) -> Decimal:
        return self._balance

    def deposit(self, amount: Decimal) -> OperationResult:
        """Add ``amount`` to the balance. Deposits always succeed."""
        amount = as_decimal(amount)
        self._balance += amount
        self._record(f"Deposited: ${format_amount(amount)}")
        return OperationResult.success(self._balance, amount)

    def withdraw(self, amount: Decimal) -> OperationResult:
        """Take ``amount`` out if this kind's withdrawal rule allows it."""
        amount = as_decimal(amount)
        error = self._check_withdrawal(amount)
        if error is not None:
            return OperationResult.failure(error, balance=self._balance)
        self._balance -= amount
        self._record(f"Withdrawn: ${format_amount(amount)}")
        return OperationResult.success(self._balance, amount)

    def transaction_history(self) -> tuple[str, ...]:
        """Narrative entries in the order they were recorded."""
        return tuple(self._transactions)

    @abstractmethod
    def display(self) -> str:
        """One-line summary with kind, owner, balance and limit."""

    @abstractmethod
    def _check_withdrawal(self, amount: Decimal) -> Optional[AppError]:
        """Return the error refusing the withdrawal, or None to allow it."""

    def _record(self, entry: str) -> None:
        self._transactions.append(entry)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(owner={self._owner!r}, balance={self._balance!r})"


class SavingsAccount(Account):
    """
    Savings account earning interest on demand.

    Cannot go below zero. Satisfies the InterestBearing capability.
    """

    kind = AccountKind.SAVINGS

    def __init__(self, owner: str, balance: Decimal, interest_rate: Decimal = Decimal("0")):
        super().__init__(owner, balance)
        self._interest_rate = as_decimal(interest_rate)

    @property
    def interest_rate(self) -> Decimal:
        """Annual percentage, e.g. ``2.5`` for 2.5%."""
        return self._interest_rate

    def apply_interest(self) -> OperationResult:
        """
        Credit interest on the current balance.

        Records two entries: the deposit of the interest and a separate
        ``Interest Applied`` line.
        """
        interest = calculate_interest(self._balance, self._interest_rate)
        self.deposit(interest)
        self._record(f"Interest Applied: ${format_amount(interest)}")
        return OperationResult.success(self._balance, interest)

    def display(self) -> str:
        return (
            f"{self.kind.label}: {self._owner} | Balance: ${format_amount(self._balance)}"
            f" | Interest Rate: {format_amount(self._interest_rate)}%"
        )

    def _check_withdrawal(self, amount: Decimal) -> Optional[AppError]:
        if amount > self._balance:
            return InsufficientFundsError(
                requested=format_amount(amount),
                available=format_amount(self._balance),
            )
        return None


class CheckingAccount(Account):
    """Checking account that may run negative up to its overdraft limit."""

    kind = AccountKind.CHECKING

    def __init__(self, owner: str, balance: Decimal, overdraft_limit: Decimal = Decimal("0")):
        super().__init__(owner, balance)
        self._overdraft_limit = as_decimal(overdraft_limit)

    @property
    def overdraft_limit(self) -> Decimal:
        return self._overdraft_limit

    @property
    def available_funds(self) -> Decimal:
        """Balance plus the unused part of the overdraft allowance."""
        return self._balance + self._overdraft_limit

    def display(self) -> str:
        return (
            f"{self.kind.label}: {self._owner} | Balance: ${format_amount(self._balance)}"
            f" | Overdraft Limit: ${format_amount(self._overdraft_limit)}"
        )

    def _check_withdrawal(self, amount: Decimal) -> Optional[AppError]:
        if not can_withdraw(self._balance, self._overdraft_limit, amount):
            return OverdraftExceededError(
                requested=format_amount(amount),
                available=format_amount(self.available_funds),
            )
        return None
