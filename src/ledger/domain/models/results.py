"""Outcome of a balance-changing account operation."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ledger.core.exceptions import AppError, ErrorKind


@dataclass(frozen=True)
class OperationResult:
    """
    Success or failure of a deposit, withdrawal or interest application.

    Failures carry the error instead of raising it, so callers branch on
    ``ok`` and decide themselves how to present the problem.
    """

    ok: bool
    balance: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    error: Optional[AppError] = None

    @classmethod
    def success(cls, balance: Decimal, amount: Decimal) -> "OperationResult":
        return cls(ok=True, balance=balance, amount=amount)

    @classmethod
    def failure(
        cls,
        error: AppError,
        balance: Optional[Decimal] = None,
    ) -> "OperationResult":
        return cls(ok=False, balance=balance, error=error)

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        """The failure kind, or None for a successful operation."""
        if self.error is None:
            return None
        try:
            return ErrorKind(self.error.code)
        except ValueError:
            return None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error else None

    def unwrap(self) -> Decimal:
        """Return the resulting balance, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.balance

    def __bool__(self) -> bool:
        return self.ok
