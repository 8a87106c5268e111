"""Domain models package."""

from ledger.core.exceptions import ErrorKind
from ledger.domain.models.enums import AccountKind
from ledger.domain.models.results import OperationResult
from ledger.domain.models.account import Account, SavingsAccount, CheckingAccount

__all__ = [
    "AccountKind",
    "ErrorKind",
    "OperationResult",
    "Account",
    "SavingsAccount",
    "CheckingAccount",
]
