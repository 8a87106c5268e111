"""Optional behaviours some account kinds expose."""

from typing import Protocol, runtime_checkable

from ledger.domain.models.results import OperationResult


@runtime_checkable
class InterestBearing(Protocol):
    """Accounts that can accrue interest on demand."""

    def apply_interest(self) -> OperationResult:
        """Credit interest on the current balance."""
        ...


def supports_interest(account: object) -> bool:
    """Check whether ``account`` can have interest applied."""
    return isinstance(account, InterestBearing)
