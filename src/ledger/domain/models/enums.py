"""Enumerations for domain models."""

from enum import Enum


class AccountKind(str, Enum):
    """Kinds of account the ledger can hold."""

    SAVINGS = "savings"
    CHECKING = "checking"

    @property
    def label(self) -> str:
        """Human-readable name used in account summaries."""
        return f"{self.value.capitalize()} Account"
