"""Repository protocol definitions (interfaces)."""

from ledger.repositories.protocols.account_repo import AccountCollection

__all__ = [
    "AccountCollection",
]
