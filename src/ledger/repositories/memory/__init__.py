"""In-memory repository implementations."""

from ledger.repositories.memory.account_repo import InMemoryAccountCollection

__all__ = [
    "InMemoryAccountCollection",
]
