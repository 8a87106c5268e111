"""Repository layer - account collection abstractions and implementations."""

from ledger.repositories.protocols import AccountCollection
from ledger.repositories.memory import InMemoryAccountCollection

__all__ = [
    "AccountCollection",
    "InMemoryAccountCollection",
]
