"""Account collection protocol."""

from typing import Iterator, Optional, Protocol

from ledger.domain.models import Account


class AccountCollection(Protocol):
    """
    Interface for the container that owns every account.

    Owner names are not unique. Traversal visits the most recently added
    account first, and ``find``/``remove`` act on the first match in that
    order.
    """

    def add(self, account: Account) -> Account:
        """Take ownership of a newly created account."""
        ...

    def find(self, name: str) -> Optional[Account]:
        """Return the first account owned by ``name``, or None."""
        ...

    def remove(self, name: str) -> bool:
        """Drop the first account owned by ``name``; report whether one was found."""
        ...

    def list_all(self) -> list[Account]:
        """All accounts in traversal order."""
        ...

    def __iter__(self) -> Iterator[Account]:
        ...

    def __len__(self) -> int:
        ...
