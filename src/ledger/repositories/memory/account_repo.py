"""In-memory implementation of AccountCollection."""

from collections import deque
from typing import Iterable, Iterator, Optional

from ledger.domain.models import Account


class InMemoryAccountCollection:
    """Process-lifetime account store, newest account first."""

    def __init__(self, accounts: Iterable[Account] = ()):
        self._accounts: deque[Account] = deque()
        for account in accounts:
            self.add(account)

    def add(self, account: Account) -> Account:
        """Insert at the front so later lookups see it first."""
        if any(held is account for held in self._accounts):
            raise ValueError(f"Account already held: {account!r}")
        self._accounts.appendleft(account)
        return account

    def find(self, name: str) -> Optional[Account]:
        """Return the first account owned by ``name``."""
        for account in self._accounts:
            if account.owner == name:
                return account
        return None

    def remove(self, name: str) -> bool:
        """Remove the first account owned by ``name``."""
        for index, account in enumerate(self._accounts):
            if account.owner == name:
                del self._accounts[index]
                return True
        return False

    def list_all(self) -> list[Account]:
        """Snapshot of all accounts, newest first."""
        return list(self._accounts)

    def clear(self) -> None:
        self._accounts.clear()

    def __iter__(self) -> Iterator[Account]:
        return iter(self.list_all())

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None
