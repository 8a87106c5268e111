"""Sample accounts used to populate a fresh ledger."""

from decimal import Decimal

from ledger.domain.models import AccountKind
from ledger.repositories.protocols import AccountCollection
from ledger.services.account_factory import create_account

# (kind, owner, balance, rate or overdraft limit), in insertion order
SAMPLE_ACCOUNTS = [
    (AccountKind.SAVINGS, "Laurie", Decimal("5000"), Decimal("2.5")),
    (AccountKind.CHECKING, "Larry", Decimal("1000"), Decimal("500")),
    (AccountKind.SAVINGS, "David", Decimal("10000"), Decimal("2.5")),
    (AccountKind.CHECKING, "Luis", Decimal("2000"), Decimal("500")),
]


def seed_sample_accounts(accounts: AccountCollection) -> int:
    """Add the sample accounts and return how many were added."""
    for kind, owner, balance, extra in SAMPLE_ACCOUNTS:
        accounts.add(create_account(kind, owner, balance, extra))
    return len(SAMPLE_ACCOUNTS)
