"""Construction of accounts by kind name."""

from decimal import Decimal
from typing import Union

from ledger.core.exceptions import ValidationError
from ledger.core.money import AmountLike, to_money
from ledger.domain.models import Account, AccountKind, CheckingAccount, SavingsAccount


def parse_kind(kind: Union[str, AccountKind]) -> AccountKind:
    """Resolve ``"savings"``/``"checking"`` (any case) to an AccountKind."""
    if isinstance(kind, AccountKind):
        return kind
    try:
        return AccountKind(str(kind).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown account type: {kind}")


def create_account(
    kind: Union[str, AccountKind],
    owner: str,
    balance: AmountLike,
    extra: AmountLike = Decimal("0"),
) -> Account:
    """
    Build an account of the given kind.

    Args:
        kind: savings or checking
        owner: Display name, need not be unique
        balance: Opening balance
        extra: Interest rate (savings) or overdraft limit (checking)

    Returns:
        New Account, not yet held by any collection
    """
    account_kind = parse_kind(kind)
    if not owner or not owner.strip():
        raise ValidationError("Owner name must not be empty")

    opening = to_money(balance)
    limit = to_money(extra)

    if account_kind is AccountKind.SAVINGS:
        if limit < 0:
            raise ValidationError("Interest rate must not be negative")
        if opening < 0:
            raise ValidationError("Savings balance must not be negative")
        return SavingsAccount(owner, opening, interest_rate=limit)

    if limit < 0:
        raise ValidationError("Overdraft limit must not be negative")
    if opening < -limit:
        raise ValidationError("Opening balance exceeds the overdraft limit")
    return CheckingAccount(owner, opening, overdraft_limit=limit)
