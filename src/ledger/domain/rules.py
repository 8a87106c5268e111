"""Business rules shared by account kinds."""

from decimal import Decimal

HUNDRED = Decimal("100")


def calculate_interest(balance: Decimal, rate: Decimal) -> Decimal:
    """Interest earned on ``balance`` at ``rate`` percent."""
    return balance * (rate / HUNDRED)


def can_withdraw(balance: Decimal, overdraft_limit: Decimal, amount: Decimal) -> bool:
    """True when ``amount`` stays within balance plus the overdraft allowance."""
    return amount <= balance + overdraft_limit
