"""Decimal helpers for currency amounts."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from ledger.core.exceptions import ValidationError

CENTS = Decimal("0.01")

AmountLike = Union[Decimal, int, float, str]


def as_decimal(value: AmountLike) -> Decimal:
    """Convert to Decimal via ``str`` so floats keep their written value. No validation."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_money(value: AmountLike) -> Decimal:
    """
    Convert user-facing input into a Decimal amount.

    Floats go through ``str`` so 0.1 stays 0.1. NaN and infinities are
    rejected here, at the boundary; account operations trust their input.
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            raise ValidationError(f"Invalid amount: {value!r}")
    if not amount.is_finite():
        raise ValidationError(f"Amount must be finite: {value!r}")
    return amount


def format_amount(amount: Decimal) -> str:
    """Render an amount with exactly two decimal places, e.g. ``1234.50``."""
    return f"{Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP):f}"
