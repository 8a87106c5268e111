"""Pydantic schemas for account endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ledger.domain.models import Account, AccountKind, CheckingAccount, SavingsAccount


class AccountCreate(BaseModel):
    """Request schema for opening an account."""

    kind: AccountKind = Field(..., description="savings or checking")
    owner: str = Field(..., min_length=1, max_length=255, description="Owner name, need not be unique")
    balance: Decimal = Field(default=Decimal("0"), description="Opening balance")
    interest_rate: Decimal = Field(default=Decimal("0"), ge=0, description="Percent, savings only")
    overdraft_limit: Decimal = Field(default=Decimal("0"), ge=0, description="Checking only")

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, value):
        """Accept any letter case, e.g. "Savings"."""
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def extra(self) -> Decimal:
        if self.kind is AccountKind.SAVINGS:
            return self.interest_rate
        return self.overdraft_limit


class AccountResponse(BaseModel):
    """Response schema for a single account."""

    kind: AccountKind
    owner: str
    balance: Decimal
    interest_rate: Optional[Decimal] = None
    overdraft_limit: Optional[Decimal] = None
    summary: str

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        return cls(
            kind=account.kind,
            owner=account.owner,
            balance=account.balance,
            interest_rate=account.interest_rate if isinstance(account, SavingsAccount) else None,
            overdraft_limit=account.overdraft_limit if isinstance(account, CheckingAccount) else None,
            summary=account.display(),
        )


class AccountListResponse(BaseModel):
    """Response schema for listing accounts."""

    accounts: list[AccountResponse]
    count: int


class AmountRequest(BaseModel):
    """Request schema for deposits and withdrawals."""

    amount: Decimal = Field(..., gt=0, allow_inf_nan=False)


class OperationResponse(BaseModel):
    """Response schema for a completed balance change."""

    owner: str
    amount: Decimal
    balance: Decimal


class HistoryResponse(BaseModel):
    """Response schema for an account's transaction history."""

    owner: str
    entries: list[str]
