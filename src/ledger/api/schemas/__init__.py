"""Pydantic schemas for API request/response validation."""

from ledger.api.schemas.account import (
    AccountCreate,
    AccountResponse,
    AccountListResponse,
    AmountRequest,
    OperationResponse,
    HistoryResponse,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "AccountListResponse",
    "AmountRequest",
    "OperationResponse",
    "HistoryResponse",
]
