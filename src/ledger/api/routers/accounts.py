"""Account API endpoints."""

from fastapi import APIRouter, Depends, Response, status

from ledger.api.deps import get_banking_service
from ledger.api.schemas import (
    AccountCreate,
    AccountResponse,
    AccountListResponse,
    AmountRequest,
    OperationResponse,
    HistoryResponse,
)
from ledger.domain.models import OperationResult
from ledger.services import BankingService

router = APIRouter(prefix="/accounts", tags=["accounts"])


def _to_operation_response(name: str, result: OperationResult) -> OperationResponse:
    if not result.ok:
        raise result.error
    return OperationResponse(owner=name, amount=result.amount, balance=result.balance)


@router.get("/", response_model=AccountListResponse)
def list_accounts(
    service: BankingService = Depends(get_banking_service),
) -> AccountListResponse:
    """List all accounts, most recently opened first."""
    accounts = service.list_accounts()
    return AccountListResponse(
        accounts=[AccountResponse.from_account(a) for a in accounts],
        count=len(accounts),
    )


@router.post("/", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def open_account(
    data: AccountCreate,
    service: BankingService = Depends(get_banking_service),
) -> AccountResponse:
    """Open a savings or checking account."""
    account = service.open_account(data.kind, data.owner, data.balance, data.extra)
    return AccountResponse.from_account(account)


@router.get("/{name}", response_model=AccountResponse)
def get_account(
    name: str,
    service: BankingService = Depends(get_banking_service),
) -> AccountResponse:
    """Get the first account held under ``name``."""
    return AccountResponse.from_account(service.get_account(name))


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
def close_account(
    name: str,
    service: BankingService = Depends(get_banking_service),
) -> Response:
    """Close one account held under ``name``."""
    service.close_account(name)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{name}/deposit", response_model=OperationResponse)
def deposit(
    name: str,
    data: AmountRequest,
    service: BankingService = Depends(get_banking_service),
) -> OperationResponse:
    return _to_operation_response(name, service.deposit(name, data.amount))


@router.post("/{name}/withdraw", response_model=OperationResponse)
def withdraw(
    name: str,
    data: AmountRequest,
    service: BankingService = Depends(get_banking_service),
) -> OperationResponse:
    """Withdraw, subject to the account's withdrawal rule."""
    return _to_operation_response(name, service.withdraw(name, data.amount))


@router.post("/{name}/interest", response_model=OperationResponse)
def apply_interest(
    name: str,
    service: BankingService = Depends(get_banking_service),
) -> OperationResponse:
    """Apply interest; rejected for accounts that do not bear interest."""
    return _to_operation_response(name, service.apply_interest(name))


@router.get("/{name}/history", response_model=HistoryResponse)
def get_history(
    name: str,
    service: BankingService = Depends(get_banking_service),
) -> HistoryResponse:
    return HistoryResponse(owner=name, entries=list(service.history(name)))
