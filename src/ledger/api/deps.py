"""Dependency injection for FastAPI."""

from ledger.app_context import get_app_context
from ledger.services import BankingService


def get_banking_service() -> BankingService:
    """Provide the BankingService of the process-wide context."""
    return get_app_context().banking
