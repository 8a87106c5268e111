"""Service layer - business logic orchestration."""

from ledger.services.account_factory import create_account, parse_kind
from ledger.services.banking_service import BankingService
from ledger.services.seed import SAMPLE_ACCOUNTS, seed_sample_accounts

__all__ = [
    "BankingService",
    "create_account",
    "parse_kind",
    "SAMPLE_ACCOUNTS",
    "seed_sample_accounts",
]
