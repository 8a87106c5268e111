"""
Pytest configuration and fixtures for ledger tests.

This module provides:
- Fresh in-memory account collections
- BankingService fixtures, empty and seeded with sample accounts
- The account pair used by the original unit scenarios (Alice, Bob)
- FastAPI test client bound to an isolated ledger
"""

from decimal import Decimal
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from ledger.api.deps import get_banking_service
from ledger.app_context import AppContext, set_app_context
from ledger.config.settings import reset_settings
from ledger.domain.models import CheckingAccount, SavingsAccount
from ledger.main import app
from ledger.repositories.memory import InMemoryAccountCollection
from ledger.services import BankingService, seed_sample_accounts


# =============================================================================
# COLLECTION FIXTURES
# =============================================================================


@pytest.fixture
def accounts() -> InMemoryAccountCollection:
    """Provide an empty account collection."""
    return InMemoryAccountCollection()


@pytest.fixture
def seeded_accounts(accounts) -> InMemoryAccountCollection:
    """Provide a collection holding the four sample accounts."""
    seed_sample_accounts(accounts)
    return accounts


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def banking_service(accounts) -> BankingService:
    """Provide a BankingService over an empty collection."""
    return BankingService(accounts)


@pytest.fixture
def seeded_service(seeded_accounts) -> BankingService:
    """Provide a BankingService over the sample accounts."""
    return BankingService(seeded_accounts)


# =============================================================================
# ACCOUNT FIXTURES
# =============================================================================


@pytest.fixture
def savings_account() -> SavingsAccount:
    """Savings account for Alice: $5000 at 2.5%."""
    return SavingsAccount("Alice", Decimal("5000"), Decimal("2.5"))


@pytest.fixture
def checking_account() -> CheckingAccount:
    """Checking account for Bob: $1000 with $500 overdraft."""
    return CheckingAccount("Bob", Decimal("1000"), Decimal("500"))


# =============================================================================
# CONSOLE FIXTURES
# =============================================================================


@pytest.fixture
def scripted_input() -> Callable[..., Callable[[str], str]]:
    """Factory for an ``input`` replacement that replays lines, then raises EOFError."""

    def _make(*lines: str) -> Callable[[str], str]:
        remaining = list(lines)

        def _read(prompt: str) -> str:
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        return _read

    return _make


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def app_context() -> AppContext:
    """Provide an initialized context with no accounts."""
    reset_settings()
    context = AppContext()
    context.initialize(seed=False)
    set_app_context(context)
    yield context
    set_app_context(None)
    context.close()


@pytest.fixture
def client(app_context) -> TestClient:
    """Provide FastAPI test client bound to the test context."""
    app.dependency_overrides[get_banking_service] = lambda: app_context.banking
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
