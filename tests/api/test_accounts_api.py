"""
API tests for account endpoints.

Tests cover:
- Open account (success + validation errors)
- List, get and close accounts
- Deposit, withdraw and interest endpoints
- Error responses (400, 404, 422)
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient


def _open(client: TestClient, **payload):
    return client.post("/accounts/", json=payload)


@pytest.fixture
def alice(client: TestClient):
    """Savings account: Alice, $5000 at 2.5%."""
    _open(client, kind="savings", owner="Alice", balance="5000", interest_rate="2.5")
    return "Alice"


@pytest.fixture
def bob(client: TestClient):
    """Checking account: Bob, $1000 with $500 overdraft."""
    _open(client, kind="checking", owner="Bob", balance="1000", overdraft_limit="500")
    return "Bob"


# =============================================================================
# GENERAL ENDPOINTS
# =============================================================================


class TestGeneralEndpoints:
    def test_health_check(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client: TestClient):
        data = client.get("/").json()

        assert data["app"] == "Account Ledger"
        assert data["docs"] == "/docs"


# =============================================================================
# ACCOUNT MANAGEMENT
# =============================================================================


class TestOpenAccountAPI:
    """Tests for POST /accounts."""

    def test_open_savings_account(self, client: TestClient):
        """
        GIVEN no accounts exist
        WHEN I POST /accounts with a savings account
        THEN response is 201 with the account summary
        """
        response = _open(client, kind="savings", owner="Alice", balance="5000", interest_rate="2.5")

        assert response.status_code == 201
        data = response.json()
        assert data["kind"] == "savings"
        assert data["owner"] == "Alice"
        assert Decimal(data["balance"]) == Decimal("5000")
        assert Decimal(data["interest_rate"]) == Decimal("2.5")
        assert data["overdraft_limit"] is None
        assert data["summary"] == "Savings Account: Alice | Balance: $5000.00 | Interest Rate: 2.50%"

    def test_open_checking_account(self, client: TestClient):
        response = _open(client, kind="checking", owner="Bob", balance="1000", overdraft_limit="500")

        assert response.status_code == 201
        data = response.json()
        assert Decimal(data["overdraft_limit"]) == Decimal("500")
        assert data["interest_rate"] is None

    def test_duplicate_owner_allowed(self, client: TestClient, alice):
        response = _open(client, kind="checking", owner="Alice", balance="10")

        assert response.status_code == 201
        assert client.get("/accounts/").json()["count"] == 2

    def test_kind_is_case_insensitive(self, client: TestClient):
        """
        GIVEN a kind written as "Savings"
        WHEN I POST /accounts
        THEN the account is opened as a savings account
        """
        response = _open(client, kind=" Savings", owner="Cara", balance="10")

        assert response.status_code == 201
        assert response.json()["kind"] == "savings"

    def test_unknown_kind_returns_422(self, client: TestClient):
        response = _open(client, kind="brokerage", owner="Eve")

        assert response.status_code == 422

    def test_empty_owner_returns_422(self, client: TestClient):
        response = _open(client, kind="savings", owner="")

        assert response.status_code == 422

    def test_negative_savings_balance_returns_400(self, client: TestClient):
        response = _open(client, kind="savings", owner="Eve", balance="-1")

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"


class TestListAndGetAccountsAPI:
    """Tests for GET /accounts and GET /accounts/{name}."""

    def test_list_newest_first(self, client: TestClient, alice, bob):
        data = client.get("/accounts/").json()

        assert data["count"] == 2
        assert [a["owner"] for a in data["accounts"]] == ["Bob", "Alice"]

    def test_get_account(self, client: TestClient, bob):
        response = client.get("/accounts/Bob")

        assert response.status_code == 200
        assert response.json()["kind"] == "checking"

    def test_get_missing_account_returns_404(self, client: TestClient):
        response = client.get("/accounts/Ghost")

        assert response.status_code == 404
        assert response.json()["error"] == "ACCOUNT_NOT_FOUND"

    def test_close_account(self, client: TestClient, alice):
        response = client.delete("/accounts/Alice")

        assert response.status_code == 204
        assert client.get("/accounts/Alice").status_code == 404
        assert client.delete("/accounts/Alice").status_code == 404


# =============================================================================
# OPERATIONS
# =============================================================================


class TestOperationsAPI:
    """Deposit, withdraw, interest and history endpoints."""

    def test_savings_scenario(self, client: TestClient, alice):
        """
        GIVEN Alice's savings account with $5000
        WHEN I deposit 1000, withdraw 2000, then withdraw 5000
        THEN the last call returns 400 INSUFFICIENT_FUNDS and balance stays 4000
        """
        deposit = client.post("/accounts/Alice/deposit", json={"amount": "1000"})
        assert deposit.status_code == 200
        assert Decimal(deposit.json()["balance"]) == Decimal("6000")

        withdraw = client.post("/accounts/Alice/withdraw", json={"amount": "2000"})
        assert Decimal(withdraw.json()["balance"]) == Decimal("4000")

        refused = client.post("/accounts/Alice/withdraw", json={"amount": "5000"})
        assert refused.status_code == 400
        assert refused.json()["error"] == "INSUFFICIENT_FUNDS"

        assert Decimal(client.get("/accounts/Alice").json()["balance"]) == Decimal("4000")

    def test_checking_scenario(self, client: TestClient, bob):
        client.post("/accounts/Bob/deposit", json={"amount": "500"})
        client.post("/accounts/Bob/withdraw", json={"amount": "1200"})

        refused = client.post("/accounts/Bob/withdraw", json={"amount": "1000"})

        assert refused.status_code == 400
        assert refused.json()["error"] == "OVERDRAFT_EXCEEDED"
        assert Decimal(client.get("/accounts/Bob").json()["balance"]) == Decimal("300")

    @pytest.mark.parametrize("amount", ["0", "-5"])
    def test_non_positive_amount_returns_422(self, client: TestClient, alice, amount):
        response = client.post("/accounts/Alice/deposit", json={"amount": amount})

        assert response.status_code == 422

    def test_deposit_unknown_account_returns_404(self, client: TestClient):
        response = client.post("/accounts/Ghost/deposit", json={"amount": "5"})

        assert response.status_code == 404
        assert response.json()["error"] == "ACCOUNT_NOT_FOUND"

    def test_apply_interest(self, client: TestClient, alice):
        response = client.post("/accounts/Alice/interest")

        assert response.status_code == 200
        data = response.json()
        assert Decimal(data["amount"]) == Decimal("125")
        assert Decimal(data["balance"]) == Decimal("5125")

    def test_apply_interest_on_checking_returns_400(self, client: TestClient, bob):
        response = client.post("/accounts/Bob/interest")

        assert response.status_code == 400
        assert response.json()["error"] == "UNSUPPORTED_CAPABILITY"

    def test_history(self, client: TestClient, alice):
        client.post("/accounts/Alice/deposit", json={"amount": "10"})
        client.post("/accounts/Alice/withdraw", json={"amount": "99999"})
        client.post("/accounts/Alice/interest")

        response = client.get("/accounts/Alice/history")

        assert response.status_code == 200
        data = response.json()
        assert data["owner"] == "Alice"
        assert data["entries"] == [
            "Deposited: $10.00",
            "Deposited: $125.25",
            "Interest Applied: $125.25",
        ]
