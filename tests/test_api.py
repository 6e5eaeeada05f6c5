import logging
from decimal import Decimal

from fastapi.testclient import TestClient

from app.main import app
from app.shared.database.models import AccountEntity, PocketEntity


class TestTransactionsEndpoints:

    def test_transfer_between_accounts(self, client, accounts, balances):
        response = client.post(
            f"/api/v1/transactions/accounts/{accounts[0]}/accounts/{accounts[1]}",
            json={"amount": 200.0},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["transfer_type"] == "account_to_account"
        assert Decimal(data["source_balance"]) == Decimal("800")
        assert Decimal(data["destination_balance"]) == Decimal("1200")
        assert balances(AccountEntity, accounts[0], accounts[1]) == [Decimal("800.00"), Decimal("1200.00")]

    def test_transfer_to_pocket(self, client, accounts, pockets, balances):
        response = client.post(
            f"/api/v1/transactions/accounts/{accounts[0]}/pockets/{pockets[0]}",
            json={"amount": "75.25"},
        )

        assert response.status_code == 200
        assert balances(AccountEntity, accounts[0]) == [Decimal("924.75")]
        assert balances(PocketEntity, pockets[0]) == [Decimal("75.25")]

    def test_unknown_origin_is_404(self, client, accounts):
        response = client.post(
            f"/api/v1/transactions/accounts/0/accounts/{accounts[1]}",
            json={"amount": 100},
        )

        assert response.status_code == 404
        data = response.json()
        assert data["success"] is False
        assert data["error_code"] == "origin_account_not_found"

    def test_insufficient_funds_is_412(self, client, accounts, update_account, balances):
        update_account(accounts[0], balance=Decimal("50.00"))

        response = client.post(
            f"/api/v1/transactions/accounts/{accounts[0]}/accounts/{accounts[1]}",
            json={"amount": 100.0},
        )

        assert response.status_code == 412
        assert response.json()["error_code"] == "insufficient_funds"
        assert balances(AccountEntity, accounts[0]) == [Decimal("50.00")]

    def test_missing_amount_is_business_rule(self, client, accounts, pockets):
        response = client.post(
            f"/api/v1/transactions/accounts/{accounts[0]}/pockets/{pockets[0]}",
            json={},
        )

        assert response.status_code == 412
        assert response.json()["error_code"] == "invalid_amount"

    def test_foreign_pocket_is_412(self, client, accounts, pockets):
        response = client.post(
            f"/api/v1/transactions/accounts/{accounts[0]}/pockets/{pockets[1]}",
            json={"amount": 10},
        )

        assert response.status_code == 412
        assert response.json()["error_code"] == "pocket_not_owned"


class TestAccountsEndpoints:

    def test_get_account(self, client, accounts, pockets):
        response = client.get(f"/api/v1/accounts/{accounts[0]}")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ACTIVE"
        assert [p["pocket_id"] for p in data["pockets"]] == [pockets[0]]

    def test_get_pocket(self, client, accounts, pockets):
        response = client.get(f"/api/v1/accounts/pockets/{pockets[1]}")

        assert response.status_code == 200
        assert response.json()["account_id"] == accounts[1]

    def test_get_missing_account(self, client, accounts):
        response = client.get("/api/v1/accounts/0")

        assert response.status_code == 404
        assert response.json()["error_code"] == "account_not_found"

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"
        assert client.get("/api/v1/accounts/health").json()["service"] == "accounts"
        assert client.get("/api/v1/transactions/health").json()["service"] == "transactions"


def test_lifespan_sets_up_logging():
    with TestClient(app) as client:
        assert client.get("/").json()["status"] == "running"

    assert logging.getLogger().handlers
