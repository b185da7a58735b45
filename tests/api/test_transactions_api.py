from datetime import datetime

import pytest

API = "/api/v1/transactions"


@pytest.fixture
def seeded(food, travel, make_transaction):
    """Food: 10 + 20 (March), Travel: 5 (approved, April)."""
    return {
        "first": make_transaction(food, amount="10", when=datetime(2024, 3, 1, 9, 0)),
        "second": make_transaction(food, amount="20", when=datetime(2024, 3, 20, 9, 0)),
        "third": make_transaction(travel, amount="5", card="9999", when=datetime(2024, 4, 2, 9, 0), status="approved"),
    }


class TestCreateTransactionApi:
    def test_create(self, client, food):
        response = client.post(API, json={
            "cardLastFour": "1234",
            "amount": 45.5,
            "categoryId": food.id,
            "transactionDate": "2024-03-01T10:00:00Z",
        })

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["cardLastFour"] == "1234"
        assert data["amount"] == 45.5
        assert data["categoryId"] == food.id
        assert data["status"] == "pending"
        assert data["transactionDate"].startswith("2024-03-01T10:00:00")

    def test_create_without_date_defaults_to_now(self, client, food):
        response = client.post(API, json={"cardLastFour": "1234", "amount": 1, "categoryId": food.id})

        assert response.status_code == 201
        assert response.json()["data"]["transactionDate"]

    def test_create_with_status(self, client, food):
        response = client.post(API, json={
            "cardLastFour": "1234", "amount": 1, "categoryId": food.id, "status": "rejected",
        })

        assert response.json()["data"]["status"] == "rejected"

    @pytest.mark.parametrize("payload", [
        {"cardLastFour": "123", "amount": 10},
        {"cardLastFour": "1234", "amount": 0},
        {"cardLastFour": "1234", "amount": -3},
        {"cardLastFour": "1234", "amount": 10, "status": "done"},
        {"cardLastFour": "1234", "amount": 10, "transactionDate": "yesterday"},
    ])
    def test_create_invalid(self, client, food, payload):
        response = client.post(API, json={"categoryId": food.id, **payload})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request data"
        assert response.json()["details"]

    def test_create_rejects_amount_below_one_cent(self, client, food):
        response = client.post(API, json={"cardLastFour": "1234", "amount": 0.001, "categoryId": food.id})

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Amount must be greater than 0"}
        assert client.get(API).json()["data"] == []
        assert client.get(f"{API}/summary").json()["meta"]["totalTransactions"] == 0

    def test_create_for_missing_category(self, client):
        response = client.post(API, json={"cardLastFour": "1234", "amount": 10, "categoryId": 9999})

        assert response.status_code == 404
        assert response.json()["message"] == "Category not found"


class TestListTransactionsApi:
    def test_list_all(self, client, seeded):
        response = client.get(API)

        assert response.status_code == 200
        body = response.json()
        assert body["meta"] == {"count": 3}
        assert [row["id"] for row in body["data"]] == [
            seeded["third"].id, seeded["second"].id, seeded["first"].id,
        ]
        assert body["data"][0]["categoryName"] == "Travel"

    def test_filter_by_status(self, client, seeded):
        body = client.get(API, params={"status": "approved"}).json()

        assert [row["id"] for row in body["data"]] == [seeded["third"].id]

    def test_filters_combine(self, client, food, seeded):
        body = client.get(API, params={
            "categoryId": str(food.id),
            "dateFrom": "2024-03-10T00:00:00Z",
            "dateTo": "2024-04-30T00:00:00Z",
        }).json()

        assert [row["id"] for row in body["data"]] == [seeded["second"].id]
        assert body["meta"]["count"] == 1

    @pytest.mark.parametrize("params", [
        {"status": "done"},
        {"categoryId": "abc"},
        {"dateFrom": "not-a-date"},
    ])
    def test_invalid_filters(self, client, params):
        response = client.get(API, params=params)

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request data"


class TestSummaryApi:
    def test_summary(self, client, food, travel, seeded):
        client.post("/api/v1/categories", json={"name": "Empty"})

        body = client.get(f"{API}/summary").json()

        rows = {row["categoryName"]: row for row in body["data"]}
        assert rows == {
            "Food": {"categoryId": food.id, "categoryName": "Food", "totalAmount": 30.0, "transactionCount": 2},
            "Travel": {"categoryId": travel.id, "categoryName": "Travel", "totalAmount": 5.0, "transactionCount": 1},
        }
        assert body["meta"] == {"totalAmount": 35.0, "totalTransactions": 3, "categoryCount": 2}

    def test_empty_summary(self, client):
        body = client.get(f"{API}/summary").json()

        assert body["data"] == []
        assert body["meta"] == {"totalAmount": 0.0, "totalTransactions": 0, "categoryCount": 0}


class TestUpdateTransactionApi:
    def test_partial_update(self, client, food, seeded):
        target = seeded["first"]

        response = client.put(f"{API}/{target.id}", json={"amount": 50})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["amount"] == 50.0
        assert data["cardLastFour"] == "1234"
        assert data["categoryId"] == food.id
        assert data["status"] == "pending"
        assert data["transactionDate"].startswith("2024-03-01T09:00:00")

    def test_update_invalid(self, client, seeded):
        response = client.put(f"{API}/{seeded['first'].id}", json={"cardLastFour": "12345"})

        assert response.status_code == 400

    def test_update_rejects_amount_below_one_cent(self, client, seeded):
        target = seeded["first"]

        response = client.put(f"{API}/{target.id}", json={"amount": 0.001})

        assert response.status_code == 400
        assert response.json()["message"] == "Amount must be greater than 0"
        amounts = {row["id"]: row["amount"] for row in client.get(API).json()["data"]}
        assert amounts[target.id] == 10.0

    def test_update_missing(self, client):
        assert client.put(f"{API}/9999", json={"amount": 5}).status_code == 404

    def test_update_non_numeric_id(self, client):
        response = client.put(f"{API}/abc", json={"amount": 5})

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid transaction ID"


class TestStatusAndDeleteApi:
    def test_update_status(self, client, seeded):
        target = seeded["third"]

        response = client.patch(f"{API}/{target.id}/status", json={"status": "pending"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Transaction status updated successfully"}
        rows = client.get(API, params={"status": "pending"}).json()["data"]
        assert target.id in [row["id"] for row in rows]

    def test_update_status_invalid(self, client, seeded):
        response = client.patch(f"{API}/{seeded['first'].id}/status", json={"status": "paid"})

        assert response.status_code == 400

    def test_update_status_missing(self, client):
        response = client.patch(f"{API}/9999/status", json={"status": "approved"})

        assert response.status_code == 404
        assert response.json()["message"] == "Transaction not found"

    def test_delete(self, client, seeded):
        response = client.delete(f"{API}/{seeded['first'].id}")

        assert response.status_code == 200
        assert response.json()["message"] == "Resource deleted successfully"
        assert client.get(API).json()["meta"]["count"] == 2

    def test_delete_missing(self, client):
        assert client.delete(f"{API}/9999").status_code == 404
