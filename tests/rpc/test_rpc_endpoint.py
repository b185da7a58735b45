class TestRpcEndpoint:
    def test_health_check_without_body(self, client):
        response = client.post("/rpc/healthCheck")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": "OK"}

    def test_create_category(self, client):
        response = client.post("/rpc/category.create", json={"name": "Food"})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["name"] == "Food"
        assert "createdAt" in body["data"]

    def test_conflict(self, client, food):
        response = client.post("/rpc/category.create", json={"name": "Food"})

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "message": "Category with this name already exists",
            "code": "CONFLICT",
        }

    def test_not_found(self, client):
        response = client.post("/rpc/category.getById", json={"id": 9999})

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_unknown_procedure(self, client):
        response = client.post("/rpc/category.explode", json={})

        assert response.status_code == 404
        assert response.json()["message"] == "Procedure not found"

    def test_schema_violation(self, client, food):
        response = client.post("/rpc/transaction.create", json={
            "cardLastFour": "12",
            "amount": 10,
            "categoryId": food.id,
        })

        assert response.status_code == 400
        body = response.json()
        assert body["code"] == "BAD_REQUEST"
        assert body["message"] == "Invalid request data"
        assert body["details"][0]["path"] == ["cardLastFour"]

    def test_business_rule_violation(self, client):
        response = client.post("/rpc/transaction.create", json={
            "cardLastFour": "1234",
            "amount": 10,
            "categoryId": 9999,
        })

        assert response.status_code == 404
        assert response.json()["message"] == "Category not found"

    def test_invalid_json(self, client):
        response = client.post(
            "/rpc/category.create", content="{not json", headers={"content-type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "BAD_REQUEST"
        assert response.json()["message"] == "Request body must be valid JSON"

    def test_whitespace_body_counts_as_no_input(self, client):
        response = client.post("/rpc/healthCheck", content="  \n", headers={"content-type": "application/json"})

        assert response.status_code == 200
        assert response.json()["data"] == "OK"

    def test_amount_below_one_cent_is_rejected(self, client, food):
        response = client.post("/rpc/transaction.create", json={
            "cardLastFour": "1234",
            "amount": 0.001,
            "categoryId": food.id,
        })

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Amount must be greater than 0",
            "code": "BAD_REQUEST",
        }

    def test_transactions_use_iso_dates_over_http(self, client, food):
        client.post("/rpc/transaction.create", json={
            "cardLastFour": "1234",
            "amount": 10,
            "categoryId": food.id,
            "transactionDate": "2024-03-01T10:00:00Z",
        })

        response = client.post("/rpc/transaction.getAll", json={"dateFrom": "2024-03-01T00:00:00Z"})

        rows = response.json()["data"]
        assert len(rows) == 1
        assert rows[0]["transactionDate"].startswith("2024-03-01T10:00:00")
        assert rows[0]["categoryName"] == "Food"

    def test_unexpected_error_is_generic(self, client, services, monkeypatch):
        def explode():
            raise RuntimeError("secret internals")

        monkeypatch.setattr(services.transactions, "get_expense_summary", explode)

        response = client.post("/rpc/transaction.getExpenseSummary")

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Internal server error",
            "code": "INTERNAL_SERVER_ERROR",
        }
