BUDGET = {
    "budgetName": "January groceries",
    "totalAmount": 300,
    "startDate": "2024-01-01",
    "endDate": "2024-01-31",
    "category": "Food",
    "paymentMethod": "Card",
}


def test_budget_crud(client, alice):
    created = client.post("/api/budgets", headers=alice.headers, json=BUDGET)
    assert created.status_code == 201
    budget = created.json()
    assert budget["totalAmount"] == 300
    assert budget["startDate"] == "2024-01-01"

    updated = client.put(f"/api/budgets/{budget['id']}", headers=alice.auth, json={"totalAmount": 250.5})
    assert updated.status_code == 200
    assert updated.json()["totalAmount"] == 250.5
    assert updated.json()["budgetName"] == BUDGET["budgetName"]

    listed = client.get("/api/budgets", headers=alice.headers).json()
    assert [b["id"] for b in listed] == [budget["id"]]

    deleted = client.delete(f"/api/budgets/{budget['id']}", headers=alice.auth)
    assert deleted.status_code == 200
    assert deleted.json()["deleted"]["totalAmount"] == 250.5
    assert client.get("/api/budgets", headers=alice.headers).json() == []


def test_budget_amount_must_be_numeric(client, alice):
    response = client.post("/api/budgets", headers=alice.headers, json={**BUDGET, "totalAmount": "lots"})
    assert response.status_code == 400


def test_budget_dates_are_kept_as_strings(client, alice):
    response = client.post(
        "/api/budgets",
        headers=alice.headers,
        json={**BUDGET, "startDate": "01/02/2024", "endDate": "end of month"},
    )

    assert response.status_code == 201
    assert response.json()["startDate"] == "01/02/2024"
    assert response.json()["endDate"] == "end of month"
