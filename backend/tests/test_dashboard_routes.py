def test_empty_dashboard(client, alice):
    response = client.get("/api/dashboard", headers=alice.auth)

    assert response.status_code == 200
    assert response.json() == {
        "products": {"count": 0, "totalQuantity": 0.0, "totalValue": 0.0},
        "foods": {"count": 0, "lowStock": 0},
        "shoppingList": {"count": 0},
        "budgets": {"count": 0, "totalAmount": 0.0},
        "categories": {"count": 0, "active": 0},
        "waste": {"count": 0, "byCategory": {}, "byReason": {}},
    }


def test_dashboard_summarizes_only_own_records(client, alice, bob):
    h = alice.headers
    client.post("/api/products", headers=h, json={"name": "Rice", "category": "Grains", "quantity": 2, "price": 3.5})
    client.post("/api/products", headers=h, json={"name": "Oil", "category": "Pantry", "quantity": 1, "price": 7})
    client.post("/api/food", headers=h, json={
        "name": "Milk", "quantity": 1, "category": "Dairy", "usageQuantity": 1, "restockQuantity": 1,
    })
    client.post("/api/food", headers=h, json={
        "name": "Eggs", "quantity": 12, "category": "Dairy", "usageQuantity": 2, "restockQuantity": 4,
    })
    client.post("/api/shoppinList", headers=h, json={"itemName": "Bread"})
    client.post("/api/budgets", headers=h, json={
        "budgetName": "Jan", "totalAmount": 120.25, "startDate": "2024-01-01",
        "endDate": "2024-01-31", "category": "Food", "paymentMethod": "Cash",
    })
    client.post("/api/category", headers=h, json={"name": "Dairy"})
    client.post("/api/category", headers=h, json={"name": "Old", "status": "Inactive"})
    for reason in ("Expired", "Expired", "Moldy"):
        client.post("/api/waste", headers=h, json={
            "itemName": "Cheese", "category": "Dairy", "quantity": 1, "reason": reason, "date": "2024-02-01",
        })

    # Noise from another user
    client.post("/api/products", headers=bob.headers, json={"name": "Tea", "category": "Drinks", "quantity": 9, "price": 1})

    data = client.get("/api/dashboard", headers=alice.auth).json()

    assert data["products"] == {"count": 2, "totalQuantity": 3.0, "totalValue": 14.0}
    assert data["foods"] == {"count": 2, "lowStock": 1}
    assert data["shoppingList"] == {"count": 1}
    assert data["budgets"] == {"count": 1, "totalAmount": 120.25}
    assert data["categories"] == {"count": 2, "active": 1}
    assert data["waste"] == {
        "count": 3,
        "byCategory": {"Dairy": 3},
        "byReason": {"Expired": 2, "Moldy": 1},
    }


def test_dashboard_requires_token(client):
    assert client.get("/api/dashboard").status_code == 401
