MILK = {
    "name": "  Milk  ",
    "quantity": 2,
    "category": "Dairy",
    "usageQuantity": 0.5,
    "restockQuantity": 1,
    "unit": "liter",
}


def test_create_food_trims_name(client, alice):
    response = client.post("/api/food", headers=alice.headers, json=MILK)

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Milk"
    assert data["unit"] == "liter"
    assert data["usageQuantity"] == 0.5


def test_unit_defaults_to_count(client, alice):
    payload = {k: v for k, v in MILK.items() if k != "unit"}

    response = client.post("/api/food", headers=alice.headers, json=payload)

    assert response.json()["unit"] == "count"


def test_unknown_unit_is_rejected(client, alice):
    response = client.post("/api/food", headers=alice.headers, json={**MILK, "unit": "cups"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Validation failed"


def test_blank_name_is_rejected(client, alice):
    response = client.post("/api/food", headers=alice.headers, json={**MILK, "name": "   "})
    assert response.status_code == 400


def test_search_food_by_name(client, alice, bob):
    client.post("/api/food", headers=alice.headers, json=MILK)
    client.post("/api/food", headers=alice.headers, json={**MILK, "name": "Oat milk"})
    client.post("/api/food", headers=alice.headers, json={**MILK, "name": "Bread"})
    client.post("/api/food", headers=bob.headers, json=MILK)

    response = client.get("/api/food/search", params={"q": "MILK"}, headers=alice.headers)

    assert response.status_code == 200
    assert sorted(f["name"] for f in response.json()) == ["Milk", "Oat milk"]


def test_search_treats_wildcards_literally(client, alice):
    client.post("/api/food", headers=alice.headers, json=MILK)
    client.post("/api/food", headers=alice.headers, json={**MILK, "name": "100% juice"})
    client.post("/api/food", headers=alice.headers, json={**MILK, "name": "Rice_flour"})

    def names(q):
        response = client.get("/api/food/search", params={"q": q}, headers=alice.headers)
        return [f["name"] for f in response.json()]

    assert names("%") == ["100% juice"]
    assert names("_") == ["Rice_flour"]
    assert names("e_f") == ["Rice_flour"]
    assert names("i_") == []


def test_search_requires_query(client, alice):
    response = client.get("/api/food/search", headers=alice.headers)
    assert response.status_code == 400


def test_update_food_unit(client, alice):
    food = client.post("/api/food", headers=alice.headers, json=MILK).json()

    response = client.put(f"/api/food/{food['id']}", headers=alice.auth, json={"unit": "ml", "quantity": 500})

    assert response.status_code == 200
    assert response.json()["unit"] == "ml"
    assert response.json()["quantity"] == 500
