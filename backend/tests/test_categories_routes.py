def create(client, account, name, status="Active"):
    return client.post(
        "/api/category",
        headers=account.headers,
        json={"name": name, "description": f"{name} items", "status": status},
    ).json()


def test_status_defaults_to_active(client, alice):
    response = client.post("/api/category", headers=alice.headers, json={"name": "Dairy"})

    assert response.status_code == 201
    assert response.json()["status"] == "Active"
    assert response.json()["description"] is None


def test_unknown_status_is_rejected(client, alice):
    response = client.post("/api/category", headers=alice.headers, json={"name": "Dairy", "status": "Archived"})
    assert response.status_code == 400


def test_active_categories(client, alice, bob):
    create(client, alice, "Dairy")
    create(client, alice, "Frozen", status="Inactive")
    create(client, bob, "Bakery")

    response = client.get("/api/category/active", headers=alice.headers)

    assert response.status_code == 200
    assert [c["name"] for c in response.json()] == ["Dairy"]


def test_search_categories(client, alice):
    create(client, alice, "Dairy")
    create(client, alice, "Dried fruit")
    create(client, alice, "Meat")

    response = client.get("/api/category/search", params={"q": "dr"}, headers=alice.headers)

    assert {c["name"] for c in response.json()} == {"Dried fruit"}

    response = client.get("/api/category/search", params={"q": "D"}, headers=alice.headers)

    assert {c["name"] for c in response.json()} == {"Dairy", "Dried fruit"}


def test_deactivate_category(client, alice):
    category = create(client, alice, "Snacks")

    response = client.put(f"/api/category/{category['id']}", headers=alice.auth, json={"status": "Inactive"})

    assert response.status_code == 200
    assert response.json()["status"] == "Inactive"
    assert client.get("/api/category/active", headers=alice.headers).json() == []


def test_renaming_category_leaves_products_untouched(client, alice):
    category = create(client, alice, "Grains")
    product = client.post("/api/products", headers=alice.headers, json={
        "name": "Rice", "category": "Grains", "quantity": 1, "price": 2,
    }).json()

    client.put(f"/api/category/{category['id']}", headers=alice.auth, json={"name": "Cereals"})

    assert client.get(f"/api/products/{product['id']}", headers=alice.auth).json()["category"] == "Grains"
