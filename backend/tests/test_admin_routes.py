import pytest

from homestock.models import ErrorLog, Product, User


@pytest.mark.parametrize("method, path", [
    ("get", "/api/auth/admin/users"),
    ("get", "/api/auth/admin/error-logs"),
])
def test_admin_reads_forbidden_for_users(client, alice, method, path):
    response = getattr(client, method)(path, headers=alice.auth)

    assert response.status_code == 403
    assert response.json()["detail"] == "Admin access required"


def test_admin_routes_require_token(client):
    assert client.get("/api/auth/admin/users").status_code == 401


def test_list_users(client, admin, alice, bob):
    response = client.get("/api/auth/admin/users", headers=admin.auth)

    assert response.status_code == 200
    users = response.json()
    assert {u["email"] for u in users} == {admin.email, alice.email, bob.email}
    assert all("passwordHash" not in u for u in users)


def test_non_admin_update_is_rejected_without_mutation(client, db, alice, bob):
    response = client.patch(
        f"/api/auth/admin/users/{bob.id}",
        headers=alice.auth,
        json={"role": "admin"},
    )

    assert response.status_code == 403
    assert db.get(User, bob.id).role.value == "user"


def test_admin_promotes_user(client, admin, alice):
    response = client.patch(
        f"/api/auth/admin/users/{alice.id}",
        headers=admin.auth,
        json={"role": "admin", "username": "alice-admin"},
    )

    assert response.status_code == 200
    assert response.json()["role"] == "admin"
    assert response.json()["username"] == "alice-admin"

    # The promoted user's existing token now passes the admin gate
    assert client.get("/api/auth/admin/users", headers=alice.auth).status_code == 200


def test_admin_update_rejects_fields_outside_allow_list(client, db, admin, alice):
    response = client.patch(
        f"/api/auth/admin/users/{alice.id}",
        headers=admin.auth,
        json={"passwordHash": "x", "username": "changed"},
    )

    assert response.status_code == 400
    assert db.get(User, alice.id).username == "alice"


def test_admin_update_unknown_user(client, admin):
    response = client.patch(
        "/api/auth/admin/users/00000000-0000-0000-0000-000000000000",
        headers=admin.auth,
        json={"username": "nobody"},
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "User not found"


def test_admin_delete_user_keeps_resources(client, db, admin, alice):
    client.post("/api/products", headers=alice.headers, json={
        "name": "Rice", "category": "Grains", "quantity": 2, "price": 3.5,
    })

    response = client.delete(f"/api/auth/admin/users/{alice.id}", headers=admin.auth)

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "User deleted successfully"
    assert body["deleted"]["email"] == alice.email
    assert db.get(User, alice.id) is None
    assert db.query(Product).filter(Product.user_id == alice.id).count() == 1

    # Deleted user's token no longer authenticates
    assert client.get("/api/auth/me", headers=alice.auth).status_code == 401


def test_admin_delete_missing_user(client, admin):
    response = client.delete(
        "/api/auth/admin/users/00000000-0000-0000-0000-000000000000",
        headers=admin.auth,
    )
    assert response.status_code == 404


def test_error_logs_lists_failed_logins(client, db, admin, alice, stored_errors):
    client.post("/api/auth/login", json={"email": alice.email, "password": "nope-nope"})

    response = client.get("/api/auth/admin/error-logs", headers=admin.auth)

    assert response.status_code == 200
    logs = response.json()
    assert len(logs) == 1
    assert logs[0]["errorType"] == "LoginFailedError"
    assert logs[0]["severity"] == "warning"
    assert logs[0]["requestPath"] == "/api/auth/login"
    assert db.query(ErrorLog).count() == 1


def test_error_logs_severity_filter(client, admin, alice, stored_errors):
    client.post("/api/auth/login", json={"email": alice.email, "password": "nope-nope"})

    response = client.get("/api/auth/admin/error-logs?severity=critical", headers=admin.auth)

    assert response.status_code == 200
    assert response.json() == []
