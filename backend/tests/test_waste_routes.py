import io
from pathlib import Path

from homestock.core.config import settings
from homestock.models import WasteRecord


WASTE = {
    "itemName": "Yogurt",
    "category": "Dairy",
    "quantity": 2,
    "unit": "count",
    "reason": "Expired",
    "date": "2024-02-14",
}


def test_create_waste_from_json(client, alice):
    response = client.post("/api/waste", headers=alice.headers, json={**WASTE, "imageUrl": "https://example.com/y.png"})

    assert response.status_code == 201
    data = response.json()
    assert data["itemName"] == "Yogurt"
    assert data["category"] == "Dairy"
    assert data["reason"] == "Expired"
    assert data["imageUrl"] == "https://example.com/y.png"
    assert data["userId"] == str(alice.id)


def test_multi_word_reason(client, alice):
    response = client.post("/api/waste", headers=alice.headers, json={**WASTE, "reason": "Freezer Burn"})

    assert response.status_code == 201
    assert response.json()["reason"] == "Freezer Burn"


def test_unknown_category_or_reason_is_rejected(client, db, alice):
    assert client.post("/api/waste", headers=alice.headers, json={**WASTE, "category": "Candy"}).status_code == 400
    assert client.post("/api/waste", headers=alice.headers, json={**WASTE, "reason": "Bored"}).status_code == 400
    assert db.query(WasteRecord).count() == 0


def test_missing_fields_report_errors(client, alice):
    response = client.post("/api/waste", headers=alice.headers, json={"itemName": "Yogurt"})

    assert response.status_code == 400
    body = response.json()
    assert body["detail"] == "Validation failed"
    assert {e["loc"][0] for e in body["errors"]} >= {"category", "quantity", "reason", "date"}


def test_malformed_json_body(client, alice):
    response = client.post(
        "/api/waste",
        headers={**alice.headers, "content-type": "application/json"},
        content=b"{not json",
    )
    assert response.status_code == 400


def test_create_waste_with_photo(client, alice):
    response = client.post(
        "/api/waste",
        headers=alice.headers,
        data={k: str(v) for k, v in WASTE.items()},
        files={"photo": ("yogurt.JPG", io.BytesIO(b"\xff\xd8\xff fake jpeg"), "image/jpeg")},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["quantity"] == 2
    assert data["imageUrl"].startswith("/images/")
    assert data["imageUrl"].endswith(".jpg")

    stored = Path(settings.UPLOAD_DIR) / data["imageUrl"].rsplit("/", 1)[1]
    assert stored.read_bytes() == b"\xff\xd8\xff fake jpeg"

    served = client.get(data["imageUrl"])
    assert served.status_code == 200
    assert served.content == b"\xff\xd8\xff fake jpeg"


def test_create_waste_form_without_photo(client, alice):
    response = client.post(
        "/api/waste",
        headers=alice.headers,
        data={**{k: str(v) for k, v in WASTE.items()}, "imageUrl": "/images/old.png"},
    )

    assert response.status_code == 201
    assert response.json()["imageUrl"] == "/images/old.png"


def test_photo_with_bad_extension(client, db, alice):
    response = client.post(
        "/api/waste",
        headers=alice.headers,
        data={k: str(v) for k, v in WASTE.items()},
        files={"photo": ("notes.txt", io.BytesIO(b"hello"), "text/plain")},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Error uploading file"
    assert db.query(WasteRecord).count() == 0


def test_invalid_form_fields_do_not_store_photo(client, alice):
    before = set(Path(settings.UPLOAD_DIR).iterdir()) if Path(settings.UPLOAD_DIR).exists() else set()

    response = client.post(
        "/api/waste",
        headers=alice.headers,
        data={"itemName": "Yogurt", "quantity": "two"},
        files={"photo": ("y.png", io.BytesIO(b"png"), "image/png")},
    )

    assert response.status_code == 400
    after = set(Path(settings.UPLOAD_DIR).iterdir()) if Path(settings.UPLOAD_DIR).exists() else set()
    assert after == before


def test_update_waste_replaces_photo(client, alice):
    waste = client.post("/api/waste", headers=alice.headers, json=WASTE).json()
    assert waste["imageUrl"] is None

    response = client.put(
        f"/api/waste/{waste['id']}",
        headers=alice.auth,
        data={"reason": "Moldy"},
        files={"photo": ("new.png", io.BytesIO(b"png"), "image/png")},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["reason"] == "Moldy"
    assert data["imageUrl"].endswith(".png")
    assert data["itemName"] == "Yogurt"


def test_update_waste_json(client, alice):
    waste = client.post("/api/waste", headers=alice.headers, json=WASTE).json()

    response = client.put(f"/api/waste/{waste['id']}", headers=alice.auth, json={"quantity": 0.5, "unit": "kg"})

    assert response.status_code == 200
    assert response.json()["quantity"] == 0.5
    assert response.json()["unit"] == "kg"
