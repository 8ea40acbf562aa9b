# tests/test_lookups_api.py
import jwt

from linkbuilder.core.config import JWT_SECRET_KEY


def test_channel_types(client):
    response = client.post("/api/channel-types", json={"name": "Email", "prefix": "eml", "color": "#F2994A"})
    assert response.status_code == 201
    assert response.json()["prefix"] == "EML"

    client.post("/api/channel-types", json={"name": "Display", "prefix": "DSP"})
    rows = client.get("/api/channel-types").json()
    assert [row["name"] for row in rows] == ["Display", "Email"]
    assert rows[0]["color"] == "#219DB8"


def test_duplicate_channel_prefix_is_conflict(client):
    client.post("/api/channel-types", json={"name": "Email", "prefix": "EML"})
    response = client.post("/api/channel-types", json={"name": "Newsletter", "prefix": "eml"})
    assert response.status_code == 409
    assert response.json()["detail"] == "Channel type prefix already exists"


def test_bad_channel_type_is_bad_request(client):
    response = client.post("/api/channel-types", json={"name": "Email", "prefix": "E-1", "color": "red"})
    assert response.status_code == 400
    assert set(response.json()["detail"]) == {"prefix", "color"}


def test_categories(client):
    assert client.post("/api/categories", json={"name": "Seasonal"}).status_code == 201
    assert client.post("/api/categories", json={"name": "Seasonal"}).status_code == 409
    assert [row["name"] for row in client.get("/api/categories").json()] == ["Seasonal"]


def test_form_options(client):
    body = client.get("/api/form-options").json()
    assert body["campaign_types"][0] == "Display Ads"
    assert body["cost_centers"] == ["Engineering", "Marketing", "Operations", "Product", "Sales"]
    assert body["options"]["tactic"][0] == "Acquisition"
    assert body["help"]["base_url"]["title"] == "Base URL"
    assert "Display Ads" in body["campaign_hierarchy"]


def test_field_choices(client):
    response = client.get(
        "/api/form-options/ad_type",
        params={"campaign_type": "Display Ads", "campaign_source": "Facebook"},
    )
    assert response.json() == {"field": "ad_type", "choices": ["Carousel", "Image", "Video"]}

    response = client.get("/api/form-options/sub-ledger", params={"cost_center": "Nowhere"})
    assert response.json()["choices"] == []

    assert client.get("/api/form-options/campaign_notes").status_code == 404


def test_me_requires_token(client):
    assert client.get("/api/auth/me").status_code == 401

    token = jwt.encode({"oid": "abc", "preferred_username": "pat@example.com", "name": "Pat"}, JWT_SECRET_KEY, algorithm="HS256")
    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.json() == {
        "user_id": "abc", "email": "pat@example.com", "name": "Pat", "is_admin": False
    }


def test_bad_token(client):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer nonsense"})
    assert response.status_code == 401


def test_healthz(client):
    body = client.get("/healthz").json()
    assert body["status"] == "ok"
    assert body["database_ok"] is True
