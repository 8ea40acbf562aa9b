# tests/test_reference_api.py
import pytest


@pytest.mark.parametrize("path", ["/api/partners", "/api/third-parties"])
def test_create_list_check(client, path):
    assert client.get(path).json() == []

    for name in ("Zeta", "Acme"):
        response = client.post(path, json={"name": name})
        assert response.status_code == 201
        assert response.json()["name"] == name

    names = [row["name"] for row in client.get(path).json()]
    assert names == ["Acme", "Zeta"]

    assert client.post(f"{path}/check", json={"name": "Acme"}).json() == {"exists": True}
    # exact, case-sensitive match
    assert client.post(f"{path}/check", json={"name": "acme"}).json() == {"exists": False}


def test_duplicate_partner_is_conflict(client):
    assert client.post("/api/partners", json={"name": "Acme"}).status_code == 201
    response = client.post("/api/partners", json={"name": "Acme"})
    assert response.status_code == 409
    assert response.json()["detail"] == "Partner name already exists"


def test_name_is_trimmed(client):
    response = client.post("/api/partners", json={"name": "  Acme  "})
    assert response.json()["name"] == "Acme"
    assert client.post("/api/partners", json={"name": "Acme"}).status_code == 409


def test_collections_are_separate(client):
    client.post("/api/partners", json={"name": "Acme"})
    assert client.post("/api/third-parties", json={"name": "Acme"}).status_code == 201


@pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": "   "}])
def test_blank_name_rejected(client, body):
    response = client.post("/api/third-parties", json=body)
    assert response.status_code == 400
    assert response.json()["detail"] == "Third party name is required"


def test_check_requires_name(client):
    response = client.post("/api/partners/check", json={})
    assert response.status_code == 400
    assert response.json()["detail"] == "Name is required"


def test_check_trims_name(client):
    client.post("/api/partners", json={"name": "Acme"})
    assert client.post("/api/partners/check", json={"name": " Acme "}).json() == {"exists": True}


def test_check_blank_name_after_trim(client):
    response = client.post("/api/partners/check", json={"name": "   "})
    assert response.status_code == 400
    assert response.json()["detail"] == "Name is required"
