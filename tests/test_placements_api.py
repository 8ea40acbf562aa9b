# tests/test_placements_api.py
import jwt

from linkbuilder.core.config import JWT_SECRET_KEY
from linkbuilder.schemas.placement import SUB_LEDGER_REQUIRED


def test_create_assigns_sequential_codes(client, valid_draft):
    first = client.post("/api/placements", json=valid_draft)
    assert first.status_code == 201
    body = first.json()
    assert body["tracking_code"] == "MP00001"
    assert body["full_tracking_url"] == "https://example.com/?cid=MP00001"
    assert body["status"] == "draft"

    second = client.post("/api/placements", json=valid_draft)
    assert second.json()["tracking_code"] == "MP00002"


def test_invalid_draft_returns_field_map(client, valid_draft):
    draft = dict(valid_draft, costCenter="Engineering", subLedger="", brand1="")
    response = client.post("/api/placements", json=draft)
    assert response.status_code == 400
    assert response.json()["detail"] == {
        "brand1": "Brand 1 is required",
        "sub_ledger": SUB_LEDGER_REQUIRED,
    }
    assert client.get("/api/placements").json() == []


def test_channel_prefix_and_anchor(client, valid_draft):
    channel = client.post("/api/channel-types", json={"name": "Display", "prefix": "dsp"}).json()
    draft = dict(valid_draft, channelTypeId=channel["id"], baseUrl="https://example.com/shop?ref=x", anchorTag="#offers")
    body = client.post("/api/placements", json=draft).json()
    assert body["tracking_code"] == "DSP00001"
    assert body["full_tracking_url"] == "https://example.com/shop?ref=x&cid=DSP00001#offers"
    assert body["channel_type_id"] == channel["id"]


def test_unknown_channel_type(client, valid_draft):
    response = client.post("/api/placements", json=dict(valid_draft, channelTypeId="missing"))
    assert response.status_code == 400
    assert response.json()["detail"] == {"channel_type_id": "Unknown channel type"}


def test_get_and_list(client, valid_draft):
    created = client.post("/api/placements", json=valid_draft).json()
    assert client.get(f"/api/placements/{created['id']}").json()["tracking_code"] == "MP00001"
    assert [row["id"] for row in client.get("/api/placements").json()] == [created["id"]]
    assert client.get("/api/placements?status=active").json() == []
    assert client.get("/api/placements/nope").status_code == 404


def test_update_revalidates(client, valid_draft):
    created = client.post("/api/placements", json=valid_draft).json()
    path = f"/api/placements/{created['id']}"

    response = client.patch(path, json={"status": "active", "anchorTag": "top"})
    assert response.status_code == 200
    assert response.json()["status"] == "active"
    assert response.json()["full_tracking_url"] == "https://example.com/?cid=MP00001#top"

    response = client.patch(path, json={"campaignType": "Email Campaign"})
    assert response.status_code == 400
    assert "campaign_source" in response.json()["detail"]


def test_creator_recorded_from_token(client, valid_draft):
    token = jwt.encode({"sub": "user-7", "email": "a@example.com"}, JWT_SECRET_KEY, algorithm="HS256")
    body = client.post(
        "/api/placements", json=valid_draft, headers={"Authorization": f"Bearer {token}"}
    ).json()
    assert body["user_id"] == "user-7"
