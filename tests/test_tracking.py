# tests/test_tracking.py
from linkbuilder.models.reference import ChannelType
from linkbuilder.services.tracking import build_tracking_url, next_tracking_code


def test_build_tracking_url():
    assert build_tracking_url("https://example.com", "MP00001") == "https://example.com/?cid=MP00001"
    assert build_tracking_url("https://example.com/a?x=1#old", "MP00002") == "https://example.com/a?x=1&cid=MP00002#old"
    assert build_tracking_url("https://example.com/a#old", "MP00003", "new") == "https://example.com/a?cid=MP00003#new"


def test_existing_tracking_param_replaced():
    assert build_tracking_url("https://example.com/?cid=OLD&x=1", "MP00004") == "https://example.com/?x=1&cid=MP00004"


def test_counters_are_per_channel(db):
    channel = ChannelType(name="Video", prefix="VID")
    db.add(channel)
    db.flush()

    assert next_tracking_code(db) == "MP00001"
    assert next_tracking_code(db, channel) == "VID00001"
    assert next_tracking_code(db) == "MP00002"
    assert next_tracking_code(db, channel) == "VID00002"
    db.commit()
