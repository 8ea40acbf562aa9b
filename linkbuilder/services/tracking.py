# linkbuilder/services/tracking.py
"""Tracking code sequence and tracking URL construction"""
import logging
from typing import Optional
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from sqlalchemy.orm import Session

from linkbuilder.core.config import DEFAULT_TRACKING_PREFIX, TRACKING_CODE_DIGITS, TRACKING_PARAM
from linkbuilder.models.placement import TrackingCounter
from linkbuilder.models.reference import ChannelType

log = logging.getLogger("linkbuilder.tracking")


def next_tracking_code(db: Session, channel_type: Optional[ChannelType] = None) -> str:
    """
    Reserve the next code for a channel, e.g. ``MP00001``.

    The counter row is created on first use. The caller commits.
    """
    channel_type_id = channel_type.id if channel_type else None
    query = db.query(TrackingCounter)
    if channel_type_id is None:
        query = query.filter(TrackingCounter.channel_type_id.is_(None))
    else:
        query = query.filter(TrackingCounter.channel_type_id == channel_type_id)

    counter = query.with_for_update().first()
    if counter is None:
        counter = TrackingCounter(channel_type_id=channel_type_id, current_count=0)
        db.add(counter)

    counter.current_count = (counter.current_count or 0) + 1
    db.flush()

    prefix = channel_type.prefix if channel_type else DEFAULT_TRACKING_PREFIX
    code = f"{prefix}{counter.current_count:0{TRACKING_CODE_DIGITS}d}"
    log.debug(f"Reserved tracking code {code}")
    return code


def build_tracking_url(base_url: str, tracking_code: str, anchor_tag: Optional[str] = None) -> str:
    """
    Add the tracking parameter to base_url, keeping its existing query.
    A set anchor tag replaces the URL fragment.
    """
    scheme, netloc, path, query, fragment = urlsplit(base_url.strip())
    params = [(key, value) for key, value in parse_qsl(query, keep_blank_values=True) if key != TRACKING_PARAM]
    params.append((TRACKING_PARAM, tracking_code))

    anchor = (anchor_tag or "").strip().lstrip("#")
    if anchor:
        fragment = anchor
    return urlunsplit((scheme, netloc, path or "/", urlencode(params), fragment))
