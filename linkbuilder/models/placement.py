# linkbuilder/models/placement.py
"""
Marketing placement models.
A placement is a persisted campaign tracking record.
"""
import enum
from datetime import datetime
from sqlalchemy import Column, String, Text, Boolean, Date, DateTime, Integer, ForeignKey

from linkbuilder.models.base import BaseModel, Base, new_id


class PlacementStatus(str, enum.Enum):
    """Lifecycle of a placement"""
    DRAFT = "draft"
    ACTIVE = "active"
    PAUSED = "paused"
    ARCHIVED = "archived"


class MarketingPlacement(BaseModel):
    """Campaign metadata plus its generated tracking code and URL"""
    __tablename__ = "marketing_placements"

    # Basic campaign info
    title = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    base_url = Column(String(2048), nullable=False)
    anchor_tag = Column(String(255), nullable=True)

    # Campaign details
    campaign_type = Column(String(100), nullable=True)
    campaign_source = Column(String(100), nullable=True)
    ad_type = Column(String(100), nullable=True)
    ad_type_detail = Column(String(100), nullable=True)
    targeting = Column(Boolean, default=False)

    # Brand information
    brand1 = Column(String(100), nullable=True)
    brand2 = Column(String(100), nullable=True)
    brand3 = Column(String(100), nullable=True)
    product_category = Column(String(100), nullable=True)
    product_brand = Column(String(100), nullable=True)

    # Campaign management
    campaign_owner = Column(String(255), nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    campaign_notes = Column(Text, nullable=True)

    # Financial & organizational
    project_reference_number = Column(String(50), nullable=True)
    budget = Column(String(100), nullable=True)
    industry = Column(String(100), nullable=True)
    tactic = Column(String(100), nullable=True)
    cost_center = Column(String(100), nullable=True)
    sub_ledger = Column(String(100), nullable=True)

    # Partnership info
    partnering = Column(Boolean, default=False)
    partner_name = Column(String(255), nullable=True)
    third_party = Column(Boolean, default=False)
    third_party_name = Column(String(255), nullable=True)

    # System fields
    channel_type_id = Column(String(36), ForeignKey("channel_types.id"), nullable=True)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=True)
    tracking_code = Column(String(50), unique=True, index=True, nullable=False)
    full_tracking_url = Column(Text, nullable=True)
    status = Column(String(20), default=PlacementStatus.DRAFT.value, nullable=False)
    user_id = Column(String(100), nullable=True)  # subject claim of the creator's token

    def __repr__(self):
        return f"<MarketingPlacement {self.tracking_code}>"


class TrackingCounter(Base):
    """Per-channel sequence for tracking codes; NULL channel is the shared counter"""
    __tablename__ = "tracking_counter"

    id = Column(String(36), primary_key=True, default=new_id)
    channel_type_id = Column(String(36), ForeignKey("channel_types.id"), unique=True, nullable=True)
    current_count = Column(Integer, default=0, nullable=False)
    last_updated = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
