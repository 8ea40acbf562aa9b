# linkbuilder/db/base.py
"""Import all models for Alembic"""
from linkbuilder.models.base import Base

from linkbuilder.models.reference import Partner, ThirdParty, ChannelType, Category
from linkbuilder.models.placement import MarketingPlacement, TrackingCounter

__all__ = ["Base"]
