# linkbuilder/models/reference.py
"""Lookup tables the campaign form picks from"""
from sqlalchemy import Column, String, Text
from linkbuilder.models.base import BaseModel


class Partner(BaseModel):
    """Partner companies for co-marketing placements"""
    __tablename__ = "partners"

    name = Column(String(255), unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Partner {self.name}>"


class ThirdParty(BaseModel):
    """Third parties involved in a placement"""
    __tablename__ = "third_parties"

    name = Column(String(255), unique=True, index=True, nullable=False)
    description = Column(Text, nullable=True)

    def __repr__(self):
        return f"<ThirdParty {self.name}>"


class ChannelType(BaseModel):
    """Marketing channel; its prefix starts every tracking code in the channel"""
    __tablename__ = "channel_types"

    name = Column(String(255), unique=True, nullable=False)
    prefix = Column(String(10), unique=True, nullable=False)
    color = Column(String(7), default="#219DB8")
    description = Column(Text, nullable=True)

    def __repr__(self):
        return f"<ChannelType {self.name} ({self.prefix})>"


class Category(BaseModel):
    __tablename__ = "categories"

    name = Column(String(255), unique=True, nullable=False)
    description = Column(Text, nullable=True)

    def __repr__(self):
        return f"<Category {self.name}>"
