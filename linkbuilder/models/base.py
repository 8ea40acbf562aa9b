# linkbuilder/models/base.py
"""
Base model with common fields for all database models.
Provides consistent structure for all tables.
"""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def new_id() -> str:
    """Opaque server-assigned identifier"""
    return str(uuid.uuid4())


class BaseModel(Base):
    """
    Abstract base model with common fields.

    Provides:
    - id: Primary key (uuid string)
    - created_at: Auto timestamp on creation
    - updated_at: Auto timestamp on updates
    """
    __abstract__ = True

    id = Column(String(36), primary_key=True, index=True, default=new_id)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

