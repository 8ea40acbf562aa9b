# linkbuilder/schemas/reference.py
import enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional
from datetime import datetime


class ReferenceKind(str, enum.Enum):
    """Named lookup collections creatable from the campaign form"""
    PARTNER = "partner"
    THIRD_PARTY = "third_party"

    @property
    def path(self) -> str:
        return "/api/partners" if self is ReferenceKind.PARTNER else "/api/third-parties"

    @property
    def label(self) -> str:
        return "Partner" if self is ReferenceKind.PARTNER else "Third party"


class ReferenceCreate(BaseModel):
    """Create partner / third party. Blank names are rejected by the service."""
    name: Optional[str] = None
    description: Optional[str] = None


class ReferenceCheck(BaseModel):
    name: Optional[str] = None


class ReferenceCheckResponse(BaseModel):
    exists: bool


class ReferenceResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ChannelTypeCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    prefix: str = Field(..., min_length=1, max_length=10, description="Tracking code prefix")
    color: Optional[str] = Field("#219DB8", pattern=r"^#[0-9A-Fa-f]{6}$")
    description: Optional[str] = None

    @field_validator("name", "prefix")
    @classmethod
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("prefix")
    @classmethod
    def upper_prefix(cls, v):
        if not v.isalnum():
            raise ValueError("prefix must be letters and digits only")
        return v.upper()


class ChannelTypeResponse(BaseModel):
    id: str
    name: str
    prefix: str
    color: Optional[str] = None
    description: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def not_blank(cls, v):
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()


class CategoryResponse(BaseModel):
    id: str
    name: str
    description: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
