# linkbuilder/api/v1/lookups.py
"""Channel types and categories"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from linkbuilder.db.session import get_db
from linkbuilder.core.exceptions import DuplicateName
from linkbuilder.schemas.reference import ChannelTypeCreate, ChannelTypeResponse, CategoryCreate, CategoryResponse
from linkbuilder.services import get_channel_type_service, get_category_service, ChannelTypeService, CategoryService

channel_types_router = APIRouter()
categories_router = APIRouter()


@channel_types_router.get("", response_model=List[ChannelTypeResponse])
def list_channel_types(
    db: Session = Depends(get_db),
    service: ChannelTypeService = Depends(get_channel_type_service)
):
    """List channel types"""
    return service.list(db)


@channel_types_router.post("", response_model=ChannelTypeResponse, status_code=201)
def create_channel_type(
    data: ChannelTypeCreate,
    db: Session = Depends(get_db),
    service: ChannelTypeService = Depends(get_channel_type_service)
):
    """Create channel type; name and prefix must be unique"""
    try:
        return service.create(db, data)
    except DuplicateName as e:
        raise HTTPException(409, str(e))


@categories_router.get("", response_model=List[CategoryResponse])
def list_categories(
    db: Session = Depends(get_db),
    service: CategoryService = Depends(get_category_service)
):
    """List categories"""
    return service.list(db)


@categories_router.post("", response_model=CategoryResponse, status_code=201)
def create_category(
    data: CategoryCreate,
    db: Session = Depends(get_db),
    service: CategoryService = Depends(get_category_service)
):
    """Create category"""
    try:
        return service.create(db, data)
    except DuplicateName as e:
        raise HTTPException(409, str(e))
