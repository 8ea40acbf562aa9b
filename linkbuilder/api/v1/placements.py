# linkbuilder/api/v1/placements.py
import logging
from fastapi import APIRouter, Body, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import Any, Dict, List, Optional

from linkbuilder.db.session import get_db
from linkbuilder.api.deps import get_user_id
from linkbuilder.core.exceptions import NotFound, ValidationError
from linkbuilder.models.placement import PlacementStatus
from linkbuilder.schemas.placement import PlacementResponse, PlacementUpdate
from linkbuilder.services import get_placement_service, PlacementService

router = APIRouter()
log = logging.getLogger("linkbuilder.placements")


@router.get("", response_model=List[PlacementResponse])
def list_placements(
    status: Optional[PlacementStatus] = None,
    skip: int = 0,
    limit: int = Query(100, le=500),
    db: Session = Depends(get_db),
    service: PlacementService = Depends(get_placement_service)
):
    """List placements, newest first"""
    return service.list(db, status=status, skip=skip, limit=limit)


@router.get("/{placement_id}", response_model=PlacementResponse)
def get_placement(
    placement_id: str,
    db: Session = Depends(get_db),
    service: PlacementService = Depends(get_placement_service)
):
    """Get placement"""
    try:
        return service.get(db, placement_id)
    except NotFound:
        raise HTTPException(404, "Placement not found")


@router.post("", response_model=PlacementResponse, status_code=201)
def create_placement(
    payload: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_user_id),
    service: PlacementService = Depends(get_placement_service)
):
    """
    Create a placement from a submitted campaign draft.

    Accepts the form's camelCase field names or snake_case. The response
    carries the generated tracking code and URL. Invalid drafts return 400
    with ``{"detail": {"<field>": "<message>"}}``.
    """
    try:
        return service.create(db, payload, user_id=user_id)
    except ValidationError as e:
        log.info(f"Placement rejected: {sorted(e.errors)}")
        raise HTTPException(400, e.errors)


@router.patch("/{placement_id}", response_model=PlacementResponse)
def update_placement(
    placement_id: str,
    data: PlacementUpdate,
    db: Session = Depends(get_db),
    service: PlacementService = Depends(get_placement_service)
):
    """Update placement fields or status"""
    try:
        return service.update(db, placement_id, data)
    except NotFound:
        raise HTTPException(404, "Placement not found")
    except ValidationError as e:
        raise HTTPException(400, e.errors)
