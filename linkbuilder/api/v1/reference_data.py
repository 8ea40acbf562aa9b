# linkbuilder/api/v1/reference_data.py
"""Partner and third-party endpoints; both collections share one router shape"""
import logging
from typing import Callable, List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from linkbuilder.db.session import get_db
from linkbuilder.core.exceptions import DuplicateName, InvalidInput
from linkbuilder.schemas.reference import (
    ReferenceKind, ReferenceCreate, ReferenceCheck, ReferenceCheckResponse, ReferenceResponse
)
from linkbuilder.services import get_partner_service, get_third_party_service, ReferenceService

log = logging.getLogger("linkbuilder.reference_data")


def build_router(kind: ReferenceKind, get_service: Callable[[], ReferenceService]) -> APIRouter:
    router = APIRouter()
    label = kind.label
    plural = "partners" if kind is ReferenceKind.PARTNER else "third parties"

    @router.get("", response_model=List[ReferenceResponse])
    def list_entities(
        db: Session = Depends(get_db),
        service: ReferenceService = Depends(get_service)
    ):
        """List ordered by name"""
        try:
            return service.list(db)
        except SQLAlchemyError as e:
            log.error(f"❌ Error fetching {plural}: {e}")
            raise HTTPException(500, f"Failed to fetch {plural}")

    @router.post("", response_model=ReferenceResponse, status_code=201)
    def create_entity(
        data: ReferenceCreate,
        db: Session = Depends(get_db),
        service: ReferenceService = Depends(get_service)
    ):
        """Create; 409 if the exact name exists"""
        try:
            return service.create(db, data.name, data.description)
        except DuplicateName as e:
            raise HTTPException(409, str(e))
        except InvalidInput as e:
            raise HTTPException(400, str(e))
        except SQLAlchemyError as e:
            db.rollback()
            log.error(f"❌ Error creating {label.lower()}: {e}")
            raise HTTPException(500, f"Failed to create {label.lower()}")

    @router.post("/check", response_model=ReferenceCheckResponse)
    def check_entity(
        data: ReferenceCheck,
        db: Session = Depends(get_db),
        service: ReferenceService = Depends(get_service)
    ):
        """Exact-match existence check"""
        name = (data.name or "").strip()
        if not name:
            raise HTTPException(400, "Name is required")
        try:
            return ReferenceCheckResponse(exists=service.exists(db, name))
        except SQLAlchemyError as e:
            log.error(f"❌ Error checking {label.lower()}: {e}")
            raise HTTPException(500, f"Failed to check {label.lower()}")

    return router


partners_router = build_router(ReferenceKind.PARTNER, get_partner_service)
third_parties_router = build_router(ReferenceKind.THIRD_PARTY, get_third_party_service)
