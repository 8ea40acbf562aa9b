# linkbuilder/services/placement_service.py
"""
Marketing placement service - validates drafts, assigns tracking codes and
persists placements.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import desc
from sqlalchemy.orm import Session

from linkbuilder.core.exceptions import NotFound, ValidationError
from linkbuilder.form.submission import collect_errors, validate_draft
from linkbuilder.models.placement import MarketingPlacement, PlacementStatus
from linkbuilder.models.reference import ChannelType, Category
from linkbuilder.schemas.placement import CampaignDraft, PlacementCreate, PlacementUpdate, ALIASES
from linkbuilder.services.tracking import build_tracking_url, next_tracking_code

log = logging.getLogger("linkbuilder.placement_service")

DRAFT_FIELDS = list(CampaignDraft.model_fields)


def _pydantic_errors(exc: PydanticValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for error in exc.errors():
        if error["loc"]:
            name = str(error["loc"][0])
            errors.setdefault(ALIASES.get(name, name), error["msg"])
    return errors


def _row_values(record: CampaignDraft) -> Dict[str, Any]:
    # empty optional text is stored as NULL
    return {key: (None if value == "" else value) for key, value in record.model_dump().items()}


class PlacementService:
    """Service for marketing placements"""

    # ────────────────────────────────────────────
    # Read
    # ────────────────────────────────────────────

    def list(
        self,
        db: Session,
        status: Optional[PlacementStatus] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[MarketingPlacement]:
        query = db.query(MarketingPlacement)
        if status is not None:
            query = query.filter(MarketingPlacement.status == status.value)
        return query.order_by(desc(MarketingPlacement.created_at)).offset(skip).limit(limit).all()

    def get(self, db: Session, placement_id: str) -> MarketingPlacement:
        placement = db.query(MarketingPlacement).filter(MarketingPlacement.id == placement_id).first()
        if not placement:
            raise NotFound(f"Placement {placement_id} not found")
        return placement

    # ────────────────────────────────────────────
    # Write
    # ────────────────────────────────────────────

    def create(self, db: Session, payload: Mapping[str, Any], user_id: Optional[str] = None) -> MarketingPlacement:
        """
        Validate a submitted draft and persist it with a fresh tracking code.

        Raises:
            ValidationError: field-keyed messages for every rejected field
        """
        errors = collect_errors(payload)
        try:
            data = PlacementCreate.model_validate(dict(payload))
        except PydanticValidationError as exc:
            for name, message in _pydantic_errors(exc).items():
                errors.setdefault(name, message)
            raise ValidationError(errors)
        if errors:
            raise ValidationError(errors)

        channel_type = self._lookup_channel_type(db, data.channel_type_id)
        self._check_category(db, data.category_id)

        record = CampaignDraft.model_validate(data.model_dump(include=set(DRAFT_FIELDS)))
        tracking_code = next_tracking_code(db, channel_type)

        placement = MarketingPlacement(
            **_row_values(record),
            title=data.title,
            description=data.description,
            channel_type_id=data.channel_type_id,
            category_id=data.category_id,
            status=data.status.value,
            user_id=user_id,
            tracking_code=tracking_code,
            full_tracking_url=build_tracking_url(record.base_url, tracking_code, record.anchor_tag),
        )
        db.add(placement)
        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(placement)

        log.info(f"💾 Placement {placement.tracking_code} saved ({record.campaign_type} / {record.campaign_source})")
        return placement

    def update(self, db: Session, placement_id: str, data: PlacementUpdate) -> MarketingPlacement:
        """Merge changes onto the stored draft, re-validate, recompute the URL"""
        placement = self.get(db, placement_id)
        changes = data.model_dump(exclude_unset=True)

        merged = {name: getattr(placement, name) for name in DRAFT_FIELDS}
        merged.update({name: value for name, value in changes.items() if name in DRAFT_FIELDS})
        record = validate_draft(merged)

        if "channel_type_id" in changes:
            self._lookup_channel_type(db, changes["channel_type_id"])
        if "category_id" in changes:
            self._check_category(db, changes["category_id"])

        for name, value in _row_values(record).items():
            setattr(placement, name, value)
        for name in ("title", "description", "channel_type_id", "category_id"):
            if name in changes:
                setattr(placement, name, changes[name])
        if changes.get("status") is not None:
            placement.status = PlacementStatus(changes["status"]).value

        placement.full_tracking_url = build_tracking_url(record.base_url, placement.tracking_code, record.anchor_tag)
        try:
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(placement)

        log.info(f"✏️ Placement {placement.tracking_code} updated: {sorted(changes)}")
        return placement

    # ────────────────────────────────────────────
    # Helpers
    # ────────────────────────────────────────────

    def _lookup_channel_type(self, db: Session, channel_type_id: Optional[str]) -> Optional[ChannelType]:
        if not channel_type_id:
            return None
        channel_type = db.query(ChannelType).filter(ChannelType.id == channel_type_id).first()
        if not channel_type:
            raise ValidationError({"channel_type_id": "Unknown channel type"})
        return channel_type

    def _check_category(self, db: Session, category_id: Optional[str]) -> None:
        if category_id and not db.query(Category).filter(Category.id == category_id).first():
            raise ValidationError({"category_id": "Unknown category"})
