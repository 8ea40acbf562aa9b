# linkbuilder/services/reference_service.py
"""
Reference data service - partners, third parties, channel types, categories.
Names are unique with an exact, case-sensitive match.
"""
import logging
from typing import List, Optional, Type, Union

from sqlalchemy import asc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from linkbuilder.core.exceptions import DuplicateName, InvalidInput
from linkbuilder.models.reference import Partner, ThirdParty, ChannelType, Category
from linkbuilder.schemas.reference import ReferenceKind, ChannelTypeCreate, CategoryCreate

log = logging.getLogger("linkbuilder.reference_service")

ReferenceModel = Union[Partner, ThirdParty]

MODELS = {
    ReferenceKind.PARTNER: Partner,
    ReferenceKind.THIRD_PARTY: ThirdParty,
}


class ReferenceService:
    """Partner / third party collections"""

    def __init__(self, kind: ReferenceKind):
        self.kind = ReferenceKind(kind)
        self.model: Type[ReferenceModel] = MODELS[self.kind]

    def list(self, db: Session) -> List[ReferenceModel]:
        return db.query(self.model).order_by(asc(self.model.name)).all()

    def exists(self, db: Session, name: Optional[str]) -> bool:
        """Exact match on the trimmed name, the same rule create applies"""
        name = (name or "").strip()
        if not name:
            return False
        return db.query(self.model.id).filter(self.model.name == name).first() is not None

    def create(self, db: Session, name: Optional[str], description: Optional[str] = None) -> ReferenceModel:
        """
        Insert a new entity after an existence check.

        Raises:
            InvalidInput: name missing or blank
            DuplicateName: name already taken
        """
        name = (name or "").strip()
        if not name:
            raise InvalidInput(f"{self.kind.label} name is required")

        if self.exists(db, name):
            raise DuplicateName(self.kind.value, name, f"{self.kind.label} name already exists")

        entity = self.model(name=name, description=description)
        db.add(entity)
        try:
            db.commit()
        except IntegrityError:
            # lost a race with a concurrent insert of the same name
            db.rollback()
            raise DuplicateName(self.kind.value, name, f"{self.kind.label} name already exists")
        db.refresh(entity)

        log.info(f"💾 {self.kind.label} '{name}' saved")
        return entity


class ChannelTypeService:

    def list(self, db: Session) -> List[ChannelType]:
        return db.query(ChannelType).order_by(asc(ChannelType.name)).all()

    def get(self, db: Session, channel_type_id: str) -> Optional[ChannelType]:
        return db.query(ChannelType).filter(ChannelType.id == channel_type_id).first()

    def create(self, db: Session, data: ChannelTypeCreate) -> ChannelType:
        if db.query(ChannelType).filter(ChannelType.name == data.name).first():
            raise DuplicateName("channel_type", data.name, "Channel type name already exists")
        if db.query(ChannelType).filter(ChannelType.prefix == data.prefix).first():
            raise DuplicateName("channel_type", data.prefix, "Channel type prefix already exists")

        channel_type = ChannelType(**data.model_dump())
        db.add(channel_type)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise DuplicateName("channel_type", data.name, "Channel type already exists")
        db.refresh(channel_type)
        log.info(f"💾 Channel type '{data.name}' ({data.prefix}) saved")
        return channel_type


class CategoryService:

    def list(self, db: Session) -> List[Category]:
        return db.query(Category).order_by(asc(Category.name)).all()

    def get(self, db: Session, category_id: str) -> Optional[Category]:
        return db.query(Category).filter(Category.id == category_id).first()

    def create(self, db: Session, data: CategoryCreate) -> Category:
        if db.query(Category).filter(Category.name == data.name).first():
            raise DuplicateName("category", data.name, "Category name already exists")

        category = Category(**data.model_dump())
        db.add(category)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            raise DuplicateName("category", data.name, "Category name already exists")
        db.refresh(category)
        log.info(f"💾 Category '{data.name}' saved")
        return category
