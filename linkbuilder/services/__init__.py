"""
Service layer initialization.
Provides service instances for FastAPI dependencies.
"""
from linkbuilder.schemas.reference import ReferenceKind
from linkbuilder.services.placement_service import PlacementService
from linkbuilder.services.reference_service import ReferenceService, ChannelTypeService, CategoryService


def get_partner_service() -> ReferenceService:
    return ReferenceService(ReferenceKind.PARTNER)


def get_third_party_service() -> ReferenceService:
    return ReferenceService(ReferenceKind.THIRD_PARTY)


def get_placement_service() -> PlacementService:
    return PlacementService()


def get_channel_type_service() -> ChannelTypeService:
    return ChannelTypeService()


def get_category_service() -> CategoryService:
    return CategoryService()


__all__ = [
    'PlacementService',
    'ReferenceService',
    'ChannelTypeService',
    'CategoryService',
    'get_partner_service',
    'get_third_party_service',
    'get_placement_service',
    'get_channel_type_service',
    'get_category_service',
]
