# linkbuilder/api/v1/router.py
"""Main API router combining all v1 endpoints"""
from fastapi import APIRouter

from linkbuilder.api.v1 import auth, placements, form_options
from linkbuilder.api.v1.lookups import channel_types_router, categories_router
from linkbuilder.api.v1.reference_data import partners_router, third_parties_router

api_router = APIRouter()

# Include all routers
api_router.include_router(auth.router, prefix="/auth", tags=["Authentication"])
api_router.include_router(partners_router, prefix="/partners", tags=["Partners"])
api_router.include_router(third_parties_router, prefix="/third-parties", tags=["Third Parties"])
api_router.include_router(placements.router, prefix="/placements", tags=["Placements"])
api_router.include_router(channel_types_router, prefix="/channel-types", tags=["Channel Types"])
api_router.include_router(categories_router, prefix="/categories", tags=["Categories"])
api_router.include_router(form_options.router, prefix="/form-options", tags=["Form Options"])
