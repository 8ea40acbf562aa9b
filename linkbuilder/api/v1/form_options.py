# linkbuilder/api/v1/form_options.py
"""Choices for the campaign form dropdowns"""
from fastapi import APIRouter, HTTPException
from typing import Optional

from linkbuilder.form import hierarchy, resolver
from linkbuilder.form.options import STATIC_OPTIONS, FIELD_HELP, help_for

router = APIRouter()

DROPDOWN_FIELDS = {
    "campaign_type", "campaign_source", "ad_type", "ad_type_detail", "cost_center", "sub_ledger",
    *STATIC_OPTIONS,
}


@router.get("")
def get_form_options():
    """Everything the form needs to render its dropdowns and help panels"""
    return {
        "campaign_types": resolver.campaign_types(),
        "cost_centers": resolver.cost_centers(),
        "options": {field: sorted(values) for field, values in STATIC_OPTIONS.items()},
        "help": {field: help_for(field) for field in FIELD_HELP},
        **hierarchy.as_dict(),
    }


@router.get("/{field}")
def get_field_choices(
    field: str,
    campaign_type: Optional[str] = None,
    campaign_source: Optional[str] = None,
    ad_type: Optional[str] = None,
    cost_center: Optional[str] = None,
):
    """
    Choices for one dropdown given its parents, e.g.
    ``/api/form-options/ad_type?campaign_type=Display Ads&campaign_source=Google``
    """
    field = field.replace("-", "_")
    if field not in DROPDOWN_FIELDS:
        raise HTTPException(404, f"No choices for field '{field}'")
    values = {
        "campaign_type": campaign_type,
        "campaign_source": campaign_source,
        "ad_type": ad_type,
        "cost_center": cost_center,
    }
    return {"field": field, "choices": resolver.choices_for(field, values)}
