# linkbuilder/form/resolver.py
"""
Dependent dropdown choices.

Every lookup is total: an unset or unknown parent yields an empty list,
never an exception.
"""
from typing import Any, List, Mapping, Optional

from linkbuilder.form.hierarchy import CAMPAIGN_HIERARCHY, COST_CENTER_SUB_LEDGERS
from linkbuilder.form.options import STATIC_OPTIONS


def _lookup(table: Mapping, key: Any):
    if not key or not isinstance(key, str):
        return None
    return table.get(key)


def campaign_types() -> List[str]:
    return sorted(CAMPAIGN_HIERARCHY)


def cost_centers() -> List[str]:
    return sorted(COST_CENTER_SUB_LEDGERS)


def sources(campaign_type: Optional[str]) -> List[str]:
    """Sources valid for a campaign type"""
    type_data = _lookup(CAMPAIGN_HIERARCHY, campaign_type)
    if type_data is None:
        return []
    return sorted(set(type_data["sources"]))


def ad_types(campaign_type: Optional[str], campaign_source: Optional[str]) -> List[str]:
    """Ad types valid for a (campaign type, source) pair"""
    type_data = _lookup(CAMPAIGN_HIERARCHY, campaign_type)
    if type_data is None or campaign_source not in type_data["sources"]:
        return []
    values = _lookup(type_data["ad_types"], campaign_source)
    return sorted(set(values)) if values else []


def ad_type_details(campaign_type: Optional[str], ad_type: Optional[str]) -> List[str]:
    """Ad type details valid for a (campaign type, ad type) pair"""
    type_data = _lookup(CAMPAIGN_HIERARCHY, campaign_type)
    if type_data is None:
        return []
    values = _lookup(type_data["ad_type_details"], ad_type)
    return sorted(set(values)) if values else []


def sub_ledgers(cost_center: Optional[str]) -> List[str]:
    """Sub ledgers valid for a cost center"""
    values = _lookup(COST_CENTER_SUB_LEDGERS, cost_center)
    return sorted(set(values)) if values else []


def choices_for(field: str, values: Mapping[str, Any]) -> List[str]:
    """
    Choice list for any dropdown field given the current form values.

    Fields without a fixed choice list (free text, dates, booleans and the
    reference-data fields) return an empty list.
    """
    if field == "campaign_type":
        return campaign_types()
    if field == "campaign_source":
        return sources(values.get("campaign_type"))
    if field == "ad_type":
        return ad_types(values.get("campaign_type"), values.get("campaign_source"))
    if field == "ad_type_detail":
        return ad_type_details(values.get("campaign_type"), values.get("ad_type"))
    if field == "cost_center":
        return cost_centers()
    if field == "sub_ledger":
        return sub_ledgers(values.get("cost_center"))
    if field in STATIC_OPTIONS:
        return sorted(STATIC_OPTIONS[field])
    return []
