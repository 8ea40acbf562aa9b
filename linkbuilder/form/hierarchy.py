# linkbuilder/form/hierarchy.py
"""
Static parent -> child tables behind the dependent dropdowns.

CAMPAIGN_HIERARCHY maps a campaign type to its sources, the ad types per
source and the ad type details per ad type. COST_CENTER_SUB_LEDGERS maps a
cost center to its sub ledgers. Both are read-only.
"""
from types import MappingProxyType
from typing import Dict, Mapping, Sequence, Tuple


def _freeze(table: Dict[str, Sequence[str]]) -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType({key: tuple(values) for key, values in table.items()})


def _campaign_type(sources, ad_types, ad_type_details):
    return MappingProxyType({
        "sources": tuple(sources),
        "ad_types": _freeze(ad_types),
        "ad_type_details": _freeze(ad_type_details),
    })


CAMPAIGN_HIERARCHY = MappingProxyType({
    "Display Ads": _campaign_type(
        sources=["Google", "Facebook", "LinkedIn"],
        ad_types={
            "Google": ["Banner", "Video"],
            "Facebook": ["Image", "Video", "Carousel"],
            "LinkedIn": ["Banner", "Text"],
        },
        ad_type_details={
            "Banner": ["Standard Banner", "Rich Media"],
            "Video": ["Interstitial", "Native"],
            "Image": ["Standard Banner", "Native"],
            "Carousel": ["Rich Media", "Native"],
            "Text": ["Standard Banner"],
        },
    ),
    "Email Campaign": _campaign_type(
        sources=["Email Newsletter", "Organic Social"],
        ad_types={
            "Email Newsletter": ["Text", "Image"],
            "Organic Social": ["Text", "Image", "Video"],
        },
        ad_type_details={
            "Text": ["Standard Banner"],
            "Image": ["Standard Banner", "Rich Media"],
            "Video": ["Native", "Interstitial"],
        },
    ),
    "Google Ads": _campaign_type(
        sources=["Google", "Paid Social"],
        ad_types={
            "Google": ["Banner", "Video", "Text"],
            "Paid Social": ["Image", "Video", "Carousel"],
        },
        ad_type_details={
            "Banner": ["Standard Banner", "Rich Media", "Expandable"],
            "Video": ["Interstitial", "Native"],
            "Text": ["Standard Banner"],
            "Image": ["Standard Banner", "Rich Media"],
            "Carousel": ["Rich Media", "Native"],
        },
    ),
    "Social Media": _campaign_type(
        sources=["Facebook", "LinkedIn", "Organic Social", "Paid Social"],
        ad_types={
            "Facebook": ["Image", "Video", "Carousel", "Story"],
            "LinkedIn": ["Banner", "Text", "Image"],
            "Organic Social": ["Text", "Image", "Video"],
            "Paid Social": ["Image", "Video", "Carousel"],
        },
        ad_type_details={
            "Image": ["Standard Banner", "Rich Media", "Native"],
            "Video": ["Interstitial", "Native"],
            "Carousel": ["Rich Media", "Native"],
            "Story": ["Native"],
            "Banner": ["Standard Banner", "Rich Media"],
            "Text": ["Standard Banner"],
        },
    ),
    "Video Campaign": _campaign_type(
        sources=["Google", "Facebook", "Paid Social"],
        ad_types={
            "Google": ["Video"],
            "Facebook": ["Video", "Story"],
            "Paid Social": ["Video", "Carousel"],
        },
        ad_type_details={
            "Video": ["Interstitial", "Native", "Rich Media"],
            "Story": ["Native"],
            "Carousel": ["Rich Media", "Native"],
        },
    ),
})

COST_CENTER_SUB_LEDGERS = _freeze({
    "Engineering": ["Engineering Projects", "Engineering Operations", "Engineering R&D"],
    "Marketing": ["Marketing Campaigns", "Marketing Events", "Marketing Content"],
    "Operations": ["Operations Support", "Operations Infrastructure", "Operations Maintenance"],
    "Product": ["Product Development", "Product Support", "Product Research"],
    "Sales": ["Sales Activities", "Sales Support", "Sales Training"],
})

# child fields cleared when the parent changes
CASCADES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "campaign_type": ("campaign_source", "ad_type", "ad_type_detail"),
    "campaign_source": ("ad_type", "ad_type_detail"),
    "ad_type": ("ad_type_detail",),
    "cost_center": ("sub_ledger",),
})


def as_dict() -> dict:
    """Plain-dict copy of both tables, for JSON responses"""
    return {
        "campaign_hierarchy": {
            campaign_type: {
                "sources": list(data["sources"]),
                "ad_types": {k: list(v) for k, v in data["ad_types"].items()},
                "ad_type_details": {k: list(v) for k, v in data["ad_type_details"].items()},
            }
            for campaign_type, data in CAMPAIGN_HIERARCHY.items()
        },
        "cost_center_sub_ledgers": {k: list(v) for k, v in COST_CENTER_SUB_LEDGERS.items()},
    }
