# tests/test_resolver.py
import pytest

from linkbuilder.form import hierarchy, resolver


def test_campaign_types_sorted():
    assert resolver.campaign_types() == [
        "Display Ads", "Email Campaign", "Google Ads", "Social Media", "Video Campaign"
    ]


@pytest.mark.parametrize("campaign_type", ["", None, "Radio", "display ads", 42])
def test_unknown_campaign_type_has_no_sources(campaign_type):
    assert resolver.sources(campaign_type) == []
    assert resolver.ad_types(campaign_type, "Google") == []
    assert resolver.ad_type_details(campaign_type, "Banner") == []


def test_sources_for_display_ads():
    assert resolver.sources("Display Ads") == ["Facebook", "Google", "LinkedIn"]


def test_ad_types_require_a_source_of_the_type():
    assert resolver.ad_types("Display Ads", "Google") == ["Banner", "Video"]
    # Email Newsletter belongs to Email Campaign only
    assert resolver.ad_types("Display Ads", "Email Newsletter") == []
    assert resolver.ad_types("Display Ads", "") == []


def test_every_listed_source_resolves():
    for campaign_type in resolver.campaign_types():
        for source in resolver.sources(campaign_type):
            assert isinstance(resolver.ad_types(campaign_type, source), list)


def test_ad_type_details():
    assert resolver.ad_type_details("Display Ads", "Banner") == ["Rich Media", "Standard Banner"]
    assert resolver.ad_type_details("Display Ads", "Unknown") == []


def test_sub_ledgers():
    assert resolver.sub_ledgers("Engineering") == [
        "Engineering Operations", "Engineering Projects", "Engineering R&D"
    ]
    assert resolver.sub_ledgers("") == []
    assert resolver.sub_ledgers("Legal") == []


def test_choices_for_follows_parents():
    values = {"campaign_type": "Display Ads", "campaign_source": "LinkedIn"}
    assert resolver.choices_for("campaign_source", values) == ["Facebook", "Google", "LinkedIn"]
    assert resolver.choices_for("ad_type", values) == ["Banner", "Text"]
    assert resolver.choices_for("industry", values)[0] == "Finance"
    assert resolver.choices_for("campaign_notes", values) == []


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        hierarchy.CAMPAIGN_HIERARCHY["Radio"] = {}
    with pytest.raises(TypeError):
        hierarchy.COST_CENTER_SUB_LEDGERS["Legal"] = ()


def test_as_dict_is_plain():
    data = hierarchy.as_dict()
    assert data["campaign_hierarchy"]["Display Ads"]["sources"] == ["Google", "Facebook", "LinkedIn"]
    assert isinstance(data["cost_center_sub_ledgers"]["Sales"], list)
