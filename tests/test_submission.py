# tests/test_submission.py
import pytest

from linkbuilder.core.exceptions import ValidationError
from linkbuilder.form.submission import SubmissionPipeline, collect_errors, validate_draft
from linkbuilder.schemas.placement import (
    PARTNER_NAME_REQUIRED, SUB_LEDGER_REQUIRED, THIRD_PARTY_NAME_REQUIRED
)


def test_full_valid_draft_passes(valid_draft):
    assert collect_errors(valid_draft) == {}
    record = validate_draft(valid_draft)
    assert record.campaign_type == "Display Ads"
    assert record.ad_type_detail == "Standard Banner"


def test_snake_case_keys_accepted(valid_draft):
    snake = {
        "base_url": valid_draft["baseUrl"],
        "campaign_type": "Display Ads",
        "campaign_source": "Google",
        "ad_type": "Banner",
        "brand1": "Brand A",
        "product_category": "Hardware",
        "campaign_owner": "Daniel Konig",
        "start_date": "2026-10-01",
        "campaign_notes": "launch",
        "project_reference_number": "1234567",
        "industry": "Technology",
        "tactic": "Awareness",
    }
    assert collect_errors(snake) == {}


def test_engineering_without_sub_ledger(valid_draft):
    draft = dict(valid_draft, costCenter="Engineering", subLedger="")
    assert collect_errors(draft) == {"sub_ledger": SUB_LEDGER_REQUIRED}


def test_sub_ledger_must_belong_to_cost_center(valid_draft):
    draft = dict(valid_draft, costCenter="Engineering", subLedger="Sales Support")
    assert list(collect_errors(draft)) == ["sub_ledger"]


def test_empty_draft_reports_required_fields():
    errors = collect_errors({})
    assert errors["base_url"] == "Must be a valid URL"
    assert errors["brand1"] == "Brand 1 is required"
    assert errors["start_date"] == "Start date is required"
    assert "ad_type_detail" not in errors
    assert "sub_ledger" not in errors


@pytest.mark.parametrize("url", ["example.com", "not a url", "https://", "   "])
def test_bad_base_url(valid_draft, url):
    errors = collect_errors(dict(valid_draft, baseUrl=url))
    assert errors == {"base_url": "Must be a valid URL"}


def test_stale_child_rejected(valid_draft):
    draft = dict(valid_draft, campaignType="Email Campaign")
    errors = collect_errors(draft)
    assert list(errors) == ["campaign_source"]


def test_partner_and_third_party_names(valid_draft):
    draft = dict(valid_draft, partnering=True, thirdParty=True)
    assert collect_errors(draft) == {
        "partner_name": PARTNER_NAME_REQUIRED,
        "third_party_name": THIRD_PARTY_NAME_REQUIRED,
    }


def test_names_dropped_when_flag_off(valid_draft):
    record = validate_draft(dict(valid_draft, partnerName="Acme", thirdPartyName="Agency"))
    assert record.partner_name is None
    assert record.third_party_name is None


def test_validate_draft_raises(valid_draft):
    with pytest.raises(ValidationError) as exc_info:
        validate_draft(dict(valid_draft, tactic=""))
    assert exc_info.value.errors == {"tactic": "Tactic is required"}


def test_pipeline_does_not_call_back_on_failure():
    calls = []
    result = SubmissionPipeline().submit({}, on_accept=calls.append)
    assert not result.ok
    assert result.record is None
    assert calls == []
