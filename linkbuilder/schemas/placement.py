# linkbuilder/schemas/placement.py
from pydantic import BaseModel, ConfigDict, TypeAdapter, AnyUrl, field_validator, model_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError
from typing import Any, Dict, Mapping, Optional
from datetime import date, datetime

from linkbuilder.form import resolver
from linkbuilder.models.placement import PlacementStatus

_url_adapter = TypeAdapter(AnyUrl)

# field -> message when the value is missing
REQUIRED_MESSAGES: Dict[str, str] = {
    "base_url": "Must be a valid URL",
    "campaign_type": "Campaign type is required",
    "campaign_source": "Campaign source is required",
    "ad_type": "Ad type is required",
    "brand1": "Brand 1 is required",
    "product_category": "Product category is required",
    "campaign_owner": "Campaign owner is required",
    "start_date": "Start date is required",
    "campaign_notes": "Campaign notes are required",
    "project_reference_number": "Project reference number is required",
    "industry": "Industry is required",
    "tactic": "Tactic is required",
}

# text fields that arrive as None from partially filled forms
REQUIRED_TEXT = [field for field in REQUIRED_MESSAGES if field != "start_date"]

SUB_LEDGER_REQUIRED = "Sub Ledger is required when Cost Center is selected"
PARTNER_NAME_REQUIRED = "Partner name is required when Partnering is selected"
THIRD_PARTY_NAME_REQUIRED = "Third party name is required when 3rd Party is selected"


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def dependency_errors(values: Mapping[str, Any]) -> Dict[str, str]:
    """
    Cross-field rules of a draft: conditional requirements and the
    parent -> child hierarchy. Takes snake_case keys.
    """
    errors: Dict[str, str] = {}
    campaign_type = values.get("campaign_type")
    campaign_source = values.get("campaign_source")
    ad_type = values.get("ad_type")
    ad_type_detail = values.get("ad_type_detail")
    cost_center = values.get("cost_center")
    sub_ledger = values.get("sub_ledger")

    if not is_blank(campaign_type) and campaign_type not in resolver.campaign_types():
        errors["campaign_type"] = "Campaign type is not a valid option"
    elif not is_blank(campaign_source) and campaign_source not in resolver.sources(campaign_type):
        errors["campaign_source"] = "Campaign source is not valid for the selected campaign type"
    elif not is_blank(ad_type) and ad_type not in resolver.ad_types(campaign_type, campaign_source):
        errors["ad_type"] = "Ad type is not valid for the selected campaign source"
    elif not is_blank(ad_type_detail) and ad_type_detail not in resolver.ad_type_details(campaign_type, ad_type):
        errors["ad_type_detail"] = "Ad type detail is not valid for the selected ad type"

    if not is_blank(cost_center):
        if cost_center not in resolver.cost_centers():
            errors["cost_center"] = "Cost center is not a valid option"
        elif is_blank(sub_ledger):
            errors["sub_ledger"] = SUB_LEDGER_REQUIRED
        elif sub_ledger not in resolver.sub_ledgers(cost_center):
            errors["sub_ledger"] = "Sub ledger is not valid for the selected cost center"

    if values.get("partnering") is True and is_blank(values.get("partner_name")):
        errors["partner_name"] = PARTNER_NAME_REQUIRED
    if values.get("third_party") is True and is_blank(values.get("third_party_name")):
        errors["third_party_name"] = THIRD_PARTY_NAME_REQUIRED

    return errors


class CampaignDraft(BaseModel):
    """
    Campaign form payload.

    Accepts snake_case names or the camelCase names the browser form sends.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
        from_attributes=True,
    )

    # Basic campaign info
    base_url: str = ""
    anchor_tag: Optional[str] = None
    campaign_type: str = ""
    campaign_source: str = ""
    ad_type: str = ""
    ad_type_detail: Optional[str] = None
    targeting: bool = False
    brand1: str = ""
    brand2: Optional[str] = None
    brand3: Optional[str] = None
    product_category: str = ""
    product_brand: Optional[str] = None

    # Campaign management
    campaign_owner: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    campaign_notes: str = ""
    project_reference_number: str = ""
    budget: Optional[str] = None
    industry: str = ""
    tactic: str = ""
    cost_center: Optional[str] = None
    sub_ledger: Optional[str] = None

    # Partnership info
    partnering: bool = False
    partner_name: Optional[str] = None
    third_party: bool = False
    third_party_name: Optional[str] = None

    @field_validator(*REQUIRED_TEXT, mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def datetime_to_date(cls, v):
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator(*REQUIRED_MESSAGES)
    @classmethod
    def required(cls, v, info):
        if is_blank(v):
            raise PydanticCustomError("required", REQUIRED_MESSAGES[info.field_name])
        return v

    @field_validator("base_url")
    @classmethod
    def valid_url(cls, v):
        try:
            parsed = _url_adapter.validate_python(v.strip())
        except ValueError:
            raise PydanticCustomError("url", "Must be a valid URL")
        if not parsed.host:
            raise PydanticCustomError("url", "Must be a valid URL")
        return v.strip()

    @model_validator(mode="after")
    def check_dependencies(self):
        errors = dependency_errors(self.model_dump())
        if errors:
            raise ValueError("; ".join(f"{field}: {message}" for field, message in errors.items()))
        if not self.partnering:
            self.partner_name = None
        if not self.third_party:
            self.third_party_name = None
        return self


# wire name -> field name, so raw payloads can be normalized
ALIASES: Dict[str, str] = {
    (field.alias or name): name for name, field in CampaignDraft.model_fields.items()
}


def normalize_keys(values: Mapping[str, Any]) -> Dict[str, Any]:
    return {ALIASES.get(key, key): value for key, value in values.items()}


class PlacementCreate(CampaignDraft):
    """Create a placement; the draft plus optional bookkeeping fields"""
    title: Optional[str] = None
    description: Optional[str] = None
    channel_type_id: Optional[str] = None
    category_id: Optional[str] = None
    status: PlacementStatus = PlacementStatus.DRAFT


class PlacementUpdate(BaseModel):
    """Partial update; merged onto the stored placement and re-validated"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    base_url: Optional[str] = None
    anchor_tag: Optional[str] = None
    campaign_type: Optional[str] = None
    campaign_source: Optional[str] = None
    ad_type: Optional[str] = None
    ad_type_detail: Optional[str] = None
    targeting: Optional[bool] = None
    brand1: Optional[str] = None
    brand2: Optional[str] = None
    brand3: Optional[str] = None
    product_category: Optional[str] = None
    product_brand: Optional[str] = None
    campaign_owner: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    campaign_notes: Optional[str] = None
    project_reference_number: Optional[str] = None
    budget: Optional[str] = None
    industry: Optional[str] = None
    tactic: Optional[str] = None
    cost_center: Optional[str] = None
    sub_ledger: Optional[str] = None
    partnering: Optional[bool] = None
    partner_name: Optional[str] = None
    third_party: Optional[bool] = None
    third_party_name: Optional[str] = None
    channel_type_id: Optional[str] = None
    category_id: Optional[str] = None
    status: Optional[PlacementStatus] = None


class PlacementResponse(BaseModel):
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    base_url: str
    anchor_tag: Optional[str] = None
    campaign_type: Optional[str] = None
    campaign_source: Optional[str] = None
    ad_type: Optional[str] = None
    ad_type_detail: Optional[str] = None
    targeting: Optional[bool] = None
    brand1: Optional[str] = None
    brand2: Optional[str] = None
    brand3: Optional[str] = None
    product_category: Optional[str] = None
    product_brand: Optional[str] = None
    campaign_owner: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    campaign_notes: Optional[str] = None
    project_reference_number: Optional[str] = None
    budget: Optional[str] = None
    industry: Optional[str] = None
    tactic: Optional[str] = None
    cost_center: Optional[str] = None
    sub_ledger: Optional[str] = None
    partnering: Optional[bool] = None
    partner_name: Optional[str] = None
    third_party: Optional[bool] = None
    third_party_name: Optional[str] = None
    channel_type_id: Optional[str] = None
    category_id: Optional[str] = None
    tracking_code: str
    full_tracking_url: Optional[str] = None
    status: str
    user_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
