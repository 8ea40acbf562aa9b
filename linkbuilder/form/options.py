# linkbuilder/form/options.py
"""Fixed option lists and help text for the campaign form"""
from types import MappingProxyType

STATIC_OPTIONS = MappingProxyType({
    "brand1": ("Brand A", "Brand B", "Brand C", "Brand D"),
    "brand2": ("Brand A", "Brand B", "Brand C", "Brand D"),
    "brand3": ("Brand A", "Brand B", "Brand C", "Brand D"),
    "product_category": ("Consulting", "Electronics", "Hardware", "Services", "Software"),
    "product_brand": ("Product Brand 1", "Product Brand 2", "Product Brand 3"),
    "campaign_owner": ("Campaign Manager", "Daniel Konig", "Marketing Manager"),
    "industry": ("Finance", "Healthcare", "Manufacturing", "Retail", "Technology"),
    "tactic": ("Acquisition", "Awareness", "Consideration", "Conversion", "Retention"),
})

FIELD_HELP = MappingProxyType({
    "base_url": (
        "Base URL",
        "Enter the destination URL where users will be directed when they click on your "
        "campaign link. This should be a complete URL including https://",
    ),
    "anchor_tag": (
        "Anchor Tag",
        "Optional anchor tag (e.g., #section1) to direct users to a specific section of the destination page.",
    ),
    "campaign_type": (
        "Campaign Type",
        "Select the primary type of marketing campaign. This helps categorize and track different campaign strategies.",
    ),
    "campaign_source": (
        "Campaign Source",
        "Specify the source of your campaign traffic (e.g., Google, Facebook, Email Newsletter, etc.)",
    ),
    "ad_type": (
        "Ad Type",
        "Select the format or type of advertisement being used in this campaign (e.g., Banner, Video, Text, etc.)",
    ),
    "targeting": (
        "Targeting",
        "Indicates whether this campaign uses audience targeting. Select 'Yes' if you're targeting "
        "specific demographics, interests, or behaviors.",
    ),
    "brand1": (
        "Primary Brand",
        "Select the main brand associated with this campaign. This is a required field for tracking brand performance.",
    ),
    "product_category": (
        "Product Category",
        "Select the category that best describes the products or services being promoted in this campaign.",
    ),
    "campaign_owner": (
        "Campaign Owner",
        "Select or enter the name of the person responsible for managing this campaign.",
    ),
    "start_date": (
        "Start Date",
        "Select the date when this campaign will begin running. This is required for scheduling and reporting purposes.",
    ),
    "campaign_notes": (
        "Campaign Notes",
        "Enter notes that will be displayed in Adobe Analytics. Use this field to provide context "
        "or special instructions for reporting.",
    ),
    "project_reference_number": (
        "Project Reference Number",
        "Enter the Workfront Project ID (7 digits). This links the campaign to your project "
        "management system for tracking and billing.",
    ),
    "industry": (
        "Industry",
        "Select the industry or market segment this campaign is targeting.",
    ),
    "tactic": (
        "Tactic",
        "Select the marketing tactic or strategy being employed (e.g., Awareness, Consideration, Conversion, etc.)",
    ),
    "partnering": (
        "Partnering",
        "Select 'Yes' if this campaign involves a business partnership or co-marketing effort with "
        "another company. If yes, you'll need to specify the partner name.",
    ),
})


def help_for(field: str) -> dict:
    title, content = FIELD_HELP.get(field, ("", ""))
    return {"title": title, "content": content}
