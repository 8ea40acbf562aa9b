# linkbuilder/form/controller.py
"""
Campaign form state.

The controller owns the current field values and drives every change
through ``set_field`` so dependent dropdowns are reset deterministically:

    controller = CampaignFormController()
    controller.set_field("campaign_type", "Display Ads")
    controller.set_field("campaign_source", "Google")
    controller.choices("ad_type")            # ['Banner', 'Video']
    controller.set_field("campaign_type", "Email Campaign")
    controller.get("campaign_source")        # '' (reset)

One logical writer is assumed; nothing here is thread-safe.
"""
import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from linkbuilder.form import resolver
from linkbuilder.form.hierarchy import CASCADES
from linkbuilder.form.submission import SubmissionPipeline, SubmissionResult
from linkbuilder.schemas.placement import CampaignDraft, REQUIRED_MESSAGES, is_blank, normalize_keys

log = logging.getLogger("linkbuilder.form")

FIELDS: List[str] = list(CampaignDraft.model_fields)
BOOLEAN_FIELDS = {"targeting", "partnering", "third_party"}
DATE_FIELDS = {"start_date", "end_date"}
# whitespace-only is stored as empty so required-ness follows the stored value
TRIMMED_FIELDS = {"cost_center"}

# reference-data field -> (flag that shows it, gateway kind)
REFERENCE_FIELDS = {
    "partner_name": ("partnering", "partner"),
    "third_party_name": ("third_party", "third_party"),
}

# Field statuses
STATUS_ERROR = "error"
STATUS_REQUIRED = "required-unmet"
STATUS_COMPLETED = "completed"
STATUS_DEFAULT = "default"

_UNSET = object()


def _empty_value(name: str) -> Any:
    if name in BOOLEAN_FIELDS:
        return False
    if name in DATE_FIELDS:
        return None
    return ""


def _clean(name: str, value: Any) -> Any:
    if name in TRIMMED_FIELDS and isinstance(value, str):
        return value.strip()
    return value


def _same(a: Any, b: Any) -> bool:
    # '' and None both mean "nothing selected"
    return (a if a is not None else "") == (b if b is not None else "")


class CampaignFormController:
    """Explicit state holder for one campaign draft"""

    def __init__(
        self,
        initial: Optional[Mapping[str, Any]] = None,
        gateway=None,
        pipeline: Optional[SubmissionPipeline] = None,
    ):
        """
        Args:
            initial: pre-filled draft values (snake_case or camelCase keys)
            gateway: optional ReferenceDataGateway for partner/third-party choices
            pipeline: submission pipeline, a default one is created if omitted
        """
        self.gateway = gateway
        self.pipeline = pipeline or SubmissionPipeline()
        self._values: Dict[str, Any] = {name: _empty_value(name) for name in FIELDS}
        self._errors: Dict[str, str] = {}
        # last committed value of each parent field; _UNSET until mounted
        self._previous: Dict[str, Any] = {name: _UNSET for name in CASCADES}
        self.load(initial or {})

    # ────────────────────────────────────────────
    # Values
    # ────────────────────────────────────────────

    def load(self, values: Mapping[str, Any]) -> None:
        """Replace values wholesale without cascading (initial mount / edit)"""
        for name, value in normalize_keys(values).items():
            self._check_field(name)
            self._values[name] = _clean(name, value)
        self._errors.clear()
        for parent in CASCADES:
            self._previous[parent] = self._values[parent]

    def set_field(self, name: str, value: Any) -> None:
        """Commit one change and clear children invalidated by it"""
        self._check_field(name)
        value = _clean(name, value)
        self._values[name] = value
        self._errors.pop(name, None)

        if name not in CASCADES:
            return

        previous = self._previous[name]
        if previous is not _UNSET and not _same(previous, value):
            for child in CASCADES[name]:
                self._values[child] = ""
                self._errors.pop(child, None)
                if child in self._previous:
                    self._previous[child] = ""
            log.debug(f"{name} changed {previous!r} -> {value!r}, cleared {list(CASCADES[name])}")
        self._previous[name] = value

    def get(self, name: str) -> Any:
        self._check_field(name)
        return self._values[name]

    def values(self) -> Dict[str, Any]:
        return dict(self._values)

    @property
    def errors(self) -> Dict[str, str]:
        return dict(self._errors)

    # ────────────────────────────────────────────
    # Required-ness and status
    # ────────────────────────────────────────────

    def is_required(self, name: str) -> bool:
        self._check_field(name)
        if name in REQUIRED_MESSAGES:
            return True
        if name == "sub_ledger":
            return not is_blank(self._values["cost_center"])
        if name in REFERENCE_FIELDS:
            flag, _ = REFERENCE_FIELDS[name]
            return bool(self._values[flag])
        return False

    def is_completed(self, name: str) -> bool:
        value = self._values[name]
        return value is not None and value != ""

    def status(self, name: str) -> str:
        """One of error, required-unmet, completed, default"""
        self._check_field(name)
        if name in self._errors:
            return STATUS_ERROR
        completed = self.is_completed(name)
        if self.is_required(name) and not completed:
            return STATUS_REQUIRED
        if completed:
            return STATUS_COMPLETED
        return STATUS_DEFAULT

    def statuses(self) -> Dict[str, str]:
        return {name: self.status(name) for name in FIELDS}

    def visible_fields(self) -> List[str]:
        """Partner / third-party name only show when their flag is on"""
        return [
            name for name in FIELDS
            if name not in REFERENCE_FIELDS or self._values[REFERENCE_FIELDS[name][0]]
        ]

    # ────────────────────────────────────────────
    # Choices
    # ────────────────────────────────────────────

    def choices(self, name: str) -> List[str]:
        self._check_field(name)
        if name in REFERENCE_FIELDS:
            if self.gateway is None:
                return []
            return self.gateway.choices(REFERENCE_FIELDS[name][1])
        return resolver.choices_for(name, self._values)

    # ────────────────────────────────────────────
    # Submit
    # ────────────────────────────────────────────

    def submit(self, on_accept: Optional[Callable[[CampaignDraft], Any]] = None) -> SubmissionResult:
        result = self.pipeline.submit(self._values, on_accept)
        self._errors = dict(result.errors)
        return result

    def _check_field(self, name: str) -> None:
        if name not in self._values:
            raise KeyError(f"Unknown campaign form field: {name}")
