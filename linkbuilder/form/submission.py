# linkbuilder/form/submission.py
"""
Submission pipeline: validate a complete campaign draft and hand the
finalized record to the caller. Nothing here touches the network or storage.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from linkbuilder.core.exceptions import ValidationError
from linkbuilder.schemas.placement import ALIASES, CampaignDraft, dependency_errors, normalize_keys

log = logging.getLogger("linkbuilder.submission")


@dataclass
class SubmissionResult:
    """Outcome of a submit: either a record or field-keyed messages"""
    record: Optional[CampaignDraft] = None
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.record is not None and not self.errors


def collect_errors(values: Mapping[str, Any]) -> Dict[str, str]:
    """
    Validate raw values and return every field error.

    Field-level messages win; the cross-field rules add messages for fields
    that passed on their own.
    """
    values = normalize_keys(values)
    errors: Dict[str, str] = {}
    try:
        CampaignDraft.model_validate(values)
    except PydanticValidationError as exc:
        for error in exc.errors():
            if not error["loc"]:
                # raised by the cross-field check, re-derived below
                continue
            name = ALIASES.get(str(error["loc"][0]), str(error["loc"][0]))
            errors.setdefault(name, error["msg"])

    for name, message in dependency_errors(values).items():
        errors.setdefault(name, message)
    return errors


def validate_draft(values: Mapping[str, Any]) -> CampaignDraft:
    """Return the finalized draft or raise ValidationError with all field errors"""
    errors = collect_errors(values)
    if errors:
        raise ValidationError(errors)
    return CampaignDraft.model_validate(normalize_keys(values))


class SubmissionPipeline:
    """Validates drafts and calls back with the finalized record"""

    def submit(
        self,
        values: Mapping[str, Any],
        on_accept: Optional[Callable[[CampaignDraft], Any]] = None,
    ) -> SubmissionResult:
        try:
            record = validate_draft(values)
        except ValidationError as e:
            log.info(f"Draft rejected: {sorted(e.errors)}")
            return SubmissionResult(errors=e.errors)

        log.info(f"✅ Draft accepted: {record.campaign_type} / {record.campaign_source}")
        if on_accept is not None:
            on_accept(record)
        return SubmissionResult(record=record)
