# -*- coding: utf-8 -*-
"""
Reading and writing step answers on a listing draft.

Each step writes only to the section it owns. A few answers invalidate
follow-up answers; those are blanked here so hidden steps never keep
stale values.
"""

from typing import Any, Dict, List, Tuple

from models.listing_draft import ListingDraft, PROPERTY_SPECS, HAS_EXISTING_SURVEY
from models.step import StepDefinition
from services.wizard.step_filter import OTHER, NO_COVERED_PARKING
from utils.helpers import is_blank

YES = "yes"
NO = "no"


def _dependent_fields(step_id: str, value: Any) -> List[Tuple[str, str]]:
    """Get (section, field) pairs that must be blanked after this answer."""
    cleared = []
    if step_id == "coveredParking":
        if (value or "") in NO_COVERED_PARKING:
            cleared.append((PROPERTY_SPECS, "coveredParkingElectricity"))
        if value != OTHER:
            cleared.append((PROPERTY_SPECS, "coveredParkingOtherDescription"))
    elif step_id == "squareFootageSource" and value != OTHER:
        cleared.append((PROPERTY_SPECS, "squareFootageSourceOther"))
    elif step_id == "occupancy":
        cleared.append((PROPERTY_SPECS, "occupancyVacatePlans"))
        cleared.append((PROPERTY_SPECS, "occupancyVacantDuration"))
    return cleared


def write_answer(draft: ListingDraft, step: StepDefinition, value: Any) -> Dict[str, Any]:
    """
    Store an answer in the section the step owns.

    Returns:
        Mapping of "section.field" -> value for every field written,
        including blanked follow-ups
    """
    written: Dict[str, Any] = {}

    if step.section == HAS_EXISTING_SURVEY:
        if is_blank(value):
            stored = None
        else:
            stored = value if isinstance(value, bool) else value == YES
        draft.set_section(step.section, stored)
        written[step.section] = stored
    elif step.field is None:
        draft.set_section(step.section, value)
        written[step.section] = value
    else:
        draft.set_field(step.section, step.field, value)
        written[f"{step.section}.{step.field}"] = value

    for section, field in _dependent_fields(step.id, value):
        if not is_blank(draft.get_field(section, field)):
            draft.clear_field(section, field)
            written[f"{section}.{field}"] = ""

    return written


def read_answer(draft: ListingDraft, step: StepDefinition) -> Any:
    """Get the current answer for a step, in the shape the step accepts."""
    if step.section == HAS_EXISTING_SURVEY:
        stored = draft.get_section(HAS_EXISTING_SURVEY)
        if stored is None:
            return ""
        return YES if stored else NO
    if step.field is None:
        return draft.get_section(step.section, {} if step.section == "address" else "")
    return draft.get_field(step.section, step.field, "")


def is_answered(draft: ListingDraft, step: StepDefinition) -> bool:
    """Check whether a step holds a non-empty answer."""
    value = read_answer(draft, step)
    if isinstance(value, dict) and step.section == "address":
        return not is_blank(value.get("fullAddress"))
    return not is_blank(value)


def is_valid_address(value: Any) -> bool:
    """An address counts as captured once it carries a full address line."""
    return isinstance(value, dict) and not is_blank(value.get("fullAddress"))
