# -*- coding: utf-8 -*-
"""
Step visibility rules for the listing creation wizard.

filter_steps() maps (catalog, draft) to the ordered list of steps the seller
actually sees. The result depends only on four draft fields and always keeps
the catalog's relative order.
"""

from typing import Any, Iterable, List, Mapping, Union

from models.listing_draft import ListingDraft, PROPERTY_SPECS, OCCUPANCY_STATUS, as_text
from models.step import StepDefinition

# Property types
LAND = "land"
CONDO = "condo"
TOWNHOME = "townhome"

LAND_STEP_IDS = frozenset({"address", "propertyType", "lotSize", "survey", "occupancy"})
SHARED_WALL_TYPES = frozenset({CONDO, TOWNHOME})

OTHER = "other"
NO_COVERED_PARKING = ("", "none")
OWNER_OCCUPIED = "owner-occupied"
VACANT = "vacant"

DraftLike = Union[ListingDraft, Mapping[str, Any], None]


def _visibility_fields(draft: DraftLike) -> tuple:
    """Extract (propertyType, coveredParking, squareFootageSource, occupancyStatus)."""
    if isinstance(draft, ListingDraft):
        return (
            draft.property_type,
            draft.covered_parking,
            draft.square_footage_source,
            draft.occupancy_status,
        )

    data = draft if isinstance(draft, Mapping) else {}
    specs = data.get(PROPERTY_SPECS)
    if not isinstance(specs, Mapping):
        specs = {}
    return (
        as_text(specs.get("propertyType")),
        as_text(specs.get("coveredParking")),
        as_text(specs.get("squareFootageSource")),
        as_text(data.get(OCCUPANCY_STATUS)),
    )


def filter_steps(catalog: Iterable[StepDefinition], draft: DraftLike) -> List[StepDefinition]:
    """
    Get the visible steps for the current draft.

    Args:
        catalog: All steps in declared order
        draft: ListingDraft or plain section mapping

    Returns:
        Ordered subsequence of the catalog
    """
    property_type, covered_parking, footage_source, occupancy = _visibility_fields(draft)

    hidden = set()
    if covered_parking in NO_COVERED_PARKING:
        hidden.add("coveredParkingElectricity")
    if covered_parking != OTHER:
        hidden.add("coveredParkingOtherDescription")
    if footage_source != OTHER:
        hidden.add("squareFootageSourceOther")
    if occupancy != OWNER_OCCUPIED:
        hidden.add("occupancyVacatePlans")
    if occupancy != VACANT:
        hidden.add("occupancyVacantDuration")

    visible = []
    for step in catalog:
        if property_type == LAND and step.id not in LAND_STEP_IDS:
            continue
        if property_type in SHARED_WALL_TYPES and step.id == "lotSize":
            continue
        if step.id in hidden:
            continue
        visible.append(step)
    return visible


def clamp_index(index: int, steps: List[StepDefinition]) -> int:
    """Clamp a step index into [0, len(steps) - 1]; 0 for an empty list."""
    if not steps:
        return 0
    return max(0, min(index, len(steps) - 1))


def visible_step_ids(catalog: Iterable[StepDefinition], draft: DraftLike) -> List[str]:
    """Convenience wrapper returning ids only."""
    return [step.id for step in filter_steps(catalog, draft)]
