# -*- coding: utf-8 -*-
"""
Legacy step id resolution.

Drafts saved by earlier versions of the product record their last step
under older names. LEGACY_STEP_ALIASES maps every known name onto the
canonical section id; add new aliases here and bump ALIAS_TABLE_VERSION.
"""

from typing import Dict, Optional

from services.wizard.section_completion import SECTION_ORDER, FIRST_SECTION
from services.wizard.step_catalog import BASIC_INFO_CATALOG
from utils.logger import get_logger

logger = get_logger(__name__)

ALIAS_TABLE_VERSION = 3

LEGACY_STEP_ALIASES: Dict[str, str] = {
    # Address, property specs and home facts were merged into basic info
    "address": "basic-info",
    "property-specs": "basic-info",
    "home-facts": "basic-info",
    "basic-info": "basic-info",
    "listing-service": "listing-service",
    "title-holder": "titleholder",
    "titleholder": "titleholder",
    "titleholder-information": "titleholder",
    "mortgages-taxes-liens": "financial",
    "financial-info": "financial",
    "sellers-disclosure": "disclosure",
    "seller-disclosure": "disclosure",
    "additional-information": "additional-info",
    "secure-access": "showing-access",
    "access-and-showings": "showing-access",
    "showing-access": "showing-access",
    "property-media": "property-media",
    "listing-price": "listing-price",
    "sign-paperwork": "sign-paperwork",
}

# Section id -> step id understood by the listing flow's router
FLOW_STEP_IDS: Dict[str, str] = {
    "basic-info": "basic-info",
    "listing-service": "listing-service",
    "titleholder": "titleholder-information",
    "financial": "mortgages-taxes-liens",
    "disclosure": "sellers-disclosure",
    "additional-info": "additional-information",
    "showing-access": "showing-access",
    "property-media": "property-media",
    "listing-price": "listing-price",
    "sign-paperwork": "sign-paperwork",
}


def resolve_step_id(raw_id: Optional[str]) -> str:
    """
    Translate a possibly legacy step id into its canonical form.

    Known aliases map to their canonical id; anything else comes back
    unchanged. A missing id resolves to the first section.
    """
    if not raw_id:
        return FIRST_SECTION
    return LEGACY_STEP_ALIASES.get(raw_id, raw_id)


def resolve_section_id(raw_id: Optional[str]) -> str:
    """
    Translate a raw step id into a canonical section id.

    Basic-information question ids belong to the first section. Ids that
    match no section fall back to the first section.
    """
    resolved = resolve_step_id(raw_id)
    if resolved in SECTION_ORDER:
        return resolved
    if resolved in BASIC_INFO_CATALOG:
        return FIRST_SECTION
    logger.warning(f"Unresolvable step id {raw_id!r}, defaulting to {FIRST_SECTION}")
    return FIRST_SECTION


def is_known_step_id(raw_id: Optional[str]) -> bool:
    """Check whether an id is an alias or a canonical section id."""
    return bool(raw_id) and (raw_id in LEGACY_STEP_ALIASES or raw_id in SECTION_ORDER)


def flow_step_for_section(section_id: str) -> str:
    """Get the flow step id to navigate to for a section."""
    return FLOW_STEP_IDS.get(section_id, section_id)
