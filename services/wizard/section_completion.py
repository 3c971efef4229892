# -*- coding: utf-8 -*-
"""
Section completion rules for listing drafts.

Decides, per top-level section of the listing flow, whether the draft holds
enough to call that section done. Rules read only the keys they need and
treat missing or malformed data as incomplete.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from models.listing_draft import (
    ListingDraft,
    BASIC_INFO, LISTING_SERVICE, TITLE_HOLDER, FINANCIAL_INFO, SELLER_DISCLOSURE,
    ADDITIONAL_INFO, SECURE_ACCESS, PROPERTY_MEDIA, LISTING_PRICE, SIGN_PAPERWORK,
)
from utils.logger import get_logger

logger = get_logger(__name__)

DraftLike = Union[ListingDraft, Mapping[str, Any], None]
SectionPredicate = Callable[[Mapping[str, Any]], bool]


def _sections(draft: DraftLike) -> Mapping[str, Any]:
    if isinstance(draft, ListingDraft):
        return draft.data
    if isinstance(draft, Mapping):
        return draft
    return {}


def _section(data: Mapping[str, Any], key: str) -> Optional[Mapping[str, Any]]:
    value = data.get(key)
    return value if isinstance(value, Mapping) else None


def _present(key: str) -> SectionPredicate:
    # An attached object counts, even an empty one
    def predicate(data: Mapping[str, Any]) -> bool:
        return isinstance(data.get(key), Mapping)
    return predicate


def _video_and_flag(key: str, flag: str) -> SectionPredicate:
    def predicate(data: Mapping[str, Any]) -> bool:
        section = _section(data, key)
        return bool(section and section.get("videoWatched") and section.get(flag))
    return predicate


def _listing_service_complete(data: Mapping[str, Any]) -> bool:
    section = _section(data, LISTING_SERVICE)
    return bool(section and section.get("serviceType") and section.get("termsAccepted"))


def _titleholder_complete(data: Mapping[str, Any]) -> bool:
    section = _section(data, TITLE_HOLDER)
    if not section or not section.get("numberOfOwners"):
        return False
    owners = section.get("owners")
    return isinstance(owners, (list, tuple)) and len(owners) > 0


def _sign_paperwork_complete(data: Mapping[str, Any]) -> bool:
    section = _section(data, SIGN_PAPERWORK)
    return bool(section and section.get("allRequiredDocsSigned"))


@dataclass(frozen=True)
class SectionDefinition:
    """A top-level stage of the listing flow."""
    id: str
    title: str
    estimated_time: str
    draft_key: str
    is_complete: SectionPredicate


SECTION_DEFINITIONS: Tuple[SectionDefinition, ...] = (
    SectionDefinition("basic-info", "Basic Information", "3-5 minutes",
                      BASIC_INFO, _present(BASIC_INFO)),
    SectionDefinition("listing-service", "Listing Service", "2-3 minutes",
                      LISTING_SERVICE, _listing_service_complete),
    SectionDefinition("titleholder", "Titleholder Information", "3-5 minutes",
                      TITLE_HOLDER, _titleholder_complete),
    SectionDefinition("financial", "Mortgage, Taxes and Liens", "2-10 minutes",
                      FINANCIAL_INFO, _present(FINANCIAL_INFO)),
    SectionDefinition("disclosure", "Sellers Disclosure", "5-10 minutes",
                      SELLER_DISCLOSURE, _present(SELLER_DISCLOSURE)),
    SectionDefinition("additional-info", "Additional Information", "3-5 minutes",
                      ADDITIONAL_INFO, _present(ADDITIONAL_INFO)),
    SectionDefinition("showing-access", "Showing Access", "3-5 minutes",
                      SECURE_ACCESS, _video_and_flag(SECURE_ACCESS, "accessMethodSelected")),
    SectionDefinition("property-media", "Property Media", "5-7 minutes",
                      PROPERTY_MEDIA, _video_and_flag(PROPERTY_MEDIA, "photographyScheduled")),
    SectionDefinition("listing-price", "Listing Price", "3-5 minutes",
                      LISTING_PRICE, _video_and_flag(LISTING_PRICE, "priceSubmitted")),
    SectionDefinition("sign-paperwork", "Sign Paperwork", "5-10 minutes",
                      SIGN_PAPERWORK, _sign_paperwork_complete),
)

SECTION_ORDER: Tuple[str, ...] = tuple(section.id for section in SECTION_DEFINITIONS)
FIRST_SECTION = SECTION_ORDER[0]

_BY_ID: Dict[str, SectionDefinition] = {section.id: section for section in SECTION_DEFINITIONS}


class SectionCompletion:
    """Evaluates section completion against a draft."""

    @staticmethod
    def get_section(section_id: str) -> Optional[SectionDefinition]:
        """Get a section definition by canonical id."""
        return _BY_ID.get(section_id)

    @staticmethod
    def is_complete(section_id: str, draft: DraftLike) -> bool:
        """
        Check whether a section counts as done.

        Args:
            section_id: Canonical section id (e.g. "titleholder")
            draft: ListingDraft or plain section mapping

        Returns:
            True if complete; unknown sections are never complete
        """
        section = _BY_ID.get(section_id)
        if section is None:
            logger.warning(f"Completion requested for unknown section: {section_id!r}")
            return False
        return section.is_complete(_sections(draft))

    @staticmethod
    def evaluate_all(draft: DraftLike) -> Dict[str, bool]:
        """Evaluate every section, in flow order."""
        data = _sections(draft)
        return {section.id: section.is_complete(data) for section in SECTION_DEFINITIONS}

    @staticmethod
    def completed_sections(draft: DraftLike) -> List[str]:
        """Get ids of the completed sections, in flow order."""
        return [section_id for section_id, done in SectionCompletion.evaluate_all(draft).items() if done]


def is_section_complete(section_id: str, draft: DraftLike) -> bool:
    """Module-level shortcut for SectionCompletion.is_complete."""
    return SectionCompletion.is_complete(section_id, draft)


def next_section(section_id: str) -> Optional[str]:
    """Get the section after section_id in the listing flow, or None."""
    if section_id not in _BY_ID:
        return None
    index = SECTION_ORDER.index(section_id)
    if index == len(SECTION_ORDER) - 1:
        return None
    return SECTION_ORDER[index + 1]


def previous_section(section_id: str) -> Optional[str]:
    """Get the section before section_id in the listing flow, or None."""
    if section_id not in _BY_ID:
        return None
    index = SECTION_ORDER.index(section_id)
    if index == 0:
        return None
    return SECTION_ORDER[index - 1]
