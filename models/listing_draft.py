# -*- coding: utf-8 -*-
"""
Listing Draft - the record a listing-in-progress accumulates.

Section data is stored under the section names the rest of the product
uses (camelCase), so drafts saved by any client resume here unchanged.
Sections are absent until first written.
"""

import copy
from typing import Any, Dict, Mapping, Optional

from app.config import Config
from models.wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


# Sections filled by the basic-information questions
ADDRESS = "address"
PROPERTY_SPECS = "propertySpecs"
HAS_EXISTING_SURVEY = "hasExistingSurvey"
OCCUPANCY_STATUS = "occupancyStatus"

BASIC_INFO_SECTIONS = (ADDRESS, PROPERTY_SPECS, HAS_EXISTING_SURVEY, OCCUPANCY_STATUS)

# Top-level sections attached once each stage of the listing flow is submitted
BASIC_INFO = "basicInfo"
LISTING_SERVICE = "listingService"
TITLE_HOLDER = "titleHolder"
FINANCIAL_INFO = "financialInfo"
SELLER_DISCLOSURE = "sellerDisclosure"
ADDITIONAL_INFO = "additionalInfo"
SECURE_ACCESS = "secureAccess"
PROPERTY_MEDIA = "propertyMedia"
LISTING_PRICE = "listingPrice"
SIGN_PAPERWORK = "signPaperwork"

FLOW_SECTIONS = (
    BASIC_INFO, LISTING_SERVICE, TITLE_HOLDER, FINANCIAL_INFO, SELLER_DISCLOSURE,
    ADDITIONAL_INFO, SECURE_ACCESS, PROPERTY_MEDIA, LISTING_PRICE, SIGN_PAPERWORK,
)

# Set by onboarding when the seller already typed the address on the landing page
FROM_ONBOARDING_FLAG = "_fromOnboardingWithAddress"

_SERIALIZED_MARKERS = ("wizard_id", "reference_number")


def as_text(value: Any) -> str:
    """Read a stored choice value; anything but a string reads as unanswered."""
    return value if isinstance(value, str) else ""


class ListingDraft(WizardContext):
    """Context for the listing creation wizard."""

    def __init__(self, listing_id: Optional[str] = None):
        """Initialize listing draft."""
        super().__init__()
        self.listing_id: Optional[str] = listing_id

    def _get_reference_prefix(self) -> str:
        """Override to use listing-specific prefix."""
        return Config.DRAFT_REFERENCE_PREFIX

    # =========================================================================
    # Section access
    # =========================================================================

    def has_section(self, section: str) -> bool:
        """Check whether a section has been written."""
        return section in self.data

    def get_section(self, section: str, default: Any = None) -> Any:
        """Get a section value."""
        return self.data.get(section, default)

    def set_section(self, section: str, value: Any):
        """Replace a whole section."""
        self.update_data(section, value)

    def get_field(self, section: str, field: str, default: Any = "") -> Any:
        """Get a sub-field of a section; missing sections read as the default."""
        value = self.data.get(section)
        if not isinstance(value, Mapping):
            return default
        return value.get(field, default)

    def set_field(self, section: str, field: str, value: Any):
        """Set a sub-field of a section, creating the section on first write."""
        current = self.data.get(section)
        section_data = dict(current) if isinstance(current, Mapping) else {}
        section_data[field] = value
        self.update_data(section, section_data)

    def clear_field(self, section: str, field: str):
        """Blank a sub-field if the section exists."""
        if isinstance(self.data.get(section), Mapping) and field in self.data[section]:
            self.set_field(section, field, "")

    def sections(self) -> Dict[str, Any]:
        """Get a detached copy of all section data."""
        return copy.deepcopy(self.data)

    # =========================================================================
    # Fields that drive step visibility
    # =========================================================================

    @property
    def property_type(self) -> str:
        return as_text(self.get_field(PROPERTY_SPECS, "propertyType"))

    @property
    def covered_parking(self) -> str:
        return as_text(self.get_field(PROPERTY_SPECS, "coveredParking"))

    @property
    def square_footage_source(self) -> str:
        return as_text(self.get_field(PROPERTY_SPECS, "squareFootageSource"))

    @property
    def occupancy_status(self) -> str:
        return as_text(self.data.get(OCCUPANCY_STATUS))

    @property
    def from_onboarding_with_address(self) -> bool:
        """True when onboarding captured a complete address already."""
        return bool(self.data.get(FROM_ONBOARDING_FLAG)) and bool(
            self.get_field(ADDRESS, "fullAddress")
        )

    def seed_from_basic_info(self) -> bool:
        """
        Prefill the question sections from an attached basicInfo payload.

        Only sections not written yet are copied. Returns True if anything
        was seeded.
        """
        basic_info = self.data.get(BASIC_INFO)
        if not isinstance(basic_info, Mapping):
            return False

        seeded = False
        for key in BASIC_INFO_SECTIONS + (FROM_ONBOARDING_FLAG,):
            if key not in self.data and key in basic_info:
                self.data[key] = copy.deepcopy(basic_info[key])
                seeded = True
        return seeded

    def basic_info_snapshot(self) -> Dict[str, Any]:
        """Collect the basic-information answers into one section payload."""
        snapshot = {
            ADDRESS: copy.deepcopy(self.data.get(ADDRESS) or {}),
            PROPERTY_SPECS: copy.deepcopy(self.data.get(PROPERTY_SPECS) or {}),
            HAS_EXISTING_SURVEY: self.data.get(HAS_EXISTING_SURVEY),
            OCCUPANCY_STATUS: self.data.get(OCCUPANCY_STATUS) or "",
        }
        if self.data.get(FROM_ONBOARDING_FLAG):
            snapshot[FROM_ONBOARDING_FLAG] = True
        return snapshot

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Serialize context to dictionary."""
        base_data = super().to_dict()
        base_data["data"] = self.sections()
        base_data["listing_id"] = self.listing_id
        return base_data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'ListingDraft':
        """
        Restore a draft.

        Accepts three shapes:
        - a dict produced by to_dict()
        - a stored draft envelope {listingId, lastStep, lastUpdated, data}
        - a bare section mapping {basicInfo: ..., titleHolder: ...}
        """
        ctx = cls()
        if data is None:
            return ctx

        if any(marker in data for marker in _SERIALIZED_MARKERS):
            cls._restore_base_fields(ctx, data)
            ctx.listing_id = data.get("listing_id")
        elif "lastStep" in data or "listingId" in data:
            ctx.listing_id = data.get("listingId")
            ctx.last_step = data.get("lastStep")
            ctx.reference_number = data.get("referenceNumber") or ctx.reference_number
            ctx.data = copy.deepcopy(dict(data.get("data") or {}))
        else:
            ctx.data = copy.deepcopy(dict(data))

        logger.debug(f"Restored draft {ctx.reference_number} with sections {sorted(ctx.data)}")
        return ctx

    @classmethod
    def coerce(cls, value: Any) -> 'ListingDraft':
        """Return value itself if it is already a draft, else restore it."""
        if isinstance(value, ListingDraft):
            return value
        if value is None:
            return cls()
        return cls.from_dict(value)
