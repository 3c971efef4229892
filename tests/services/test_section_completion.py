# -*- coding: utf-8 -*-
"""
Tests for section completion rules.
"""

import pytest

from models.listing_draft import ListingDraft
from services.wizard.section_completion import (
    SectionCompletion,
    SECTION_ORDER,
    FIRST_SECTION,
    is_section_complete,
    next_section,
    previous_section,
)


class TestSectionOrder:
    """Test the listing flow order."""

    def test_ten_sections(self):
        assert SECTION_ORDER == (
            "basic-info", "listing-service", "titleholder", "financial", "disclosure",
            "additional-info", "showing-access", "property-media", "listing-price",
            "sign-paperwork",
        )
        assert FIRST_SECTION == "basic-info"

    def test_next_and_previous(self):
        assert next_section("basic-info") == "listing-service"
        assert next_section("sign-paperwork") is None
        assert previous_section("listing-service") == "basic-info"
        assert previous_section("basic-info") is None
        assert next_section("unknown") is None

    def test_titles_and_times(self):
        section = SectionCompletion.get_section("financial")
        assert section.title == "Mortgage, Taxes and Liens"
        assert section.estimated_time == "2-10 minutes"


class TestPresencePredicates:
    """Test sections completed by attaching an object."""

    @pytest.mark.parametrize("section_id,key", [
        ("basic-info", "basicInfo"),
        ("financial", "financialInfo"),
        ("disclosure", "sellerDisclosure"),
        ("additional-info", "additionalInfo"),
    ])
    def test_attached_object_completes(self, section_id, key):
        """Test an attached object, even empty, completes the section."""
        assert not is_section_complete(section_id, {})
        assert is_section_complete(section_id, {key: {}})
        assert not is_section_complete(section_id, {key: None})

    def test_land_basic_info_ignores_room_counts(self):
        """Test land basic info completes without bedroom or bathroom fields."""
        draft = {"propertySpecs": {"propertyType": "land"}}
        assert not is_section_complete("basic-info", draft)
        draft["basicInfo"] = {"propertySpecs": {"propertyType": "land", "lotSize": "8000"}}
        assert is_section_complete("basic-info", draft)


class TestFieldPredicates:
    """Test sections with field-level rules."""

    def test_listing_service(self):
        assert not is_section_complete("listing-service", {"listingService": {"serviceType": "full"}})
        assert is_section_complete(
            "listing-service", {"listingService": {"serviceType": "full", "termsAccepted": True}})

    def test_titleholder_needs_owners(self):
        assert not is_section_complete("titleholder", {"titleHolder": {"numberOfOwners": 1, "owners": []}})
        assert not is_section_complete("titleholder", {"titleHolder": {"owners": [{"name": "A"}]}})
        assert is_section_complete(
            "titleholder", {"titleHolder": {"numberOfOwners": 1, "owners": [{"name": "A"}]}})

    @pytest.mark.parametrize("section_id,key,flag", [
        ("showing-access", "secureAccess", "accessMethodSelected"),
        ("property-media", "propertyMedia", "photographyScheduled"),
        ("listing-price", "listingPrice", "priceSubmitted"),
    ])
    def test_video_and_flag(self, section_id, key, flag):
        """Test sections that need the video watched and a flag set."""
        assert not is_section_complete(section_id, {key: {"videoWatched": True}})
        assert not is_section_complete(section_id, {key: {flag: True}})
        assert is_section_complete(section_id, {key: {"videoWatched": True, flag: True}})

    def test_sign_paperwork(self):
        assert not is_section_complete("sign-paperwork", {"signPaperwork": {"allRequiredDocsSigned": False}})
        assert is_section_complete("sign-paperwork", {"signPaperwork": {"allRequiredDocsSigned": True}})


class TestRobustness:
    """Test predicates never raise."""

    @pytest.mark.parametrize("draft", [None, {}, {"titleHolder": "x"}, {"secureAccess": []}])
    def test_malformed_drafts(self, draft):
        """Test malformed drafts evaluate as incomplete."""
        results = SectionCompletion.evaluate_all(draft)
        assert list(results) == list(SECTION_ORDER)
        assert not any(results.values())

    def test_unknown_section(self):
        assert not is_section_complete("escrow", {"basicInfo": {}})

    def test_accepts_listing_draft(self):
        draft = ListingDraft.from_dict({"basicInfo": {}, "listingService": {"serviceType": "x"}})
        assert SectionCompletion.completed_sections(draft) == ["basic-info"]
