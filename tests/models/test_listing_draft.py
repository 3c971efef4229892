# -*- coding: utf-8 -*-
"""
Tests for the listing draft model.
"""

from models.listing_draft import ListingDraft


class TestSections:
    """Test section access."""

    def test_sections_absent_until_written(self):
        draft = ListingDraft()
        assert not draft.has_section("propertySpecs")
        assert draft.get_field("propertySpecs", "bedrooms") == ""
        draft.set_field("propertySpecs", "bedrooms", "2")
        assert draft.has_section("propertySpecs")

    def test_set_field_copies_section(self):
        specs = {"bedrooms": "2"}
        draft = ListingDraft.from_dict({"propertySpecs": specs})
        draft.set_field("propertySpecs", "pool", "none")
        assert specs == {"bedrooms": "2"}

    def test_visibility_fields(self):
        draft = ListingDraft.from_dict({
            "propertySpecs": {"propertyType": "condo", "coveredParking": "other"},
            "occupancyStatus": "vacant",
        })
        assert draft.property_type == "condo"
        assert draft.covered_parking == "other"
        assert draft.square_footage_source == ""
        assert draft.occupancy_status == "vacant"

    def test_non_text_visibility_fields_read_empty(self):
        draft = ListingDraft.from_dict({
            "propertySpecs": {"propertyType": ["condo"], "coveredParking": {"v": "other"}, "squareFootageSource": 7},
            "occupancyStatus": False,
        })
        assert draft.property_type == ""
        assert draft.covered_parking == ""
        assert draft.square_footage_source == ""
        assert draft.occupancy_status == ""


class TestSerialization:
    """Test the three accepted shapes."""

    def test_to_dict_round_trip(self):
        draft = ListingDraft(listing_id="listing-1")
        draft.set_section("occupancyStatus", "vacant")
        draft.last_step = "occupancy"
        restored = ListingDraft.from_dict(draft.to_dict())
        assert restored.listing_id == "listing-1"
        assert restored.reference_number == draft.reference_number
        assert restored.last_step == "occupancy"
        assert restored.data == {"occupancyStatus": "vacant"}

    def test_envelope(self):
        restored = ListingDraft.from_dict({
            "listingId": "listing-2",
            "lastStep": "home-facts",
            "lastUpdated": "2024-06-01T10:00:00Z",
            "data": {"basicInfo": {}},
        })
        assert restored.listing_id == "listing-2"
        assert restored.last_step == "home-facts"
        assert restored.data == {"basicInfo": {}}

    def test_envelope_keeps_stored_reference(self):
        restored = ListingDraft.from_dict({
            "listingId": "listing-3",
            "lastStep": "address",
            "data": {},
            "referenceNumber": "LST-20240601100000-ABCD",
        })
        assert restored.reference_number == "LST-20240601100000-ABCD"

    def test_timestamps_survive_round_trip(self):
        draft = ListingDraft("listing-4")
        restored = ListingDraft.from_dict(draft.to_dict())
        assert restored.created_at == draft.created_at
        assert restored.status == "draft"

    def test_bare_sections(self):
        restored = ListingDraft.from_dict({"titleHolder": {"numberOfOwners": 2}})
        assert restored.get_field("titleHolder", "numberOfOwners") == 2

    def test_reference_prefix(self):
        assert ListingDraft().reference_number.startswith("LST-")


class TestBasicInfo:
    """Test basicInfo seeding and snapshots."""

    def test_seed_only_missing_sections(self):
        draft = ListingDraft.from_dict({
            "propertySpecs": {"bedrooms": "5"},
            "basicInfo": {
                "propertySpecs": {"bedrooms": "3"},
                "occupancyStatus": "vacant",
                "_fromOnboardingWithAddress": True,
            },
        })
        assert draft.seed_from_basic_info()
        assert draft.get_field("propertySpecs", "bedrooms") == "5"
        assert draft.occupancy_status == "vacant"
        assert draft.get_data("_fromOnboardingWithAddress") is True

    def test_seed_without_basic_info(self):
        assert not ListingDraft().seed_from_basic_info()

    def test_snapshot(self):
        draft = ListingDraft.from_dict({
            "address": {"fullAddress": "1 Elm St"},
            "hasExistingSurvey": True,
        })
        snapshot = draft.basic_info_snapshot()
        assert snapshot == {
            "address": {"fullAddress": "1 Elm St"},
            "propertySpecs": {},
            "hasExistingSurvey": True,
            "occupancyStatus": "",
        }

    def test_onboarding_flag_needs_address(self):
        assert not ListingDraft.from_dict({"_fromOnboardingWithAddress": True}).from_onboarding_with_address
        assert ListingDraft.from_dict({
            "_fromOnboardingWithAddress": True,
            "address": {"fullAddress": "1 Elm St"},
        }).from_onboarding_with_address
