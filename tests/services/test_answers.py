# -*- coding: utf-8 -*-
"""
Tests for writing answers into draft sections.
"""

from models.listing_draft import ListingDraft
from services.wizard.answers import write_answer, read_answer, is_answered, is_valid_address
from services.wizard.step_catalog import BASIC_INFO_CATALOG


def step(step_id):
    return BASIC_INFO_CATALOG.get(step_id)


class TestOwnership:
    """Test each step writes only its own section."""

    def test_field_step_writes_sub_field(self):
        draft = ListingDraft()
        write_answer(draft, step("bedrooms"), "3")
        assert draft.data == {"propertySpecs": {"bedrooms": "3"}}

    def test_section_step_writes_whole_section(self, full_address):
        draft = ListingDraft()
        write_answer(draft, step("address"), full_address)
        write_answer(draft, step("occupancy"), "vacant")
        assert draft.data["address"] == full_address
        assert draft.data["occupancyStatus"] == "vacant"

    def test_survey_stored_as_bool(self):
        draft = ListingDraft()
        write_answer(draft, step("survey"), "yes")
        assert draft.data["hasExistingSurvey"] is True
        assert read_answer(draft, step("survey")) == "yes"
        write_answer(draft, step("survey"), "no")
        assert draft.data["hasExistingSurvey"] is False
        assert read_answer(draft, step("survey")) == "no"

    def test_survey_accepts_bool(self):
        draft = ListingDraft()
        write_answer(draft, step("survey"), True)
        assert draft.data["hasExistingSurvey"] is True
        assert read_answer(draft, step("survey")) == "yes"
        write_answer(draft, step("survey"), False)
        assert draft.data["hasExistingSurvey"] is False
        assert read_answer(draft, step("survey")) == "no"

    def test_unanswered_reads_empty(self):
        draft = ListingDraft()
        assert read_answer(draft, step("pool")) == ""
        assert read_answer(draft, step("survey")) == ""
        assert read_answer(draft, step("address")) == {}


class TestDependentClearing:
    """Test answers that invalidate follow-ups."""

    def test_no_covered_parking_clears_both_follow_ups(self):
        draft = ListingDraft.from_dict({"propertySpecs": {
            "coveredParking": "other",
            "coveredParkingOtherDescription": "Lean-to",
            "coveredParkingElectricity": "220v",
        }})
        written = write_answer(draft, step("coveredParking"), "none")
        assert draft.get_field("propertySpecs", "coveredParkingOtherDescription") == ""
        assert draft.get_field("propertySpecs", "coveredParkingElectricity") == ""
        assert written["propertySpecs.coveredParkingElectricity"] == ""

    def test_carport_keeps_electricity(self):
        draft = ListingDraft.from_dict({"propertySpecs": {
            "coveredParkingOtherDescription": "Lean-to",
            "coveredParkingElectricity": "120v",
        }})
        write_answer(draft, step("coveredParking"), "1-vehicle-carport")
        assert draft.get_field("propertySpecs", "coveredParkingElectricity") == "120v"
        assert draft.get_field("propertySpecs", "coveredParkingOtherDescription") == ""

    def test_square_footage_source(self):
        draft = ListingDraft.from_dict({"propertySpecs": {"squareFootageSourceOther": "Old flyer"}})
        write_answer(draft, step("squareFootageSource"), "appraisal")
        assert draft.get_field("propertySpecs", "squareFootageSourceOther") == ""

    def test_occupancy_change_clears_follow_ups(self):
        draft = ListingDraft.from_dict({
            "occupancyStatus": "owner-occupied",
            "propertySpecs": {"occupancyVacatePlans": "yes"},
        })
        write_answer(draft, step("occupancy"), "vacant")
        assert draft.get_field("propertySpecs", "occupancyVacatePlans") == ""

    def test_clearing_does_not_create_missing_fields(self):
        draft = ListingDraft()
        write_answer(draft, step("coveredParking"), "none")
        assert draft.data == {"propertySpecs": {"coveredParking": "none"}}


class TestAnswered:
    """Test answered checks."""

    def test_address_needs_full_address(self, full_address):
        draft = ListingDraft()
        write_answer(draft, step("address"), {"street": "123 Main St"})
        assert not is_answered(draft, step("address"))
        write_answer(draft, step("address"), full_address)
        assert is_answered(draft, step("address"))

    def test_false_survey_counts_as_answered(self):
        draft = ListingDraft()
        write_answer(draft, step("survey"), "no")
        assert is_answered(draft, step("survey"))

    def test_is_valid_address(self, full_address):
        assert is_valid_address(full_address)
        assert not is_valid_address({"fullAddress": "  "})
        assert not is_valid_address("123 Main St")
