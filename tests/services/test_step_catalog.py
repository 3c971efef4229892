# -*- coding: utf-8 -*-
"""
Tests for the step catalog.
"""

import pytest

from models.step import StepDefinition, StepKind
from services.exceptions import StepCatalogError, ConfigurationException
from services.wizard.step_catalog import StepCatalog, BASIC_INFO_CATALOG


EXPECTED_ORDER = [
    "address", "propertyType", "bedrooms", "fullBathrooms", "halfBathrooms",
    "squareFeet", "squareFootageSource", "squareFootageSourceOther", "lotSize",
    "yearBuilt", "garage", "coveredParking", "coveredParkingOtherDescription",
    "coveredParkingElectricity", "pool", "survey", "occupancy",
    "occupancyVacatePlans", "occupancyVacantDuration",
]


class TestBasicInfoCatalog:
    """Test the declared basic-information questions."""

    def test_declared_order(self):
        """Test the catalog keeps the declared question order."""
        assert BASIC_INFO_CATALOG.ids() == EXPECTED_ORDER
        assert len(BASIC_INFO_CATALOG) == 19

    def test_property_type_options(self):
        """Test property type values match the listing product."""
        step = BASIC_INFO_CATALOG.get("propertyType")
        assert step.kind == StepKind.SELECT
        assert step.option_values() == ("residential", "halfDuplex", "condo", "townhome", "land")
        assert step.get_option_label("halfDuplex") == "Half Duplex"

    def test_property_type_does_not_auto_advance(self):
        """Test the property type select waits for Next."""
        assert not BASIC_INFO_CATALOG.get("propertyType").advances_automatically
        assert BASIC_INFO_CATALOG.get("occupancy").advances_automatically

    def test_step_kinds(self):
        """Test a sample of step kinds."""
        assert BASIC_INFO_CATALOG.get("address").kind == StepKind.ADDRESS
        assert BASIC_INFO_CATALOG.get("bedrooms").kind == StepKind.CHOICE
        assert BASIC_INFO_CATALOG.get("squareFeet").kind == StepKind.TEXT
        assert not BASIC_INFO_CATALOG.get("squareFeet").advances_automatically

    def test_conditional_steps_declare_dependencies(self):
        """Test conditional steps name the fields they depend on."""
        conditional = [step for step in BASIC_INFO_CATALOG if step.is_conditional]
        assert {step.id for step in conditional} == {
            "squareFootageSourceOther", "lotSize", "coveredParkingOtherDescription",
            "coveredParkingElectricity", "occupancyVacatePlans", "occupancyVacantDuration",
        }
        for step in conditional:
            assert step.depends_on

    def test_steps_for_section(self):
        """Test section ownership lookup."""
        assert [s.id for s in BASIC_INFO_CATALOG.steps_for_section("occupancyStatus")] == ["occupancy"]
        assert [s.id for s in BASIC_INFO_CATALOG.steps_for_section("hasExistingSurvey")] == ["survey"]

    def test_index_of(self):
        """Test declared positions."""
        assert BASIC_INFO_CATALOG.index_of("address") == 0
        assert BASIC_INFO_CATALOG.index_of("nope") == -1
        assert "pool" in BASIC_INFO_CATALOG


class TestStepDefinition:
    """Test step definition defaults."""

    def test_defaults(self):
        step = StepDefinition(id="notes", kind=StepKind.TEXT, title="Notes", section="additionalInfo")
        assert step.field is None
        assert step.depends_on == frozenset()
        assert not step.advances_automatically

    def test_field_and_dependencies(self):
        step = StepDefinition(
            id="lotSize", kind=StepKind.SELECT, title="Lot size", section="propertySpecs",
            field="lotSize", is_conditional=True, depends_on=frozenset({"propertyType"}),
        )
        assert step.field == "lotSize"
        assert step.depends_on == {"propertyType"}
        assert step.advances_automatically


class TestCatalogErrors:
    """Test catalog misconfiguration handling."""

    def test_unknown_id_raises_in_dev_mode(self, dev_mode):
        """Test unknown ids raise a configuration error in dev mode."""
        with pytest.raises(StepCatalogError) as exc_info:
            BASIC_INFO_CATALOG.get("bathtubs")
        assert isinstance(exc_info.value, ConfigurationException)
        assert exc_info.value.step_id == "bathtubs"
        assert "[bathtubs]" in str(exc_info.value)

    def test_unknown_id_returns_none_in_production(self, prod_mode):
        """Test unknown ids are skipped outside dev mode."""
        assert BASIC_INFO_CATALOG.get("bathtubs") is None

    def test_duplicate_ids_rejected(self):
        """Test duplicate ids are a configuration error."""
        step = StepDefinition(id="x", kind=StepKind.TEXT, title="X", section="s", field="x")
        with pytest.raises(StepCatalogError):
            StepCatalog([step, step])
