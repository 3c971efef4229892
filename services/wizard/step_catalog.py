# -*- coding: utf-8 -*-
"""
Step catalog for the listing creation wizard.

Declares every basic-information question in display order. The catalog is
pure data: visibility rules live in step_filter, completion rules in
section_completion.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from app.config import Config
from models.listing_draft import (
    ADDRESS, PROPERTY_SPECS, HAS_EXISTING_SURVEY, OCCUPANCY_STATUS,
)
from models.step import StepDefinition, StepKind, StepOption
from services.exceptions import StepCatalogError
from utils.logger import get_logger

logger = get_logger(__name__)


def _options(*pairs) -> Tuple[StepOption, ...]:
    return tuple(StepOption(*pair) for pair in pairs)


def _counts(*values: str) -> Tuple[StepOption, ...]:
    return tuple(StepOption(value, value) for value in values)


class StepCatalog:
    """Ordered, read-only collection of step definitions."""

    def __init__(self, steps: Iterable[StepDefinition]):
        self._steps: Tuple[StepDefinition, ...] = tuple(steps)
        self._by_id: Dict[str, StepDefinition] = {}
        for step in self._steps:
            if step.id in self._by_id:
                raise StepCatalogError("Duplicate step id in catalog", step_id=step.id)
            self._by_id[step.id] = step

    def __iter__(self) -> Iterator[StepDefinition]:
        return iter(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __contains__(self, step_id: object) -> bool:
        return step_id in self._by_id

    @property
    def steps(self) -> Tuple[StepDefinition, ...]:
        return self._steps

    def ids(self) -> List[str]:
        """Get step ids in declared order."""
        return [step.id for step in self._steps]

    def index_of(self, step_id: str) -> int:
        """Get the declared position of a step, or -1."""
        for index, step in enumerate(self._steps):
            if step.id == step_id:
                return index
        return -1

    def get(self, step_id: str) -> Optional[StepDefinition]:
        """
        Look up a step by id.

        Unknown ids are a programming error: raised in dev mode,
        logged and skipped (None) otherwise.
        """
        step = self._by_id.get(step_id)
        if step is None:
            if Config.DEV_MODE:
                raise StepCatalogError("Unknown step id", step_id=step_id, context="StepCatalog.get")
            logger.error(f"Unknown step id requested from catalog: {step_id!r}")
        return step

    def steps_for_section(self, section: str) -> List[StepDefinition]:
        """Get the steps that write to a draft section."""
        return [step for step in self._steps if step.section == section]


# =============================================================================
# Basic information questions
# =============================================================================

BASIC_INFO_STEPS: Tuple[StepDefinition, ...] = (
    StepDefinition(
        id="address",
        kind=StepKind.ADDRESS,
        title="What is the Address of the Property?",
        description="Enter the complete address of the property you want to list",
        section=ADDRESS,
        required=True,
    ),
    StepDefinition(
        id="propertyType",
        kind=StepKind.SELECT,
        title="What type of property is this?",
        section=PROPERTY_SPECS,
        field="propertyType",
        options=_options(
            ("residential", "Single Family Home", "Standalone house on its own lot"),
            ("halfDuplex", "Half Duplex", "One half of a 2-family housing structure sharing one common wall"),
            ("condo", "Condominium", "Unit in a multi-unit building with shared ownership"),
            ("townhome", "Townhome", "Multi-story home sharing walls with adjacent units"),
            ("land", "Land/Lot", "Raw land or vacant lot"),
        ),
        required=True,
        # Seller confirms the property type with Next
        auto_advance=False,
    ),
    StepDefinition(
        id="bedrooms",
        kind=StepKind.CHOICE,
        title="How many Bedrooms does the Property have?",
        description="A bedroom must have a window and a closet",
        section=PROPERTY_SPECS,
        field="bedrooms",
        options=_counts("1", "2", "3", "4", "5", "6", "7", "8"),
        required=True,
    ),
    StepDefinition(
        id="fullBathrooms",
        kind=StepKind.CHOICE,
        title="How many Full Bathrooms does the Property have?",
        description="Full bathrooms include a toilet, sink, and bathtub/shower",
        section=PROPERTY_SPECS,
        field="fullBathrooms",
        options=_counts("1", "2", "3", "4", "5", "6"),
        required=True,
    ),
    StepDefinition(
        id="halfBathrooms",
        kind=StepKind.CHOICE,
        title="How many Half Bathrooms does the Property have?",
        description="Half bathrooms include a toilet and sink (no bathtub/shower)",
        section=PROPERTY_SPECS,
        field="halfBathrooms",
        options=_counts("0", "1", "2", "3", "4", "5"),
        required=True,
    ),
    StepDefinition(
        id="squareFeet",
        kind=StepKind.TEXT,
        title="What is the Square Footage of the Property?",
        description="Interior living space in square feet",
        section=PROPERTY_SPECS,
        field="squareFeet",
        placeholder="e.g., 2,400",
        required=True,
        show_description=True,
    ),
    StepDefinition(
        id="squareFootageSource",
        kind=StepKind.CHOICE,
        title="What is the source of the Square Footage?",
        section=PROPERTY_SPECS,
        field="squareFootageSource",
        options=_options(
            ("tax-assessor", "Tax Assessor Records"),
            ("appraisal", "Licensed Appraisal Report"),
            ("blueprints", "Architectural Blueprints"),
            ("building-permit", "Building Permit"),
            ("survey", "Survey"),
            ("prior-mls", "Prior MLS Listing"),
            ("other", "Other"),
        ),
    ),
    StepDefinition(
        id="squareFootageSourceOther",
        kind=StepKind.TEXT,
        title="Please describe the Other source of information for the Square Footage",
        section=PROPERTY_SPECS,
        field="squareFootageSourceOther",
        placeholder="e.g., Real estate listing, Homeowner records, etc.",
        is_conditional=True,
        depends_on=frozenset({"propertySpecs.squareFootageSource"}),
    ),
    StepDefinition(
        id="lotSize",
        kind=StepKind.TEXT,
        title="What is the Lot Size of the Property?",
        description="Total property size in square feet",
        section=PROPERTY_SPECS,
        field="lotSize",
        placeholder="e.g., 8,000",
        input_type="number",
        show_description=True,
        is_conditional=True,
        depends_on=frozenset({"propertySpecs.propertyType"}),
    ),
    StepDefinition(
        id="yearBuilt",
        kind=StepKind.TEXT,
        title="What year was the Property built?",
        section=PROPERTY_SPECS,
        field="yearBuilt",
        placeholder="e.g., 1995",
        input_type="number",
    ),
    StepDefinition(
        id="garage",
        kind=StepKind.CHOICE,
        title="How many Garage Spaces does the Property have?",
        section=PROPERTY_SPECS,
        field="garage",
        options=_options(
            ("none", "No Garage"),
            ("1", "1 Car"),
            ("2", "2 Car"),
            ("3", "3 Car"),
            ("4", "4 Car"),
            ("5+", "5+ Car"),
        ),
    ),
    StepDefinition(
        id="coveredParking",
        kind=StepKind.CHOICE,
        title="Does the Property have any additional Covered Parking?",
        section=PROPERTY_SPECS,
        field="coveredParking",
        options=_options(
            ("none", "None"),
            ("other", "Other"),
            ("1-vehicle-carport", "1 Vehicle Carport"),
            ("2-vehicle-carport", "2 Vehicle Carport"),
            ("1-vehicle-detached", "1 Vehicle Detached Garage"),
            ("2-vehicle-detached", "2 Vehicle Detached Garage"),
        ),
    ),
    StepDefinition(
        id="coveredParkingOtherDescription",
        kind=StepKind.TEXT,
        title="Please describe the Other Covered Parking Structure:",
        section=PROPERTY_SPECS,
        field="coveredParkingOtherDescription",
        placeholder="e.g., Metal carport, Lean-to structure, etc.",
        is_conditional=True,
        depends_on=frozenset({"propertySpecs.coveredParking"}),
    ),
    StepDefinition(
        id="coveredParkingElectricity",
        kind=StepKind.CHOICE,
        title="Does the Covered Parking have electricity for vehicle charging such as RV?",
        section=PROPERTY_SPECS,
        field="coveredParkingElectricity",
        options=_options(
            ("none", "None"),
            ("120v", "120V"),
            ("220v", "220V"),
            ("unknown", "Unknown"),
        ),
        is_conditional=True,
        depends_on=frozenset({"propertySpecs.coveredParking"}),
    ),
    StepDefinition(
        id="pool",
        kind=StepKind.CHOICE,
        title="Does the Property have a Pool?",
        section=PROPERTY_SPECS,
        field="pool",
        options=_options(
            ("none", "No Pool"),
            ("community", "Community Pool"),
            ("in-ground", "In-Ground Pool"),
            ("above-ground", "Above-Ground Pool"),
            ("spa-only", "Spa/Hot Tub Only"),
        ),
    ),
    StepDefinition(
        id="survey",
        kind=StepKind.CHOICE,
        title="Do you have a Survey for the Property?",
        description="A property survey shows exact boundaries, structures, and features of your property",
        section=HAS_EXISTING_SURVEY,
        options=_options(("yes", "Yes"), ("no", "No")),
        show_description=True,
    ),
    StepDefinition(
        id="occupancy",
        kind=StepKind.SELECT,
        title="What is the Current Occupancy of the Property?",
        description="This information helps buyers understand the current status of the property",
        section=OCCUPANCY_STATUS,
        options=_options(
            ("owner-occupied", "Owner Occupied"),
            ("non-owner-occupied", "Non-Owner Occupied"),
            ("vacant", "Vacant"),
        ),
        show_description=True,
    ),
    StepDefinition(
        id="occupancyVacatePlans",
        kind=StepKind.CHOICE,
        title="Do you presently have plans to vacate the property prior to going under contract?",
        section=PROPERTY_SPECS,
        field="occupancyVacatePlans",
        options=_options(("yes", "Yes"), ("no", "No")),
        is_conditional=True,
        depends_on=frozenset({"occupancyStatus"}),
    ),
    StepDefinition(
        id="occupancyVacantDuration",
        kind=StepKind.TEXT,
        title="How long has it been Vacant?",
        section=PROPERTY_SPECS,
        field="occupancyVacantDuration",
        placeholder="e.g., 3 months, 1 year",
        is_conditional=True,
        depends_on=frozenset({"occupancyStatus"}),
    ),
)

BASIC_INFO_CATALOG = StepCatalog(BASIC_INFO_STEPS)
