# -*- coding: utf-8 -*-
"""
Wizard step definition model.
"""

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple


class StepKind(Enum):
    """Input shape of a wizard step."""
    ADDRESS = "address"    # address input with autocomplete
    SELECT = "select"      # single-select dropdown
    CHOICE = "radio"       # single-choice button grid
    TEXT = "input"         # free-text input


@dataclass(frozen=True)
class StepOption:
    """A selectable value of a select/choice step."""
    value: str
    label: str
    description: str = ""


@dataclass(frozen=True)
class StepDefinition:
    """
    One question of the listing wizard.

    Ownership:
    - section: draft section the step writes to
    - field: sub-field inside that section, or None when the step
      owns the whole section value
    """

    id: str
    kind: StepKind
    title: str
    section: str
    field: Optional[str] = None
    options: Tuple[StepOption, ...] = ()
    description: str = ""
    placeholder: str = ""
    input_type: str = "text"
    required: bool = False
    show_description: bool = False

    # Visibility
    is_conditional: bool = False
    depends_on: FrozenSet[str] = dataclasses.field(default_factory=frozenset)

    # None = derive from kind
    auto_advance: Optional[bool] = None

    @property
    def has_options(self) -> bool:
        """Check if the step offers a fixed set of values."""
        return self.kind in (StepKind.SELECT, StepKind.CHOICE)

    @property
    def advances_automatically(self) -> bool:
        """Whether answering this step schedules a move to the next one."""
        if self.auto_advance is not None:
            return self.auto_advance
        return self.kind in (StepKind.SELECT, StepKind.CHOICE, StepKind.ADDRESS)

    def option_values(self) -> Tuple[str, ...]:
        """Get the option values in declared order."""
        return tuple(option.value for option in self.options)

    def get_option_label(self, value: str) -> str:
        """Get the display label for a value, falling back to the raw value."""
        for option in self.options:
            if option.value == value:
                return option.label
        return value
