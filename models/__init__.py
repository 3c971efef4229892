# -*- coding: utf-8 -*-
"""
Listing Wizard Data Models
"""

from .step import StepKind, StepOption, StepDefinition
from .wizard_context import WizardContext
from .listing_draft import ListingDraft

__all__ = [
    "StepKind",
    "StepOption",
    "StepDefinition",
    "WizardContext",
    "ListingDraft",
]
