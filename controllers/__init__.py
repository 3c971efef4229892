# -*- coding: utf-8 -*-
"""
Listing Wizard Controllers
==========================
Controller layer between a desktop UI and the wizard engine.

Controllers provide:
- Qt signals for UI updates
- Standardized results via OperationResult
- Ownership of the single pending wizard transition

Usage:
    from controllers import ListingWizardController

    controller = ListingWizardController(initial_step_id="home-facts")
    controller.step_changed.connect(on_step_changed)
    controller.answer("propertyType", "condo")
    controller.next_step()
"""

# Base controller and result types
from controllers.base_controller import (
    BaseController,
    OperationResult,
)

# Wizard controller
from controllers.listing_wizard_controller import ListingWizardController

# All public exports
__all__ = [
    # Base
    "BaseController",
    "OperationResult",

    # Wizard
    "ListingWizardController",
]
