# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ConfigurationException(Exception):
    """Exception raised for wizard configuration errors."""

    def __init__(self, message: str, step_id: str = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.step_id = step_id
        self.context = context

    def __str__(self):
        if self.step_id:
            return f"[{self.step_id}] {self.message}"
        return self.message


class StepCatalogError(ConfigurationException):
    """Raised when a step id is not declared in the step catalog."""


class DraftException(Exception):
    """Exception raised for draft storage errors."""

    def __init__(self, message: str, listing_id: str = None,
                 original_error: Exception = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.listing_id = listing_id
        self.original_error = original_error
        self.context = context


class DraftNotFoundError(DraftException):
    """Raised when a listing draft does not exist in the store."""
