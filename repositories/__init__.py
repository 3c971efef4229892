# -*- coding: utf-8 -*-
"""
Listing Wizard Repository Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "Database",
    "DraftRepository",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "Database":
        from .database import Database
        return Database
    elif name == "DraftRepository":
        from .draft_repository import DraftRepository
        return DraftRepository
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
