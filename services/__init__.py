# -*- coding: utf-8 -*-
"""
Listing Wizard Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "DraftService",
    "DraftBadgeInfo",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "DraftService":
        from .draft_service import DraftService
        return DraftService
    elif name == "DraftBadgeInfo":
        from .draft_service import DraftBadgeInfo
        return DraftBadgeInfo
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
