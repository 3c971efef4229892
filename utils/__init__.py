# -*- coding: utf-8 -*-
"""
Listing Wizard Utility Module
"""

from .logger import get_logger, setup_logger
from .helpers import format_last_updated, format_step_label, is_blank

__all__ = [
    "get_logger",
    "setup_logger",
    "format_last_updated",
    "format_step_label",
    "is_blank",
]
