# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

from datetime import datetime
from typing import Any, Optional, Union


def format_last_updated(
    value: Optional[Union[datetime, str]],
    format_str: Optional[str] = None
) -> str:
    """
    Format a draft's last-saved timestamp for display.

    Args:
        value: Datetime or ISO string
        format_str: Output format string (defaults to Config.LAST_UPDATED_FORMAT)

    Returns:
        Formatted string, or "Recently" when the value is missing or unparseable
    """
    if value is None or value == "":
        return "Recently"

    if format_str is None:
        from app.config import Config
        format_str = Config.LAST_UPDATED_FORMAT

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return "Recently"

    if isinstance(value, datetime):
        return value.strftime(format_str)

    return "Recently"


def format_step_label(step: Optional[str]) -> str:
    """Capitalize the first letter of a raw step id for the draft badge."""
    if not step:
        return ""
    return step[0].upper() + step[1:]


def is_blank(value: Any) -> bool:
    """
    Check whether a draft answer counts as empty.

    None, empty strings and empty collections are blank; False and 0 are answers.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False
