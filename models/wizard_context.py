# -*- coding: utf-8 -*-
"""
Shared state carried by a wizard session.

Concrete wizards subclass WizardContext, keep their answers in `data`
and implement from_dict() for their own serialized shapes.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

# Lifecycle values for WizardContext.status
STATUS_DRAFT = "draft"
STATUS_IN_PROGRESS = "in_progress"
STATUS_COMPLETED = "completed"


class WizardContext(ABC):
    """Identity, lifecycle and section data of one wizard session."""

    def __init__(self):
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = STATUS_DRAFT
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = self.created_at
        self.current_step_index: int = 0
        self.last_step: Optional[str] = None
        self.data: Dict[str, Any] = {}
        self.reference_number: str = self._make_reference_number()

    def _get_reference_prefix(self) -> str:
        return "WIZ"

    def _make_reference_number(self) -> str:
        """PREFIX-YYYYMMDDHHMMSS-XXXX, e.g. LST-20260118153045-A3F2."""
        stamp = self.created_at.strftime("%Y%m%d%H%M%S")
        return f"{self._get_reference_prefix()}-{stamp}-{self.wizard_id[:4].upper()}"

    def touch(self):
        self.updated_at = datetime.now()

    def update_data(self, key: str, value: Any):
        """Store a section value and bump updated_at."""
        self.data[key] = value
        self.touch()

    def get_data(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize; subclasses extend the returned dict."""
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step_index": self.current_step_index,
            "last_step": self.last_step,
            "data": self.data,
        }

    @classmethod
    @abstractmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'WizardContext':
        ...

    @staticmethod
    def _parse_timestamp(value: Any, fallback: datetime) -> datetime:
        if isinstance(value, datetime):
            return value
        if not value:
            return fallback
        try:
            return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
        except ValueError:
            return fallback

    @classmethod
    def _restore_base_fields(cls, context: 'WizardContext', data: Mapping[str, Any]):
        """Copy the fields written by WizardContext.to_dict() onto context."""
        context.wizard_id = data.get("wizard_id") or context.wizard_id
        context.reference_number = data.get("reference_number") or context.reference_number
        context.status = data.get("status") or STATUS_DRAFT
        context.current_step_index = int(data.get("current_step_index") or 0)
        context.last_step = data.get("last_step")
        context.data = dict(data.get("data") or {})
        context.created_at = cls._parse_timestamp(data.get("created_at"), context.created_at)
        context.updated_at = cls._parse_timestamp(data.get("updated_at"), context.updated_at)
