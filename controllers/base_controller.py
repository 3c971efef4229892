# -*- coding: utf-8 -*-
"""
Base Controller
===============
QObject base for the wizard controllers, plus the OperationResult value
returned by controller and service operations.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Outcome of an operation: success flag, payload and failure message."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, errors: Optional[List[str]] = None) -> 'OperationResult[T]':
        return cls(success=False, message=message, errors=list(errors or []))


class BaseController(QObject):
    """Shared signals and error bookkeeping for controllers."""

    operation_error = pyqtSignal(str, str)  # operation, message
    data_changed = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._last_error = ""

    @property
    def last_error(self) -> str:
        return self._last_error

    def _log_operation(self, operation: str, **details):
        logger.debug(f"{type(self).__name__}.{operation} {details}")

    def _emit_error(self, operation: str, message: str):
        """Remember the message, log it and emit operation_error."""
        self._last_error = message
        logger.error(f"{type(self).__name__}.{operation}: {message}")
        self.operation_error.emit(operation, message)
