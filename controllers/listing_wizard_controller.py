# -*- coding: utf-8 -*-
"""
Listing Wizard Controller - drives the basic-information questions.

Handles:
- Recording answers into the draft
- Recomputing the visible questions after every answer
- Next/previous/jump navigation over the visible questions
- Delayed auto-advance and completion, through a single pending transition

Every user action first cancels the pending transition, so at most one
delayed move is armed at any time.
"""

from typing import Any, Callable, Dict, List, Optional, Union

from PyQt5.QtCore import QTimer, pyqtSignal

from app.config import Config
from controllers.base_controller import BaseController
from models.listing_draft import ListingDraft, BASIC_INFO_SECTIONS
from models.step import StepDefinition, StepKind
from models.wizard_context import STATUS_COMPLETED, STATUS_DRAFT, STATUS_IN_PROGRESS
from services.wizard.answers import write_answer, read_answer, is_valid_address
from services.wizard.progress import (
    SectionProgress, StepProgress, build_section_progress, build_step_progress,
)
from services.wizard.section_completion import FIRST_SECTION
from services.wizard.step_aliases import resolve_step_id
from services.wizard.step_catalog import StepCatalog, BASIC_INFO_CATALOG
from services.wizard.step_filter import filter_steps, clamp_index
from utils.logger import get_logger

logger = get_logger(__name__)

# Section id -> draft sections written by that section's questions
SECTION_STEP_OWNERSHIP = {
    FIRST_SECTION: BASIC_INFO_SECTIONS,
}


class ListingWizardController(BaseController):
    """
    Controller for the listing creation wizard.

    Signals:
        step_changed(old_index, new_index)
        answer_recorded(step_id, value)
        visible_steps_changed(step_ids)
        celebration_requested()
        wizard_completed(draft_dict)
        wizard_exited(draft_dict, current_step_id)
    """

    step_changed = pyqtSignal(int, int)
    answer_recorded = pyqtSignal(str, object)
    visible_steps_changed = pyqtSignal(list)  # visible step ids
    celebration_requested = pyqtSignal()
    wizard_completed = pyqtSignal(object)  # final draft dict
    wizard_exited = pyqtSignal(object, str)  # partial draft dict, raw step id

    def __init__(
        self,
        catalog: Optional[StepCatalog] = None,
        initial_step_id: Optional[str] = None,
        initial_draft: Union[ListingDraft, Dict[str, Any], None] = None,
        parent=None,
    ):
        """
        Initialize the controller.

        Args:
            catalog: Step catalog (defaults to the basic-information questions)
            initial_step_id: Raw step id to resume at; legacy ids are accepted
            initial_draft: ListingDraft, serialized draft or section mapping
            parent: Optional QObject parent
        """
        super().__init__(parent)
        self.catalog = catalog if catalog is not None else BASIC_INFO_CATALOG
        self.draft = ListingDraft.coerce(initial_draft)
        if self.draft.seed_from_basic_info():
            logger.debug(f"Seeded question sections from basicInfo for {self.draft.reference_number}")
        self.draft.status = STATUS_IN_PROGRESS

        self._completed = False
        self._pending_name = ""
        self._pending_action: Optional[Callable[[], Any]] = None
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._run_pending)

        self._visible: List[StepDefinition] = filter_steps(self.catalog, self.draft)
        self._current_index = self._initial_index(initial_step_id)
        self.draft.current_step_index = self._current_index

        logger.info(
            f"Listing wizard started at step {self._current_index} "
            f"({self.current_step_id or 'none'}) of {len(self._visible)}"
        )

    def _initial_index(self, initial_step_id: Optional[str]) -> int:
        if initial_step_id:
            return self._seek_index(initial_step_id)
        if self.draft.from_onboarding_with_address:
            # Address already captured during onboarding
            return clamp_index(1, self._visible)
        return 0

    # =========================================================================
    # Read API
    # =========================================================================

    @property
    def visible_steps(self) -> List[StepDefinition]:
        return list(self._visible)

    @property
    def visible_step_ids(self) -> List[str]:
        return [step.id for step in self._visible]

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_step(self) -> Optional[StepDefinition]:
        if 0 <= self._current_index < len(self._visible):
            return self._visible[self._current_index]
        return None

    @property
    def current_step_id(self) -> str:
        step = self.current_step
        return step.id if step else ""

    @property
    def is_completed(self) -> bool:
        return self._completed

    @property
    def has_pending_transition(self) -> bool:
        return self._pending_action is not None and self._timer.isActive()

    @property
    def pending_transition(self) -> str:
        """Name of the armed transition ("advance" or "complete"), or ""."""
        return self._pending_name if self.has_pending_transition else ""

    def get_step_count(self) -> int:
        """Get number of visible steps."""
        return len(self._visible)

    def get_answer(self, step_id: str) -> Any:
        """Get the stored answer for a step, in the shape answer() accepts."""
        step = self.catalog.get(step_id)
        if step is None:
            return None
        return read_answer(self.draft, step)

    def get_current_value(self) -> Any:
        """Get the stored answer for the current step."""
        step = self.current_step
        if step is None:
            return None
        return read_answer(self.draft, step)

    def can_go_next(self) -> bool:
        """Next is always available until the wizard completes."""
        return not self._completed

    def can_go_previous(self) -> bool:
        return not self._completed and self._current_index > 0

    def is_last_step(self) -> bool:
        return self._current_index >= len(self._visible) - 1

    def get_progress_percentage(self) -> float:
        """
        Get current position as a percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if len(self._visible) <= 1:
            return 100.0 if self._completed else 0.0
        return (self._current_index / (len(self._visible) - 1)) * 100.0

    def get_step_progress(self) -> List[StepProgress]:
        """Question-level progress over the visible steps."""
        return build_step_progress(self._visible, self._current_index, self.draft)

    def get_section_progress(self) -> List[SectionProgress]:
        """Section-level progress; the wizard itself sits in the first section."""
        return build_section_progress(self.draft, self.current_step_id or FIRST_SECTION)

    # =========================================================================
    # User actions
    # =========================================================================

    def answer(self, step_id: str, value: Any) -> bool:
        """
        Record an answer.

        Writes into the step's owning section, clears dependent answers,
        recomputes the visible steps and, when the answered step is the
        current one, schedules the auto-advance.

        Returns:
            True if the answer was recorded
        """
        self._cancel_pending()
        if self._completed:
            logger.debug(f"Ignoring answer for {step_id}: wizard already completed")
            return False

        step = self.catalog.get(step_id)
        if step is None:
            self._emit_error("answer", f"Unknown step id: {step_id}")
            return False

        was_current = step.id == self.current_step_id
        written = write_answer(self.draft, step, value)
        self._log_operation("answer", step_id=step_id, written=written)
        self.answer_recorded.emit(step_id, value)
        self.data_changed.emit()

        self._refresh_visible()

        if was_current and step.id == self.current_step_id:
            delay = self._advance_delay(step, value)
            if delay is not None:
                self._schedule("advance", delay, self._advance)
        return True

    def next_step(self) -> bool:
        """
        Move forward one step.

        On the last visible step this requests the celebration and
        schedules completion instead.
        """
        self._cancel_pending()
        if self._completed:
            logger.debug("Ignoring next: wizard already completed")
            return False
        return self._advance()

    def previous_step(self) -> bool:
        """Move back one step; a no-op on the first step."""
        self._cancel_pending()
        if self._completed:
            logger.debug("Ignoring previous: wizard already completed")
            return False
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self._current_index})")
            return False

        logger.info(f"Navigating back: Step {self._current_index} → {self._current_index - 1}")
        return self._navigate_to(self._current_index - 1)

    def jump_to(self, raw_step_id: Optional[str]) -> bool:
        """
        Jump to a step by raw id.

        Legacy ids are resolved first. A section id lands on that section's
        first visible step; anything not found lands on the first step.
        """
        self._cancel_pending()
        if self._completed:
            logger.debug(f"Ignoring jump to {raw_step_id}: wizard already completed")
            return False

        self._refresh_visible()
        target = self._seek_index(raw_step_id)
        self._navigate_to(target)
        return True

    def exit(self) -> bool:
        """
        Leave the wizard, keeping the partial draft.

        Emits wizard_exited with the draft and the raw current step id.
        """
        self._cancel_pending()
        if self._completed:
            logger.debug("Ignoring exit: wizard already completed")
            return False

        step_id = self.current_step_id
        self.draft.status = STATUS_DRAFT
        self.draft.last_step = step_id or None
        self.draft.current_step_index = self._current_index
        logger.info(f"Exiting listing wizard at {step_id or 'no step'}")
        self.wizard_exited.emit(self.draft.to_dict(), step_id)
        return True

    # =========================================================================
    # Internals
    # =========================================================================

    def _advance(self) -> bool:
        if self.is_last_step():
            logger.info("Last step reached, requesting completion")
            self.celebration_requested.emit()
            self._schedule("complete", Config.COMPLETION_DELAY_MS, self._complete)
            return True

        logger.info(f"Navigating: Step {self._current_index} → {self._current_index + 1}")
        return self._navigate_to(self._current_index + 1)

    def _complete(self):
        if self._completed:
            return
        self._completed = True
        self.draft.status = STATUS_COMPLETED
        self.draft.last_step = FIRST_SECTION
        logger.info(f"Listing wizard completed for {self.draft.reference_number}")
        self.wizard_completed.emit(self.draft.to_dict())

    def _advance_delay(self, step: StepDefinition, value: Any) -> Optional[int]:
        """Get the auto-advance delay for an answer, or None to stay put."""
        if not step.advances_automatically:
            return None
        if step.kind == StepKind.SELECT:
            return Config.SELECT_ADVANCE_DELAY_MS
        if step.kind == StepKind.CHOICE:
            return Config.CHOICE_ADVANCE_DELAY_MS
        if step.kind == StepKind.ADDRESS:
            return Config.ADDRESS_ADVANCE_DELAY_MS if is_valid_address(value) else None
        return None

    def _seek_index(self, raw_step_id: Optional[str]) -> int:
        """Find the visible index for a raw or legacy step id."""
        ids = [step.id for step in self._visible]
        if raw_step_id in ids:
            return ids.index(raw_step_id)

        resolved = resolve_step_id(raw_step_id)
        if resolved in ids:
            return ids.index(resolved)

        owned = SECTION_STEP_OWNERSHIP.get(resolved)
        if owned:
            for index, step in enumerate(self._visible):
                if step.section in owned:
                    return index

        logger.warning(f"Step {raw_step_id!r} is not visible, starting at the first step")
        return 0

    def _refresh_visible(self):
        """Recompute the visible steps and clamp the current index."""
        visible = filter_steps(self.catalog, self.draft)
        if [step.id for step in visible] == [step.id for step in self._visible]:
            return

        self._visible = visible
        self.visible_steps_changed.emit([step.id for step in visible])

        clamped = clamp_index(self._current_index, visible)
        if clamped != self._current_index:
            logger.debug(f"Clamped step index {self._current_index} → {clamped}")
            self._navigate_to(clamped)

    def _navigate_to(self, new_index: int) -> bool:
        new_index = clamp_index(new_index, self._visible)
        if new_index == self._current_index:
            return False

        old_index = self._current_index
        self._current_index = new_index
        self.draft.current_step_index = new_index
        self.step_changed.emit(old_index, new_index)
        logger.debug(f"Step {new_index} is now active: {self.current_step_id}")
        return True

    def _schedule(self, name: str, delay_ms: int, action: Callable[[], Any]):
        self._cancel_pending()
        self._pending_name = name
        self._pending_action = action
        self._timer.start(max(0, int(delay_ms)))
        logger.debug(f"Scheduled {name} in {delay_ms} ms")

    def _cancel_pending(self):
        if self.has_pending_transition:
            logger.debug(f"Cancelled pending {self._pending_name}")
        self._timer.stop()
        self._pending_action = None
        self._pending_name = ""

    def _run_pending(self):
        action = self._pending_action
        self._pending_action = None
        self._pending_name = ""
        if action is None or self._completed:
            return
        action()
