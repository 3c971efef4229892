# -*- coding: utf-8 -*-
"""
Progress view model for the listing flow.

Everything here is recomputed from the draft on each call; nothing is
cached between reads.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Union

from models.listing_draft import ListingDraft
from models.step import StepDefinition
from services.wizard.answers import is_answered
from services.wizard.section_completion import SECTION_DEFINITIONS, SectionCompletion
from services.wizard.step_aliases import resolve_section_id, flow_step_for_section

DraftLike = Union[ListingDraft, Mapping[str, Any], None]

# Completed sections that open a read-only summary instead of navigating
SUMMARY_SECTIONS = frozenset({"basic-info", "titleholder"})


@dataclass(frozen=True)
class SectionProgress:
    """Progress row for one top-level section."""
    section_id: str
    title: str
    estimated_time: str
    is_completed: bool
    is_current_step: bool

    @property
    def status(self) -> str:
        if self.is_completed:
            return "completed"
        if self.is_current_step:
            return "in_progress"
        return "pending"


@dataclass(frozen=True)
class StepProgress:
    """Progress row for one visible question."""
    step: StepDefinition
    is_completed: bool
    is_current_step: bool

    @property
    def step_id(self) -> str:
        return self.step.id


def build_section_progress(draft: DraftLike, last_step: Optional[str]) -> List[SectionProgress]:
    """
    Build the ordered section progress list.

    Args:
        draft: ListingDraft or plain section mapping
        last_step: Raw (possibly legacy) step id the seller last visited

    Returns:
        One SectionProgress per section, in flow order. Exactly one row is
        marked current; an unmatched id marks the first section.
    """
    current = resolve_section_id(last_step)
    completion = SectionCompletion.evaluate_all(draft)
    return [
        SectionProgress(
            section_id=section.id,
            title=section.title,
            estimated_time=section.estimated_time,
            is_completed=completion[section.id],
            is_current_step=section.id == current,
        )
        for section in SECTION_DEFINITIONS
    ]


def build_step_progress(
    steps: Sequence[StepDefinition],
    current_index: int,
    draft: DraftLike,
) -> List[StepProgress]:
    """Build the question-level progress list for the visible steps."""
    ctx = ListingDraft.coerce(draft)
    return [
        StepProgress(step=step, is_completed=is_answered(ctx, step), is_current_step=index == current_index)
        for index, step in enumerate(steps)
    ]


def completed_count(progress: Sequence[Union[SectionProgress, StepProgress]]) -> int:
    return sum(1 for row in progress if row.is_completed)


class ProgressViewModel:
    """Read-only progress state for the listing dashboard."""

    def __init__(self, draft: DraftLike, last_step: Optional[str] = None):
        self._draft = draft
        self._last_step = last_step

    @property
    def sections(self) -> List[SectionProgress]:
        return build_section_progress(self._draft, self._last_step)

    @property
    def current_section_id(self) -> str:
        return resolve_section_id(self._last_step)

    @property
    def completed_count(self) -> int:
        return completed_count(self.sections)

    @property
    def total_count(self) -> int:
        return len(SECTION_DEFINITIONS)

    @property
    def is_finished(self) -> bool:
        return self.completed_count == self.total_count

    def opens_summary(self, section_id: str) -> bool:
        """Check whether clicking a section shows its summary rather than navigating."""
        return section_id in SUMMARY_SECTIONS and SectionCompletion.is_complete(section_id, self._draft)

    def navigation_target(self, section_id: str) -> str:
        """Get the flow step id the jump affordance should open for a section."""
        return flow_step_for_section(resolve_section_id(section_id))
