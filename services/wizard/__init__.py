# -*- coding: utf-8 -*-
"""
Listing wizard engine services.

- step_catalog: the basic-information questions in display order
- step_filter: which questions the current draft shows
- section_completion: per-section completion rules and flow order
- step_aliases: legacy step id resolution
- answers: writing answers into their owning draft section
- progress: section and question progress view model
"""

from services.wizard.step_catalog import StepCatalog, BASIC_INFO_CATALOG, BASIC_INFO_STEPS
from services.wizard.step_filter import filter_steps, clamp_index, visible_step_ids
from services.wizard.section_completion import (
    SectionCompletion,
    SectionDefinition,
    SECTION_DEFINITIONS,
    SECTION_ORDER,
    FIRST_SECTION,
    is_section_complete,
    next_section,
    previous_section,
)
from services.wizard.step_aliases import (
    ALIAS_TABLE_VERSION,
    LEGACY_STEP_ALIASES,
    resolve_step_id,
    resolve_section_id,
    flow_step_for_section,
)
from services.wizard.progress import (
    SectionProgress,
    StepProgress,
    ProgressViewModel,
    build_section_progress,
    build_step_progress,
    completed_count,
)

__all__ = [
    'StepCatalog',
    'BASIC_INFO_CATALOG',
    'BASIC_INFO_STEPS',
    'filter_steps',
    'clamp_index',
    'visible_step_ids',
    'SectionCompletion',
    'SectionDefinition',
    'SECTION_DEFINITIONS',
    'SECTION_ORDER',
    'FIRST_SECTION',
    'is_section_complete',
    'next_section',
    'previous_section',
    'ALIAS_TABLE_VERSION',
    'LEGACY_STEP_ALIASES',
    'resolve_step_id',
    'resolve_section_id',
    'flow_step_for_section',
    'SectionProgress',
    'StepProgress',
    'ProgressViewModel',
    'build_section_progress',
    'build_step_progress',
    'completed_count',
]
