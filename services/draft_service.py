# -*- coding: utf-8 -*-
"""
Draft Service
=============
Persists listing drafts around the wizard controller.

- Exiting the wizard saves the partial draft at the step the seller left.
- Completing the wizard attaches the basicInfo section and saves at
  "basic-info".
- Later sections of the listing flow are attached with complete_section().
- resume() rebuilds a controller from a stored draft.
"""

import time
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from app.config import Config
from controllers.base_controller import OperationResult
from models.listing_draft import ListingDraft, BASIC_INFO
from repositories.database import Database
from repositories.draft_repository import DraftRepository
from services.exceptions import DraftException, DraftNotFoundError
from services.wizard.section_completion import FIRST_SECTION, SectionCompletion
from services.wizard.step_aliases import flow_step_for_section, resolve_section_id
from utils.helpers import format_last_updated, format_step_label
from utils.logger import get_logger

logger = get_logger(__name__)

DraftLike = Union[ListingDraft, Mapping[str, Any]]


@dataclass(frozen=True)
class DraftBadgeInfo:
    """Display data for the "Draft" badge on a listing card."""
    listing_id: str
    label: str
    last_updated_display: str
    last_step_display: str


class DraftService:
    """Service for saving and resuming listing drafts."""

    def __init__(self, db: Database):
        self.db = db
        self.repository = DraftRepository(db)
        self.last_result: Optional[OperationResult] = None

    @staticmethod
    def new_listing_id() -> str:
        """Generate a listing id of the form listing-<epoch millis>."""
        return f"{Config.DRAFT_ID_PREFIX}-{int(time.time() * 1000)}"

    # =========================================================================
    # Controller wiring
    # =========================================================================

    def attach(self, controller, listing_id: Optional[str] = None) -> str:
        """
        Save drafts whenever the controller exits or completes.

        Args:
            controller: ListingWizardController
            listing_id: Listing id to save under; generated when missing

        Returns:
            The listing id drafts are saved under
        """
        listing_id = listing_id or controller.draft.listing_id or self.new_listing_id()
        controller.draft.listing_id = listing_id

        controller.wizard_exited.connect(
            lambda draft, step_id: self._on_wizard_exited(listing_id, draft, step_id)
        )
        controller.wizard_completed.connect(
            lambda draft: self._on_wizard_completed(listing_id, draft)
        )
        logger.debug(f"Draft service attached to wizard for {listing_id}")
        return listing_id

    def _on_wizard_exited(self, listing_id: str, draft: Dict[str, Any], step_id: str):
        self.last_result = self.save_draft(listing_id, step_id or None, draft)

    def _on_wizard_completed(self, listing_id: str, draft: Dict[str, Any]):
        self.last_result = self.complete_basic_info(listing_id, draft)

    # =========================================================================
    # Operations
    # =========================================================================

    def save_draft(
        self,
        listing_id: str,
        last_step: Optional[str],
        draft: DraftLike,
        status: str = "draft",
    ) -> OperationResult[Dict[str, Any]]:
        """
        Save a draft under a listing id.

        Returns:
            OperationResult with the stored envelope
        """
        ctx = ListingDraft.coerce(draft)
        try:
            envelope = self.repository.save(
                listing_id,
                last_step,
                ctx.sections(),
                status=status,
                reference_number=ctx.reference_number,
            )
            logger.info(f"Draft saved for listing {listing_id} at {last_step}")
            return OperationResult.ok(data=envelope)
        except DraftException as e:
            logger.error(f"Rejected draft {listing_id}: {e}")
            return OperationResult.fail(message=e.message)
        except Exception as e:
            logger.error(f"Failed to save draft {listing_id}: {e}", exc_info=True)
            return OperationResult.fail(message=f"Could not save draft: {e}")

    def complete_basic_info(self, listing_id: str, draft: DraftLike) -> OperationResult[Dict[str, Any]]:
        """Attach the basicInfo section from the captured answers and save."""
        ctx = ListingDraft.coerce(draft)
        ctx.set_section(BASIC_INFO, ctx.basic_info_snapshot())
        return self.save_draft(listing_id, FIRST_SECTION, ctx)

    def complete_section(
        self,
        listing_id: str,
        section_id: str,
        section_data: Mapping[str, Any],
    ) -> OperationResult[Dict[str, Any]]:
        """
        Attach a submitted section to a stored draft and save it.

        Args:
            listing_id: Listing id
            section_id: Section id or legacy step id (e.g. "titleholder-information")
            section_data: Section payload

        Returns:
            OperationResult with the stored envelope
        """
        canonical = resolve_section_id(section_id)
        section = SectionCompletion.get_section(canonical)

        loaded = self.load_draft(listing_id)
        if not loaded.success:
            return loaded

        ctx = ListingDraft.from_dict(loaded.data)
        ctx.set_section(section.draft_key, dict(section_data))
        if not SectionCompletion.is_complete(canonical, ctx):
            logger.info(f"Section {canonical} saved but not yet complete for {listing_id}")
        return self.save_draft(listing_id, flow_step_for_section(canonical), ctx)

    def load_draft(self, listing_id: str) -> OperationResult[Dict[str, Any]]:
        """Load a stored draft envelope."""
        try:
            envelope = self.repository.get_required(listing_id)
        except DraftNotFoundError as e:
            logger.warning(f"{e.message}: {listing_id}")
            return OperationResult.fail(message=f"{e.message}: {listing_id}")
        except Exception as e:
            logger.error(f"Failed to load draft {listing_id}: {e}", exc_info=True)
            return OperationResult.fail(message=f"Could not load draft: {e}")
        return OperationResult.ok(data=envelope)

    def list_drafts(self, limit: Optional[int] = None, offset: int = 0) -> OperationResult[List[Dict[str, Any]]]:
        """List stored drafts, newest first."""
        try:
            drafts = self.repository.list_drafts(limit or Config.DRAFT_PAGE_SIZE, offset, status="draft")
            return OperationResult.ok(data=drafts)
        except Exception as e:
            logger.error(f"Failed to list drafts: {e}", exc_info=True)
            return OperationResult.fail(message=f"Could not list drafts: {e}")

    def delete_draft(self, listing_id: str) -> OperationResult[bool]:
        try:
            deleted = self.repository.delete(listing_id)
        except Exception as e:
            logger.error(f"Failed to delete draft {listing_id}: {e}", exc_info=True)
            return OperationResult.fail(message=f"Could not delete draft: {e}")
        if not deleted:
            return OperationResult.fail(message=f"Draft not found: {listing_id}")
        return OperationResult.ok(data=True)

    def resume(self, listing_id: str, parent=None) -> OperationResult:
        """
        Build a wizard controller from a stored draft at its last step.

        Returns:
            OperationResult with an attached ListingWizardController
        """
        from controllers.listing_wizard_controller import ListingWizardController

        result = self.load_draft(listing_id)
        if not result.success:
            return result

        envelope = result.data
        draft = ListingDraft.from_dict(envelope)
        controller = ListingWizardController(
            initial_step_id=envelope.get("lastStep"),
            initial_draft=draft,
            parent=parent,
        )
        self.attach(controller, listing_id)
        logger.info(f"Resumed listing {listing_id} at {envelope.get('lastStep')}")
        return OperationResult.ok(data=controller)

    def get_draft_badge(self, listing_id: str) -> OperationResult[DraftBadgeInfo]:
        """Get the badge text shown on a draft listing card."""
        result = self.load_draft(listing_id)
        if not result.success:
            return result

        envelope = result.data
        return OperationResult.ok(data=DraftBadgeInfo(
            listing_id=listing_id,
            label="Draft",
            last_updated_display=format_last_updated(envelope.get("lastUpdated")),
            last_step_display=format_step_label(envelope.get("lastStep")),
        ))
