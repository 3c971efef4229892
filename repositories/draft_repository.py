# -*- coding: utf-8 -*-
"""
Listing draft repository.

Stores one row per listing with the section data as JSON. Loaded drafts
come back in the envelope the rest of the product exchanges:
{listingId, lastStep, lastUpdated, data}.
"""

import json
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from .database import Database, RowProxy
from services.exceptions import DraftException, DraftNotFoundError
from utils.logger import get_logger

logger = get_logger(__name__)


class DraftRepository:
    """Repository for listing draft persistence."""

    def __init__(self, db: Database):
        self.db = db

    def save(
        self,
        listing_id: str,
        last_step: Optional[str],
        draft_data: Mapping[str, Any],
        status: str = "draft",
        reference_number: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Insert or replace a listing draft.

        Args:
            listing_id: Listing id (e.g. "listing-1718000000000")
            last_step: Raw step id the seller last visited
            draft_data: Section mapping to store
            status: Draft status
            reference_number: Optional human-readable reference

        Returns:
            The stored envelope
        """
        if not listing_id:
            raise DraftException("Cannot save a draft without a listing id", context="DraftRepository.save")

        now = datetime.now().isoformat()
        try:
            payload = json.dumps(dict(draft_data), ensure_ascii=False, default=str)
        except (TypeError, ValueError) as e:
            raise DraftException(
                "Draft data is not serializable",
                listing_id=listing_id, original_error=e, context="DraftRepository.save",
            )

        query = """
            INSERT INTO listing_drafts (
                listing_id, reference_number, status, last_step,
                draft_data, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(listing_id) DO UPDATE SET
                reference_number = COALESCE(excluded.reference_number, listing_drafts.reference_number),
                status = excluded.status,
                last_step = excluded.last_step,
                draft_data = excluded.draft_data,
                updated_at = excluded.updated_at
        """
        self.db.execute(query, (listing_id, reference_number, status, last_step, payload, now, now))
        logger.debug(f"Saved draft: {listing_id} (last step {last_step})")

        return {
            "listingId": listing_id,
            "lastStep": last_step,
            "lastUpdated": now,
            "data": json.loads(payload),
        }

    def load(self, listing_id: str) -> Optional[Dict[str, Any]]:
        """
        Load a draft envelope.

        Returns:
            {listingId, lastStep, lastUpdated, data} or None
        """
        row = self.db.fetch_one("SELECT * FROM listing_drafts WHERE listing_id = ?", (listing_id,))
        if row is None:
            return None
        return self._row_to_envelope(row)

    def get_required(self, listing_id: str) -> Dict[str, Any]:
        """Load a draft envelope, raising DraftNotFoundError when absent."""
        envelope = self.load(listing_id)
        if envelope is None:
            raise DraftNotFoundError("Draft not found", listing_id=listing_id, context="DraftRepository.get_required")
        return envelope

    def get_status(self, listing_id: str) -> Optional[str]:
        """Get the stored status of a draft, or None if absent."""
        return self.db.scalar("SELECT status FROM listing_drafts WHERE listing_id = ?", (listing_id,))

    def exists(self, listing_id: str) -> bool:
        return self.get_status(listing_id) is not None

    def list_drafts(self, limit: int = 50, offset: int = 0, status: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        List drafts, most recently updated first.

        Args:
            limit: Maximum number of results
            offset: Pagination offset
            status: Optional status filter

        Returns:
            List of draft envelopes
        """
        query = "SELECT * FROM listing_drafts"
        params: list = []
        if status:
            query += " WHERE status = ?"
            params.append(status)
        query += " ORDER BY updated_at DESC LIMIT ? OFFSET ?"
        params.extend([limit, offset])

        rows = self.db.fetch_all(query, tuple(params))
        return [self._row_to_envelope(row) for row in rows]

    def count_drafts(self, status: Optional[str] = None) -> int:
        if status:
            return self.db.scalar("SELECT COUNT(*) AS count FROM listing_drafts WHERE status = ?", (status,)) or 0
        return self.db.scalar("SELECT COUNT(*) AS count FROM listing_drafts") or 0

    def delete(self, listing_id: str) -> bool:
        """
        Delete a draft.

        Returns:
            True if a row was removed
        """
        with self.db.transaction() as conn:
            cursor = conn.execute("DELETE FROM listing_drafts WHERE listing_id = ?", (listing_id,))
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info(f"Deleted draft: {listing_id}")
        return deleted

    def _row_to_envelope(self, row: RowProxy) -> Dict[str, Any]:
        raw = row.get("draft_data") or "{}"
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Corrupt draft data for {row['listing_id']}: {e}")
            data = {}

        return {
            "listingId": row["listing_id"],
            "lastStep": row.get("last_step"),
            "lastUpdated": row.get("updated_at"),
            "data": data if isinstance(data, dict) else {},
            "status": row.get("status"),
            "referenceNumber": row.get("reference_number"),
        }
