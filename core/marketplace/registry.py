"""Collectible registry.

Owns every Collectible record. Records are frozen snapshots, so readers can
hold onto what they got back; each mutation replaces the stored snapshot in
a single step, which means a rejected mutation leaves the record untouched.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from threading import Lock
from typing import Optional

from core.errors import NotFoundError, ValidationError
from core.marketplace.locks import guarded
from core.types import Collectible

logger = logging.getLogger(__name__)


class Registry:
    """Thread-safe in-memory store of collectibles keyed by id."""

    def __init__(self, *, lock_timeout: float = 5.0) -> None:
        self._timeout = lock_timeout
        self._lock = Lock()
        self._records: dict[str, Collectible] = {}
        self._next_token_id = 1

    def _guard(self):
        return guarded(self._lock, self._timeout, "collectible registry")

    def next_token_id(self) -> int:
        """Allocate the next synthetic token number."""
        with self._guard():
            token_id = self._next_token_id
            self._next_token_id += 1
            return token_id

    def create(self, record: Collectible) -> Collectible:
        """Insert a new collectible.

        Raises:
            ValidationError: If a record with the same id already exists.
        """
        with self._guard():
            if record.id in self._records:
                raise ValidationError(f"Collectible {record.id} already exists")
            self._records[record.id] = record
        logger.info("Registered collectible %s (%s) for %s", record.id, record.rarity, record.owner)
        return record

    def get(self, nft_id: str) -> Collectible:
        """Return the collectible or raise NotFoundError."""
        with self._guard():
            record = self._records.get(nft_id)
        if record is None:
            raise NotFoundError(f"Collectible {nft_id} not found")
        return record

    def list_all(self) -> list[Collectible]:
        """Snapshot of all collectibles (no ordering guarantee)."""
        with self._guard():
            return list(self._records.values())

    def owned_by(self, wallet: str) -> list[Collectible]:
        with self._guard():
            return [r for r in self._records.values() if r.owner == wallet]

    def count(self) -> int:
        with self._guard():
            return len(self._records)

    # ------------------------------------------------------------------
    # Marketplace-internal mutations. Only the listing ledger calls these,
    # while holding the per-collectible lock.
    # ------------------------------------------------------------------

    def _update(self, nft_id: str, **changes) -> Collectible:
        with self._guard():
            current = self._records.get(nft_id)
            if current is None:
                raise NotFoundError(f"Collectible {nft_id} not found")
            updated = replace(current, **changes)
            self._records[nft_id] = updated
            return updated

    def mutate_ownership(self, nft_id: str, new_owner: str, *, clear_listing: bool = False) -> Collectible:
        """Transfer ownership, optionally clearing listing state in the same write."""
        changes: dict = {"owner": new_owner}
        if clear_listing:
            changes.update(price=None, is_listed=False, listing_date=None)
        return self._update(nft_id, **changes)

    def mutate_listing_state(
        self,
        nft_id: str,
        price: Optional[Decimal],
        listed: bool,
        *,
        listed_at: Optional[datetime] = None,
    ) -> Collectible:
        """Set or clear the sale price; price, flag and date always agree."""
        if listed != (price is not None):
            raise ValueError("price must be set exactly when the collectible is listed")
        if listed:
            return self._update(
                nft_id,
                price=price,
                is_listed=True,
                listing_date=listed_at or datetime.now(timezone.utc),
            )
        return self._update(nft_id, price=None, is_listed=False, listing_date=None)
