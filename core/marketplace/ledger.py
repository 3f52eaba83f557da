"""Listing ledger: the sale-offer state machine.

Per collectible: Unlisted -> Active -> Sold | Cancelled. Sold and Cancelled
are terminal for that Listing; the collectible can be listed again under a
new Listing record.

Every open/close/cancel runs under the collectible's own lock, so the
precondition checks and the writes they guard are atomic for that id while
other ids proceed in parallel. Inside that, locks are always taken in the
order ledger -> transaction log -> registry. A sale holds the ledger and
the log before it writes anything, and its first write is the registry
one, so a lock timeout during a sale leaves every store untouched.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from threading import Lock
from typing import Callable, Optional, Union

from core.errors import (
    AlreadyListedError,
    InvalidPriceError,
    MarketplaceError,
    NotFoundError,
    NotListedError,
    NotOwnerError,
    PriceMismatchError,
    ValidationError,
)
from core.marketplace.locks import KeyedLocks, guarded
from core.marketplace.registry import Registry
from core.marketplace.transactions import TransactionLog
from core.types import Listing, Transaction

logger = logging.getLogger(__name__)

PriceLike = Union[Decimal, int, float, str]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_price(value: PriceLike) -> Decimal:
    """Convert an incoming price to Decimal and require it to be positive.

    Floats go through their shortest repr so 1.5 becomes Decimal("1.5").
    """
    try:
        price = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidPriceError(f"Invalid price: {value!r}") from exc
    if not price.is_finite() or price <= 0:
        raise InvalidPriceError("Price must be greater than zero")
    return price


def _require(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def _synthetic_tx_hash() -> str:
    return "0x" + uuid.uuid4().hex + uuid.uuid4().hex


class ListingLedger:
    """Owns Listing records and drives listing/buy/cancel transitions."""

    def __init__(
        self,
        registry: Registry,
        transactions: TransactionLog,
        *,
        lock_timeout: float = 5.0,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._registry = registry
        self._transactions = transactions
        self._timeout = lock_timeout
        self._clock = clock
        self._id_locks = KeyedLocks(timeout=lock_timeout)
        self._lock = Lock()
        # nft_id -> every Listing ever opened for it, oldest first
        self._listings: dict[str, list[Listing]] = {}

    def _guard(self):
        return guarded(self._lock, self._timeout, "listing ledger")

    def _active(self, nft_id: str) -> Optional[Listing]:
        history = self._listings.get(nft_id)
        if history and history[-1].status == "Active":
            return history[-1]
        return None

    def _reject(self, action: str, nft_id: str, exc: MarketplaceError) -> MarketplaceError:
        logger.warning("Rejected %s for %s: %s", action, nft_id, exc)
        return exc

    def open(self, nft_id: str, price: PriceLike, seller: str) -> Listing:
        """List a collectible for sale.

        Raises:
            InvalidPriceError: If price is not a positive number.
            ValidationError: If seller is empty.
            NotFoundError: If the collectible does not exist.
            NotOwnerError: If seller is not the current owner.
            AlreadyListedError: If an Active listing already exists.
        """
        asking = parse_price(price)
        seller = _require(seller, "seller_address")

        with self._id_locks.hold(nft_id):
            collectible = self._registry.get(nft_id)
            if collectible.owner != seller:
                raise self._reject("listing", nft_id, NotOwnerError("Only the owner can list this collectible"))

            with self._guard():
                if self._active(nft_id) is not None:
                    raise self._reject("listing", nft_id, AlreadyListedError("Collectible is already listed"))
                listing = Listing(nft_id=nft_id, price=asking, seller=seller, listed_at=self._clock())
                self._registry.mutate_listing_state(nft_id, asking, True, listed_at=listing.listed_at)
                self._listings.setdefault(nft_id, []).append(listing)

        logger.info("Listed %s by %s at %s", nft_id, seller, asking)
        return listing

    def close_as_sold(self, nft_id: str, buyer: str, price: PriceLike) -> Transaction:
        """Complete a sale at exactly the asking price.

        Raises:
            InvalidPriceError: If price is not a positive number.
            ValidationError: If buyer is empty.
            NotListedError: If there is no Active listing for the collectible.
            PriceMismatchError: If price differs from the asking price.
        """
        offered = parse_price(price)
        buyer = _require(buyer, "buyer_address")

        with self._id_locks.hold(nft_id):
            with self._guard():
                listing = self._active(nft_id)
                if listing is None:
                    raise self._reject("purchase", nft_id, NotListedError("Collectible is not listed for sale"))
                # Exact comparison; see DESIGN.md on price matching.
                if offered != listing.price:
                    raise self._reject(
                        "purchase",
                        nft_id,
                        PriceMismatchError(f"Price mismatch: asking {listing.price}, offered {offered}"),
                    )

                tx = Transaction(
                    id=str(uuid.uuid4()),
                    nft_id=nft_id,
                    seller=listing.seller,
                    buyer=buyer,
                    price=listing.price,
                    transaction_hash=_synthetic_tx_hash(),
                    timestamp=self._clock(),
                )
                with self._transactions.hold() as append_tx:
                    self._registry.mutate_ownership(nft_id, buyer, clear_listing=True)
                    self._listings[nft_id][-1] = replace(listing, status="Sold")
                    append_tx(tx)

        logger.info("Sold %s from %s to %s for %s", nft_id, tx.seller, buyer, tx.price)
        return tx

    def cancel(self, nft_id: str, requester: str) -> Listing:
        """Withdraw an Active listing.

        Raises:
            ValidationError: If requester is empty.
            NotFoundError: If there is no Active listing for the collectible.
            NotOwnerError: If requester is not the listing's seller.
        """
        requester = _require(requester, "seller_address")

        with self._id_locks.hold(nft_id):
            with self._guard():
                listing = self._active(nft_id)
                if listing is None:
                    raise self._reject("cancel", nft_id, NotFoundError("No active listing for this collectible"))
                if listing.seller != requester:
                    raise self._reject("cancel", nft_id, NotOwnerError("Only the seller can cancel this listing"))

                self._registry.mutate_listing_state(nft_id, None, False)
                cancelled = replace(listing, status="Cancelled")
                self._listings[nft_id][-1] = cancelled

        logger.info("Cancelled listing for %s by %s", nft_id, requester)
        return cancelled

    def get_active(self, nft_id: str) -> Optional[Listing]:
        with self._guard():
            return self._active(nft_id)

    def active_listings(self) -> list[Listing]:
        """All Active listings, newest first."""
        with self._guard():
            active = [h[-1] for h in self._listings.values() if h and h[-1].status == "Active"]
        return sorted(active, key=lambda listing: listing.listed_at, reverse=True)

    def history_for(self, nft_id: str) -> list[Listing]:
        """Every listing ever opened for a collectible, oldest first."""
        with self._guard():
            return list(self._listings.get(nft_id, ()))
