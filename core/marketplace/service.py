from __future__ import annotations

import logging
from typing import Optional

from core.config import MarketplaceConfig
from core.content.minting import MintRequest, mint_collectible
from core.errors import ContentTooLargeError
from core.marketplace.ledger import ListingLedger, PriceLike
from core.marketplace.registry import Registry
from core.marketplace.seed import seed_registry
from core.marketplace.stats import StatsAggregator
from core.marketplace.transactions import TransactionLog
from core.types import Collectible, Listing, MarketplaceStats, Transaction, UserCollection

logger = logging.getLogger(__name__)


class Marketplace:
    """Wires the registry, listing ledger, transaction log and stats together.

    One instance holds the whole volatile marketplace state. Request
    handlers receive it by dependency injection and only ever see the
    methods below; ownership and listing state change through
    list_for_sale, buy and cancel_listing alone.
    """

    def __init__(self, config: Optional[MarketplaceConfig] = None) -> None:
        self.config = config or MarketplaceConfig()
        timeout = self.config.lock_timeout_seconds
        self._registry = Registry(lock_timeout=timeout)
        self._transactions = TransactionLog(lock_timeout=timeout)
        self._ledger = ListingLedger(self._registry, self._transactions, lock_timeout=timeout)
        self._stats = StatsAggregator(
            self._ledger,
            self._transactions,
            recent_limit=self.config.recent_transactions_limit,
        )
        if self.config.seed_samples:
            seeded = seed_registry(self._registry, self.config.demo_owner)
            logger.info("Seeded marketplace with %d sample collectibles", len(seeded))

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def mint(self, request: MintRequest) -> Collectible:
        """Validate an upload, derive its collectible and register it.

        Raises:
            ValidationError: If a required field or the content is empty.
            ContentTooLargeError: If the content exceeds max_upload_bytes.
        """
        request.validate()
        if len(request.content) > self.config.max_upload_bytes:
            raise ContentTooLargeError(
                f"Content is {len(request.content)} bytes; limit is {self.config.max_upload_bytes}"
            )
        record = mint_collectible(request, token_id=self._registry.next_token_id())
        return self._registry.create(record)

    def list_for_sale(self, nft_id: str, price: PriceLike, seller: str) -> Listing:
        return self._ledger.open(nft_id, price, seller)

    def buy(self, nft_id: str, buyer: str, price: PriceLike) -> Transaction:
        return self._ledger.close_as_sold(nft_id, buyer, price)

    def cancel_listing(self, nft_id: str, requester: str) -> Listing:
        return self._ledger.cancel(nft_id, requester)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, nft_id: str) -> Collectible:
        """Raises NotFoundError for unknown ids."""
        return self._registry.get(nft_id)

    def list_all(self) -> list[Collectible]:
        """Every collectible, newest first."""
        return sorted(self._registry.list_all(), key=lambda c: c.created_at, reverse=True)

    def count(self) -> int:
        return self._registry.count()

    def active_listings(self) -> list[Listing]:
        return self._ledger.active_listings()

    def active_listing(self, nft_id: str) -> Optional[Listing]:
        return self._ledger.get_active(nft_id)

    def listing_history(self, nft_id: str) -> list[Listing]:
        return self._ledger.history_for(nft_id)

    def transactions_for(self, nft_id: str) -> list[Transaction]:
        """Sales of one collectible, oldest first."""
        return self._transactions.for_collectible(nft_id)

    def all_transactions(self) -> list[Transaction]:
        return self._transactions.all()

    def transaction_count(self) -> int:
        return self._transactions.count()

    def get_marketplace_stats(self) -> MarketplaceStats:
        return self._stats.snapshot()

    def collection(self, wallet: str) -> UserCollection:
        owned = sorted(self._registry.owned_by(wallet), key=lambda c: c.created_at, reverse=True)
        return UserCollection(
            wallet_address=wallet,
            owned_nfts=tuple(owned),
            listed_nfts=tuple(c for c in owned if c.is_listed),
            transaction_history=tuple(
                sorted(self._transactions.history_for(wallet), key=lambda tx: tx.timestamp, reverse=True)
            ),
        )
