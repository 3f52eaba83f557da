from __future__ import annotations

from decimal import Decimal

from core.marketplace.ledger import ListingLedger
from core.marketplace.transactions import TransactionLog
from core.types import MarketplaceStats


class StatsAggregator:
    """Read-only marketplace projections, recomputed on every call."""

    def __init__(self, ledger: ListingLedger, transactions: TransactionLog, *, recent_limit: int = 10) -> None:
        self._ledger = ledger
        self._transactions = transactions
        self._recent_limit = recent_limit

    def snapshot(self) -> MarketplaceStats:
        active = self._ledger.active_listings()
        return MarketplaceStats(
            total_listings=len(active),
            total_volume=sum((tx.price for tx in self._transactions.all()), Decimal("0")),
            floor_price=min((listing.price for listing in active), default=None),
            recent_transactions=tuple(self._transactions.recent(self._recent_limit)),
        )
