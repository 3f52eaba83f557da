"""Marketplace state: collectible registry, listing ledger, transaction log, stats."""

from core.marketplace.ledger import ListingLedger, parse_price
from core.marketplace.registry import Registry
from core.marketplace.service import Marketplace
from core.marketplace.stats import StatsAggregator
from core.marketplace.transactions import TransactionLog

__all__ = [
    "ListingLedger",
    "Marketplace",
    "Registry",
    "StatsAggregator",
    "TransactionLog",
    "parse_price",
]
