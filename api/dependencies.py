"""Marketplace singleton handed to route handlers via FastAPI Depends."""

from __future__ import annotations

import threading
from typing import Optional

from core.config import MarketplaceConfig
from core.marketplace import Marketplace

# Global marketplace instance (in-memory, reset on restart)
_marketplace: Optional[Marketplace] = None
_marketplace_lock = threading.Lock()


def get_marketplace() -> Marketplace:
    """Get or initialize the marketplace."""
    global _marketplace
    if _marketplace is None:
        with _marketplace_lock:
            if _marketplace is None:
                _marketplace = Marketplace(MarketplaceConfig.from_env())
    return _marketplace


def reset_marketplace(config: Optional[MarketplaceConfig] = None) -> Marketplace:
    """Replace the marketplace with a fresh instance (used by tests)."""
    global _marketplace
    with _marketplace_lock:
        _marketplace = Marketplace(config or MarketplaceConfig.from_env())
    return _marketplace
