"""Health check API endpoint."""

from __future__ import annotations

import asyncio
import time
from typing import Any

from fastapi import APIRouter, Depends

from api.dependencies import get_marketplace
from core.marketplace import Marketplace

router = APIRouter(prefix="/health", tags=["health"])

# Track API start time
_api_start_time = time.time()


def _state_counts(marketplace: Marketplace) -> dict[str, int]:
    return {
        "collectibles": marketplace.count(),
        "active_listings": len(marketplace.active_listings()),
        "transactions": marketplace.transaction_count(),
    }


@router.get("")
async def health_check(marketplace: Marketplace = Depends(get_marketplace)) -> dict[str, Any]:
    """Liveness plus in-memory state counts.

    Returns:
        - status: always "ok" while the process serves requests
        - uptime_seconds: seconds since the API module was loaded
        - collectibles / active_listings / transactions: current counts
    """
    # Store reads take locks; keep them off the event loop
    counts = await asyncio.to_thread(_state_counts, marketplace)

    return {
        "status": "ok",
        "uptime_seconds": int(time.time() - _api_start_time),
        **counts,
    }
