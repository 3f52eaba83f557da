"""API route for a wallet's collection."""

from __future__ import annotations

import asyncio
from typing import Any

from fastapi import APIRouter, Depends, Path

from api.dependencies import get_marketplace
from api.responses import collection_to_response
from core.marketplace import Marketplace

router = APIRouter(prefix="/collection", tags=["collection"])


@router.get("/{wallet}")
async def get_collection(
    wallet: str = Path(..., description="Wallet address"),
    marketplace: Marketplace = Depends(get_marketplace),
) -> dict[str, Any]:
    """Owned collectibles, the listed subset, and the wallet's sales history."""
    collection = await asyncio.to_thread(marketplace.collection, wallet)
    return collection_to_response(collection)
