"""API routes for listing, buying and cancelling sale offers."""

from __future__ import annotations

import asyncio
from decimal import Decimal
from typing import Any

from fastapi import APIRouter, Depends, Path
from pydantic import BaseModel, Field

from api.dependencies import get_marketplace
from api.responses import (
    listing_to_response,
    marketplace_http_error,
    stats_to_response,
    transaction_to_response,
)
from core.errors import MarketplaceError
from core.marketplace import Marketplace

router = APIRouter(prefix="/marketplace", tags=["marketplace"])


class ListNFTRequest(BaseModel):
    """Request body for listing a collectible."""

    nft_id: str = Field(..., min_length=1, description="Collectible ID")
    price: Decimal = Field(..., description="Asking price")
    seller_address: str = Field(..., description="Wallet of the current owner")


class BuyNFTRequest(BaseModel):
    """Request body for buying a listed collectible."""

    nft_id: str = Field(..., min_length=1, description="Collectible ID")
    buyer_address: str = Field(..., description="Wallet of the buyer")
    price: Decimal = Field(..., description="Offered price; must equal the asking price")


class CancelListingRequest(BaseModel):
    """Request body for cancelling a listing."""

    nft_id: str = Field(..., min_length=1, description="Collectible ID")
    seller_address: str = Field(..., description="Wallet that opened the listing")


@router.get("/listings")
async def get_listings(marketplace: Marketplace = Depends(get_marketplace)) -> list[dict[str, Any]]:
    """All Active listings, newest first."""
    listings = await asyncio.to_thread(marketplace.active_listings)
    return [listing_to_response(listing) for listing in listings]


@router.get("/listings/{nft_id}/history")
async def get_listing_history(
    nft_id: str = Path(..., description="Collectible ID"),
    marketplace: Marketplace = Depends(get_marketplace),
) -> dict[str, Any]:
    """Every listing opened for a collectible, with its final status."""
    history = await asyncio.to_thread(marketplace.listing_history, nft_id)
    return {
        "nft_id": nft_id,
        "listings": [listing_to_response(listing) for listing in history],
    }


@router.get("/stats")
async def get_stats(marketplace: Marketplace = Depends(get_marketplace)) -> dict[str, Any]:
    """Floor price, volume, active listing count and recent sales."""
    stats = await asyncio.to_thread(marketplace.get_marketplace_stats)
    return stats_to_response(stats)


@router.post("/list")
async def list_nft(
    request: ListNFTRequest,
    marketplace: Marketplace = Depends(get_marketplace),
) -> dict[str, Any]:
    """List a collectible for sale.

    Raises:
        HTTPException: 400 if the collectible is unknown, not owned by the
            seller, already listed, or the price is not positive.
    """
    try:
        listing = await asyncio.to_thread(
            marketplace.list_for_sale, request.nft_id, request.price, request.seller_address
        )
    except MarketplaceError as exc:
        raise marketplace_http_error(exc) from exc

    return {"message": "NFT listed successfully", "listing": listing_to_response(listing)}


@router.post("/buy")
async def buy_nft(
    request: BuyNFTRequest,
    marketplace: Marketplace = Depends(get_marketplace),
) -> dict[str, Any]:
    """Buy a listed collectible at its asking price.

    Raises:
        HTTPException: 400 if the collectible is not listed or the price
            does not match the asking price.
    """
    try:
        tx = await asyncio.to_thread(marketplace.buy, request.nft_id, request.buyer_address, request.price)
    except MarketplaceError as exc:
        raise marketplace_http_error(exc) from exc

    return {"message": "NFT purchased successfully", "transaction": transaction_to_response(tx)}


@router.delete("/cancel")
async def cancel_listing(
    request: CancelListingRequest,
    marketplace: Marketplace = Depends(get_marketplace),
) -> dict[str, Any]:
    """Cancel an Active listing.

    Raises:
        HTTPException: 400 if there is no Active listing or the requester
            is not the seller.
    """
    try:
        listing = await asyncio.to_thread(marketplace.cancel_listing, request.nft_id, request.seller_address)
    except MarketplaceError as exc:
        raise marketplace_http_error(exc) from exc

    return {"message": "Listing cancelled successfully", "listing": listing_to_response(listing)}
