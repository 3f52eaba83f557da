"""Convert core records into JSON-ready dicts."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from fastapi import HTTPException

from core.errors import ContentTooLargeError, MarketplaceError, NotFoundError
from core.types import Collectible, Listing, MarketplaceStats, Transaction, UserCollection


def _price(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def collectible_to_response(nft: Collectible) -> dict[str, Any]:
    return {
        "id": nft.id,
        "token_id": str(nft.token_id),
        "metadata": {
            "name": nft.metadata.name,
            "description": nft.metadata.description,
            "image": nft.metadata.image,
            "attributes": [{"trait_type": a.trait_type, "value": a.value} for a in nft.attributes],
            "external_url": nft.metadata.external_url,
            "license": nft.metadata.license,
            "provenance": nft.metadata.provenance,
        },
        "xml_content": nft.xml_content,
        "xml_hash": nft.xml_hash,
        "owner": nft.owner,
        "rarity": nft.rarity,
        "created_at": _iso(nft.created_at),
        "price": _price(nft.price),
        "is_listed": nft.is_listed,
        "listing_date": _iso(nft.listing_date),
    }


def listing_to_response(listing: Listing) -> dict[str, Any]:
    return {
        "nft_id": listing.nft_id,
        "price": float(listing.price),
        "seller": listing.seller,
        "listed_at": _iso(listing.listed_at),
        "status": listing.status,
    }


def transaction_to_response(tx: Transaction) -> dict[str, Any]:
    return {
        "id": tx.id,
        "nft_id": tx.nft_id,
        "seller": tx.seller,
        "buyer": tx.buyer,
        "price": float(tx.price),
        "transaction_hash": tx.transaction_hash,
        "timestamp": _iso(tx.timestamp),
    }


def stats_to_response(stats: MarketplaceStats) -> dict[str, Any]:
    return {
        "total_listings": stats.total_listings,
        "total_volume": float(stats.total_volume),
        "recent_transactions": [transaction_to_response(tx) for tx in stats.recent_transactions],
        "floor_price": _price(stats.floor_price),
    }


def collection_to_response(collection: UserCollection) -> dict[str, Any]:
    return {
        "wallet_address": collection.wallet_address,
        "owned_nfts": [collectible_to_response(n) for n in collection.owned_nfts],
        "listed_nfts": [collectible_to_response(n) for n in collection.listed_nfts],
        "transaction_history": [transaction_to_response(tx) for tx in collection.transaction_history],
    }


def marketplace_http_error(exc: MarketplaceError, *, not_found_status: int = 400) -> HTTPException:
    """Map a marketplace rejection to an HTTPException with a consistent body."""
    if isinstance(exc, ContentTooLargeError):
        status_code = 413
    elif isinstance(exc, NotFoundError):
        status_code = not_found_status
    else:
        status_code = 400
    return HTTPException(status_code=status_code, detail={"error": exc.code, "message": str(exc)})
