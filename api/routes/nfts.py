"""API routes for browsing and minting collectibles."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, File, Form, Path, UploadFile

from api.dependencies import get_marketplace
from api.responses import collectible_to_response, marketplace_http_error, transaction_to_response
from core.content.minting import MintRequest
from core.errors import ContentTooLargeError, MarketplaceError
from core.marketplace import Marketplace

logger = logging.getLogger(__name__)

router = APIRouter(tags=["nfts"])


@router.get("/nfts")
async def list_nfts(marketplace: Marketplace = Depends(get_marketplace)) -> list[dict[str, Any]]:
    """List every collectible, newest first."""
    nfts = await asyncio.to_thread(marketplace.list_all)
    return [collectible_to_response(n) for n in nfts]


@router.get("/nft/{nft_id}")
async def get_nft(
    nft_id: str = Path(..., description="Collectible ID"),
    marketplace: Marketplace = Depends(get_marketplace),
) -> dict[str, Any]:
    """Get a single collectible.

    Raises:
        HTTPException: 404 if the collectible does not exist.
    """
    try:
        nft = await asyncio.to_thread(marketplace.get, nft_id)
    except MarketplaceError as exc:
        raise marketplace_http_error(exc, not_found_status=404) from exc
    return collectible_to_response(nft)


@router.get("/nft/{nft_id}/transactions")
async def get_nft_transactions(
    nft_id: str = Path(..., description="Collectible ID"),
    marketplace: Marketplace = Depends(get_marketplace),
) -> dict[str, Any]:
    """Sales history for one collectible, oldest first."""
    try:
        await asyncio.to_thread(marketplace.get, nft_id)
    except MarketplaceError as exc:
        raise marketplace_http_error(exc, not_found_status=404) from exc
    transactions = await asyncio.to_thread(marketplace.transactions_for, nft_id)
    return {
        "nft_id": nft_id,
        "transactions": [transaction_to_response(tx) for tx in transactions],
    }


@router.post("/nft/upload-xml")
async def upload_xml(
    name: str = Form(""),
    description: str = Form(""),
    external_url: str = Form(""),
    license: str = Form(""),
    wallet_address: str = Form(""),
    xml_file: Optional[UploadFile] = File(None),
    marketplace: Marketplace = Depends(get_marketplace),
) -> dict[str, Any]:
    """Mint a collectible from an uploaded XML document.

    All form fields and the file are required; empty values are rejected
    with 400 before any state is touched. Uploads over the configured size
    limit get 413 without being read past the limit.
    """
    limit = marketplace.config.max_upload_bytes
    content = await xml_file.read(limit + 1) if xml_file is not None else b""
    if len(content) > limit:
        exc = ContentTooLargeError(f"Content exceeds the {limit} byte upload limit")
        logger.warning("Rejected upload: %s", exc)
        raise marketplace_http_error(exc)

    request = MintRequest(
        name=name,
        description=description,
        external_url=external_url,
        license=license,
        content=content,
        wallet_address=wallet_address,
    )

    try:
        nft = await asyncio.to_thread(marketplace.mint, request)
    except MarketplaceError as exc:
        logger.warning("Rejected upload: %s", exc)
        raise marketplace_http_error(exc) from exc

    return {"message": "NFT minted successfully", "nft": collectible_to_response(nft)}
