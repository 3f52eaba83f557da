"""FastAPI application for the collectible marketplace.

This module provides the HTTP API service for:
- GET /nfts - All collectibles
- GET /nft/{id} - One collectible
- GET /nft/{id}/transactions - Sales of one collectible
- POST /nft/upload-xml - Mint a collectible from an XML upload
- GET /marketplace/listings - Active listings
- GET /marketplace/listings/{id}/history - Listing history of one collectible
- GET /marketplace/stats - Floor price, volume and recent sales
- POST /marketplace/list - List a collectible for sale
- POST /marketplace/buy - Buy a listed collectible
- DELETE /marketplace/cancel - Cancel a listing
- GET /collection/{wallet} - A wallet's collectibles and history
- GET /health - Liveness and state counts

All state is in memory; restarting the process resets to the sample set.
No authentication (local demo only).
"""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from api.routes import collection, health, marketplace, nfts
from core.errors import StoreBusyError

logger = logging.getLogger(__name__)

app = FastAPI(
    title="GeneNFT Marketplace API",
    description="API for minting collectibles from XML content and trading them",
    version="1.0.0",
)

app.include_router(nfts.router)
app.include_router(marketplace.router)
app.include_router(collection.router)
app.include_router(health.router)


@app.exception_handler(StoreBusyError)
async def store_busy_handler(_request, exc: StoreBusyError):
    """Lock timeouts are reported, never ignored."""
    logger.error("Store busy: %s", exc)
    return JSONResponse(
        status_code=503,
        content={"detail": {"error": exc.code, "message": str(exc)}},
    )


@app.exception_handler(Exception)
async def global_exception_handler(_request, exc):
    """Global exception handler to ensure consistent error responses."""
    logger.exception("Unhandled error: %s", exc)
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred",
        },
    )
