"""Read endpoints run their store access on worker threads."""

from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient

from api.dependencies import reset_marketplace
from core.config import MarketplaceConfig
from tests.helpers import W1, make_request


@pytest.fixture
def recorded_threads(monkeypatch):
    names = []
    real_to_thread = asyncio.to_thread

    async def recording_to_thread(func, *args, **kwargs):
        names.append(func.__name__)
        return await real_to_thread(func, *args, **kwargs)

    monkeypatch.setattr(asyncio, "to_thread", recording_to_thread)
    return names


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/nfts", "list_all"),
        ("/nft/{id}", "get"),
        ("/nft/{id}/transactions", "transactions_for"),
        ("/marketplace/listings", "active_listings"),
        ("/marketplace/listings/{id}/history", "listing_history"),
        ("/marketplace/stats", "get_marketplace_stats"),
        ("/collection/" + W1, "collection"),
        ("/health", "_state_counts"),
    ],
)
def test_reads_leave_event_loop(recorded_threads, path, expected):
    from api.main import app

    marketplace = reset_marketplace(MarketplaceConfig(seed_samples=False))
    nft = marketplace.mint(make_request())

    response = TestClient(app).get(path.format(id=nft.id))

    assert response.status_code == 200
    assert expected in recorded_threads


def test_busy_store_read_returns_503():
    from api.main import app

    marketplace = reset_marketplace(MarketplaceConfig(seed_samples=False, lock_timeout_seconds=0.05))

    with marketplace._registry._guard():
        response = TestClient(app).get("/nfts")

    assert response.status_code == 503
    assert response.json()["detail"]["error"] == "store_busy"
