"""Shared test fixtures for pytest.

Provides marketplace instances and an API test client.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.dependencies import reset_marketplace
from core.config import MarketplaceConfig
from core.marketplace import Marketplace
from tests.helpers import make_request


@pytest.fixture(autouse=True)
def fresh_marketplace_singleton():
    """Give every test its own unseeded API marketplace."""
    reset_marketplace(MarketplaceConfig(seed_samples=False))
    yield
    reset_marketplace(MarketplaceConfig(seed_samples=False))


@pytest.fixture
def marketplace() -> Marketplace:
    """Empty marketplace (no sample collectibles)."""
    return Marketplace(MarketplaceConfig(seed_samples=False))


@pytest.fixture
def minted(marketplace: Marketplace):
    """A collectible owned by W1 in the empty marketplace."""
    return marketplace.mint(make_request())


@pytest.fixture
def client():
    """Test client against the fresh marketplace from the autouse reset."""
    from api.main import app

    return TestClient(app)
