"""Tests for the collectible browsing and upload endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_marketplace, reset_marketplace
from core.config import MarketplaceConfig
from tests.helpers import W1

UPLOAD_FORM = {
    "name": "Sample",
    "description": "Test upload",
    "external_url": "https://example.org/sample",
    "license": "CC0",
    "wallet_address": W1,
}


def _upload(client, content: bytes = b"<a/>", **overrides):
    data = {**UPLOAD_FORM, **overrides}
    return client.post(
        "/nft/upload-xml",
        data=data,
        files={"xml_file": ("sample.xml", content, "application/xml")},
    )


class TestUpload:
    """Tests for POST /nft/upload-xml."""

    def test_upload_mints_collectible(self, client):
        response = _upload(client)
        assert response.status_code == 200
        nft = response.json()["nft"]

        assert nft["owner"] == W1
        assert nft["is_listed"] is False
        assert nft["price"] is None
        assert nft["xml_hash"] == "29114363f749a0226b6988dda3ca2492a954117ab6b5f382706c20300dabc079"
        assert nft["rarity"] == "Legendary"
        assert nft["xml_content"] == "<a/>"
        assert nft["metadata"]["image"].startswith("data:image/svg+xml;base64,")
        traits = [a["trait_type"] for a in nft["metadata"]["attributes"]]
        assert traits[:3] == ["Content Hash", "Rarity", "Content Size"]

    @pytest.mark.parametrize("field_name", ["name", "description", "external_url", "license", "wallet_address"])
    def test_upload_rejects_empty_field(self, client, field_name):
        response = _upload(client, **{field_name: ""})
        assert response.status_code == 400
        assert response.json()["detail"]["error"] == "validation_error"
        assert get_marketplace().count() == 0

    def test_upload_rejects_empty_file(self, client):
        response = _upload(client, content=b"")
        assert response.status_code == 400
        assert "xml_file" in response.json()["detail"]["message"]

    def test_upload_rejects_missing_file(self, client):
        response = client.post("/nft/upload-xml", data=UPLOAD_FORM)
        assert response.status_code == 400

    def test_upload_too_large(self):
        from api.main import app

        reset_marketplace(MarketplaceConfig(seed_samples=False, max_upload_bytes=8))
        response = _upload(TestClient(app), content=b"<long-document/>")
        assert response.status_code == 413
        assert response.json()["detail"]["error"] == "content_too_large"

    def test_upload_at_limit_accepted(self):
        from api.main import app

        reset_marketplace(MarketplaceConfig(seed_samples=False, max_upload_bytes=4))
        response = _upload(TestClient(app), content=b"<a/>")
        assert response.status_code == 200

    def test_upload_read_stops_past_limit(self, monkeypatch):
        from starlette.datastructures import UploadFile

        from api.main import app

        sizes = []
        original_read = UploadFile.read

        async def recording_read(self, size=-1):
            sizes.append(size)
            return await original_read(self, size)

        monkeypatch.setattr(UploadFile, "read", recording_read)
        reset_marketplace(MarketplaceConfig(seed_samples=False, max_upload_bytes=8))
        response = _upload(TestClient(app), content=b"x" * 4096)

        assert response.status_code == 413
        assert sizes == [9]
        assert get_marketplace().count() == 0


class TestBrowse:
    """Tests for GET /nfts and GET /nft/{id}."""

    def test_list_empty(self, client):
        response = client.get("/nfts")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_and_get(self, client):
        nft_id = _upload(client).json()["nft"]["id"]

        listing = client.get("/nfts").json()
        assert [n["id"] for n in listing] == [nft_id]

        response = client.get(f"/nft/{nft_id}")
        assert response.status_code == 200
        assert response.json()["id"] == nft_id

    def test_get_unknown_is_404(self, client):
        response = client.get("/nft/does-not-exist")
        assert response.status_code == 404
        assert response.json()["detail"]["error"] == "not_found"

    def test_transactions_for_unknown_is_404(self, client):
        assert client.get("/nft/does-not-exist/transactions").status_code == 404

    def test_seeded_samples_listed(self):
        from api.main import app

        reset_marketplace(MarketplaceConfig(seed_samples=True))
        response = TestClient(app).get("/nfts")
        assert response.status_code == 200
        assert len(response.json()) == 5
