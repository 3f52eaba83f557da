"""Tests for the /health endpoint."""

from __future__ import annotations

from tests.helpers import W1


def test_health_counts(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["uptime_seconds"] >= 0
    assert data["collectibles"] == 0
    assert data["active_listings"] == 0
    assert data["transactions"] == 0


def test_health_tracks_state(client):
    client.post(
        "/nft/upload-xml",
        data={
            "name": "Sample",
            "description": "Test upload",
            "external_url": "https://example.org/sample",
            "license": "CC0",
            "wallet_address": W1,
        },
        files={"xml_file": ("sample.xml", b"<a/>", "application/xml")},
    )
    assert client.get("/health").json()["collectibles"] == 1
