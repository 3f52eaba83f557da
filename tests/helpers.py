"""Shared constants and builders for the test suite."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from core.content.minting import MintRequest

W1 = "0xW1000000000000000000000000000000000000001"
W2 = "0xW2000000000000000000000000000000000000002"
W3 = "0xW3000000000000000000000000000000000000003"


def make_request(content: bytes = b"<a/>", wallet: str = W1, name: str = "Sample") -> MintRequest:
    return MintRequest(
        name=name,
        description="Test upload",
        external_url="https://example.org/sample",
        license="CC0",
        content=content,
        wallet_address=wallet,
    )


class StepClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current
