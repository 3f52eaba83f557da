from __future__ import annotations

import os
from dataclasses import dataclass

DEMO_OWNER = "0x1234567890abcdef1234567890abcdef12345678"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class MarketplaceConfig:
    """Runtime configuration for the in-memory marketplace.

    All state is volatile; restarting the process resets to the seed set.
    """

    seed_samples: bool = True
    lock_timeout_seconds: float = 5.0
    max_upload_bytes: int = 5 * 1024 * 1024
    recent_transactions_limit: int = 10
    demo_owner: str = DEMO_OWNER

    @classmethod
    def from_env(cls) -> "MarketplaceConfig":
        """Build configuration from MARKETPLACE_* environment variables."""
        return cls(
            seed_samples=_env_bool("MARKETPLACE_SEED_SAMPLES", True),
            lock_timeout_seconds=float(os.environ.get("MARKETPLACE_LOCK_TIMEOUT", "5.0")),
            max_upload_bytes=int(os.environ.get("MARKETPLACE_MAX_UPLOAD_BYTES", str(5 * 1024 * 1024))),
            recent_transactions_limit=int(os.environ.get("MARKETPLACE_RECENT_LIMIT", "10")),
            demo_owner=os.environ.get("MARKETPLACE_DEMO_OWNER", DEMO_OWNER),
        )
