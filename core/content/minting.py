"""Turn an uploaded XML document into a collectible record.

Pipeline: fingerprint the bytes, classify rarity and synthesize art from the
fingerprint, then assemble the record. Nothing here touches shared state;
the marketplace inserts the result into its registry.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from core.content.art import synthesize_art
from core.content.fingerprint import fingerprint_bytes, fingerprint_content
from core.content.rarity import classify_rarity
from core.errors import ValidationError
from core.types import Collectible, CollectibleMetadata, CollectibleTraits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MintRequest:
    """Upload payload for a new collectible."""

    name: str
    description: str
    external_url: str
    license: str
    content: bytes
    wallet_address: str

    def validate(self) -> None:
        """Raise ValidationError naming every empty required field."""
        missing = [
            field_name
            for field_name in ("name", "description", "external_url", "license", "wallet_address")
            if not getattr(self, field_name).strip()
        ]
        if not self.content:
            missing.append("xml_file")
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def mint_collectible(
    request: MintRequest,
    *,
    token_id: int,
    now: Optional[datetime] = None,
) -> Collectible:
    """Build a collectible from an upload.

    Args:
        request: Validated or unvalidated upload; it is validated here.
        token_id: Synthetic token number allocated by the registry.
        now: Creation timestamp (defaults to current UTC time).

    Returns:
        A new, unlisted Collectible owned by the uploading wallet.

    Raises:
        ValidationError: If a required field or the content is empty.
    """
    request.validate()

    fingerprint = fingerprint_content(request.content)
    rarity = classify_rarity(fingerprint)
    art = synthesize_art(fingerprint_bytes(fingerprint))

    created_at = now or datetime.now(timezone.utc)
    owner = request.wallet_address.strip()
    metadata = CollectibleMetadata(
        name=request.name.strip(),
        description=request.description.strip(),
        image=art.data_uri,
        external_url=request.external_url.strip(),
        license=request.license.strip(),
        provenance=f"Minted from XML content {fingerprint[:16]} by {owner}",
    )
    collectible = Collectible(
        id=str(uuid.uuid4()),
        token_id=token_id,
        metadata=metadata,
        traits=CollectibleTraits(
            fingerprint=fingerprint,
            rarity_tier=rarity,
            content_size=len(request.content),
        ),
        extra_attributes=art.plan.as_attributes(),
        xml_content=request.content.decode("utf-8", errors="replace"),
        owner=owner,
        created_at=created_at,
    )
    logger.debug("Derived %s collectible %s (%s art)", rarity, fingerprint[:12], art.plan.style)
    return collectible
