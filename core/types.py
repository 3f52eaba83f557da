from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

RarityTier = Literal["Common", "Rare", "Epic", "Legendary"]
ListingStatus = Literal["Active", "Sold", "Cancelled"]
ArtStyle = Literal["heatmap", "geometric", "helix", "fractal"]


@dataclass(frozen=True)
class Attribute:
    trait_type: str
    value: str


@dataclass(frozen=True)
class CollectibleTraits:
    """Fixed traits every collectible carries."""

    fingerprint: str
    rarity_tier: RarityTier
    content_size: int  # bytes

    def as_attributes(self) -> tuple[Attribute, ...]:
        return (
            Attribute(trait_type="Content Hash", value=self.fingerprint),
            Attribute(trait_type="Rarity", value=self.rarity_tier),
            Attribute(trait_type="Content Size", value=f"{self.content_size} bytes"),
        )


@dataclass(frozen=True)
class CollectibleMetadata:
    name: str
    description: str
    image: str  # data:image/svg+xml;base64,...
    external_url: str
    license: str
    provenance: str


@dataclass(frozen=True)
class Collectible:
    """A minted collectible.

    Records are immutable snapshots; the registry swaps in a new snapshot on
    every ownership or listing change. `price`, `is_listed` and
    `listing_date` always move together.
    """

    id: str
    token_id: int
    metadata: CollectibleMetadata
    traits: CollectibleTraits
    xml_content: str
    owner: str
    created_at: datetime
    extra_attributes: tuple[Attribute, ...] = ()
    price: Optional[Decimal] = None
    is_listed: bool = False
    listing_date: Optional[datetime] = None

    @property
    def xml_hash(self) -> str:
        return self.traits.fingerprint

    @property
    def rarity(self) -> RarityTier:
        return self.traits.rarity_tier

    @property
    def attributes(self) -> tuple[Attribute, ...]:
        return self.traits.as_attributes() + self.extra_attributes


@dataclass(frozen=True)
class Listing:
    nft_id: str
    price: Decimal
    seller: str
    listed_at: datetime
    status: ListingStatus = "Active"


@dataclass(frozen=True)
class Transaction:
    id: str
    nft_id: str
    seller: str
    buyer: str
    price: Decimal
    transaction_hash: str  # synthetic, never submitted anywhere
    timestamp: datetime


@dataclass(frozen=True)
class MarketplaceStats:
    total_listings: int
    total_volume: Decimal
    floor_price: Optional[Decimal]
    recent_transactions: tuple[Transaction, ...] = field(default_factory=tuple)

    @property
    def total_active_listings(self) -> int:
        return self.total_listings


@dataclass(frozen=True)
class UserCollection:
    wallet_address: str
    owned_nfts: tuple[Collectible, ...]
    listed_nfts: tuple[Collectible, ...]
    transaction_history: tuple[Transaction, ...]
