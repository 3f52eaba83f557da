"""Rarity classification from a content fingerprint."""

from __future__ import annotations

from core.types import RarityTier

HEX_LETTERS = frozenset("abcdef")

# (minimum hex-letter count, tier), highest first
RARITY_THRESHOLDS: tuple[tuple[int, RarityTier], ...] = (
    (7, "Legendary"),
    (5, "Epic"),
    (3, "Rare"),
    (0, "Common"),
)


def count_hex_letters(fingerprint: str) -> int:
    return sum(1 for ch in fingerprint.lower() if ch in HEX_LETTERS)


def classify_rarity(fingerprint: str) -> RarityTier:
    """Map a hex fingerprint to its rarity tier.

    0-2 letters -> Common, 3-4 -> Rare, 5-6 -> Epic, 7+ -> Legendary.
    """
    letters = count_hex_letters(fingerprint)
    # The ladder ends at (0, "Common"), so a tier always matches
    return next(tier for minimum, tier in RARITY_THRESHOLDS if letters >= minimum)
