"""Deterministic content pipeline: fingerprint, rarity, art, minting."""

from core.content.art import ArtPlan, GeneratedArt, plan_art, synthesize_art
from core.content.fingerprint import fingerprint_bytes, fingerprint_content
from core.content.minting import MintRequest, mint_collectible
from core.content.rarity import classify_rarity, count_hex_letters

__all__ = [
    "ArtPlan",
    "GeneratedArt",
    "MintRequest",
    "classify_rarity",
    "count_hex_letters",
    "fingerprint_bytes",
    "fingerprint_content",
    "mint_collectible",
    "plan_art",
    "synthesize_art",
]
