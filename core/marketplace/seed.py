"""Sample collectibles loaded into a fresh marketplace."""

from __future__ import annotations

from core.content.minting import MintRequest, mint_collectible
from core.marketplace.registry import Registry
from core.types import Collectible

# (name, scientific name)
SAMPLE_SPECIES: tuple[tuple[str, str], ...] = (
    ("Golden Eagle", "Aquila chrysaetos"),
    ("Blue Whale", "Balaenoptera musculus"),
    ("Red Panda", "Ailurus fulgens"),
    ("Snow Leopard", "Panthera uncia"),
    ("Monarch Butterfly", "Danaus plexippus"),
)


def sample_genome_xml(name: str, scientific_name: str) -> bytes:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        f'<genome species="{scientific_name}">'
        f"<common_name>{name}</common_name>"
        f"<sequence>{scientific_name} genome sequence...</sequence>"
        "</genome>"
    ).encode("utf-8")


def seed_registry(registry: Registry, owner: str) -> list[Collectible]:
    """Mint the sample species into `registry`, all owned by `owner`."""
    seeded = []
    for name, scientific_name in SAMPLE_SPECIES:
        request = MintRequest(
            name=name,
            description=f"Genome record for {scientific_name}",
            external_url="https://www.ncbi.nlm.nih.gov/genome/",
            license="CC-BY-4.0",
            content=sample_genome_xml(name, scientific_name),
            wallet_address=owner,
        )
        seeded.append(registry.create(mint_collectible(request, token_id=registry.next_token_id())))
    return seeded
