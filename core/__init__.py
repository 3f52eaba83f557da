"""Core domain modules.

This package contains the building blocks behind the marketplace API:

- types: frozen records for collectibles, listings, transactions and stats
- errors: the marketplace rejection taxonomy
- config: environment-driven runtime settings
- content: fingerprinting, rarity classification and procedural art
- marketplace: registry, listing ledger, transaction log and stats

All state is in memory and resets on restart.
"""
