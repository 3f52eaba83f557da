from __future__ import annotations

import hashlib

FINGERPRINT_HEX_LENGTH = 64


def fingerprint_content(content: bytes) -> str:
    """Return the lowercase SHA-256 hex digest of uploaded content.

    Callers reject empty content before getting here.
    """
    return hashlib.sha256(content).hexdigest()


def fingerprint_bytes(fingerprint: str) -> bytes:
    """Decode a hex fingerprint back into its raw digest bytes."""
    return bytes.fromhex(fingerprint)
