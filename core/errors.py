"""Marketplace error taxonomy.

Every rejection the marketplace can produce is a `MarketplaceError`. They are
all recoverable client errors; the `code` is the stable machine-readable tag
the API puts in its error payloads.
"""

from __future__ import annotations


class MarketplaceError(ValueError):
    code = "marketplace_error"


class ValidationError(MarketplaceError):
    """Missing/empty required field or malformed input."""

    code = "validation_error"


class InvalidPriceError(ValidationError):
    code = "invalid_price"


class ContentTooLargeError(ValidationError):
    code = "content_too_large"


class NotFoundError(MarketplaceError):
    code = "not_found"


class NotOwnerError(MarketplaceError):
    code = "not_owner"


class AlreadyListedError(MarketplaceError):
    code = "already_listed"


class NotListedError(MarketplaceError):
    code = "not_listed"


class PriceMismatchError(MarketplaceError):
    code = "price_mismatch"


class StoreBusyError(RuntimeError):
    """Exclusive access to shared state could not be obtained in time."""

    code = "store_busy"
