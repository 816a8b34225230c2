"""Errors raised by the caller-facing layer (ingestion, storage, requests).

The scoring and extraction core never raises; these cover input validation
and lookups performed around it.
"""

from __future__ import annotations


class RentIQError(Exception):
    """Base class for rent_iq errors."""


class ValidationError(RentIQError, ValueError):
    """Invalid request or listing fields."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class ListingNotFoundError(RentIQError, KeyError):
    """No listing with the requested id."""

    def __init__(self, listing_id: str) -> None:
        super().__init__(listing_id)
        self.listing_id = listing_id

    def __str__(self) -> str:
        return f"Listing not found: {self.listing_id}"


class DuplicateListingError(RentIQError):
    """A listing with the same id already exists."""

    def __init__(self, listing_id: str) -> None:
        super().__init__(f"Listing already exists: {listing_id}")
        self.listing_id = listing_id
