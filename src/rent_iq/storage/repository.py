"""Listing repository interface and in-memory implementation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from ..errors import DuplicateListingError, ListingNotFoundError
from ..models import Listing

logger = logging.getLogger(__name__)


class ListingRepository(ABC):
    """
    Abstract listing store.
    Implementations: in-memory (tests, demos), DuckDB (local persistence).
    """

    @abstractmethod
    def get_all(self) -> list[Listing]:
        """All listings in insertion order."""
        ...

    @abstractmethod
    def get_by_id(self, listing_id: str) -> Listing | None:
        """Listing with ``listing_id``, or None."""
        ...

    @abstractmethod
    def add(self, listing: Listing) -> None:
        """Store a new listing. Raises DuplicateListingError if the id exists."""
        ...

    def require(self, listing_id: str) -> Listing:
        """Like get_by_id but raises ListingNotFoundError."""
        listing = self.get_by_id(listing_id)
        if listing is None:
            raise ListingNotFoundError(listing_id)
        return listing

    def add_many(self, listings: Iterable[Listing]) -> int:
        """Add listings, skipping ids that already exist. Returns the number added."""
        added = 0
        for l in listings:
            if self.get_by_id(l.id) is not None:
                logger.debug("skipping existing listing %s", l.id)
                continue
            self.add(l)
            added += 1
        return added


class InMemoryListingRepository(ListingRepository):
    """Dict-backed store keyed by listing id."""

    def __init__(self, listings: Iterable[Listing] | None = None) -> None:
        self._listings: dict[str, Listing] = {}
        for l in listings or []:
            self.add(l)

    def get_all(self) -> list[Listing]:
        return list(self._listings.values())

    def get_by_id(self, listing_id: str) -> Listing | None:
        return self._listings.get(listing_id)

    def add(self, listing: Listing) -> None:
        if listing.id in self._listings:
            raise DuplicateListingError(listing.id)
        self._listings[listing.id] = listing

    def __len__(self) -> int:
        return len(self._listings)
