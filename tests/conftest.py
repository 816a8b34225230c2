"""Pytest fixtures."""

from typing import Any, Callable

import pytest

from rent_iq.models import Listing, RenterProfile
from rent_iq.seed import mock_listings
from rent_iq.storage import InMemoryListingRepository


@pytest.fixture
def make_listing() -> Callable[..., Listing]:
    """Factory for listings with sensible defaults."""

    def _make(**overrides: Any) -> Listing:
        fields: dict[str, Any] = {
            "id": "test-1",
            "title": "Sunny 1BR",
            "city": "Los Angeles",
            "neighborhood": "Koreatown",
            "rent": 1000,
            "beds": 1,
            "baths": 1,
        }
        fields.update(overrides)
        return Listing(**fields)

    return _make


@pytest.fixture
def renter() -> RenterProfile:
    """Renter who meets a 3x requirement on $1000 rent, credit 700, no co-signer."""
    return RenterProfile(
        monthly_income=5000,
        estimated_credit_score=700,
        has_cosigner=False,
        max_rent=2500,
    )


@pytest.fixture
def demo_repo() -> InMemoryListingRepository:
    """In-memory store with the ten demo listings."""
    return InMemoryListingRepository(mock_listings())
