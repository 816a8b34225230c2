"""Listing search for a renter: band mapping, property filters, ranking."""

from __future__ import annotations

import logging

from .eligibility.credit import credit_score_from_band
from .eligibility.engine import EligibilityEngine
from .filters import filter_listings
from .models import ListingWithScore, RenterProfile
from .storage.repository import ListingRepository

logger = logging.getLogger(__name__)


def search_listings(
    repository: ListingRepository,
    monthly_income: float,
    credit_band: str,
    has_cosigner: bool,
    max_rent: float,
    neighborhood: str | None = None,
    zip_code: str | None = None,
    min_beds: int | None = None,
    min_baths: float | None = None,
    min_rent: float | None = None,
    engine: EligibilityEngine | None = None,
) -> list[ListingWithScore]:
    """Rank stored listings for a renter, best first.

    Unknown credit bands fall back to 650 (see credit_score_from_band).
    """
    engine = engine or EligibilityEngine()
    profile = RenterProfile(
        monthly_income=monthly_income,
        estimated_credit_score=credit_score_from_band(credit_band),
        has_cosigner=has_cosigner,
        max_rent=max_rent,
    )
    listings = filter_listings(
        repository.get_all(),
        neighborhood=neighborhood,
        zip_code=zip_code,
        min_beds=min_beds,
        min_baths=min_baths,
        min_rent=min_rent,
    )
    results = engine.rank(listings, profile)
    logger.info("search matched %d listings (credit=%s)", len(results), profile.estimated_credit_score)
    return results
