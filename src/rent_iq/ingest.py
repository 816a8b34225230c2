"""Listing ingestion: validate, extract eligibility from text, store."""

from __future__ import annotations

import logging
import time
from dataclasses import fields as dataclass_fields
from typing import Any

from .eligibility.engine import EligibilityEngine
from .models import Listing, ListingEligibility
from .storage.repository import ListingRepository
from .validation import validate_listing_fields

logger = logging.getLogger(__name__)

_ELIGIBILITY_FIELDS = {f.name for f in dataclass_fields(ListingEligibility)}
_LISTING_FIELDS = {f.name for f in dataclass_fields(Listing)}


def _new_listing_id() -> str:
    """Millisecond timestamp id."""
    return str(time.time_ns() // 1_000_000)


def build_listing(
    fields: dict[str, Any],
    engine: EligibilityEngine | None = None,
    default_city: str = "Los Angeles",
) -> Listing:
    """Create a Listing from raw fields.

    Eligibility is extracted from title + description; eligibility values given
    explicitly in ``fields`` take precedence over extracted ones.
    """
    engine = engine or EligibilityEngine()
    clean = validate_listing_fields(fields)

    extracted = engine.extract(clean["title"], clean.get("description"))
    eligibility = extracted.to_dict()
    overrides = {
        k: v for k, v in clean.items() if k in _ELIGIBILITY_FIELDS and v is not None
    }
    eligibility.update(overrides)
    if overrides and "prime_candidate_score" not in overrides:
        merged = ListingEligibility(**eligibility)
        eligibility["prime_candidate_score"] = engine.prime_score(merged)

    attrs = {
        k: v
        for k, v in clean.items()
        if k in _LISTING_FIELDS and k not in _ELIGIBILITY_FIELDS and v is not None
    }
    attrs.setdefault("id", _new_listing_id())
    attrs.setdefault("city", default_city)
    attrs.setdefault("source", "manual")
    return Listing(**attrs, **eligibility)


def ingest_listing(
    repository: ListingRepository,
    fields: dict[str, Any],
    engine: EligibilityEngine | None = None,
    default_city: str = "Los Angeles",
) -> Listing:
    """Build a listing from raw fields and add it to ``repository``.

    Extraction happens here only; stored fields are reused for all later scoring.
    """
    listing = build_listing(fields, engine=engine, default_city=default_city)
    repository.add(listing)
    logger.info(
        "ingested listing %s keywords=%s prime=%s",
        listing.id,
        listing.keywords,
        listing.prime_candidate_score,
    )
    return listing
