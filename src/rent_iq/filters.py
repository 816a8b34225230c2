"""Listing filters for location, size and rent constraints."""

from __future__ import annotations

from .models import Listing


def filter_listings(
    listings: list[Listing],
    neighborhood: str | None = None,
    zip_code: str | None = None,
    min_beds: int | None = None,
    min_baths: float | None = None,
    min_rent: float | None = None,
) -> list[Listing]:
    """
    Filter listings before scoring. Unset criteria are ignored.
    - neighborhood: case-insensitive substring of neighborhood or city
    - zip_code: substring of address or neighborhood
    - min_beds / min_baths: at least this many
    - min_rent: rent >= min_rent (max rent is handled by the approval score)
    """
    result = []
    needle = neighborhood.lower() if neighborhood else None
    for l in listings:
        if needle and not (
            needle in (l.neighborhood or "").lower() or needle in (l.city or "").lower()
        ):
            continue
        if zip_code and not (zip_code in (l.address or "") or zip_code in (l.neighborhood or "")):
            continue
        if min_beds is not None and l.beds < min_beds:
            continue
        if min_baths is not None and l.baths < min_baths:
            continue
        if min_rent and l.rent < min_rent:
            continue
        result.append(l)
    return result
