"""Demo listings used to seed an empty store."""

from __future__ import annotations

from .models import Listing


def _demo(
    id: str,
    title: str,
    neighborhood: str,
    rent: float,
    beds: int,
    baths: float,
    income_multiplier: float,
    min_credit_score: int | None,
    cosigner_allowed: bool,
    landlord_type: str,
) -> Listing:
    return Listing(
        id=id,
        title=title,
        neighborhood=neighborhood,
        city="Los Angeles",
        rent=rent,
        beds=beds,
        baths=baths,
        source="manual",
        income_multiplier=income_multiplier,
        min_credit_score=min_credit_score,
        cosigner_allowed=cosigner_allowed,
        landlord_type=landlord_type,
    )


def mock_listings() -> list[Listing]:
    """Fresh copies of the demo listings (safe to mutate)."""
    return [
        _demo("1", "Modern Studio in Koreatown", "Koreatown", 1800, 0, 1, 3, 600, True, "independent"),
        _demo("2", "Spacious 2BR Near UCLA", "Westside", 3200, 2, 2, 3.5, 700, False, "corporate"),
        _demo("3", "Cozy 1BR in Hollywood", "Hollywood", 2200, 1, 1, 2.5, 650, True, "independent"),
        _demo("4", "Luxury 3BR in Beverly Hills", "Beverly Hills", 5500, 3, 2.5, 3.5, 750, False, "corporate"),
        _demo("5", "Affordable 1BR in Valley", "San Fernando Valley", 1900, 1, 1, 2.5, None, True, "independent"),
        _demo("6", "Updated 2BR in Mid-Wilshire", "Mid-Wilshire", 2800, 2, 1.5, 3, 680, True, "corporate"),
        _demo("7", "Charming Studio in Silver Lake", "Silver Lake", 2100, 0, 1, 3, 650, True, "independent"),
        _demo("8", "Family-Friendly 3BR in Pasadena", "Pasadena", 3800, 3, 2, 3, 700, False, "corporate"),
        _demo("9", "Budget Studio in Downtown LA", "Downtown LA", 1600, 0, 1, 2.5, None, True, "independent"),
        _demo("10", "Modern 2BR in Santa Monica", "Santa Monica", 4200, 2, 2, 3.5, 720, False, "corporate"),
    ]
