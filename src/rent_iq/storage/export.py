"""Export ranked eligibility results to CSV and JSON."""

from __future__ import annotations

import csv
import json
from dataclasses import asdict
from datetime import datetime
from pathlib import Path

from ..models import ListingWithScore, RenterProfile


def export_csv(results: list[ListingWithScore], path: Path | str) -> None:
    """Export ranked listings to CSV."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = [
        "rank",
        "listing_id",
        "title",
        "neighborhood",
        "city",
        "rent",
        "beds",
        "baths",
        "score",
        "income_multiplier",
        "min_credit_score",
        "cosigner_allowed",
        "guarantor_allowed",
        "prime_candidate_score",
        "keywords",
    ]

    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for i, r in enumerate(results, 1):
            l = r.listing
            writer.writerow({
                "rank": i,
                "listing_id": l.id,
                "title": l.title,
                "neighborhood": l.neighborhood or "",
                "city": l.city,
                "rent": l.rent,
                "beds": l.beds,
                "baths": l.baths,
                "score": r.score,
                "income_multiplier": l.income_multiplier,
                "min_credit_score": l.min_credit_score,
                "cosigner_allowed": l.cosigner_allowed,
                "guarantor_allowed": l.guarantor_allowed,
                "prime_candidate_score": l.prime_candidate_score,
                "keywords": " | ".join(l.keywords or []),
            })


def export_json(
    results: list[ListingWithScore],
    path: Path | str,
    profile: RenterProfile | None = None,
) -> None:
    """Export ranked results to JSON, with the renter profile they were ranked for."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "generated_at": datetime.utcnow().isoformat(),
        "profile": asdict(profile) if profile else None,
        "count": len(results),
        "eligible_count": sum(1 for r in results if r.score > 0),
        "results": [
            {"rank": i, "score": r.score, "listing": r.listing.to_dict()}
            for i, r in enumerate(results, 1)
        ],
    }

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
