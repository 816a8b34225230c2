"""Renter-specific approval scoring and ranking of listings."""

from __future__ import annotations

import logging
from typing import Iterable

from ..models import (
    ApprovalScoreWeights,
    Listing,
    ListingEligibility,
    ListingWithScore,
    RenterProfile,
    ScoreContribution,
)
from .contributions import fold_score, safe_divide

logger = logging.getLogger(__name__)


def required_monthly_income(
    listing: Listing,
    weights: ApprovalScoreWeights | None = None,
) -> float:
    """Income the listing demands: multiplier (default 3) times rent."""
    w = weights or ApprovalScoreWeights()
    multiplier = listing.income_multiplier
    if multiplier is None:
        multiplier = w.default_income_multiplier
    return multiplier * listing.rent


def _cosigner_usable(listing: ListingEligibility, has_cosigner: bool) -> bool:
    return bool(has_cosigner and (listing.cosigner_allowed or listing.guarantor_allowed))


def approval_score_contributions(
    listing: Listing,
    monthly_income: float,
    estimated_credit_score: float,
    has_cosigner: bool,
    weights: ApprovalScoreWeights | None = None,
) -> list[ScoreContribution]:
    """
    Labelled contributions of the approval score (budget cutoff excluded).
    - income: full bonus when met, else linear partial credit minus a flat penalty, floored at 0
    - credit: met / substituted by a co-signer / missed / no minimum stated
    - co-signer bonus: stacks with the credit substitution
    """
    w = weights or ApprovalScoreWeights()
    parts = [ScoreContribution("base", w.base)]

    required = required_monthly_income(listing, w)
    if monthly_income >= required:
        parts.append(ScoreContribution("income_met", w.income_met_bonus))
    else:
        ratio = safe_divide(monthly_income, required)
        partial = max(0.0, ratio * w.income_partial_weight - w.income_partial_penalty)
        parts.append(ScoreContribution("income_partial", partial))

    min_credit = listing.min_credit_score
    cosigner_usable = _cosigner_usable(listing, has_cosigner)
    if min_credit is not None:
        if estimated_credit_score >= min_credit:
            parts.append(ScoreContribution("credit_met", w.credit_met_bonus))
        elif cosigner_usable:
            parts.append(ScoreContribution("credit_cosigner", w.credit_cosigner_bonus))
        else:
            parts.append(ScoreContribution("credit_missed", -w.credit_missed_penalty))
    else:
        parts.append(ScoreContribution("no_credit_minimum", w.no_credit_minimum_bonus))

    if cosigner_usable:
        parts.append(ScoreContribution("cosigner_bonus", w.cosigner_bonus))
    return parts


def compute_approval_score(
    listing: Listing,
    monthly_income: float,
    estimated_credit_score: float,
    has_cosigner: bool,
    max_rent: float,
    weights: ApprovalScoreWeights | None = None,
) -> int:
    """Approval score (0-100) of one listing for one renter.

    Listings above ``max_rent`` score 0 with no partial credit.
    """
    if listing.rent > max_rent:
        return 0
    return fold_score(
        approval_score_contributions(
            listing, monthly_income, estimated_credit_score, has_cosigner, weights
        )
    )


def filter_eligible_listings(
    listings: Iterable[Listing],
    profile: RenterProfile,
    weights: ApprovalScoreWeights | None = None,
) -> list[ListingWithScore]:
    """Score every listing and sort by score descending.

    Nothing is dropped (zero scores included); ties keep input order.
    """
    results = [
        ListingWithScore(
            listing=l,
            score=compute_approval_score(
                l,
                profile.monthly_income,
                profile.estimated_credit_score,
                profile.has_cosigner,
                profile.max_rent,
                weights,
            ),
        )
        for l in listings
    ]
    ranked = sorted(results, key=lambda r: -r.score)
    logger.debug("ranked %d listings", len(ranked))
    return ranked
