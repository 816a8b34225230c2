"""Eligibility engine bound to configured weights."""

from __future__ import annotations

from typing import Iterable

from ..config import (
    get_approval_score_weights,
    get_preapproval_params,
    get_prime_candidate_weights,
)
from ..models import (
    ApprovalScoreWeights,
    Listing,
    ListingEligibility,
    ListingWithScore,
    PreapprovalInput,
    PreapprovalParams,
    PreapprovalResult,
    PrimeCandidateWeights,
    RenterProfile,
    ScoreContribution,
)
from .parsing import compute_prime_candidate_score, extract_eligibility
from .preapproval import calculate_preapproval
from .scoring import approval_score_contributions, compute_approval_score, filter_eligible_listings


class EligibilityEngine:
    """
    Extracts listing requirements, scores and ranks listings for renters,
    and computes pre-approvals, all with one set of weights.
    Stateless after construction; safe to share.
    """

    def __init__(
        self,
        approval_weights: ApprovalScoreWeights | None = None,
        prime_weights: PrimeCandidateWeights | None = None,
        preapproval_params: PreapprovalParams | None = None,
        config: dict | None = None,
    ) -> None:
        cfg = config or {}
        self.approval_weights = approval_weights or get_approval_score_weights(cfg)
        self.prime_weights = prime_weights or get_prime_candidate_weights(cfg)
        self.preapproval_params = preapproval_params or get_preapproval_params(cfg)

    def extract(self, title: str | None, description: str | None) -> ListingEligibility:
        """Parse eligibility fields from listing text."""
        return extract_eligibility(title, description, self.prime_weights)

    def prime_score(self, eligibility: ListingEligibility) -> int:
        """Recompute the prime-candidate score, e.g. after manual overrides."""
        return compute_prime_candidate_score(eligibility, self.prime_weights)

    def score(self, listing: Listing, profile: RenterProfile) -> int:
        """Approval score of one listing for ``profile``."""
        return compute_approval_score(
            listing,
            profile.monthly_income,
            profile.estimated_credit_score,
            profile.has_cosigner,
            profile.max_rent,
            self.approval_weights,
        )

    def explain(self, listing: Listing, profile: RenterProfile) -> list[ScoreContribution]:
        """Contributions behind :meth:`score`; empty when the listing is over budget."""
        if listing.rent > profile.max_rent:
            return []
        return approval_score_contributions(
            listing,
            profile.monthly_income,
            profile.estimated_credit_score,
            profile.has_cosigner,
            self.approval_weights,
        )

    def rank(self, listings: Iterable[Listing], profile: RenterProfile) -> list[ListingWithScore]:
        """Score and rank listings, best first."""
        return filter_eligible_listings(listings, profile, self.approval_weights)

    def preapprove(self, data: PreapprovalInput) -> PreapprovalResult:
        return calculate_preapproval(data, self.preapproval_params)
