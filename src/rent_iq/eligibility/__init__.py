"""Eligibility engine: requirement extraction, approval scoring, pre-approval."""

from .contributions import fold_score, round_half_up
from .credit import CREDIT_BANDS, credit_score_from_band
from .engine import EligibilityEngine
from .letter import render_preapproval_letter
from .parsing import compute_prime_candidate_score, extract_eligibility, prime_candidate_contributions
from .preapproval import calculate_preapproval, max_recommended_rent
from .scoring import (
    approval_score_contributions,
    compute_approval_score,
    filter_eligible_listings,
    required_monthly_income,
)

__all__ = [
    "EligibilityEngine",
    "CREDIT_BANDS",
    "credit_score_from_band",
    "extract_eligibility",
    "compute_prime_candidate_score",
    "prime_candidate_contributions",
    "compute_approval_score",
    "approval_score_contributions",
    "required_monthly_income",
    "filter_eligible_listings",
    "calculate_preapproval",
    "max_recommended_rent",
    "render_preapproval_letter",
    "fold_score",
    "round_half_up",
]
