"""Data models for listings, renter profiles and eligibility results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

IncomeFlexibility = Literal["strict", "flexible", "negotiable"]
CreditFlexibility = Literal["strict", "flexible", "negotiable", "no_minimum"]
Strength = Literal["strong", "borderline", "weak"]


@dataclass
class ListingEligibility:
    """Eligibility attributes parsed from (or entered with) a listing."""

    income_multiplier: float | None = None
    income_flexibility: IncomeFlexibility | None = None
    min_credit_score: int | None = None
    credit_flexibility: CreditFlexibility | None = None
    cosigner_allowed: bool | None = None
    guarantor_allowed: bool | None = None
    extra_deposit_allowed: bool | None = None
    keywords: list[str] | None = None
    prime_candidate_score: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "income_multiplier": self.income_multiplier,
            "income_flexibility": self.income_flexibility,
            "min_credit_score": self.min_credit_score,
            "credit_flexibility": self.credit_flexibility,
            "cosigner_allowed": self.cosigner_allowed,
            "guarantor_allowed": self.guarantor_allowed,
            "extra_deposit_allowed": self.extra_deposit_allowed,
            "keywords": list(self.keywords) if self.keywords else None,
            "prime_candidate_score": self.prime_candidate_score,
        }


@dataclass
class Listing(ListingEligibility):
    """Rental listing with its (static) eligibility attributes."""

    id: str = ""
    title: str = ""
    city: str = ""
    rent: float = 0.0
    beds: int = 0
    baths: float = 0.0
    source: str = "manual"
    address: str | None = None
    neighborhood: str | None = None
    description: str | None = None
    landlord_type: Literal["independent", "corporate"] | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def eligibility(self) -> ListingEligibility:
        return ListingEligibility(**ListingEligibility.to_dict(self))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "city": self.city,
            "rent": self.rent,
            "beds": self.beds,
            "baths": self.baths,
            "source": self.source,
            "address": self.address,
            "neighborhood": self.neighborhood,
            "description": self.description,
            "landlord_type": self.landlord_type,
            "created_at": self.created_at.isoformat(),
        }
        data.update(ListingEligibility.to_dict(self))
        return data


@dataclass
class RenterProfile:
    """Renter inputs for scoring. Credit score is already band-mapped by the caller."""

    monthly_income: float
    estimated_credit_score: float
    has_cosigner: bool
    max_rent: float


@dataclass(frozen=True)
class ScoreContribution:
    """One labelled, signed step of an additive score."""

    label: str
    delta: float


@dataclass
class ListingWithScore:
    """A listing paired with its approval score for one renter."""

    listing: Listing
    score: int

    def to_dict(self) -> dict[str, Any]:
        return {"listing": self.listing.to_dict(), "score": self.score}


@dataclass
class PreapprovalInput:
    """Renter's standalone financial inputs for pre-approval."""

    monthly_income: float
    credit_band: str
    savings: float
    has_cosigner: bool
    target_rent: float


@dataclass
class PreapprovalResult:
    """Pre-approval outcome."""

    strength: Strength
    max_recommended_rent: int
    explanation: str
    suggested_top_up_deposit: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "strength": self.strength,
            "max_recommended_rent": self.max_recommended_rent,
            "explanation": self.explanation,
        }
        if self.suggested_top_up_deposit is not None:
            data["suggested_top_up_deposit"] = self.suggested_top_up_deposit
        return data


@dataclass
class ApprovalScoreWeights:
    """Weights for the renter-specific approval score."""

    base: float = 50
    default_income_multiplier: float = 3
    income_met_bonus: float = 25
    income_partial_weight: float = 25
    income_partial_penalty: float = 10
    credit_met_bonus: float = 15
    credit_cosigner_bonus: float = 10
    credit_missed_penalty: float = 20
    no_credit_minimum_bonus: float = 5
    cosigner_bonus: float = 10


@dataclass
class PrimeCandidateWeights:
    """Weights for the listing-side prime-candidate score."""

    base: float = 50
    no_credit_minimum: float = 20
    cosigner_or_guarantor: float = 15
    extra_deposit: float = 10
    income_flexibility: float = 15
    low_multiplier_bonus: float = 10
    low_multiplier_threshold: float = 2.5
    high_multiplier_penalty: float = 10
    high_multiplier_threshold: float = 3.5


@dataclass
class PreapprovalParams:
    """Pre-approval affordability parameters."""

    income_to_rent_ratio: float = 3
    move_in_savings_months: float = 2
    savings_flex_factor: float = 1.5
    low_savings_factor: float = 0.9
    poor_credit_threshold: float = 600
    poor_credit_factor: float = 0.85
    fair_credit_threshold: float = 650
    fair_credit_factor: float = 0.95
    cosigner_factor: float = 1.1
    rent_rounding_step: float = 50
    min_recommended_rent: float = 500
    strong_income_ratio: float = 3
    borderline_income_ratio: float = 2.5
    strong_savings_months: float = 3
    borderline_savings_months: float = 2
    good_credit_score: float = 650
    deposit_rounding_step: float = 100
