"""Input validation for the request layer (listing creation, pre-approval, search).

The scoring core trusts its inputs; callers run these checks first.
"""

from __future__ import annotations

from typing import Any

from .eligibility.credit import CREDIT_BANDS
from .errors import ValidationError
from .models import PreapprovalInput

LANDLORD_TYPES = ("independent", "corporate")


def _number(fields: dict[str, Any], name: str) -> float:
    value = fields.get(name)
    if isinstance(value, bool) or value is None:
        raise ValidationError(name, "is required and must be a number")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(name, "must be a number") from e


def validate_credit_band(band: str) -> str:
    if band not in CREDIT_BANDS:
        raise ValidationError("credit_band", f"must be one of: {', '.join(CREDIT_BANDS)}")
    return band


def validate_preapproval_input(data: PreapprovalInput) -> PreapprovalInput:
    """Check ranges the calculator assumes: positive income/rent, non-negative savings."""
    if data.monthly_income <= 0:
        raise ValidationError("monthly_income", "must be a positive number")
    if data.savings < 0:
        raise ValidationError("savings", "must be a non-negative number")
    if data.target_rent <= 0:
        raise ValidationError("target_rent", "must be a positive number")
    validate_credit_band(data.credit_band)
    return data


def validate_search_profile(monthly_income: float, max_rent: float) -> None:
    if monthly_income <= 0:
        raise ValidationError("monthly_income", "must be a positive number")
    if max_rent <= 0:
        raise ValidationError("max_rent", "must be a positive number")


def validate_listing_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Validate manual listing fields and return them normalized."""
    title = str(fields.get("title") or "").strip()
    if not title:
        raise ValidationError("title", "is required")

    rent = _number(fields, "rent")
    if rent <= 0:
        raise ValidationError("rent", "must be a positive number")
    beds = _number(fields, "beds")
    baths = _number(fields, "baths")
    if beds < 0:
        raise ValidationError("beds", "must be a non-negative number")
    if baths < 0:
        raise ValidationError("baths", "must be a non-negative number")

    out = dict(fields)
    out.update(title=title, rent=rent, beds=int(beds), baths=baths)

    if fields.get("income_multiplier") is not None:
        multiplier = _number(fields, "income_multiplier")
        if multiplier <= 0:
            raise ValidationError("income_multiplier", "must be a positive number")
        out["income_multiplier"] = multiplier

    if fields.get("min_credit_score") is not None:
        score = _number(fields, "min_credit_score")
        if not 300 <= score <= 850:
            raise ValidationError("min_credit_score", "must be null or a number between 300 and 850")
        out["min_credit_score"] = int(score)

    for flag in ("cosigner_allowed", "guarantor_allowed", "extra_deposit_allowed"):
        if fields.get(flag) is not None and not isinstance(fields[flag], bool):
            raise ValidationError(flag, "must be a boolean")

    landlord_type = fields.get("landlord_type")
    if landlord_type is not None and landlord_type not in LANDLORD_TYPES:
        raise ValidationError("landlord_type", 'must be "independent" or "corporate"')
    return out
