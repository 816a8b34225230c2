"""Pre-approval: recommended maximum rent and approval strength from renter finances."""

from __future__ import annotations

import logging
import math

from ..models import PreapprovalInput, PreapprovalParams, PreapprovalResult
from .contributions import round_half_up, safe_divide
from .credit import credit_score_from_band

logger = logging.getLogger(__name__)


def format_dollars(value: float) -> str:
    """Thousands-separated amount, e.g. ``2,100`` or ``1,234.5``."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")


def _format_months(months: float) -> str:
    if math.isfinite(months):
        return str(round_half_up(months))
    return "unlimited"


def _round_to_step(value: float, step: float) -> int:
    return int(round_half_up(value / step) * step)


def max_recommended_rent(
    data: PreapprovalInput,
    credit_score: float,
    params: PreapprovalParams | None = None,
) -> int:
    """Recommended rent ceiling: income rule, savings cap, credit and co-signer adjustments.

    Rounded to the nearest 50 and never below 500.
    """
    p = params or PreapprovalParams()
    by_income = data.monthly_income / p.income_to_rent_ratio
    by_savings = data.savings / p.move_in_savings_months

    rent = by_income
    if by_savings < by_income:
        if data.savings >= by_income:
            rent = min(by_income, by_savings * p.savings_flex_factor)
        else:
            rent = by_income * p.low_savings_factor

    if credit_score < p.poor_credit_threshold:
        rent *= p.poor_credit_factor
    elif credit_score < p.fair_credit_threshold:
        rent *= p.fair_credit_factor

    if data.has_cosigner:
        rent *= p.cosigner_factor

    rounded = _round_to_step(rent, p.rent_rounding_step)
    return int(max(p.min_recommended_rent, rounded))


def _top_up(target_rent: float, savings: float, params: PreapprovalParams) -> int:
    """Deposit that brings savings up to three months of rent, rounded to 100."""
    shortfall = target_rent * params.strong_savings_months - savings
    return _round_to_step(shortfall, params.deposit_rounding_step)


def calculate_preapproval(
    data: PreapprovalInput,
    params: PreapprovalParams | None = None,
) -> PreapprovalResult:
    """Compute pre-approval strength, recommended rent and explanation.

    Inputs are assumed validated by the caller; nothing here raises.
    """
    p = params or PreapprovalParams()
    credit_score = credit_score_from_band(data.credit_band)
    max_rent = max_recommended_rent(data, credit_score, p)
    max_rent_text = format_dollars(max_rent)

    income_ratio = safe_divide(data.monthly_income, data.target_rent)
    savings_months = safe_divide(data.savings, data.target_rent)
    credit_good = credit_score >= p.good_credit_score

    top_up: int | None = None

    if (
        income_ratio >= p.strong_income_ratio
        and credit_good
        and savings_months >= p.strong_savings_months
    ):
        strength = "strong"
        explanation = (
            f"Your financial profile is strong. You meet the standard 3x income requirement, "
            f"have good credit ({credit_score}+), and sufficient savings "
            f"({_format_months(savings_months)} months of rent). You should have no trouble "
            f"getting approved for rentals up to ${max_rent_text}/month."
        )
    elif (
        income_ratio >= p.borderline_income_ratio
        and (credit_good or data.has_cosigner)
        and savings_months >= p.borderline_savings_months
    ):
        strength = "borderline"
        needs_deposit = (
            income_ratio < p.strong_income_ratio or savings_months < p.strong_savings_months
        )
        if needs_deposit and data.savings >= data.target_rent * p.borderline_savings_months:
            top_up = _top_up(data.target_rent, data.savings, p)
            if 0 < top_up <= data.target_rent * p.borderline_savings_months:
                explanation = (
                    f"Your profile is borderline. While you meet basic requirements, offering an "
                    f"additional security deposit of ${format_dollars(top_up)} (bringing total to "
                    f"${format_dollars(data.savings + top_up)}) would significantly strengthen your "
                    f"application. This shows financial stability and reduces landlord risk."
                )
            else:
                top_up = None
                explanation = (
                    f"Your profile is borderline. You're close to meeting all requirements. "
                    f"Consider properties up to ${max_rent_text}/month, and be prepared to provide "
                    f"additional documentation or a larger security deposit if needed."
                )
        else:
            explanation = (
                f"Your profile is borderline. You meet most requirements but may face competition "
                f"from stronger applicants. Focus on properties up to ${max_rent_text}/month and "
                f"consider offering a larger security deposit or providing additional financial "
                f"documentation."
            )
    else:
        strength = "weak"
        issues: list[str] = []
        if income_ratio < p.borderline_income_ratio:
            issues.append("income is below the standard 3x rent requirement")
        if credit_score < p.poor_credit_threshold and not data.has_cosigner:
            issues.append("credit score may be below landlord requirements")
        if savings_months < p.borderline_savings_months:
            issues.append("savings may be insufficient for move-in costs")

        cosigner_hint = "" if data.has_cosigner else "adding a co-signer, "
        summary = f" {', '.join(issues)}." if issues else ""
        explanation = (
            f"Your profile needs strengthening.{summary} We recommend focusing on properties up "
            f"to ${max_rent_text}/month. Consider: {cosigner_hint}increasing your savings, or "
            f"looking for properties with more flexible requirements."
        )

        if data.target_rent <= data.savings < data.target_rent * p.strong_savings_months:
            top_up = _top_up(data.target_rent, data.savings, p)
            if top_up > 0:
                explanation += (
                    f" Offering an additional ${format_dollars(top_up)} security deposit could help."
                )

    logger.debug(
        "preapproval strength=%s max_rent=%s income_ratio=%.2f savings_months=%.2f",
        strength,
        max_rent,
        income_ratio,
        savings_months,
    )
    return PreapprovalResult(
        strength=strength,
        max_recommended_rent=max_rent,
        explanation=explanation,
        suggested_top_up_deposit=top_up if top_up is not None and top_up > 0 else None,
    )
