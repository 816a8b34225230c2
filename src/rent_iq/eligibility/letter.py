"""Printable plain-text pre-approval letter."""

from __future__ import annotations

import textwrap
from datetime import date

from ..models import PreapprovalInput, PreapprovalResult
from .credit import credit_band_label
from .preapproval import format_dollars

PLATFORM_NAME = "RentIQ Rental Platform"
VALID_DAYS = 30

_WIDTH = 78


def _wrap(text: str) -> str:
    return textwrap.fill(text, width=_WIDTH, break_on_hyphens=False)


def render_preapproval_letter(
    data: PreapprovalInput,
    result: PreapprovalResult,
    renter_name: str = "Applicant",
    city: str = "Los Angeles",
    issued_on: date | None = None,
) -> str:
    """Render the pre-approval letter for printing or saving to a file."""
    issued = issued_on or date.today()
    issued_text = f"{issued:%B} {issued.day}, {issued.year}"

    lines = [
        "RentIQ",
        "Rental Pre-Approval Letter",
        "=" * _WIDTH,
        "",
        issued_text,
        PLATFORM_NAME,
        f"{city}, CA",
        "",
        "To Whom It May Concern:",
        "",
        _wrap(
            f"This letter serves to confirm that {renter_name} has been pre-approved for rental "
            f"properties in the {city} area based on the financial information provided to RentIQ."
        ),
        "",
        "Financial Profile Summary",
        "-" * 25,
        f"  Monthly Income:       ${format_dollars(data.monthly_income)}",
        f"  Credit Score Range:   {credit_band_label(data.credit_band)}",
        f"  Available Savings:    ${format_dollars(data.savings)}",
        f"  Co-Signer Available:  {'Yes' if data.has_cosigner else 'No'}",
        "",
        "Pre-Approval Details",
        "-" * 20,
        _wrap(
            f"Based on the financial information provided, {renter_name} is pre-approved for "
            f"rental properties with monthly rent up to:"
        ),
        "",
        f"  Maximum Recommended Monthly Rent: ${format_dollars(result.max_recommended_rent)}",
        "",
        _wrap(f"Assessment: {result.explanation}"),
    ]

    if result.suggested_top_up_deposit:
        lines += [
            "",
            "Recommendation",
            _wrap(
                "To strengthen the application, consider offering an additional security "
                f"deposit of ${format_dollars(result.suggested_top_up_deposit)}."
            ),
        ]

    lines += [
        "",
        "-" * _WIDTH,
        _wrap(
            "Disclaimer: This pre-approval letter is based on the information provided by the "
            "applicant and is not a guarantee of rental approval. Final approval is subject to "
            "the landlord's verification process, including but not limited to credit checks, "
            "income verification, and reference checks. This letter is valid for "
            f"{VALID_DAYS} days from the date of issuance. RentIQ reserves the right to verify "
            "all information provided."
        ),
        "",
        "=" * _WIDTH,
        PLATFORM_NAME,
        f"This is an automated pre-approval letter generated on {issued_text}",
    ]
    return "\n".join(lines) + "\n"
