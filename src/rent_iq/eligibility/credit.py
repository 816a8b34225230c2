"""Credit band to representative score mapping."""

from __future__ import annotations

# En-dash in the ranged labels is part of the contract.
CREDIT_BAND_SCORES: dict[str, int] = {
    "<580": 550,
    "580–649": 615,
    "650–699": 675,
    "700–749": 725,
    "750+": 775,
}

CREDIT_BANDS: tuple[str, ...] = tuple(CREDIT_BAND_SCORES)

DEFAULT_CREDIT_SCORE = 650

# Printable labels used on the pre-approval letter.
CREDIT_BAND_LABELS: dict[str, str] = {
    "<580": "Below 580",
    "580–649": "580-649",
    "650–699": "650-699",
    "700–749": "700-749",
    "750+": "750+",
}


def credit_score_from_band(band: str) -> int:
    """Representative score for a credit band; unknown bands map to 650."""
    return CREDIT_BAND_SCORES.get(band, DEFAULT_CREDIT_SCORE)


def credit_band_label(band: str) -> str:
    return CREDIT_BAND_LABELS.get(band, band)
