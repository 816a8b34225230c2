"""Additive scores as folds over labelled contributions."""

from __future__ import annotations

import math
from typing import Iterable

from ..models import ScoreContribution

SCORE_MIN = 0
SCORE_MAX = 100


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def safe_divide(numerator: float, denominator: float) -> float:
    """Float division that never raises.

    A zero denominator gives ``inf``/``-inf`` by the numerator's sign, or ``nan`` for 0/0.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def total(contributions: Iterable[ScoreContribution]) -> float:
    """Raw (unclamped) sum of contribution deltas."""
    return sum((c.delta for c in contributions), 0.0)


def fold_score(contributions: Iterable[ScoreContribution]) -> int:
    """Sum contributions, clamp to [0, 100] and round to an integer."""
    return round_half_up(max(SCORE_MIN, min(SCORE_MAX, total(contributions))))


def describe(contributions: Iterable[ScoreContribution]) -> list[str]:
    """Human-readable notes, e.g. ``["base 50", "+25 income_met"]``."""
    notes: list[str] = []
    for c in contributions:
        if c.label == "base":
            notes.append(f"base {c.delta:g}")
        else:
            notes.append(f"{c.delta:+g} {c.label}")
    return notes
