"""Extract structured eligibility requirements from listing title/description text.

Rules are kept as ordered tables so each stage can be audited and tested on its
own. Stages run in a fixed order and ``keywords`` preserves detection order:

1. income multiplier ("3x income", "income must be 2.5x", "3 times rent")
2. income flexibility (only when no multiplier was found)
3. minimum credit score ("credit 650+", "700 fico")
4. credit flexibility (only when no minimum was found)
5. co-signer / guarantor policy
6. extra deposit option
7. prime-candidate score (listing-side accessibility, 0-100)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable

from ..models import ListingEligibility, PrimeCandidateWeights, ScoreContribution
from .contributions import fold_score

logger = logging.getLogger(__name__)

_FLAGS = re.IGNORECASE

# Word-bounded alternations shared by several rules.
_ALLOW = r"\b(?:allow|accept|welcome|ok|yes)\b"
_NEGATION = r"\b(?:no|not|don't|doesn't)\b"
_COSIGNER_TERM = r"\b(?:co[\s-]?signers?|co[\s-]?sign|guarantors?)\b"

_INCOME_MULTIPLIER_RANGE = (2.0, 4.0)
_CREDIT_SCORE_RANGE = (300, 850)


@dataclass(frozen=True)
class ValueRule:
    """Capture a number; keep it only if ``accept`` passes."""

    name: str
    pattern: re.Pattern[str]
    convert: Callable[[str], Any]
    accept: Callable[[Any], bool]
    keyword: Callable[[Any], str]


@dataclass(frozen=True)
class FlagRule:
    """All ``patterns`` must match for the rule to fire."""

    name: str
    patterns: tuple[re.Pattern[str], ...]
    value: Any
    keyword: str | None = None

    def matches(self, text: str) -> bool:
        return all(p.search(text) for p in self.patterns)


def _in_range(bounds: tuple[float, float]) -> Callable[[float], bool]:
    lo, hi = bounds
    return lambda v: lo <= v <= hi


def _format_multiplier(value: float) -> str:
    return f"{value:g}x income"


INCOME_MULTIPLIER_RULES: tuple[ValueRule, ...] = tuple(
    ValueRule(
        name=name,
        pattern=re.compile(pattern, _FLAGS),
        convert=float,
        accept=_in_range(_INCOME_MULTIPLIER_RANGE),
        keyword=_format_multiplier,
    )
    for name, pattern in (
        ("n_x_income", r"(\d+(?:\.\d+)?)\s*x\s*(?:income|rent|salary)"),
        ("income_at_least_n_x", r"income\s*(?:must\s*be|of|at\s*least)\s*(\d+(?:\.\d+)?)\s*x"),
        ("n_times_income", r"(\d+(?:\.\d+)?)\s*times\s*(?:income|rent)"),
    )
)

INCOME_FLEXIBILITY_RULES: tuple[FlagRule, ...] = (
    FlagRule(
        name="flexible_income",
        patterns=(
            re.compile(r"\b(?:flexible|negotiable|open|willing)\b.*\b(?:income|salary|rent)\b", _FLAGS),
        ),
        value="flexible",
        keyword="flexible income",
    ),
    FlagRule(
        name="strict_income",
        patterns=(re.compile(r"\b(?:strict|must|required|minimum)\b.*\b(?:income|salary)\b", _FLAGS),),
        value="strict",
    ),
)

CREDIT_SCORE_RULES: tuple[ValueRule, ...] = tuple(
    ValueRule(
        name=name,
        pattern=re.compile(pattern, _FLAGS),
        convert=int,
        accept=_in_range(_CREDIT_SCORE_RANGE),
        keyword=lambda score: f"credit {score}+",
    )
    for name, pattern in (
        (
            "credit_n",
            r"(?:credit|credit\s*score|fico)\s*(?:score\s*)?(?:of|at\s*least|minimum|min)?\s*(\d{3,4})\+?",
        ),
        ("n_credit", r"(\d{3,4})\+?\s*(?:credit|fico)"),
    )
)

CREDIT_FLEXIBILITY_RULES: tuple[FlagRule, ...] = (
    FlagRule(
        name="no_credit_check",
        patterns=(re.compile(r"\b(?:no\s*credit|credit\s*not\s*required|bad\s*credit\s*ok)\b", _FLAGS),),
        value="no_minimum",
        keyword="no credit check",
    ),
    FlagRule(
        name="flexible_credit",
        patterns=(re.compile(r"\b(?:flexible|negotiable|open)\b.*\bcredit\b", _FLAGS),),
        value="flexible",
        keyword="flexible credit",
    ),
)

# Gate for the co-signer rules below.
COSIGNER_MENTION = re.compile(_COSIGNER_TERM, _FLAGS)

COSIGNER_RULES: tuple[FlagRule, ...] = (
    FlagRule(
        name="allow_before_cosigner",
        patterns=(re.compile(_ALLOW + r".*" + _COSIGNER_TERM, _FLAGS),),
        value=True,
        keyword="co-signer allowed",
    ),
    FlagRule(
        name="allow_after_cosigner",
        patterns=(re.compile(_COSIGNER_TERM + r".*" + _ALLOW, _FLAGS),),
        value=True,
        keyword="co-signer allowed",
    ),
    FlagRule(
        name="negated_cosigner",
        patterns=(re.compile(_NEGATION + r".*" + _COSIGNER_TERM, _FLAGS),),
        value=False,
    ),
)

GUARANTOR_RULE = FlagRule(
    name="guarantor_allowed",
    patterns=(re.compile(r"\bguarantors?\b", _FLAGS), re.compile(_ALLOW, _FLAGS)),
    value=True,
    keyword="guarantor allowed",
)

EXTRA_DEPOSIT_RULE = FlagRule(
    name="extra_deposit_option",
    patterns=(
        re.compile(r"\b(?:extra|additional|higher|larger)\s*(?:security\s*)?deposit\b", _FLAGS),
        re.compile(r"\b(?:allow|accept|welcome|ok|yes|option)\b", _FLAGS),
    ),
    value=True,
    keyword="extra deposit option",
)


def first_value(text: str, rules: tuple[ValueRule, ...]) -> tuple[Any, str] | None:
    """Return (value, keyword) for the first rule whose captured value is accepted."""
    for rule in rules:
        m = rule.pattern.search(text)
        if not m:
            continue
        try:
            value = rule.convert(m.group(1))
        except ValueError:
            continue
        if rule.accept(value):
            logger.debug("rule %s matched %r -> %s", rule.name, m.group(0), value)
            return value, rule.keyword(value)
    return None


def first_flag(text: str, rules: tuple[FlagRule, ...]) -> FlagRule | None:
    """Return the first rule whose patterns all match."""
    for rule in rules:
        if rule.matches(text):
            logger.debug("rule %s matched", rule.name)
            return rule
    return None


def prime_candidate_contributions(
    eligibility: ListingEligibility,
    weights: PrimeCandidateWeights | None = None,
) -> list[ScoreContribution]:
    """Named contributions making up the prime-candidate score."""
    w = weights or PrimeCandidateWeights()
    parts = [ScoreContribution("base", w.base)]
    if not eligibility.min_credit_score or eligibility.credit_flexibility == "no_minimum":
        parts.append(ScoreContribution("no_credit_minimum", w.no_credit_minimum))
    if eligibility.cosigner_allowed or eligibility.guarantor_allowed:
        parts.append(ScoreContribution("cosigner_or_guarantor", w.cosigner_or_guarantor))
    if eligibility.extra_deposit_allowed:
        parts.append(ScoreContribution("extra_deposit", w.extra_deposit))
    if eligibility.income_flexibility in ("flexible", "negotiable"):
        parts.append(ScoreContribution("income_flexibility", w.income_flexibility))
    multiplier = eligibility.income_multiplier
    if multiplier and multiplier <= w.low_multiplier_threshold:
        parts.append(ScoreContribution("low_income_multiplier", w.low_multiplier_bonus))
    elif multiplier and multiplier >= w.high_multiplier_threshold:
        parts.append(ScoreContribution("high_income_multiplier", -w.high_multiplier_penalty))
    return parts


def compute_prime_candidate_score(
    eligibility: ListingEligibility,
    weights: PrimeCandidateWeights | None = None,
) -> int:
    """Listing-side accessibility score (0-100); higher means more lenient."""
    return fold_score(prime_candidate_contributions(eligibility, weights))


def extract_eligibility(
    title: str | None,
    description: str | None,
    weights: PrimeCandidateWeights | None = None,
) -> ListingEligibility:
    """Parse eligibility requirements from listing title and description.

    Never raises; a rule that does not match leaves its field as ``None``.
    ``keywords`` is ``None`` when nothing was detected.
    """
    text = f"{title or ''} {description or ''}".lower()
    result = ListingEligibility()
    keywords: list[str] = []

    found = first_value(text, INCOME_MULTIPLIER_RULES)
    if found:
        result.income_multiplier, keyword = found
        keywords.append(keyword)
    else:
        rule = first_flag(text, INCOME_FLEXIBILITY_RULES)
        if rule:
            result.income_flexibility = rule.value
            if rule.keyword:
                keywords.append(rule.keyword)

    found = first_value(text, CREDIT_SCORE_RULES)
    if found:
        result.min_credit_score, keyword = found
        keywords.append(keyword)
    else:
        rule = first_flag(text, CREDIT_FLEXIBILITY_RULES)
        if rule:
            result.credit_flexibility = rule.value
            if rule.keyword:
                keywords.append(rule.keyword)

    if COSIGNER_MENTION.search(text):
        rule = first_flag(text, COSIGNER_RULES)
        if rule:
            result.cosigner_allowed = rule.value
            if rule.keyword:
                keywords.append(rule.keyword)

    if GUARANTOR_RULE.matches(text):
        result.guarantor_allowed = True
        keywords.append(GUARANTOR_RULE.keyword)

    if EXTRA_DEPOSIT_RULE.matches(text):
        result.extra_deposit_allowed = True
        keywords.append(EXTRA_DEPOSIT_RULE.keyword)

    result.keywords = keywords or None
    result.prime_candidate_score = compute_prime_candidate_score(result, weights)
    logger.debug("extracted keywords=%s prime=%s", result.keywords, result.prime_candidate_score)
    return result
