"""Tests for eligibility extraction from listing text."""

import pytest

from rent_iq.eligibility import compute_prime_candidate_score, extract_eligibility
from rent_iq.eligibility.parsing import (
    CREDIT_SCORE_RULES,
    INCOME_MULTIPLIER_RULES,
    first_value,
    prime_candidate_contributions,
)
from rent_iq.models import ListingEligibility


class TestScenario:
    """Title-only listing with several requirements."""

    def test_multiplier_credit_and_no_cosigner(self) -> None:
        result = extract_eligibility(
            "2BR apartment, 3x income required, credit 650+, no cosigners", ""
        )
        assert result.income_multiplier == 3
        assert result.min_credit_score == 650
        assert result.cosigner_allowed is False
        assert result.guarantor_allowed is None
        assert result.keywords == ["3x income", "credit 650+"]
        assert "co-signer allowed" not in result.keywords
        assert result.prime_candidate_score == 50

    def test_plain_text_has_neutral_baseline(self) -> None:
        result = extract_eligibility("Sunny 1BR near the park", "Hardwood floors and a balcony.")
        assert result.income_multiplier is None
        assert result.income_flexibility is None
        assert result.min_credit_score is None
        assert result.credit_flexibility is None
        assert result.cosigner_allowed is None
        assert result.guarantor_allowed is None
        assert result.extra_deposit_allowed is None
        assert result.keywords is None
        # base 50 + 20 for no stated credit minimum
        assert result.prime_candidate_score == 70

    def test_empty_text(self) -> None:
        result = extract_eligibility("", None)
        assert result.keywords is None
        assert result.prime_candidate_score == 70


class TestIncomeRules:
    def test_income_must_be_pattern(self) -> None:
        result = extract_eligibility("Studio", "Income must be 2.5x the rent")
        assert result.income_multiplier == 2.5
        assert result.keywords == ["2.5x income"]
        # +20 no credit minimum, +10 low multiplier
        assert result.prime_candidate_score == 80

    def test_times_pattern_with_high_multiplier(self) -> None:
        result = extract_eligibility("Loft", "Tenant income 4 times rent")
        assert result.income_multiplier == 4
        assert result.keywords == ["4x income"]
        assert result.prime_candidate_score == 60

    def test_out_of_range_multiplier_rejected(self) -> None:
        result = extract_eligibility("Loft", "5x rent required")
        assert result.income_multiplier is None
        assert result.keywords is None

    def test_flexible_income(self) -> None:
        result = extract_eligibility("Cottage", "Landlord is flexible on income requirements")
        assert result.income_multiplier is None
        assert result.income_flexibility == "flexible"
        assert result.keywords == ["flexible income"]
        assert result.prime_candidate_score == 85

    def test_strict_income_adds_no_keyword(self) -> None:
        result = extract_eligibility("Cottage", "Applicants must show proof of income")
        assert result.income_flexibility == "strict"
        assert result.keywords is None
        assert result.prime_candidate_score == 70

    def test_flexibility_skipped_when_multiplier_found(self) -> None:
        result = extract_eligibility("3x income", "Flexible on rent date")
        assert result.income_multiplier == 3
        assert result.income_flexibility is None

    def test_rule_table_first_value(self) -> None:
        assert first_value("needs 3x income", INCOME_MULTIPLIER_RULES) == (3.0, "3x income")
        assert first_value("nothing here", INCOME_MULTIPLIER_RULES) is None


class TestCreditRules:
    def test_trailing_fico_pattern(self) -> None:
        result = extract_eligibility("Minimum 700 FICO required", "")
        assert result.min_credit_score == 700
        assert result.keywords == ["credit 700+"]
        assert result.prime_candidate_score == 50

    def test_out_of_range_score_rejected(self) -> None:
        result = extract_eligibility("Townhouse", "credit score 900")
        assert result.min_credit_score is None
        assert result.prime_candidate_score == 70

    @pytest.mark.parametrize("text", ["No credit check, move in today!", "Bad credit OK"])
    def test_no_minimum(self, text: str) -> None:
        result = extract_eligibility("Room", text)
        assert result.min_credit_score is None
        assert result.credit_flexibility == "no_minimum"
        assert result.keywords == ["no credit check"]
        assert result.prime_candidate_score == 70

    def test_flexible_credit(self) -> None:
        result = extract_eligibility("Room", "Open to applicants with any credit")
        assert result.credit_flexibility == "flexible"
        assert result.keywords == ["flexible credit"]

    def test_rule_table_rejects_then_falls_through(self) -> None:
        assert first_value("fico 200", CREDIT_SCORE_RULES) is None
        assert first_value("credit score at least 680", CREDIT_SCORE_RULES) == (680, "credit 680+")


class TestCosignerRules:
    def test_cosigner_welcome(self) -> None:
        result = extract_eligibility("1BR", "Co-signers welcome")
        assert result.cosigner_allowed is True
        assert result.guarantor_allowed is None
        assert result.keywords == ["co-signer allowed"]
        assert result.prime_candidate_score == 85

    def test_allow_token_before_term(self) -> None:
        result = extract_eligibility("1BR", "We accept a cosigner")
        assert result.cosigner_allowed is True

    def test_guarantor_sets_both_flags(self) -> None:
        result = extract_eligibility("1BR", "Guarantors welcome")
        assert result.cosigner_allowed is True
        assert result.guarantor_allowed is True
        assert result.keywords == ["co-signer allowed", "guarantor allowed"]
        assert result.prime_candidate_score == 85

    def test_negated_cosigner(self) -> None:
        result = extract_eligibility("1BR", "Sorry, no co-signer")
        assert result.cosigner_allowed is False
        assert result.keywords is None
        assert result.prime_candidate_score == 70

    def test_no_mention_leaves_unset(self) -> None:
        result = extract_eligibility("1BR", "No pets")
        assert result.cosigner_allowed is None

    def test_inflected_allow_word_is_not_an_allowance(self) -> None:
        result = extract_eligibility("Studio", "No pets allowed. Guarantor required.")
        assert result.cosigner_allowed is False
        assert result.guarantor_allowed is None
        assert result.keywords is None
        assert result.prime_candidate_score == 70

    @pytest.mark.parametrize("text", ["Co-signer accepted", "Cosigners allowed"])
    def test_only_base_allow_words_count(self, text: str) -> None:
        assert extract_eligibility("1BR", text).cosigner_allowed is None


class TestExtraDeposit:
    def test_extra_deposit_option(self) -> None:
        result = extract_eligibility("2BR", "Extra deposit option available")
        assert result.extra_deposit_allowed is True
        assert result.keywords == ["extra deposit option"]
        assert result.prime_candidate_score == 80

    def test_higher_security_deposit_ok(self) -> None:
        result = extract_eligibility("2BR", "Higher security deposit ok")
        assert result.extra_deposit_allowed is True

    def test_deposit_without_allowance(self) -> None:
        result = extract_eligibility("2BR", "Extra deposit required")
        assert result.extra_deposit_allowed is None

    def test_unrelated_allowance_does_not_count(self) -> None:
        result = extract_eligibility("Studio", "Extra deposit required. No smoking allowed.")
        assert result.extra_deposit_allowed is None
        assert result.keywords is None
        assert result.prime_candidate_score == 70


def test_keywords_keep_detection_order() -> None:
    result = extract_eligibility("3x income, credit 680+", "Co-signer OK. Extra deposit option.")
    assert result.keywords == [
        "3x income",
        "credit 680+",
        "co-signer allowed",
        "extra deposit option",
    ]
    assert result.prime_candidate_score == 75


class TestPrimeCandidateScore:
    def test_high_multiplier_penalty(self) -> None:
        eligibility = ListingEligibility(income_multiplier=3.5, min_credit_score=700)
        assert compute_prime_candidate_score(eligibility) == 40

    def test_multiplier_bonus_and_penalty_exclusive(self) -> None:
        labels = [c.label for c in prime_candidate_contributions(ListingEligibility(income_multiplier=2))]
        assert "low_income_multiplier" in labels
        assert "high_income_multiplier" not in labels

    def test_clamped_to_100(self) -> None:
        eligibility = ListingEligibility(
            income_multiplier=2,
            income_flexibility="negotiable",
            cosigner_allowed=True,
            extra_deposit_allowed=True,
        )
        # 50 + 20 + 15 + 10 + 15 + 10 = 120
        assert compute_prime_candidate_score(eligibility) == 100
