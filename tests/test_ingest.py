"""Tests for listing ingestion and validation."""

from typing import Any

import pytest

from rent_iq.eligibility import EligibilityEngine
from rent_iq.errors import DuplicateListingError, ValidationError
from rent_iq.ingest import build_listing, ingest_listing
from rent_iq.models import PreapprovalInput
from rent_iq.storage import InMemoryListingRepository
from rent_iq.validation import validate_credit_band, validate_preapproval_input


def _fields(**overrides: Any) -> dict[str, Any]:
    fields: dict[str, Any] = {"title": "Sunny 1BR", "rent": 2000, "beds": 1, "baths": 1}
    fields.update(overrides)
    return fields


class TestBuildListing:
    def test_extracts_from_text(self) -> None:
        listing = build_listing(
            _fields(title="2BR apartment, 3x income required", description="Co-signers welcome")
        )
        assert listing.income_multiplier == 3
        assert listing.cosigner_allowed is True
        assert listing.keywords == ["3x income", "co-signer allowed"]
        assert listing.prime_candidate_score == 85
        assert listing.city == "Los Angeles"
        assert listing.source == "manual"
        assert listing.id.isdigit()

    def test_explicit_values_override_and_rescore(self) -> None:
        listing = build_listing(_fields(cosigner_allowed=True))
        assert listing.cosigner_allowed is True
        assert listing.keywords is None
        # 50 + 20 (no credit minimum) + 15 (co-signer)
        assert listing.prime_candidate_score == 85

    def test_explicit_minimum_replaces_extracted(self) -> None:
        listing = build_listing(
            _fields(title="1BR credit 650+", min_credit_score=700, income_multiplier=3)
        )
        assert listing.min_credit_score == 700
        assert listing.keywords == ["credit 650+"]
        assert listing.prime_candidate_score == 50

    def test_given_id_and_city_kept(self) -> None:
        listing = build_listing(_fields(id="abc", city="Pasadena"), default_city="Glendale")
        assert listing.id == "abc"
        assert listing.city == "Pasadena"

    def test_engine_weights_used(self) -> None:
        engine = EligibilityEngine(config={"prime_candidate": {"base": 30}})
        assert build_listing(_fields(), engine=engine).prime_candidate_score == 50


class TestValidation:
    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"title": "  "}, "title"),
            ({"rent": 0}, "rent"),
            ({"rent": "cheap"}, "rent"),
            ({"beds": -1}, "beds"),
            ({"baths": None}, "baths"),
            ({"income_multiplier": 0}, "income_multiplier"),
            ({"min_credit_score": 900}, "min_credit_score"),
            ({"cosigner_allowed": "yes"}, "cosigner_allowed"),
            ({"landlord_type": "hoa"}, "landlord_type"),
        ],
    )
    def test_invalid_fields(self, overrides: dict[str, Any], field: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            build_listing(_fields(**overrides))
        assert exc_info.value.field == field

    def test_credit_band(self) -> None:
        assert validate_credit_band("700–749") == "700–749"
        with pytest.raises(ValidationError):
            validate_credit_band("700-749")

    @pytest.mark.parametrize(
        "income, savings, target, field",
        [(0, 100, 1000, "monthly_income"), (1000, -1, 1000, "savings"), (1000, 0, 0, "target_rent")],
    )
    def test_preapproval_input(self, income: float, savings: float, target: float, field: str) -> None:
        data = PreapprovalInput(income, "750+", savings, False, target)
        with pytest.raises(ValidationError) as exc_info:
            validate_preapproval_input(data)
        assert exc_info.value.field == field
        assert str(exc_info.value).startswith(f"{field}: ")


class TestIngestListing:
    def test_stores_listing(self) -> None:
        repo = InMemoryListingRepository()
        listing = ingest_listing(repo, _fields(id="x1"))
        assert repo.require("x1") is listing

    def test_duplicate_id(self) -> None:
        repo = InMemoryListingRepository()
        ingest_listing(repo, _fields(id="x1"))
        with pytest.raises(DuplicateListingError):
            ingest_listing(repo, _fields(id="x1"))

    def test_invalid_listing_not_stored(self) -> None:
        repo = InMemoryListingRepository()
        with pytest.raises(ValidationError):
            ingest_listing(repo, _fields(rent=-5))
        assert len(repo) == 0
