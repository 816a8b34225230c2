"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from rent_iq.cli import app
from rent_iq.storage import DuckDBListingRepository

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        f"default_city: Los Angeles\n"
        f"output_dir: {tmp_path / 'out'}\n"
        f"storage:\n"
        f"  db_path: {tmp_path / 'listings.duckdb'}\n",
        encoding="utf-8",
    )
    return path


def test_parse() -> None:
    result = runner.invoke(app, ["parse", "2BR apartment, 3x income required, credit 650+, no cosigners"])
    assert result.exit_code == 0, result.output
    assert "Extracted Eligibility" in result.output
    assert "income_multiplier" in result.output
    assert "650" in result.output


def test_preapprove() -> None:
    result = runner.invoke(
        app,
        ["preapprove", "--income", "6250", "--credit", "700–749", "--savings", "10000", "--target-rent", "2500"],
    )
    assert result.exit_code == 0, result.output
    assert "Strength: borderline" in result.output
    assert "Max recommended rent: $2,100/month" in result.output


def test_preapprove_writes_letter(tmp_path: Path) -> None:
    letter = tmp_path / "letters" / "preapproval.txt"
    result = runner.invoke(
        app,
        [
            "preapprove",
            "--income", "9000",
            "--credit", "750+",
            "--savings", "9000",
            "--target-rent", "2500",
            "--letter", str(letter),
            "--name", "Jordan Lee",
            "--city", "Pasadena",
        ],
    )
    assert result.exit_code == 0, result.output
    text = letter.read_text(encoding="utf-8")
    assert "Rental Pre-Approval Letter" in text
    assert "Jordan Lee" in text
    assert "Pasadena, CA" in text


def test_preapprove_rejects_unknown_band() -> None:
    result = runner.invoke(
        app,
        ["preapprove", "--income", "5000", "--credit", "700-749", "--savings", "0", "--target-rent", "2000"],
    )
    assert result.exit_code == 1
    assert "credit_band" in result.output


def test_preapprove_rejects_negative_savings() -> None:
    result = runner.invoke(
        app,
        ["preapprove", "--income", "5000", "--credit", "750+", "--savings", "-1", "--target-rent", "2000"],
    )
    assert result.exit_code == 1
    assert "savings" in result.output


def test_search_demo() -> None:
    result = runner.invoke(
        app,
        ["search", "--income", "7000", "--credit", "650–699", "--max-rent", "2500", "--demo"],
    )
    assert result.exit_code == 0, result.output
    assert "Best Matches" in result.output


def test_search_empty_store(config_file: Path) -> None:
    result = runner.invoke(
        app,
        ["search", "--income", "7000", "--credit", "650–699", "--max-rent", "2500", "-c", str(config_file)],
    )
    assert result.exit_code == 1
    assert "No listings in store" in result.output


def test_seed_then_search_and_export(config_file: Path, tmp_path: Path) -> None:
    result = runner.invoke(app, ["seed", "-c", str(config_file)])
    assert result.exit_code == 0, result.output
    assert "Added 10 demo listings" in result.output

    result = runner.invoke(app, ["seed", "-c", str(config_file)])
    assert "Added 0 demo listings (10 stored)" in result.output

    result = runner.invoke(
        app,
        [
            "search",
            "--income", "7000",
            "--credit", "650–699",
            "--max-rent", "2500",
            "-n", "hollywood",
            "--export",
            "-c", str(config_file),
        ],
    )
    assert result.exit_code == 0, result.output
    csv_files = list((tmp_path / "out").glob("matches_*.csv"))
    assert len(csv_files) == 1
    content = csv_files[0].read_text(encoding="utf-8")
    assert "Cozy 1BR in Hollywood" in content
    json_files = list((tmp_path / "out").glob("matches_*.json"))
    assert len(json_files) == 1
    data = json.loads(json_files[0].read_text(encoding="utf-8"))
    assert data["profile"]["estimated_credit_score"] == 675
    assert data["results"][0]["listing"]["id"] == "3"


def test_add_listing(config_file: Path, tmp_path: Path) -> None:
    result = runner.invoke(
        app,
        [
            "add-listing",
            "--title", "Studio, 2.5x income, co-signers welcome",
            "--rent", "1500",
            "--neighborhood", "Echo Park",
            "-c", str(config_file),
        ],
    )
    assert result.exit_code == 0, result.output
    assert "co-signer allowed" in result.output

    with DuckDBListingRepository(tmp_path / "listings.duckdb") as repo:
        listings = repo.get_all()
    assert len(listings) == 1
    assert listings[0].income_multiplier == 2.5
    assert listings[0].neighborhood == "Echo Park"
    assert listings[0].city == "Los Angeles"


def test_add_listing_validation_error(config_file: Path) -> None:
    result = runner.invoke(app, ["add-listing", "--title", "Studio", "--rent", "0", "-c", str(config_file)])
    assert result.exit_code == 1
    assert "rent" in result.output


def test_missing_explicit_config(tmp_path: Path) -> None:
    result = runner.invoke(app, ["parse", "Studio", "-c", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 1
    assert "Config not found" in result.output
