"""CLI for the RentIQ eligibility engine."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, NoReturn, Optional

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import get_db_path, get_default_city, get_output_dir, load_config
from .eligibility import EligibilityEngine, render_preapproval_letter
from .eligibility.credit import CREDIT_BANDS, credit_score_from_band
from .errors import DuplicateListingError, ValidationError
from .ingest import ingest_listing
from .models import ListingWithScore, PreapprovalInput, RenterProfile
from .search import search_listings
from .seed import mock_listings
from .storage import DuckDBListingRepository, InMemoryListingRepository, export_csv, export_json
from .storage.repository import ListingRepository
from .validation import validate_credit_band, validate_preapproval_input, validate_search_profile

app = typer.Typer(
    name="rent-iq",
    help="Rental eligibility scoring - match renters to listings they can get approved for",
)
console = Console()
logger = logging.getLogger("rent_iq")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Configure logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_config(config_path: Optional[Path]) -> dict[str, Any]:
    """Load config; an explicit path must exist, the default one may be absent."""
    try:
        return load_config(config_path)
    except FileNotFoundError as e:
        if config_path:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)
        logger.warning("%s - using built-in defaults", e)
        return {}


def _run_id() -> str:
    """Generate run ID from timestamp."""
    return datetime.utcnow().strftime("%Y%m%d_%H%M%S")


def _fail(message: str) -> NoReturn:
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


def _yes_no(value: Optional[bool]) -> str:
    if value is None:
        return "-"
    return "yes" if value else "no"


def _display_results(results: list[ListingWithScore], limit: int = 20) -> None:
    """Display ranked listings table."""
    if not results:
        console.print("[yellow]No listings matched.[/yellow]")
        return

    table = Table(title="Best Matches")
    table.add_column("Rank", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("Neighborhood", style="dim")
    table.add_column("Rent", justify="right")
    table.add_column("Beds", justify="right")
    table.add_column("Income x", justify="right")
    table.add_column("Min credit", justify="right")
    table.add_column("Co-signer", justify="center")
    table.add_column("Score", justify="right")

    for i, r in enumerate(results[:limit], 1):
        l = r.listing
        title = l.title[:32] + "..." if len(l.title) > 32 else l.title
        style = "green" if r.score >= 75 else "yellow" if r.score >= 50 else "red"
        table.add_row(
            str(i),
            title,
            l.neighborhood or l.city,
            f"${l.rent:,.0f}",
            str(l.beds),
            f"{l.income_multiplier:g}" if l.income_multiplier is not None else "3 (default)",
            str(l.min_credit_score) if l.min_credit_score is not None else "none",
            _yes_no(l.cosigner_allowed or l.guarantor_allowed),
            f"[{style}]{r.score}[/{style}]",
        )

    console.print(table)


def _repository(cfg: dict[str, Any], demo: bool) -> ListingRepository:
    if demo:
        return InMemoryListingRepository(mock_listings())
    return DuckDBListingRepository(get_db_path(cfg))


@app.command()
def parse(
    title: str = typer.Argument(..., help="Listing title"),
    description: str = typer.Option("", "--description", "-d", help="Listing description"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
) -> None:
    """Extract eligibility requirements from listing text."""
    engine = EligibilityEngine(config=_load_config(config_path))
    result = engine.extract(title, description)

    table = Table(title="Extracted Eligibility", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for key, value in result.to_dict().items():
        if isinstance(value, list):
            value = ", ".join(value)
        table.add_row(key, "-" if value is None else str(value))
    console.print(table)


@app.command()
def seed(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
) -> None:
    """Load the demo listings into the local store."""
    cfg = _load_config(config_path)
    with DuckDBListingRepository(get_db_path(cfg)) as repo:
        added = repo.add_many(mock_listings())
        total = len(repo.get_all())
    console.print(f"[green]Added {added} demo listings ({total} stored).[/green]")


@app.command("add-listing")
def add_listing(
    title: str = typer.Option(..., "--title", "-t", help="Listing title"),
    rent: float = typer.Option(..., "--rent", help="Monthly rent"),
    beds: int = typer.Option(0, "--beds"),
    baths: float = typer.Option(1, "--baths"),
    description: str = typer.Option("", "--description", "-d"),
    neighborhood: Optional[str] = typer.Option(None, "--neighborhood"),
    city: Optional[str] = typer.Option(None, "--city"),
    address: Optional[str] = typer.Option(None, "--address"),
    income_multiplier: Optional[float] = typer.Option(None, "--income-multiplier"),
    min_credit_score: Optional[int] = typer.Option(None, "--min-credit-score"),
    cosigner_allowed: Optional[bool] = typer.Option(None, "--cosigner/--no-cosigner"),
    landlord_type: Optional[str] = typer.Option(None, "--landlord-type"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
) -> None:
    """Add a listing; eligibility is extracted from its title and description."""
    cfg = _load_config(config_path)
    fields = {
        "title": title,
        "rent": rent,
        "beds": beds,
        "baths": baths,
        "description": description or None,
        "neighborhood": neighborhood,
        "city": city,
        "address": address,
        "income_multiplier": income_multiplier,
        "min_credit_score": min_credit_score,
        "cosigner_allowed": cosigner_allowed,
        "landlord_type": landlord_type,
    }
    engine = EligibilityEngine(config=cfg)
    with DuckDBListingRepository(get_db_path(cfg)) as repo:
        try:
            listing = ingest_listing(repo, fields, engine=engine, default_city=get_default_city(cfg))
        except (ValidationError, DuplicateListingError) as e:
            _fail(str(e))

    console.print(f"[green]Added listing {listing.id}: {listing.title}[/green]")
    if listing.keywords:
        console.print(f"  Detected: {', '.join(listing.keywords)}")
    console.print(f"  Prime-candidate score: {listing.prime_candidate_score}")


@app.command()
def search(
    monthly_income: float = typer.Option(..., "--income", "-i", help="Monthly income"),
    credit_band: str = typer.Option(..., "--credit", help=f"One of: {', '.join(CREDIT_BANDS)}"),
    max_rent: float = typer.Option(..., "--max-rent", help="Hard rent ceiling"),
    has_cosigner: bool = typer.Option(False, "--cosigner/--no-cosigner"),
    neighborhood: Optional[str] = typer.Option(None, "--neighborhood", "-n"),
    zip_code: Optional[str] = typer.Option(None, "--zip"),
    min_beds: Optional[int] = typer.Option(None, "--beds"),
    min_baths: Optional[float] = typer.Option(None, "--baths"),
    min_rent: Optional[float] = typer.Option(None, "--min-rent"),
    demo: bool = typer.Option(False, "--demo", help="Search the demo listings instead of the store"),
    limit: int = typer.Option(20, "--limit", help="Max listings to show"),
    export: bool = typer.Option(False, "--export", help="Write CSV and JSON to the output dir"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
) -> None:
    """Rank listings for a renter profile."""
    cfg = _load_config(config_path)
    try:
        validate_search_profile(monthly_income, max_rent)
        validate_credit_band(credit_band)
    except ValidationError as e:
        _fail(str(e))

    repo = _repository(cfg, demo)
    try:
        if not repo.get_all():
            _fail("No listings in store. Run 'seed' or 'add-listing' first, or pass --demo.")
        results = search_listings(
            repo,
            monthly_income=monthly_income,
            credit_band=credit_band,
            has_cosigner=has_cosigner,
            max_rent=max_rent,
            neighborhood=neighborhood,
            zip_code=zip_code,
            min_beds=min_beds,
            min_baths=min_baths,
            min_rent=min_rent,
            engine=EligibilityEngine(config=cfg),
        )
    finally:
        if isinstance(repo, DuckDBListingRepository):
            repo.close()

    _display_results(results, limit=limit)

    if export:
        run_id = _run_id()
        out_dir = get_output_dir(cfg)
        csv_path = out_dir / f"matches_{run_id}.csv"
        json_path = out_dir / f"matches_{run_id}.json"
        export_csv(results, csv_path)
        profile = RenterProfile(
            monthly_income=monthly_income,
            estimated_credit_score=credit_score_from_band(credit_band),
            has_cosigner=has_cosigner,
            max_rent=max_rent,
        )
        export_json(results, json_path, profile=profile)
        console.print(f"  CSV:  {csv_path}")
        console.print(f"  JSON: {json_path}")


@app.command()
def preapprove(
    monthly_income: float = typer.Option(..., "--income", "-i", help="Monthly income"),
    credit_band: str = typer.Option(..., "--credit", help=f"One of: {', '.join(CREDIT_BANDS)}"),
    savings: float = typer.Option(..., "--savings", "-s"),
    target_rent: float = typer.Option(..., "--target-rent", "-r"),
    has_cosigner: bool = typer.Option(False, "--cosigner/--no-cosigner"),
    letter: Optional[Path] = typer.Option(None, "--letter", help="Write the pre-approval letter here"),
    name: str = typer.Option("Applicant", "--name", help="Renter name for the letter"),
    city: Optional[str] = typer.Option(None, "--city", help="City for the letter"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
) -> None:
    """Estimate a recommended rent budget and approval strength."""
    cfg = _load_config(config_path)
    data = PreapprovalInput(
        monthly_income=monthly_income,
        credit_band=credit_band,
        savings=savings,
        has_cosigner=has_cosigner,
        target_rent=target_rent,
    )
    try:
        validate_preapproval_input(data)
    except ValidationError as e:
        _fail(str(e))

    result = EligibilityEngine(config=cfg).preapprove(data)

    style = {"strong": "green", "borderline": "yellow", "weak": "red"}[result.strength]
    console.print(f"Strength: [{style}]{result.strength}[/{style}]")
    console.print(f"Max recommended rent: ${result.max_recommended_rent:,}/month")
    if result.suggested_top_up_deposit:
        console.print(f"Suggested extra deposit: ${result.suggested_top_up_deposit:,}")
    console.print(result.explanation)

    if letter:
        text = render_preapproval_letter(
            data, result, renter_name=name, city=city or get_default_city(cfg)
        )
        letter.parent.mkdir(parents=True, exist_ok=True)
        letter.write_text(text, encoding="utf-8")
        console.print(f"[dim]Letter written to {letter}[/dim]")


if __name__ == "__main__":
    app()
