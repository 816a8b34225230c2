"""DuckDB-backed listing repository."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path

import duckdb

from ..errors import DuplicateListingError
from ..models import Listing
from .repository import ListingRepository

logger = logging.getLogger(__name__)

_COLUMNS = [
    "id",
    "title",
    "city",
    "rent",
    "beds",
    "baths",
    "source",
    "address",
    "neighborhood",
    "description",
    "landlord_type",
    "income_multiplier",
    "income_flexibility",
    "min_credit_score",
    "credit_flexibility",
    "cosigner_allowed",
    "guarantor_allowed",
    "extra_deposit_allowed",
    "keywords",
    "prime_candidate_score",
    "created_at",
]


class DuckDBListingRepository(ListingRepository):
    """
    DuckDB storage for listings (eligibility fields stored alongside).
    """

    def __init__(self, db_path: Path | str = "rent_iq.duckdb") -> None:
        self.db_path = Path(db_path)
        self._conn: duckdb.DuckDBPyConnection | None = None

    def _connect(self) -> duckdb.DuckDBPyConnection:
        if self._conn is None:
            if str(self.db_path) != ":memory:":
                self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = duckdb.connect(str(self.db_path))
            self._init_schema()
        return self._conn

    def _init_schema(self) -> None:
        conn = self._conn
        conn.execute("""
            CREATE TABLE IF NOT EXISTS listings (
                seq INTEGER,
                id TEXT PRIMARY KEY,
                title TEXT,
                city TEXT,
                rent DOUBLE,
                beds INTEGER,
                baths DOUBLE,
                source TEXT,
                address TEXT,
                neighborhood TEXT,
                description TEXT,
                landlord_type TEXT,
                income_multiplier DOUBLE,
                income_flexibility TEXT,
                min_credit_score INTEGER,
                credit_flexibility TEXT,
                cosigner_allowed BOOLEAN,
                guarantor_allowed BOOLEAN,
                extra_deposit_allowed BOOLEAN,
                keywords TEXT,
                prime_candidate_score INTEGER,
                created_at TIMESTAMP
            )
        """)

    def add(self, listing: Listing) -> None:
        """Insert a listing; ids are unique."""
        conn = self._connect()
        if self.get_by_id(listing.id) is not None:
            raise DuplicateListingError(listing.id)
        seq = conn.execute("SELECT COALESCE(MAX(seq), 0) + 1 FROM listings").fetchone()[0]
        conn.execute(
            f"""
            INSERT INTO listings (seq, {", ".join(_COLUMNS)})
            VALUES (?, {", ".join("?" for _ in _COLUMNS)})
            """,
            [
                seq,
                listing.id,
                listing.title,
                listing.city,
                listing.rent,
                listing.beds,
                listing.baths,
                listing.source,
                listing.address,
                listing.neighborhood,
                listing.description,
                listing.landlord_type,
                listing.income_multiplier,
                listing.income_flexibility,
                listing.min_credit_score,
                listing.credit_flexibility,
                listing.cosigner_allowed,
                listing.guarantor_allowed,
                listing.extra_deposit_allowed,
                json.dumps(listing.keywords) if listing.keywords else None,
                listing.prime_candidate_score,
                listing.created_at,
            ],
        )
        logger.info("stored listing %s (%s)", listing.id, listing.title)

    def get_all(self) -> list[Listing]:
        """Load all listings in insertion order."""
        conn = self._connect()
        rows = conn.execute(f"SELECT {', '.join(_COLUMNS)} FROM listings ORDER BY seq").fetchall()
        return [self._row_to_listing(row) for row in rows]

    def get_by_id(self, listing_id: str) -> Listing | None:
        conn = self._connect()
        row = conn.execute(
            f"SELECT {', '.join(_COLUMNS)} FROM listings WHERE id = ?", [listing_id]
        ).fetchone()
        return self._row_to_listing(row) if row else None

    @staticmethod
    def _row_to_listing(row: tuple) -> Listing:
        d = dict(zip(_COLUMNS, row))
        keywords = d.pop("keywords")
        if isinstance(keywords, str):
            keywords = json.loads(keywords)
        return Listing(
            **{k: v for k, v in d.items() if k != "created_at"},
            keywords=keywords or None,
            created_at=d.get("created_at") or datetime.utcnow(),
        )

    def close(self) -> None:
        """Close the database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> DuckDBListingRepository:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
