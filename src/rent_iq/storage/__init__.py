"""Storage layer for listings and ranked results."""

from .db import DuckDBListingRepository
from .export import export_csv, export_json
from .repository import InMemoryListingRepository, ListingRepository

__all__ = [
    "ListingRepository",
    "InMemoryListingRepository",
    "DuckDBListingRepository",
    "export_csv",
    "export_json",
]
