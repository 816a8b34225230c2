"""Configuration loader."""

from __future__ import annotations

import os
from dataclasses import fields
from pathlib import Path
from typing import Any, TypeVar

import yaml

from .models import ApprovalScoreWeights, PreapprovalParams, PrimeCandidateWeights

_T = TypeVar("_T")

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.yaml"


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load config from YAML file.

    Resolution order: explicit path, ``RENT_IQ_CONFIG`` env var, repo ``config.yaml``.
    """
    env_path = os.environ.get("RENT_IQ_CONFIG")
    if config_path:
        path = Path(config_path)
    elif env_path:
        path = Path(env_path)
    else:
        path = DEFAULT_CONFIG_PATH
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _section(config: dict[str, Any] | None, name: str, cls: type[_T]) -> _T:
    """Build a params dataclass from a config section, defaulting missing keys."""
    section = (config or {}).get(name) or {}
    kwargs = {f.name: float(section[f.name]) for f in fields(cls) if f.name in section}
    return cls(**kwargs)


def get_approval_score_weights(config: dict[str, Any] | None) -> ApprovalScoreWeights:
    """Extract approval score weights from config."""
    return _section(config, "approval_score", ApprovalScoreWeights)


def get_prime_candidate_weights(config: dict[str, Any] | None) -> PrimeCandidateWeights:
    """Extract prime-candidate weights from config."""
    return _section(config, "prime_candidate", PrimeCandidateWeights)


def get_preapproval_params(config: dict[str, Any] | None) -> PreapprovalParams:
    """Extract pre-approval parameters from config."""
    return _section(config, "preapproval", PreapprovalParams)


def get_db_path(config: dict[str, Any] | None) -> Path:
    storage = (config or {}).get("storage") or {}
    return Path(storage.get("db_path", "output/rent_iq.duckdb"))


def get_output_dir(config: dict[str, Any] | None) -> Path:
    return Path((config or {}).get("output_dir", "output"))


def get_default_city(config: dict[str, Any] | None) -> str:
    return str((config or {}).get("default_city", "Los Angeles"))
