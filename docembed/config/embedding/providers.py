"""Embedding profile loading from static.json. Read-only; no business logic."""

import json
from pathlib import Path
from typing import Any

from docembed.config.embedding.models import EmbeddingConfig

_config_path = Path(__file__).resolve().parent / "static.json"

_raw_cache: dict[str, Any] | None = None
_profiles_cache: dict[str, EmbeddingConfig] | None = None


def load_static_data() -> dict[str, Any]:
    """Return the parsed static.json (``active`` name plus ``profiles`` mapping)."""
    global _raw_cache
    if _raw_cache is None:
        _raw_cache = json.loads(_config_path.read_text(encoding="utf-8"))
    return _raw_cache


def load_embedding_profiles() -> dict[str, EmbeddingConfig]:
    """Validated profiles keyed by profile name."""
    global _profiles_cache
    if _profiles_cache is None:
        profiles = load_static_data().get("profiles", {})
        _profiles_cache = {name: EmbeddingConfig.model_validate(p) for name, p in profiles.items()}
    return _profiles_cache


def get_embedding_config(profile_name: str) -> EmbeddingConfig | None:
    return load_embedding_profiles().get(profile_name)
