"""Resolve the embedding config to use: profile name, active marker, inline overrides."""

from typing import Any

from docembed.config.embedding.models import EmbeddingConfig
from docembed.config.embedding.providers import get_embedding_config, load_static_data

ACTIVE_PROFILE = "active"

_STRATEGY_TO_PROFILE: dict[str, str] = {
    "openai": "openai_default",
    "sentence_transformers": "sentence_default",
    "bedrock": "bedrock_default",
    "mock": "mock_default",
}


def get_active_profile_name() -> str:
    """Profile marked ``active`` in static.json; 'openai_default' when unset."""
    return load_static_data().get("active", "openai_default")


def resolve_embedding_config(
    profile_name: str = ACTIVE_PROFILE,
    inline_config: dict[str, Any] | None = None,
) -> EmbeddingConfig:
    """
    Look up a profile and merge ``inline_config`` over it.
    'active' selects the marked profile; bare strategy names map to their default profile.
    Raises ValueError for an unknown profile or an override that fails validation.
    """
    if profile_name == ACTIVE_PROFILE:
        name = get_active_profile_name()
    else:
        name = _STRATEGY_TO_PROFILE.get(profile_name, profile_name)
    base = get_embedding_config(name)
    if base is None:
        raise ValueError(f"Unknown embedding profile: {name!r}")
    if not inline_config:
        return base
    # pydantic's ValidationError subclasses ValueError
    return EmbeddingConfig.model_validate({**base.model_dump(), **inline_config})
