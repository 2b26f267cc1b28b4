"""Embedding configuration models. Read-only; no business logic."""

from typing import Literal

from pydantic import BaseModel, Field


class EmbeddingConfig(BaseModel):
    """Embedding backend and parameters for one profile."""

    strategy: str = Field(..., description="openai|sentence_transformers|bedrock|mock")
    model: str = Field(..., description="Model identifier")
    max_batch_size: int = Field(
        default=100,
        ge=0,
        description="Fragments per backend request; 0 means unspecified and is treated as 1",
    )
    dimensions: int | None = Field(default=None, ge=1, description="Vector size, when the backend allows choosing it")
    normalize: bool = Field(default=False)
    normalization_type: Literal["L2", "L1", "none"] = Field(default="L2")
    api_key: str | None = Field(default=None, description="OpenAI API key when strategy is openai")
    region: str | None = Field(default=None, description="AWS region when strategy is bedrock")
