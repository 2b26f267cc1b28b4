"""Embedding backend implementations."""

from docembed.config.embedding.models import EmbeddingConfig
from docembed.services.embedder.base import BaseEmbeddingModel
from docembed.services.embedder.strategies.bedrock_strategy import BedrockEmbeddingModel
from docembed.services.embedder.strategies.mock_strategy import MockEmbeddingModel
from docembed.services.embedder.strategies.openai_strategy import OpenAIEmbeddingModel
from docembed.services.embedder.strategies.sentence_transformers_strategy import (
    SentenceTransformersEmbeddingModel,
)

STRATEGY_REGISTRY: dict[str, type[BaseEmbeddingModel]] = {
    "openai": OpenAIEmbeddingModel,
    "sentence_transformers": SentenceTransformersEmbeddingModel,
    "bedrock": BedrockEmbeddingModel,
    "mock": MockEmbeddingModel,
}


def get_embedding_model(config: EmbeddingConfig) -> BaseEmbeddingModel:
    """Instantiate the backend named by ``config.strategy``. Raises ValueError if unknown."""
    cls = STRATEGY_REGISTRY.get(config.strategy)
    if cls is None:
        raise ValueError(f"Unknown embedding strategy: {config.strategy!r}")
    return cls(config)
