"""Mock embedding backend for tests and local runs. Produces deterministic fake vectors."""

import hashlib

from docembed.services.embedder.base import BaseEmbeddingModel

# Default dimension for mock when neither config nor model name says otherwise
MOCK_DEFAULT_DIM = 384


def _mock_dimension_for_model(model: str) -> int:
    if "ada-002" in model or "3-small" in model:
        return 1536
    if "3-large" in model:
        return 3072
    return MOCK_DEFAULT_DIM


def mock_vector(text: str, dim: int) -> list[float]:
    """Same text and dim always give the same vector, across processes."""
    digest = hashlib.sha256(text.encode("utf-8")).digest()
    return [(digest[j % len(digest)] + j) % 256 / 255.0 for j in range(dim)]


class MockEmbeddingModel(BaseEmbeddingModel):
    """Deterministic fake embeddings; dimension from config.dimensions, else inferred from model name."""

    @property
    def strategy_name(self) -> str:
        return "mock"

    @property
    def ndims(self) -> int:
        return self.config.dimensions or _mock_dimension_for_model(self.config.model)

    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        return [mock_vector(t, self.ndims) for t in texts]
