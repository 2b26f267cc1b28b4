"""Embedding model contract: per-request batch limit plus an async batch call."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from docembed.config.embedding.models import EmbeddingConfig
from docembed.services.embedder.errors import EmbeddingError
from docembed.services.embedder.normalization import normalize_vectors


@dataclass(frozen=True)
class Embedding:
    """A vector and the fragment text it was computed from."""

    document: str
    vec: list[float] = field(default_factory=list)

    @property
    def dimension(self) -> int:
        return len(self.vec)


class BaseEmbeddingModel(ABC):
    """
    Abstract embedding backend. Subclasses implement ``embed_batch`` for at most
    ``max_batch_size`` texts and return one vector per text in the same order.
    Callers go through ``embed_documents``, which enforces the count contract,
    wraps backend failures in EmbeddingError and applies normalization.
    """

    def __init__(self, config: EmbeddingConfig) -> None:
        self.config = config

    @property
    def max_batch_size(self) -> int:
        """Texts per request accepted by the backend. 0 means no stated limit."""
        return self.config.max_batch_size

    @property
    def ndims(self) -> int | None:
        """Vector dimension when known ahead of a call."""
        return self.config.dimensions

    @property
    def model_name(self) -> str:
        return self.config.model

    @property
    @abstractmethod
    def strategy_name(self) -> str:
        """Strategy identifier, e.g. 'openai', 'sentence_transformers'."""
        ...

    @abstractmethod
    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        """Embed one request's worth of texts. Raise on any failure; never return partial output."""
        ...

    async def embed_documents(self, texts: list[str]) -> list[Embedding]:
        """
        Embed ``texts`` as a single backend request.
        Raises EmbeddingError on backend failure or when the vector count does not match.
        """
        if not texts:
            return []
        try:
            vectors = await self.embed_batch(list(texts))
        except EmbeddingError:
            raise
        except Exception as e:
            raise EmbeddingError(f"{self.strategy_name} embedding request failed: {e}", cause=e) from e
        if len(vectors) != len(texts):
            raise EmbeddingError(
                f"{self.strategy_name} returned {len(vectors)} vectors for {len(texts)} texts"
            )
        if self.config.normalize:
            vectors = normalize_vectors(vectors, self.config.normalization_type)
        return [Embedding(document=t, vec=[float(x) for x in v]) for t, v in zip(texts, vectors)]

    async def embed_text(self, text: str) -> Embedding:
        """Embed a single fragment."""
        embeddings = await self.embed_documents([text])
        return embeddings[0]
