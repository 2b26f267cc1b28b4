"""OpenAI Embeddings API backend."""

from openai import AsyncOpenAI

from docembed.config.embedding.models import EmbeddingConfig
from docembed.config.settings import get_settings
from docembed.services.embedder.base import BaseEmbeddingModel
from docembed.services.embedder.errors import EmbeddingError

# Inputs per request accepted by the embeddings endpoint
OPENAI_MAX_INPUTS = 2048


class OpenAIEmbeddingModel(BaseEmbeddingModel):
    """
    OpenAI Embeddings API. Models: text-embedding-3-small, text-embedding-3-large, etc.
    API key from config.api_key or settings.openai_api_key.
    """

    def __init__(self, config: EmbeddingConfig, client: AsyncOpenAI | None = None) -> None:
        super().__init__(config)
        self._client = client

    @property
    def strategy_name(self) -> str:
        return "openai"

    @property
    def max_batch_size(self) -> int:
        return min(self.config.max_batch_size or OPENAI_MAX_INPUTS, OPENAI_MAX_INPUTS)

    def _get_client(self) -> AsyncOpenAI:
        if self._client is None:
            api_key = self.config.api_key or get_settings().openai_api_key or None
            if not api_key:
                raise EmbeddingError("OpenAI API key is required (set in config or OPENAI_API_KEY)")
            self._client = AsyncOpenAI(api_key=api_key)
        return self._client

    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        client = self._get_client()
        kwargs = {"model": self.config.model, "input": texts}
        if self.config.dimensions is not None:
            kwargs["dimensions"] = self.config.dimensions
        response = await client.embeddings.create(**kwargs)
        # Preserve order by index
        by_index = {e.index: e.embedding for e in response.data}
        missing = [i for i in range(len(texts)) if i not in by_index]
        if missing:
            raise EmbeddingError(f"OpenAI response is missing embeddings for inputs {missing}")
        return [by_index[i] for i in range(len(texts))]
