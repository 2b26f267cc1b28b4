"""Sentence Transformers (local) embedding backend."""

import asyncio
import threading
from typing import TYPE_CHECKING

from docembed.config.embedding.models import EmbeddingConfig
from docembed.services.embedder.base import BaseEmbeddingModel

if TYPE_CHECKING:
    from sentence_transformers import SentenceTransformer


class SentenceTransformersEmbeddingModel(BaseEmbeddingModel):
    """
    Local Sentence Transformers. Default model: sentence-transformers/all-MiniLM-L6-v2.
    No API key required. Encoding runs in a worker thread so concurrent batches
    do not block the event loop; the model is loaded once per instance.
    """

    def __init__(self, config: EmbeddingConfig) -> None:
        super().__init__(config)
        self._model: "SentenceTransformer | None" = None
        self._load_lock = threading.Lock()

    @property
    def strategy_name(self) -> str:
        return "sentence_transformers"

    def _get_model(self) -> "SentenceTransformer":
        # Concurrent batches call this from several worker threads
        with self._load_lock:
            if self._model is None:
                # torch import is slow; defer until the first batch
                from sentence_transformers import SentenceTransformer

                self._model = SentenceTransformer(self.config.model)
        return self._model

    def _encode(self, texts: list[str]) -> list[list[float]]:
        model = self._get_model()
        vectors = model.encode(
            texts,
            batch_size=len(texts),
            show_progress_bar=False,
            convert_to_numpy=True,
        )
        return [v.tolist() for v in vectors]

    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        return await asyncio.to_thread(self._encode, texts)
