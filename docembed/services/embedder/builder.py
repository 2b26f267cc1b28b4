"""
EmbeddingsBuilder: accumulate objects with their text fragments, then embed every
fragment and hand each object back with exactly the embeddings of its own fragments.

Example::

    model = get_embedding_model(resolve_embedding_config("openai"))
    builder = EmbeddingsBuilder(model).add_documents(definitions)
    for definition, embeddings in await builder.build():
        ...

``build()`` flattens the documents into (document id, fragment) work units, chunks
them by the model's ``max_batch_size``, runs the batch calls concurrently (at most
``max(1, 1024 // max_batch_size)`` at once) and folds the results per document id.
It either returns every embedding for every document or raises EmbeddingError.
"""

from contextlib import aclosing
from dataclasses import dataclass
from typing import Generic, Iterable, TypeVar

from docembed.config.logging import get_logger, log_extra
from docembed.services.embedder.base import BaseEmbeddingModel, Embedding
from docembed.services.embedder.batching import (
    WorkUnit,
    chunk_batches,
    concurrency_limit,
    dispatch_bounded,
    effective_batch_size,
    flatten_documents,
)
from docembed.services.embedder.embeddable import TextExtractor, extract_fragments
from docembed.services.embedder.errors import EmbeddingError, ExtractionError
from docembed.utils.one_or_many import OneOrMany

logger = get_logger(__name__)

D = TypeVar("D")


@dataclass(frozen=True)
class Document(Generic[D]):
    """An added object and the fragments extracted from it at insertion time."""

    id: int
    item: D
    fragments: OneOrMany[str]


class EmbeddingsBuilder(Generic[D]):
    """
    Collects objects to embed. ``add_document`` / ``add_documents`` return the builder
    so calls chain; a failed add raises ExtractionError and leaves earlier documents in place.
    """

    def __init__(self, model: BaseEmbeddingModel, extractor: TextExtractor | None = None) -> None:
        self.model = model
        self._extractor = extractor
        self._documents: list[Document[D]] = []

    @property
    def documents(self) -> tuple[Document[D], ...]:
        return tuple(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def add_document(self, item: D) -> "EmbeddingsBuilder[D]":
        """Extract fragments from ``item`` and append it. Raises ExtractionError."""
        index = len(self._documents)
        try:
            fragments = extract_fragments(item, self._extractor)
        except ExtractionError as e:
            e.document_index = index
            raise
        self._documents.append(Document(id=index, item=item, fragments=fragments))
        return self

    def add_documents(self, items: Iterable[D]) -> "EmbeddingsBuilder[D]":
        """
        Add items in order, stopping at the first ExtractionError.
        Items added before the failing one stay in the builder.
        """
        for item in items:
            self.add_document(item)
        return self

    async def build(self) -> list[tuple[D, OneOrMany[Embedding]]]:
        """
        Embed all fragments of all documents added so far.
        Returns (item, embeddings) pairs, one per document; the order of pairs is not
        guaranteed to follow insertion order. Raises EmbeddingError if any batch fails.
        """
        snapshot = tuple(self._documents)
        if not snapshot:
            return []

        if self.model.max_batch_size is not None and self.model.max_batch_size < 0:
            raise EmbeddingError(f"max_batch_size must be >= 0, got {self.model.max_batch_size}")
        batch_size = effective_batch_size(self.model.max_batch_size)
        limit = concurrency_limit(self.model.max_batch_size)
        units = flatten_documents(doc.fragments for doc in snapshot)
        batches = chunk_batches(units, batch_size)
        logger.debug(
            "Building embeddings",
            **log_extra({
                "documents": len(snapshot),
                "work_units": len(units),
                "batches": len(batches),
                "concurrency": limit,
                "model": self.model.model_name,
            }),
        )

        aggregated: dict[int, OneOrMany[Embedding]] = {}
        async with aclosing(dispatch_bounded(batches, self._embed_batch, limit)) as results:
            async for tagged in results:
                for document_id, embedding in tagged:
                    if document_id in aggregated:
                        aggregated[document_id].add(embedding)
                    else:
                        aggregated[document_id] = OneOrMany.one(embedding)

        logger.debug("Embeddings built", **log_extra({"documents": len(aggregated)}))
        return [(snapshot[document_id].item, embeddings) for document_id, embeddings in aggregated.items()]

    async def _embed_batch(self, batch: list[WorkUnit]) -> list[tuple[int, Embedding]]:
        """Embed one batch and re-tag each embedding with its work unit's document id."""
        embeddings = await self.model.embed_documents([unit.text for unit in batch])
        if len(embeddings) != len(batch):
            raise EmbeddingError(f"Expected {len(batch)} embeddings, got {len(embeddings)}")
        return [(unit.document_id, embedding) for unit, embedding in zip(batch, embeddings)]
