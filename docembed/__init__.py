"""Batch document fragments through an embedding model and pair the vectors back with their documents."""

from docembed.services.embedder.base import BaseEmbeddingModel, Embedding
from docembed.services.embedder.builder import Document, EmbeddingsBuilder
from docembed.services.embedder.embeddable import Embeddable, extract_fragments
from docembed.services.embedder.errors import EmbeddingError, EmptyListError, ExtractionError
from docembed.utils.one_or_many import OneOrMany

__all__ = [
    "BaseEmbeddingModel",
    "Document",
    "Embeddable",
    "Embedding",
    "EmbeddingError",
    "EmbeddingsBuilder",
    "EmptyListError",
    "ExtractionError",
    "OneOrMany",
    "extract_fragments",
]
