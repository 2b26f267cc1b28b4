"""Typed errors raised while accumulating documents and generating embeddings."""


class EmptyListError(ValueError):
    """Raised when a non-empty collection is built from an empty sequence."""


class ExtractionError(Exception):
    """
    Raised when an object cannot be turned into embeddable text fragments
    (extractor failure, or zero fragments). The builder's document list is
    left exactly as it was before the failing add.
    """

    def __init__(self, message: str, document_index: int | None = None, cause: Exception | None = None):
        super().__init__(message)
        self.document_index = document_index
        self.cause = cause


class EmbeddingError(Exception):
    """
    Raised when the embedding backend fails for a batch: transport or provider
    errors, malformed responses, or a vector count that does not match the input.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause
