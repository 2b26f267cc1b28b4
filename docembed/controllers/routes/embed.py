"""POST /embed: embed every fragment of the posted documents and return them per document."""

from fastapi import APIRouter, Depends, HTTPException

from docembed.config.embedding.static import resolve_embedding_config
from docembed.config.logging import get_logger
from docembed.config.settings import Settings, get_settings
from docembed.controllers.schema.embed import (
    EmbeddedDocument,
    EmbeddedFragment,
    EmbedRequest,
    EmbedResponse,
)
from docembed.services.embedder.builder import EmbeddingsBuilder
from docembed.services.embedder.errors import EmbeddingError, ExtractionError
from docembed.services.embedder.strategies import get_embedding_model

logger = get_logger(__name__)

router = APIRouter(prefix="/embed", tags=["embedding"])


@router.post("", response_model=EmbedResponse)
async def embed_documents(body: EmbedRequest, settings: Settings = Depends(get_settings)) -> EmbedResponse:
    """
    Embed all posted documents in one build. All-or-nothing: a single failed backend
    request fails the whole call with 502. A document without texts fails with 422.
    """
    profile = body.profile or settings.embedding_profile
    try:
        config = resolve_embedding_config(profile, body.embedding_config)
        model = get_embedding_model(config)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    try:
        builder = EmbeddingsBuilder(model).add_documents(body.documents)
    except ExtractionError as e:
        bad_id = body.documents[e.document_index].id if e.document_index is not None else None
        raise HTTPException(status_code=422, detail={"document_id": bad_id, "error": str(e)}) from e

    try:
        results = await builder.build()
    except EmbeddingError as e:
        logger.warning("Embedding build failed", extra={"profile": profile, "error": str(e)})
        raise HTTPException(status_code=502, detail="Embedding provider request failed") from e

    position = {id(doc): i for i, doc in enumerate(body.documents)}
    results.sort(key=lambda pair: position[id(pair[0])])
    documents = [
        EmbeddedDocument(
            id=doc.id,
            embeddings=[EmbeddedFragment(text=e.document, vector=e.vec) for e in embeddings],
        )
        for doc, embeddings in results
    ]
    fragments = sum(len(d.embeddings) for d in documents)
    logger.info(
        "Embedded documents",
        extra={"strategy": config.strategy, "documents": len(documents), "fragments": fragments},
    )
    return EmbedResponse(
        model=config.model,
        strategy=config.strategy,
        documents_embedded=len(documents),
        fragments_embedded=fragments,
        documents=documents,
    )
