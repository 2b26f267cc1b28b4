"""Request/response schemas for POST /embed."""

from typing import Any

from pydantic import BaseModel, Field


class EmbedDocument(BaseModel):
    """One object to embed: its caller-side id and the text fragments it contributes."""

    id: str = Field(..., min_length=1, description="Caller's document id, echoed back")
    texts: list[str] = Field(default_factory=list, description="Fragments to embed; must not be empty")

    def embeddable(self) -> list[str]:
        return self.texts


class EmbedRequest(BaseModel):
    """POST /embed request body. Backend comes from the named profile (default: settings.embedding_profile)."""

    documents: list[EmbedDocument] = Field(..., min_length=1, max_length=1000)
    profile: str | None = Field(default=None, description="Profile name from static.json, or 'active'")
    embedding_config: dict[str, Any] | None = Field(
        default=None,
        description="Optional overrides for model, max_batch_size, normalize, etc.",
    )


class EmbeddedFragment(BaseModel):
    text: str
    vector: list[float]


class EmbeddedDocument(BaseModel):
    id: str
    embeddings: list[EmbeddedFragment]


class EmbedResponse(BaseModel):
    """POST /embed response body. Documents are in request order."""

    model: str
    strategy: str
    documents_embedded: int = Field(..., ge=0)
    fragments_embedded: int = Field(..., ge=0)
    documents: list[EmbeddedDocument] = Field(default_factory=list)
