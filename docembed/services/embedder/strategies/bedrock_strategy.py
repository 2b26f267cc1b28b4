"""Amazon Bedrock embedding backend."""

import asyncio
import json
from typing import Any

import boto3

from docembed.config.embedding.models import EmbeddingConfig
from docembed.config.settings import get_settings
from docembed.services.embedder.base import BaseEmbeddingModel
from docembed.services.embedder.errors import EmbeddingError


class BedrockEmbeddingModel(BaseEmbeddingModel):
    """
    Amazon Bedrock embeddings (Titan: amazon.titan-embed-text-v1, amazon.titan-embed-text-v2:0).
    Titan takes one text per invoke_model call, so the batch limit is fixed at 1.
    Uses IAM credentials (profile/env/instance). Region from config.region or settings.aws_region.
    """

    def __init__(self, config: EmbeddingConfig, client: Any = None) -> None:
        super().__init__(config)
        self._client = client

    @property
    def strategy_name(self) -> str:
        return "bedrock"

    @property
    def max_batch_size(self) -> int:
        return 1

    def _get_client(self) -> Any:
        if self._client is None:
            region = self.config.region or get_settings().aws_region or None
            self._client = boto3.client("bedrock-runtime", region_name=region)
        return self._client

    def _invoke(self, client: Any, text: str) -> list[float]:
        body: dict[str, Any] = {"inputText": text}
        if self.config.dimensions is not None:
            body["dimensions"] = self.config.dimensions
        # botocore ClientError propagates; embed_documents wraps it
        response = client.invoke_model(
            modelId=self.config.model,
            contentType="application/json",
            accept="application/json",
            body=json.dumps(body),
        )
        payload = json.loads(response["body"].read().decode("utf-8"))
        emb = payload.get("embedding")
        if emb is None:
            # Titan V2 can return embeddingsByType
            by_type = payload.get("embeddingsByType") or {}
            emb = by_type.get("float") or next(iter(by_type.values()), None)
        if not emb:
            raise EmbeddingError("Bedrock response contained no embedding")
        return [float(x) for x in emb]

    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        # client is created on the event loop thread, never inside a worker
        client = self._get_client()
        return [await asyncio.to_thread(self._invoke, client, t) for t in texts]
