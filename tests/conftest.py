"""
Shared fixtures for the test suite.

The fake embedding model records every batch it receives, tracks how many calls
are in flight at once, and can be told to stall or fail specific calls.
"""

import asyncio

import pytest

from docembed.config.embedding.models import EmbeddingConfig
from docembed.config.settings import get_settings
from docembed.services.embedder.base import BaseEmbeddingModel

# ---------------------------------------------------------------------------
# Fake embedding model
# ---------------------------------------------------------------------------


class FakeEmbeddingModel(BaseEmbeddingModel):
    """Deterministic backend: the vector for a text is [len(text), call index, 1.0]."""

    def __init__(
        self,
        max_batch_size: int = 4,
        *,
        delays: dict[int, float] | None = None,
        fail_on_call: int | None = None,
    ) -> None:
        super().__init__(
            EmbeddingConfig(strategy="fake", model="fake-model", max_batch_size=max_batch_size, dimensions=3)
        )
        self.calls: list[list[str]] = []
        self.completed: list[int] = []
        self.delays = delays or {}
        self.fail_on_call = fail_on_call
        self.in_flight = 0
        self.peak_in_flight = 0

    @property
    def strategy_name(self) -> str:
        return "fake"

    async def embed_batch(self, texts: list[str]) -> list[list[float]]:
        index = len(self.calls)
        self.calls.append(list(texts))
        self.in_flight += 1
        self.peak_in_flight = max(self.peak_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(index, 0))
            if index == self.fail_on_call:
                raise RuntimeError(f"provider rejected batch {index}")
            self.completed.append(index)
            return [[float(len(t)), float(index), 1.0] for t in texts]
        finally:
            self.in_flight -= 1


class Definition:
    """Domain object exposing its definitions as embeddable fragments."""

    def __init__(self, word: str, definitions: list[str]) -> None:
        self.word = word
        self.definitions = definitions

    def embeddable(self) -> list[str]:
        return self.definitions

    def __repr__(self) -> str:
        return f"Definition({self.word!r})"


def make_definitions(count: int, per_document: int) -> list[Definition]:
    """``count`` documents with ``per_document`` unique fragments each."""
    return [
        Definition(f"word{d}", [f"word{d} definition {f}" for f in range(per_document)])
        for d in range(count)
    ]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def fake_model() -> FakeEmbeddingModel:
    return FakeEmbeddingModel(max_batch_size=4)


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from a developer's OPENAI_API_KEY and cached settings."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
