"""Optional vector normalization applied to backend output (L2, L1, none)."""

from __future__ import annotations

import math
from typing import Literal

NormType = Literal["L2", "L1", "none"]


def vector_norm(vec: list[float], norm_type: NormType) -> float:
    """Norm of ``vec``; zero vectors report 1.0 so division leaves them unchanged."""
    if norm_type == "L1":
        n = sum(abs(x) for x in vec)
    else:
        n = math.sqrt(sum(x * x for x in vec))
    return n or 1.0


def normalize_vectors(vectors: list[list[float]], norm_type: NormType) -> list[list[float]]:
    """Return new vectors scaled to unit norm. 'none' returns copies unchanged."""
    if norm_type == "none":
        return [list(v) for v in vectors]
    out: list[list[float]] = []
    for vec in vectors:
        n = vector_norm(vec, norm_type)
        out.append([x / n for x in vec])
    return out
