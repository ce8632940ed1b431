"""Vector similarity for embedding-based scoring."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from llmscore.metrics.grading import clamp01


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Compute the cosine similarity between two vectors.

    Degenerate inputs are not errors: vectors of different lengths, empty
    vectors, zero vectors and vectors with NaN or infinite components all
    yield 0.0.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        Similarity in [-1, 1], where 1 means identical direction.

    """
    if len(a) != len(b) or len(a) == 0:
        return 0.0

    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)

    # NaN would slip through both the norm guard and the clamp below
    if not (np.all(np.isfinite(va)) and np.all(np.isfinite(vb))):
        return 0.0

    norm_a = float(np.linalg.norm(va))
    norm_b = float(np.linalg.norm(vb))
    if norm_a == 0 or norm_b == 0:
        return 0.0

    similarity = float(np.dot(va, vb)) / (norm_a * norm_b)
    # Rounding can push |similarity| slightly past 1
    return max(-1.0, min(1.0, similarity))


def similarity_to_score(similarity: float) -> float:
    """Map a cosine similarity from [-1, 1] onto [0, 1].

    Args:
        similarity: Cosine similarity.

    Returns:
        (similarity + 1) / 2, clamped to [0, 1].

    """
    return clamp01((similarity + 1.0) / 2.0)
