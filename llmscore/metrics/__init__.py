"""Scoring math: grade scale, weights, composite score and similarity."""

from llmscore.metrics.grading import (
    DEFAULT_GRADE_SCALE,
    GradeScale,
    clamp01,
    composite_score,
    gate_failures,
    normalize_weights,
)
from llmscore.metrics.similarity import cosine_similarity, similarity_to_score

__all__ = [
    "DEFAULT_GRADE_SCALE",
    "GradeScale",
    "clamp01",
    "composite_score",
    "cosine_similarity",
    "gate_failures",
    "normalize_weights",
    "similarity_to_score",
]
