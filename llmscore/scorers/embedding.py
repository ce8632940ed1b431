"""Embedding-based semantic similarity scorer."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from llmscore.config.models import EmbeddingSimilarityOptions
from llmscore.core.errors import (
    DependencyUnavailableError,
    MissingExpectedValueError,
    ResponseValidationError,
)
from llmscore.core.interfaces import Embedder
from llmscore.core.types import Score, ScoreInputs
from llmscore.metrics.similarity import cosine_similarity, similarity_to_score
from llmscore.scorers.base import BaseScorer

logger = logging.getLogger(__name__)


def _to_vector(raw: Any, field: str) -> np.ndarray:
    """Check an embedder reply and convert it to a float64 vector.

    Args:
        raw: Value returned by the embedder.
        field: Name reported if the value is unusable.

    Returns:
        One-dimensional array of finite floats.

    Raises:
        ResponseValidationError: If the reply is not a flat sequence of
            finite numbers.

    """
    if raw is None or isinstance(raw, (str, bytes)):
        raise ResponseValidationError(
            field, f"expected a sequence of numbers, got {type(raw).__name__}"
        )

    try:
        vector = np.asarray(raw, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ResponseValidationError(field, f"expected a sequence of numbers: {e}") from e

    if vector.ndim != 1:
        raise ResponseValidationError(
            field, f"expected a flat vector, got {vector.ndim} dimensions"
        )
    if not np.all(np.isfinite(vector)):
        raise ResponseValidationError(field, "vector contains NaN or infinite values")
    return vector


class EmbeddingSimilarityScorer(BaseScorer):
    """Cosine similarity between the output and expected embeddings.

    The similarity in [-1, 1] is mapped onto [0, 1] with (sim + 1) / 2.
    """

    name = "EmbeddingSimilarity"

    def __init__(
        self,
        embedder: Embedder | None,
        options: EmbeddingSimilarityOptions | None = None,
    ) -> None:
        """Initialize the scorer.

        Args:
            embedder: Embedding service.
            options: Scorer options.

        """
        self.embedder = embedder
        self.options = options or EmbeddingSimilarityOptions()

    def score(self, inputs: ScoreInputs) -> Score:
        """Embed ``output`` and ``expected`` and compare them.

        Args:
            inputs: ``expected`` is required.

        Returns:
            Score with ``cosine_similarity`` and ``embedding_dim`` metadata.

        """
        result = self._new_result()

        if not inputs.expected:
            return self._fail(result, MissingExpectedValueError())

        if self.embedder is None:
            return self._fail(result, DependencyUnavailableError("embedder"))

        try:
            raw_output = self.embedder.embed(inputs.output)
        except Exception as e:
            return self._fail(result, self._dependency_failure("failed to embed output", e))

        try:
            output_vector = _to_vector(raw_output, "output_embedding")
        except ResponseValidationError as e:
            return self._fail(result, e, raw_response=raw_output)

        try:
            raw_expected = self.embedder.embed(inputs.expected)
        except Exception as e:
            return self._fail(result, self._dependency_failure("failed to embed expected", e))

        try:
            expected_vector = _to_vector(raw_expected, "expected_embedding")
        except ResponseValidationError as e:
            return self._fail(result, e, raw_response=raw_expected)

        if len(output_vector) != len(expected_vector):
            logger.warning(
                f"Embedding dimensions differ ({len(output_vector)} vs {len(expected_vector)}), "
                "similarity is 0"
            )

        similarity = cosine_similarity(output_vector, expected_vector)
        result.score = similarity_to_score(similarity)
        result.metadata["cosine_similarity"] = similarity
        result.metadata["embedding_dim"] = len(output_vector)
        return result
