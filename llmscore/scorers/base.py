"""Base classes for scorers.

``BaseScorer`` gives every scorer the same failure reporting: errors are
logged, stored on ``Score.error`` and paired with a score of 0.0, so no
exception crosses the ``score()`` boundary for the expected failure modes.

``RubricScorer`` is the shared engine of the multi-dimension judge
scorers: ask the judge, validate its response, map grades to scores,
normalize weights, combine and gate.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from llmscore.config.models import TonalityOptions
from llmscore.core.errors import (
    DependencyFailureError,
    DependencyUnavailableError,
    ResponseValidationError,
    ScoringError,
)
from llmscore.core.interfaces import LLMGenerator
from llmscore.core.types import Score, ScoreInputs
from llmscore.judge.rubric import Dimension
from llmscore.judge.validation import RubricJudgment
from llmscore.metrics.grading import (
    DEFAULT_GRADE_SCALE,
    GradeScale,
    composite_score,
    gate_failures,
    normalize_weights,
)

logger = logging.getLogger(__name__)


class BaseScorer(ABC):
    """Abstract base class for all scorers.

    Example:
        >>> class AlwaysOne(BaseScorer):
        ...     name = "AlwaysOne"
        ...     def score(self, inputs):
        ...         result = self._new_result()
        ...         result.score = 1.0
        ...         return result
    """

    name: str = "Scorer"

    @abstractmethod
    def score(self, inputs: ScoreInputs) -> Score:
        """Evaluate the inputs.

        Args:
            inputs: Output, expected and input texts.

        Returns:
            Score with the result or the error that prevented evaluation.

        """
        ...

    def _new_result(self) -> Score:
        return Score(name=self.name)

    def _fail(self, result: Score, error: ScoringError, **metadata: Any) -> Score:
        """Record a failure on ``result`` and return it.

        Args:
            result: Result being built.
            error: The failure.
            **metadata: Extra metadata to attach.

        Returns:
            The same result with score 0.0 and the error set.

        """
        logger.warning(f"{self.name} scoring failed: {error}")
        result.score = 0.0
        result.error = error
        result.metadata.update(metadata)
        return result

    @staticmethod
    def _dependency_failure(message: str, cause: Exception) -> DependencyFailureError:
        """Wrap an exception raised by a collaborator."""
        error = DependencyFailureError(f"{message}: {cause}")
        error.__cause__ = cause
        return error

    def __repr__(self) -> str:
        """Return scorer name for logging."""
        return f"<{self.__class__.__name__} name={self.name!r}>"


class RubricScorer(BaseScorer):
    """Weighted multi-dimension judge scorer.

    Subclasses decide how the judge is asked (``_request_judgment``) and
    how its answer is turned into a ``RubricJudgment`` (``_parse_judgment``).
    Everything else (weights, threshold gate, metadata layout) is shared.

    Attributes:
        llm: Judge LLM, or None if not configured.
        options: Weights and threshold.
        dimensions: Rubric dimensions, in weight order.
        scale: Grade scale.

    """

    def __init__(
        self,
        llm: LLMGenerator | None,
        options: TonalityOptions | None = None,
        dimensions: Sequence[Dimension] = (),
        scale: GradeScale = DEFAULT_GRADE_SCALE,
    ) -> None:
        """Initialize the scorer.

        Args:
            llm: Judge LLM.
            options: Weights and threshold. Defaults to equal weights, no threshold.
            dimensions: Rubric dimensions.
            scale: Grade scale.

        """
        self.llm = llm
        self.options = options or TonalityOptions()
        self.dimensions = tuple(dimensions)
        self.scale = scale

        if len(self.options.weights()) != len(self.dimensions):
            raise ValueError(
                f"{self.name} has {len(self.dimensions)} dimensions "
                f"but {len(self.options.weights())} weights"
            )

    @abstractmethod
    def _request_judgment(self, llm: LLMGenerator, inputs: ScoreInputs) -> Any:
        """Call the judge and return its raw response."""
        ...

    @abstractmethod
    def _parse_judgment(self, raw_response: Any) -> RubricJudgment:
        """Validate the raw response.

        Raises:
            ResponseValidationError: If the response cannot be used.

        """
        ...

    def score(self, inputs: ScoreInputs) -> Score:
        """Grade the output on every dimension and combine the grades.

        Args:
            inputs: ``output`` is rated, ``input`` gives context.

        Returns:
            Score with per-dimension metadata.

        """
        result = self._new_result()

        if self.llm is None:
            return self._fail_rubric(result, DependencyUnavailableError("LLM generator"), None)

        try:
            raw_response = self._request_judgment(self.llm, inputs)
        except Exception as e:
            return self._fail_rubric(
                result, self._dependency_failure("LLM generation failed", e), None
            )

        try:
            judgment = self._parse_judgment(raw_response)
        except ResponseValidationError as e:
            return self._fail_rubric(result, e, raw_response)

        weights = normalize_weights(self.options.weights())
        scores = judgment.scores()
        threshold = self.options.threshold
        failed = gate_failures(scores, weights, threshold)

        result.score = composite_score(scores, weights, threshold)

        for dim_judgment in judgment.dimensions.values():
            prefix = dim_judgment.name
            result.metadata[f"{prefix}.choice"] = dim_judgment.grade
            result.metadata[f"{prefix}.score"] = dim_judgment.score
            result.metadata[f"{prefix}.confidence"] = dim_judgment.confidence
            result.metadata[f"{prefix}.explanation"] = dim_judgment.explanation
            result.metadata[f"{prefix}.evidence"] = dim_judgment.evidence
        for dim, weight in zip(self.dimensions, weights):
            result.metadata[f"weights.{dim.name}"] = weight
        result.metadata["threshold"] = threshold
        result.metadata["threshold.failed"] = [self.dimensions[i].name for i in failed]
        result.metadata["raw_response"] = raw_response

        if failed:
            logger.debug(
                f"{self.name} threshold {threshold} not met by: "
                f"{', '.join(result.metadata['threshold.failed'])}"
            )
        logger.debug(f"{self.name} score: {result.score:.3f}")
        return result

    def _fail_rubric(self, result: Score, error: ScoringError, raw_response: Any) -> Score:
        metadata: dict[str, Any] = {"raw_response": raw_response}
        for dim in self.dimensions:
            metadata[f"{dim.name}.choice"] = ""
            metadata[f"{dim.name}.score"] = 0.0
            metadata[f"weights.{dim.name}"] = 0.0
        return self._fail(result, error, **metadata)
