"""Factuality scorer.

Asks the judge to compare the output with the expected answer and grade
the agreement on the A-E scale.
"""

from __future__ import annotations

import logging

from llmscore.config.constants import DEFAULT_CONFIDENCE
from llmscore.config.models import FactualityOptions
from llmscore.core.errors import (
    DependencyUnavailableError,
    MissingExpectedValueError,
    ResponseValidationError,
)
from llmscore.core.interfaces import LLMGenerator
from llmscore.core.types import Score, ScoreInputs
from llmscore.judge.prompts import build_factuality_prompt
from llmscore.judge.rubric import FACTUALITY_DIMENSION, build_factuality_schema
from llmscore.judge.validation import FieldKind, FieldSpec, validate_response
from llmscore.metrics.grading import DEFAULT_GRADE_SCALE, GradeScale, clamp01
from llmscore.scorers.base import BaseScorer

logger = logging.getLogger(__name__)

FACTUALITY_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec(FACTUALITY_DIMENSION.name, FieldKind.GRADE),
    FieldSpec("explanation", FieldKind.STRING, required=False, default=""),
    FieldSpec("confidence", FieldKind.NUMBER, required=False, default=DEFAULT_CONFIDENCE),
)


class FactualityScorer(BaseScorer):
    """LLM judge for factual consistency with a reference answer."""

    name = "Factuality"

    def __init__(
        self,
        llm: LLMGenerator | None,
        options: FactualityOptions | None = None,
        scale: GradeScale = DEFAULT_GRADE_SCALE,
    ) -> None:
        """Initialize the scorer.

        Args:
            llm: Judge LLM.
            options: Scorer options.
            scale: Grade scale.

        """
        self.llm = llm
        self.options = options or FactualityOptions()
        self.scale = scale
        self.schema = build_factuality_schema(scale)

    def score(self, inputs: ScoreInputs) -> Score:
        """Grade how well ``output`` agrees with ``expected``.

        Args:
            inputs: ``expected`` is required; ``input`` is the question.

        Returns:
            Score equal to the grade-scale value of the judge's choice.

        """
        result = self._new_result()

        if not inputs.expected:
            return self._fail(result, MissingExpectedValueError())

        if self.llm is None:
            return self._fail(result, DependencyUnavailableError("LLM generator"))

        prompt = build_factuality_prompt(inputs.input, inputs.expected, inputs.output, self.scale)
        try:
            raw_response = self.llm.structured_generate(prompt, self.schema)
        except Exception as e:
            return self._fail(result, self._dependency_failure("LLM generation failed", e))

        try:
            values = validate_response(raw_response, FACTUALITY_FIELDS, self.scale)
        except ResponseValidationError as e:
            return self._fail(result, e, raw_response=raw_response)

        choice = values[FACTUALITY_DIMENSION.name]
        result.score = self.scale.to_score(choice)
        result.metadata["choice"] = choice
        result.metadata["explanation"] = values["explanation"]
        result.metadata["confidence"] = clamp01(values["confidence"])
        result.metadata["raw_response"] = raw_response

        logger.debug(f"{self.name} choice {choice} -> {result.score:.2f}")
        return result
