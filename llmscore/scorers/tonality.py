"""Tone scorers: professionalism, kindness, clarity and helpfulness.

Both scorers grade the four dimensions in a single judge call and combine
them with the shared rubric engine. ``TonalityScorer`` uses structured
generation and also collects confidence, explanation and evidence per
dimension. ``ToneRubricScorer`` works with plain text generation and
parses ``DIMENSION: <letter>`` lines.
"""

from __future__ import annotations

import re
from typing import Any

from llmscore.config.models import TonalityOptions, ToneRubricOptions
from llmscore.core.interfaces import LLMGenerator
from llmscore.core.types import ScoreInputs
from llmscore.judge.prompts import build_tonality_prompt, build_tone_rubric_prompt
from llmscore.judge.rubric import TONALITY_DIMENSIONS, build_rubric_schema
from llmscore.judge.validation import RubricJudgment, parse_rubric_response
from llmscore.metrics.grading import DEFAULT_GRADE_SCALE, GradeScale
from llmscore.scorers.base import RubricScorer


class TonalityScorer(RubricScorer):
    """Anchored A-E tone rubric using structured generation."""

    name = "Tonality"

    def __init__(
        self,
        llm: LLMGenerator | None,
        options: TonalityOptions | None = None,
        scale: GradeScale = DEFAULT_GRADE_SCALE,
    ) -> None:
        """Initialize the scorer.

        Args:
            llm: Judge LLM.
            options: Weights and threshold.
            scale: Grade scale.

        """
        super().__init__(llm, options, TONALITY_DIMENSIONS, scale)
        self.schema = build_rubric_schema(self.dimensions, scale)

    def _request_judgment(self, llm: LLMGenerator, inputs: ScoreInputs) -> Any:
        prompt = build_tonality_prompt(inputs.input, inputs.output, self.dimensions, self.scale)
        return llm.structured_generate(prompt, self.schema)

    def _parse_judgment(self, raw_response: Any) -> RubricJudgment:
        return parse_rubric_response(raw_response, self.dimensions, self.scale)


class ToneRubricScorer(RubricScorer):
    """Tone rubric over free-text generation.

    Useful with judges that do not support structured output. Only the
    grades are collected; confidences are reported at their default.
    """

    name = "ToneRubric"

    def __init__(
        self,
        llm: LLMGenerator | None,
        options: ToneRubricOptions | None = None,
        scale: GradeScale = DEFAULT_GRADE_SCALE,
    ) -> None:
        """Initialize the scorer.

        Args:
            llm: Judge LLM.
            options: Weights and threshold.
            scale: Grade scale.

        """
        super().__init__(llm, options or ToneRubricOptions(), TONALITY_DIMENSIONS, scale)
        self._patterns = {
            dim.name: re.compile(
                rf"\b{re.escape(dim.name)}[ \t]*:[ \t]*\(?([A-Z])\b", re.IGNORECASE
            )
            for dim in self.dimensions
        }

    def _request_judgment(self, llm: LLMGenerator, inputs: ScoreInputs) -> Any:
        prompt = build_tone_rubric_prompt(inputs.input, inputs.output, self.dimensions, self.scale)
        return llm.generate(prompt)

    def _parse_judgment(self, raw_response: Any) -> RubricJudgment:
        text = raw_response if isinstance(raw_response, str) else ""
        choices: dict[str, str] = {}
        for dim_name, pattern in self._patterns.items():
            match = pattern.search(text)
            if match:
                choices[dim_name] = match.group(1)

        judgment = parse_rubric_response(
            choices, self.dimensions, self.scale, include_details=False
        )
        judgment.raw_response = raw_response
        return judgment
