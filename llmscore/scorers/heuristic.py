"""Heuristic scorers based on plain string comparison."""

from __future__ import annotations

from llmscore.config.models import ExactMatchOptions
from llmscore.core.errors import MissingExpectedValueError
from llmscore.core.types import Score, ScoreInputs
from llmscore.scorers.base import BaseScorer


class ExactMatchScorer(BaseScorer):
    """Scores 1.0 when the output equals the expected value, else 0.0.

    Whitespace trimming is applied before case folding.
    """

    name = "ExactMatch"

    def __init__(self, options: ExactMatchOptions | None = None) -> None:
        """Initialize the scorer.

        Args:
            options: Normalization options.

        """
        self.options = options or ExactMatchOptions()

    def _normalize(self, text: str) -> str:
        if self.options.trim_whitespace:
            text = text.strip()
        if self.options.case_insensitive:
            text = text.casefold()
        return text

    def score(self, inputs: ScoreInputs) -> Score:
        """Compare ``output`` with ``expected``.

        Args:
            inputs: ``expected`` is required.

        Returns:
            Score of 1.0 or 0.0.

        """
        result = self._new_result()

        if not inputs.expected:
            return self._fail(result, MissingExpectedValueError())

        matched = self._normalize(inputs.output) == self._normalize(inputs.expected)
        result.score = 1.0 if matched else 0.0

        result.metadata["case_insensitive"] = self.options.case_insensitive
        result.metadata["trim_whitespace"] = self.options.trim_whitespace
        result.metadata["output_length"] = len(inputs.output)
        result.metadata["expected_length"] = len(inputs.expected)
        return result
