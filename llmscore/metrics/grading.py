"""Grading calculations for rubric-based judge scores.

This module provides the grade scale that turns judge letter grades into
numeric scores, the weight normalizer, and the composite scorer with its
threshold gate.

All functions are pure: they take and return plain values and keep no
state between calls.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from llmscore.config.constants import GRADE_LETTERS
from llmscore.core.errors import UnknownGradeError


def clamp01(value: float) -> float:
    """Clamp a value to the [0, 1] range.

    Args:
        value: Value to clamp.

    Returns:
        The clamped value.

    """
    return max(0.0, min(1.0, value))


@dataclass(frozen=True)
class GradeScale:
    """Ordered bijection between grade letters and scores.

    Letters are given best first. Scores are evenly spaced over [0, 1]:
    the first letter maps to 1.0, the last to 0.0, with a step of
    1 / (N - 1). For the default A-E scale:

        A: 1.00 (best)
        B: 0.75
        C: 0.50
        D: 0.25
        E: 0.00 (worst)

    Attributes:
        letters: Grade letters, best first.

    """

    letters: tuple[str, ...] = GRADE_LETTERS
    _table: Mapping[str, float] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Build the lookup table."""
        if len(self.letters) < 2:
            raise ValueError("A grade scale needs at least two letters")
        if len(set(self.letters)) != len(self.letters):
            raise ValueError(f"Grade letters must be unique: {self.letters}")

        last = len(self.letters) - 1
        table = {letter: (last - i) / last for i, letter in enumerate(self.letters)}
        object.__setattr__(self, "_table", MappingProxyType(table))

    @property
    def step(self) -> float:
        """Score difference between adjacent grades."""
        return 1.0 / (len(self.letters) - 1)

    @property
    def best(self) -> str:
        """The highest grade."""
        return self.letters[0]

    @property
    def worst(self) -> str:
        """The lowest grade."""
        return self.letters[-1]

    def is_valid(self, grade: str) -> bool:
        """Check whether ``grade`` belongs to the scale."""
        return grade in self._table

    def to_score(self, grade: str) -> float:
        """Map a grade letter to its score.

        Args:
            grade: A letter of the scale.

        Returns:
            Score in [0, 1].

        Raises:
            UnknownGradeError: If the letter is not on the scale.

        """
        try:
            return self._table[grade]
        except KeyError:
            raise UnknownGradeError(grade, self.letters) from None

    def as_dict(self) -> dict[str, float]:
        """Return the full letter to score table."""
        return dict(self._table)


DEFAULT_GRADE_SCALE = GradeScale()


def normalize_weights(raw_weights: Sequence[float]) -> tuple[float, ...]:
    """Normalize per-dimension weights so they sum to one.

    Non-positive weights exclude their dimension and become exactly 0.0.
    When no weight is positive, no preference was stated and every
    dimension gets 1/N.

    Args:
        raw_weights: Raw weights, one per dimension.

    Returns:
        Normalized weights in the same order.

    """
    n = len(raw_weights)
    if n == 0:
        return ()

    positive = [w for w in raw_weights if w > 0]
    if not positive:
        return tuple(1.0 / n for _ in raw_weights)

    total = sum(positive)
    return tuple(w / total if w > 0 else 0.0 for w in raw_weights)


def gate_failures(
    scores: Sequence[float],
    weights: Sequence[float],
    threshold: float,
) -> list[int]:
    """Find weighted dimensions that fall below the threshold.

    Args:
        scores: Per-dimension scores.
        weights: Normalized weights in the same order.
        threshold: Minimum score. Values of zero or less disable the gate.

    Returns:
        Indices of the dimensions that trip the gate.

    Raises:
        ValueError: If scores and weights differ in length.

    """
    if len(scores) != len(weights):
        raise ValueError(f"Got {len(scores)} scores for {len(weights)} weights")

    if threshold <= 0:
        return []

    return [i for i, (s, w) in enumerate(zip(scores, weights)) if w > 0 and s < threshold]


def composite_score(
    scores: Sequence[float],
    weights: Sequence[float],
    threshold: float = 0.0,
) -> float:
    """Combine per-dimension scores into one composite score.

    The composite is the weighted sum of the scores. With a positive
    threshold, any weighted dimension whose own score is below the
    threshold vetoes the result and the composite becomes 0.0.

    Args:
        scores: Per-dimension scores in [0, 1].
        weights: Normalized weights in the same order.
        threshold: Minimum per-dimension score (0.0 disables the gate).

    Returns:
        Composite score in [0, 1].

    Raises:
        ValueError: If scores and weights differ in length.

    """
    if gate_failures(scores, weights, threshold):
        return 0.0

    return sum(w * s for s, w in zip(scores, weights))
