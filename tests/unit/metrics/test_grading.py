"""Tests for grade mapping, weight normalization and composite scoring.

Python justification: Required for pytest testing framework.
"""

import pytest

from llmscore.config.constants import GRADE_LETTERS
from llmscore.core.errors import UnknownGradeError
from llmscore.metrics.grading import (
    DEFAULT_GRADE_SCALE,
    GradeScale,
    clamp01,
    composite_score,
    gate_failures,
    normalize_weights,
)

# Normalized weights must sum to one within this tolerance
WEIGHT_SUM_TOLERANCE = 1e-9


class TestClamp01:
    """Tests for clamp01."""

    def test_in_range(self) -> None:
        assert clamp01(0.42) == 0.42

    def test_clamps(self) -> None:
        assert clamp01(-0.5) == 0.0
        assert clamp01(1.5) == 1.0


class TestGradeScale:
    """Tests for the grade scale."""

    @pytest.mark.parametrize(
        "grade,expected",
        [("A", 1.0), ("B", 0.75), ("C", 0.5), ("D", 0.25), ("E", 0.0)],
    )
    def test_default_mapping(self, grade: str, expected: float) -> None:
        assert DEFAULT_GRADE_SCALE.to_score(grade) == pytest.approx(expected)

    def test_bijection(self) -> None:
        table = DEFAULT_GRADE_SCALE.as_dict()
        assert list(table) == list(GRADE_LETTERS)
        assert len(set(table.values())) == len(table)

    def test_monotonic_and_evenly_spaced(self) -> None:
        scores = [DEFAULT_GRADE_SCALE.to_score(g) for g in DEFAULT_GRADE_SCALE.letters]
        for better, worse in zip(scores, scores[1:]):
            assert better - worse == pytest.approx(DEFAULT_GRADE_SCALE.step)
        assert scores[0] == 1.0
        assert scores[-1] == 0.0

    def test_best_and_worst(self) -> None:
        assert DEFAULT_GRADE_SCALE.best == "A"
        assert DEFAULT_GRADE_SCALE.worst == "E"

    def test_is_valid(self) -> None:
        assert DEFAULT_GRADE_SCALE.is_valid("C")
        assert not DEFAULT_GRADE_SCALE.is_valid("F")
        assert not DEFAULT_GRADE_SCALE.is_valid("a")

    def test_unknown_grade_raises(self) -> None:
        with pytest.raises(UnknownGradeError):
            DEFAULT_GRADE_SCALE.to_score("F")

    def test_unknown_grade_is_key_error(self) -> None:
        with pytest.raises(KeyError):
            DEFAULT_GRADE_SCALE.to_score("")

    def test_custom_scale(self) -> None:
        scale = GradeScale(("PASS", "FAIL"))
        assert scale.to_score("PASS") == 1.0
        assert scale.to_score("FAIL") == 0.0
        assert scale.step == 1.0

    def test_rejects_single_letter(self) -> None:
        with pytest.raises(ValueError, match="at least two"):
            GradeScale(("A",))

    def test_rejects_duplicates(self) -> None:
        with pytest.raises(ValueError, match="unique"):
            GradeScale(("A", "B", "A"))


class TestNormalizeWeights:
    """Tests for normalize_weights."""

    def test_all_zero_gives_uniform(self) -> None:
        weights = normalize_weights([0.0, 0.0, 0.0, 0.0])
        assert weights == pytest.approx((0.25, 0.25, 0.25, 0.25))

    def test_all_negative_gives_uniform(self) -> None:
        weights = normalize_weights([-1.0, -2.0, 0.0])
        assert weights == pytest.approx((1 / 3, 1 / 3, 1 / 3))
        assert abs(sum(weights) - 1.0) < WEIGHT_SUM_TOLERANCE

    def test_positive_weights_scaled(self) -> None:
        weights = normalize_weights([2.0, 1.0, 1.0, 0.0])
        assert weights == pytest.approx((0.5, 0.25, 0.25, 0.0))

    def test_non_positive_become_exact_zero(self) -> None:
        weights = normalize_weights([3.0, -1.0, 0.0, 1.0])
        assert weights[1] == 0.0
        assert weights[2] == 0.0
        assert abs(sum(weights) - 1.0) < WEIGHT_SUM_TOLERANCE

    def test_single_positive_weight(self) -> None:
        assert normalize_weights([0.0, 0.7, 0.0, 0.0]) == (0.0, 1.0, 0.0, 0.0)

    def test_already_normalized(self) -> None:
        weights = normalize_weights([0.3, 0.2, 0.3, 0.2])
        assert weights == pytest.approx((0.3, 0.2, 0.3, 0.2))
        assert abs(sum(weights) - 1.0) < WEIGHT_SUM_TOLERANCE

    def test_empty(self) -> None:
        assert normalize_weights([]) == ()

    def test_preserves_length(self) -> None:
        assert len(normalize_weights([1.0] * 7)) == 7


class TestGateFailures:
    """Tests for gate_failures."""

    def test_below_threshold(self) -> None:
        assert gate_failures([0.4, 1.0], [0.5, 0.5], 0.5) == [0]

    def test_unweighted_dimension_ignored(self) -> None:
        assert gate_failures([1.0, 0.0], [1.0, 0.0], 0.5) == []

    def test_disabled_threshold(self) -> None:
        assert gate_failures([0.0, 0.0], [0.5, 0.5], 0.0) == []

    def test_equal_to_threshold_passes(self) -> None:
        assert gate_failures([0.5], [1.0], 0.5) == []

    def test_length_mismatch(self) -> None:
        with pytest.raises(ValueError):
            gate_failures([1.0], [0.5, 0.5], 0.5)


class TestCompositeScore:
    """Tests for composite_score."""

    def test_weighted_sum(self) -> None:
        # B, A, C, B with weights 0.3, 0.2, 0.3, 0.2
        score = composite_score([0.75, 1.0, 0.5, 0.75], [0.3, 0.2, 0.3, 0.2])
        assert score == pytest.approx(0.725)

    def test_all_best(self) -> None:
        assert composite_score([1.0] * 4, [0.3, 0.2, 0.3, 0.2]) == pytest.approx(1.0)

    def test_gate_zeroes_result(self) -> None:
        scores = [0.4, 1.0, 1.0, 1.0]
        weights = [1.0, 0.0, 0.0, 0.0]
        assert composite_score(scores, weights, 0.5) == 0.0

    def test_gate_passes(self) -> None:
        scores = [0.4, 1.0, 1.0, 1.0]
        weights = [1.0, 0.0, 0.0, 0.0]
        assert composite_score(scores, weights, 0.3) == pytest.approx(0.4)

    def test_gate_ignores_unweighted_dimension(self) -> None:
        scores = [1.0, 0.0]
        weights = [1.0, 0.0]
        assert composite_score(scores, weights, 0.9) == pytest.approx(1.0)

    def test_no_threshold_keeps_weighted_sum(self) -> None:
        assert composite_score([0.0, 1.0], [0.5, 0.5]) == pytest.approx(0.5)

    def test_length_mismatch(self) -> None:
        with pytest.raises(ValueError):
            composite_score([1.0, 1.0], [1.0])
