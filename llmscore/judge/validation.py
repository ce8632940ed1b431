"""Validation of untrusted judge responses.

Judge output is a loosely typed mapping decoded from JSON. It is checked
once here, at the boundary, and turned into typed ``RubricJudgment``
objects; scoring code never touches the raw mapping.

Rules:
- Required fields (the per-dimension grades) must be present and well
  formed. The first failure, in declaration order, is reported.
- Optional fields (confidence, explanation, evidence) fall back to a
  default when missing or malformed.
- Extra fields and field order in the response are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from llmscore.config.constants import DEFAULT_CONFIDENCE
from llmscore.core.errors import ResponseValidationError
from llmscore.judge.rubric import Dimension
from llmscore.metrics.grading import DEFAULT_GRADE_SCALE, GradeScale, clamp01

logger = logging.getLogger(__name__)

ROOT_FIELD = "<root>"


class FieldKind(str, Enum):
    """Expected type of a response field."""

    GRADE = "grade"  # letter on the grade scale
    STRING = "string"
    NUMBER = "number"  # int or float, never bool
    STRING_LIST = "string_list"


@dataclass(frozen=True)
class FieldSpec:
    """Declaration of one field expected in a judge response.

    Attributes:
        name: Key in the response mapping.
        kind: Expected type.
        required: Whether absence is a validation failure.
        default: Value used for a missing or malformed optional field.

    """

    name: str
    kind: FieldKind
    required: bool = True
    default: Any = None


@dataclass
class DimensionJudgment:
    """Validated judgment for one rubric dimension.

    Attributes:
        name: Dimension name.
        grade: Letter grade from the scale.
        score: Score derived from the grade.
        confidence: Judge confidence (0.0 to 1.0).
        explanation: Short justification.
        evidence: Quotes supporting the grade.

    """

    name: str
    grade: str
    score: float
    confidence: float = DEFAULT_CONFIDENCE
    explanation: str = ""
    evidence: list[str] = field(default_factory=list)


@dataclass
class RubricJudgment:
    """Validated judgment for a whole rubric.

    Attributes:
        dimensions: Judgments keyed by dimension name, in rubric order.
        raw_response: The response the judgment was extracted from.

    """

    dimensions: dict[str, DimensionJudgment] = field(default_factory=dict)
    raw_response: Any = None

    def scores(self) -> tuple[float, ...]:
        """Return per-dimension scores in rubric order."""
        return tuple(d.score for d in self.dimensions.values())

    def grades(self) -> tuple[str, ...]:
        """Return per-dimension grades in rubric order."""
        return tuple(d.grade for d in self.dimensions.values())


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_field(value: Any, spec: FieldSpec, scale: GradeScale) -> tuple[Any, str | None]:
    """Check one present value.

    Returns:
        Tuple of (converted value, failure reason or None).

    """
    if spec.kind is FieldKind.GRADE:
        if not isinstance(value, str):
            return None, f"expected a grade letter, got {type(value).__name__}"
        grade = value.strip().upper()
        if not scale.is_valid(grade):
            return None, f"grade {value!r} is not one of {', '.join(scale.letters)}"
        return grade, None

    if spec.kind is FieldKind.STRING:
        if not isinstance(value, str):
            return None, f"expected a string, got {type(value).__name__}"
        return value, None

    if spec.kind is FieldKind.NUMBER:
        if not _is_number(value):
            return None, f"expected a number, got {type(value).__name__}"
        return float(value), None

    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        return None, "expected an array of strings"
    return list(value), None


def validate_response(
    response: Any,
    specs: Sequence[FieldSpec],
    scale: GradeScale = DEFAULT_GRADE_SCALE,
) -> dict[str, Any]:
    """Extract and type-check fields from a judge response.

    Args:
        response: Untrusted mapping returned by the judge.
        specs: Fields to extract, checked in order.
        scale: Grade scale for GRADE fields.

    Returns:
        Mapping of field name to converted value (defaults filled in).

    Raises:
        ResponseValidationError: On the first missing or malformed
            required field, or if the response is not a mapping.

    """
    if not isinstance(response, Mapping):
        raise ResponseValidationError(
            ROOT_FIELD, f"expected an object, got {type(response).__name__}"
        )

    extracted: dict[str, Any] = {}
    for spec in specs:
        if spec.name not in response or response[spec.name] is None:
            if spec.required:
                raise ResponseValidationError(spec.name, "missing required field")
            extracted[spec.name] = _copy_default(spec.default)
            continue

        value, reason = _check_field(response[spec.name], spec, scale)
        if reason is not None:
            if spec.required:
                raise ResponseValidationError(spec.name, reason)
            logger.debug(f"Ignoring malformed optional field '{spec.name}': {reason}")
            value = _copy_default(spec.default)
        extracted[spec.name] = value

    return extracted


def _copy_default(default: Any) -> Any:
    return list(default) if isinstance(default, list) else default


def rubric_field_specs(
    dimensions: Sequence[Dimension],
    include_details: bool = True,
) -> list[FieldSpec]:
    """Build field specs for a rubric.

    Grade fields come first so that a missing grade is always the
    reported failure.

    Args:
        dimensions: Rubric dimensions.
        include_details: Whether to extract the optional detail fields.

    Returns:
        Field specs in validation order.

    """
    specs = [FieldSpec(dim.name, FieldKind.GRADE) for dim in dimensions]
    if include_details:
        for dim in dimensions:
            specs.extend(
                [
                    FieldSpec(dim.confidence_field, FieldKind.NUMBER, False, DEFAULT_CONFIDENCE),
                    FieldSpec(dim.explanation_field, FieldKind.STRING, False, ""),
                    FieldSpec(dim.evidence_field, FieldKind.STRING_LIST, False, []),
                ]
            )
    return specs


def parse_rubric_response(
    response: Any,
    dimensions: Sequence[Dimension],
    scale: GradeScale = DEFAULT_GRADE_SCALE,
    include_details: bool = True,
) -> RubricJudgment:
    """Validate a judge response and build the typed judgment.

    Args:
        response: Untrusted mapping returned by the judge.
        dimensions: Rubric dimensions, in order.
        scale: Grade scale.
        include_details: Whether to extract confidence/explanation/evidence.

    Returns:
        RubricJudgment with one entry per dimension.

    Raises:
        ResponseValidationError: If a grade is missing or malformed.

    """
    values = validate_response(response, rubric_field_specs(dimensions, include_details), scale)

    judgment = RubricJudgment(raw_response=response)
    for dim in dimensions:
        grade = values[dim.name]
        judgment.dimensions[dim.name] = DimensionJudgment(
            name=dim.name,
            grade=grade,
            score=scale.to_score(grade),
            confidence=clamp01(values.get(dim.confidence_field, DEFAULT_CONFIDENCE)),
            explanation=values.get(dim.explanation_field, ""),
            evidence=values.get(dim.evidence_field, []),
        )
    return judgment
