"""Rubric dimensions and the JSON schemas sent to the judge.

A rubric is an ordered list of dimensions. Each dimension is graded with
one letter of the grade scale and may carry an optional confidence,
explanation and evidence quotes.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from llmscore.metrics.grading import DEFAULT_GRADE_SCALE, GradeScale


class RubricError(Exception):
    """Base exception for rubric errors."""

    pass


class Dimension(BaseModel):
    """A single independently graded axis of quality.

    Attributes:
        name: Field name used in the judge response (e.g., "clarity").
        description: One-line description used in the JSON schema.
        anchors: Anchor text per grade letter, best first.

    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Response field name")
    description: str = Field(default="", description="Short description")
    anchors: dict[str, str] = Field(default_factory=dict, description="Anchor per grade")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate dimension name format."""
        v = v.strip()
        if not v or not v.replace("_", "").isalnum():
            raise ValueError(f"Dimension name must be a non-empty identifier, got: {v!r}")
        return v

    @property
    def confidence_field(self) -> str:
        """Name of the optional confidence field."""
        return f"{self.name}_confidence"

    @property
    def explanation_field(self) -> str:
        """Name of the optional explanation field."""
        return f"{self.name}_explanation"

    @property
    def evidence_field(self) -> str:
        """Name of the optional evidence field."""
        return f"{self.name}_evidence"

    @property
    def title(self) -> str:
        """Human-readable name."""
        return self.name.replace("_", " ").capitalize()


TONALITY_DIMENSIONS: tuple[Dimension, ...] = (
    Dimension(
        name="professionalism",
        description="Formality, precision and neutrality of the response",
        anchors={
            "A": "highly professional; precise, neutral, impeccably formatted",
            "B": "consistently professional; precise and neutral",
            "C": "generally professional; minor informality/sloppiness",
            "D": "frequent informality; repeated imprecision",
            "E": "casual/slang, confrontational, imprecise; chaotic formatting",
        },
    ),
    Dimension(
        name="kindness",
        description="Empathy and supportiveness of the response",
        anchors={
            "A": "exemplary empathy and care",
            "B": "empathetic, supportive",
            "C": "neutral/polite",
            "D": "occasionally harsh/blaming",
            "E": "hostile, shaming, dismissive",
        },
    ),
    Dimension(
        name="clarity",
        description="How easy the response is to understand",
        anchors={
            "A": "exceptionally clear; concise and well structured",
            "B": "clear, well-structured",
            "C": "understandable; some redundancy",
            "D": "somewhat unclear; weak structure",
            "E": "hard to understand; disorganized",
        },
    ),
    Dimension(
        name="helpfulness",
        description="How well the response addresses the request",
        anchors={
            "A": "fully addresses request; step-by-step; anticipates edge cases",
            "B": "directly addresses request; actionable steps",
            "C": "addresses request; limited actionability",
            "D": "partially relevant; little actionability",
            "E": "off-topic; no actionable guidance",
        },
    ),
)

FACTUALITY_DIMENSION = Dimension(
    name="choice",
    description="Factual consistency of the submission with the expert answer",
    anchors={
        "A": "the submission contains all the same details as the expert answer",
        "B": "the submission is a superset of the expert answer and fully consistent with it",
        "C": "the submission is a subset of the expert answer and fully consistent with it",
        "D": "the submission differs from the expert answer on details that matter",
        "E": "the submission disagrees with or contradicts the expert answer",
    },
)


def format_anchors(dimensions: tuple[Dimension, ...] | list[Dimension]) -> str:
    """Render dimension anchors as an indented bullet list for prompts.

    Args:
        dimensions: Dimensions to render.

    Returns:
        Multi-line anchor text.

    """
    lines = []
    for dim in dimensions:
        lines.append(f"- {dim.title}:")
        for letter, anchor in dim.anchors.items():
            lines.append(f"  {letter}: {anchor}")
    return "\n".join(lines)


def build_rubric_schema(
    dimensions: tuple[Dimension, ...] | list[Dimension],
    scale: GradeScale = DEFAULT_GRADE_SCALE,
    include_details: bool = True,
) -> dict[str, Any]:
    """Build the JSON schema for a structured judge response.

    Every dimension gets a required enum-constrained grade field. With
    ``include_details`` each also gets optional ``<name>_confidence``
    (number), ``<name>_explanation`` (string) and ``<name>_evidence``
    (array of strings) fields.

    Args:
        dimensions: Rubric dimensions.
        scale: Grade scale used for the enum.
        include_details: Whether to add the optional detail fields.

    Returns:
        JSON schema dictionary.

    Raises:
        RubricError: If two dimensions share a name.

    """
    names = [d.name for d in dimensions]
    if len(set(names)) != len(names):
        raise RubricError(f"Duplicate dimension names: {names}")

    properties: dict[str, Any] = {}
    for dim in dimensions:
        properties[dim.name] = {
            "type": "string",
            "enum": list(scale.letters),
            "description": (
                f"{dim.title} rating ({scale.best}-{scale.worst}, {scale.best} is best)"
                + (f": {dim.description}" if dim.description else "")
            ),
        }
        if include_details:
            properties[dim.confidence_field] = {"type": "number", "minimum": 0, "maximum": 1}
            properties[dim.explanation_field] = {"type": "string"}
            properties[dim.evidence_field] = {"type": "array", "items": {"type": "string"}}

    return {
        "type": "object",
        "properties": properties,
        "required": names,
    }


def build_factuality_schema(scale: GradeScale = DEFAULT_GRADE_SCALE) -> dict[str, Any]:
    """Build the JSON schema for a factuality judgment.

    Returns:
        Schema with a required ``choice`` grade and optional
        ``explanation`` and ``confidence``.

    """
    return {
        "type": "object",
        "properties": {
            FACTUALITY_DIMENSION.name: {
                "type": "string",
                "enum": list(scale.letters),
                "description": FACTUALITY_DIMENSION.description,
            },
            "explanation": {
                "type": "string",
                "description": "Step-by-step reasoning behind the choice",
            },
            "confidence": {"type": "number", "minimum": 0, "maximum": 1},
        },
        "required": [FACTUALITY_DIMENSION.name],
    }
