"""Judge module for rubric definitions, prompts and response validation.

This module provides what LLM-as-judge scorers need besides the LLM
itself: the rubric dimensions with their grade anchors, the JSON schemas
and prompts sent to the judge, and the validator that turns the judge's
untrusted response into a typed judgment.
"""

from llmscore.judge.prompts import (
    build_factuality_prompt,
    build_tonality_prompt,
    build_tone_rubric_prompt,
)
from llmscore.judge.rubric import (
    FACTUALITY_DIMENSION,
    TONALITY_DIMENSIONS,
    Dimension,
    RubricError,
    build_factuality_schema,
    build_rubric_schema,
    format_anchors,
)
from llmscore.judge.validation import (
    DimensionJudgment,
    FieldKind,
    FieldSpec,
    RubricJudgment,
    parse_rubric_response,
    rubric_field_specs,
    validate_response,
)

__all__ = [
    # Prompts
    "build_factuality_prompt",
    "build_tonality_prompt",
    "build_tone_rubric_prompt",
    # Rubric
    "FACTUALITY_DIMENSION",
    "TONALITY_DIMENSIONS",
    "Dimension",
    "RubricError",
    "build_factuality_schema",
    "build_rubric_schema",
    "format_anchors",
    # Validation
    "DimensionJudgment",
    "FieldKind",
    "FieldSpec",
    "RubricJudgment",
    "parse_rubric_response",
    "rubric_field_specs",
    "validate_response",
]
