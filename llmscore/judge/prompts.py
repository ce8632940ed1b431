"""Judge prompt templates.

Templates are plain ``str.format`` strings. Grade anchors are rendered
from the rubric dimensions so prompts and schemas cannot drift apart.
"""

from __future__ import annotations

from llmscore.judge.rubric import (
    FACTUALITY_DIMENSION,
    TONALITY_DIMENSIONS,
    Dimension,
    format_anchors,
)
from llmscore.metrics.grading import DEFAULT_GRADE_SCALE, GradeScale

TONALITY_PROMPT_TEMPLATE = """You are evaluating the quality of an AI response across multiple dimensions. Be deterministic and concise.

[BEGIN DATA]
[Context]: {context}
[Response]: {response}
[END DATA]

Dimension anchors (use these precise anchors, not your own; {best} is best, {worst} is worst):
{anchors}

Instructions:
- Rate each dimension independently with one of {letters}.
- For each dimension, provide: confidence (0.0-1.0), a short explanation (<=30 words), and 1-3 short quotes from the Response as evidence.
"""

TONE_RUBRIC_PROMPT_TEMPLATE = """You are evaluating the quality of an AI response across multiple dimensions.

[BEGIN DATA]
[Context]: {context}
[Response]: {response}
[END DATA]

Dimension anchors ({best} is best, {worst} is worst):
{anchors}

Rate each dimension independently. Answer with exactly one line per dimension:
{answer_lines}"""

FACTUALITY_PROMPT_TEMPLATE = """You are comparing a submitted answer to an expert answer on a given question.

[BEGIN DATA]
************
[Question]: {question}
************
[Expert]: {expected}
************
[Submission]: {output}
************
[END DATA]

Compare the factual content of the submitted answer with the expert answer. Ignore any differences in style, grammar, or punctuation.
Select the option that best describes the submission ({best} is best):
{anchors}

Think step by step in the explanation, then give your choice.
"""


def _letters(scale: GradeScale) -> str:
    return ", ".join(scale.letters)


def build_tonality_prompt(
    context: str,
    response: str,
    dimensions: tuple[Dimension, ...] = TONALITY_DIMENSIONS,
    scale: GradeScale = DEFAULT_GRADE_SCALE,
) -> str:
    """Build the structured tonality prompt.

    Args:
        context: The conversation context or user request.
        response: The response being rated.
        dimensions: Dimensions to rate.
        scale: Grade scale.

    Returns:
        Formatted prompt.

    """
    return TONALITY_PROMPT_TEMPLATE.format(
        context=context,
        response=response,
        best=scale.best,
        worst=scale.worst,
        anchors=format_anchors(dimensions),
        letters=_letters(scale),
    )


def build_tone_rubric_prompt(
    context: str,
    response: str,
    dimensions: tuple[Dimension, ...] = TONALITY_DIMENSIONS,
    scale: GradeScale = DEFAULT_GRADE_SCALE,
) -> str:
    """Build the free-text rubric prompt that asks for ``NAME: <letter>`` lines.

    Args:
        context: The conversation context or user request.
        response: The response being rated.
        dimensions: Dimensions to rate.
        scale: Grade scale.

    Returns:
        Formatted prompt.

    """
    choices = "|".join(scale.letters)
    answer_lines = "\n".join(f"{dim.name.upper()}: <{choices}>" for dim in dimensions)
    return TONE_RUBRIC_PROMPT_TEMPLATE.format(
        context=context,
        response=response,
        best=scale.best,
        worst=scale.worst,
        anchors=format_anchors(dimensions),
        answer_lines=answer_lines,
    )


def build_factuality_prompt(
    question: str,
    expected: str,
    output: str,
    scale: GradeScale = DEFAULT_GRADE_SCALE,
) -> str:
    """Build the factuality comparison prompt.

    Args:
        question: The original question (may be empty).
        expected: The expert answer.
        output: The submitted answer.
        scale: Grade scale.

    Returns:
        Formatted prompt.

    """
    anchors = "\n".join(
        f"({letter}) {anchor}" for letter, anchor in FACTUALITY_DIMENSION.anchors.items()
    )
    return FACTUALITY_PROMPT_TEMPLATE.format(
        question=question,
        expected=expected,
        output=output,
        best=scale.best,
        anchors=anchors,
    )
