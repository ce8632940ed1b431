"""Core types, errors and collaborator contracts for llmscore."""

from llmscore.core.errors import (
    DependencyFailureError,
    DependencyUnavailableError,
    MissingExpectedValueError,
    ResponseValidationError,
    ScoringError,
    UnknownGradeError,
)
from llmscore.core.interfaces import (
    MODERATION_CATEGORIES,
    Embedder,
    LLMGenerator,
    ModerationCategory,
    ModerationProvider,
    ModerationResult,
)
from llmscore.core.types import Score, ScoreInputs, Scorer

__all__ = [
    # Errors
    "DependencyFailureError",
    "DependencyUnavailableError",
    "MissingExpectedValueError",
    "ResponseValidationError",
    "ScoringError",
    "UnknownGradeError",
    # Interfaces
    "MODERATION_CATEGORIES",
    "Embedder",
    "LLMGenerator",
    "ModerationCategory",
    "ModerationProvider",
    "ModerationResult",
    # Types
    "Score",
    "ScoreInputs",
    "Scorer",
]
