"""Configuration system for llmscore.

This module provides Pydantic option models for every scorer and a
ConfigLoader for reading scorer suites from YAML.

Example:
    from llmscore.config import ConfigLoader, configure_logging

    loader = ConfigLoader()
    config = loader.load("eval/scorers.yaml")
    configure_logging(config.logging)

"""

from .constants import (
    DEFAULT_CONFIDENCE,
    DEFAULT_MODERATION_THRESHOLD,
    GRADE_LETTERS,
)
from .loader import ConfigLoader, configure_logging
from .models import (
    ConfigurationError,
    EmbeddingSimilarityOptions,
    ExactMatchOptions,
    FactualityOptions,
    LoggingConfig,
    ModerationOptions,
    ScorerOptions,
    ScorerSuiteConfig,
    TonalityOptions,
    ToneRubricOptions,
)

__all__ = [
    "DEFAULT_CONFIDENCE",
    "DEFAULT_MODERATION_THRESHOLD",
    "GRADE_LETTERS",
    "ConfigLoader",
    "ConfigurationError",
    "EmbeddingSimilarityOptions",
    "ExactMatchOptions",
    "FactualityOptions",
    "LoggingConfig",
    "ModerationOptions",
    "ScorerOptions",
    "ScorerSuiteConfig",
    "TonalityOptions",
    "ToneRubricOptions",
    "configure_logging",
]
