"""Pydantic models for scorer configuration.

Each scorer takes one options model. ``ScorerSuiteConfig`` groups them so a
whole set of scorers can be described in a single YAML file.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from llmscore.config.constants import DEFAULT_MODERATION_THRESHOLD
from llmscore.core.interfaces import MODERATION_CATEGORIES


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


class ScorerOptions(BaseModel):
    """Base class for scorer options.

    Options are immutable once a scorer is built and unknown keys are
    rejected so that typos in YAML files surface immediately.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")


# -----------------------------------------------------------------------------
# Heuristic / embedding scorers
# -----------------------------------------------------------------------------


class ExactMatchOptions(ScorerOptions):
    """Options for the ExactMatch scorer."""

    case_insensitive: bool = Field(default=False, description="Ignore case when comparing")
    trim_whitespace: bool = Field(
        default=False, description="Strip leading and trailing whitespace before comparing"
    )


class EmbeddingSimilarityOptions(ScorerOptions):
    """Options for the EmbeddingSimilarity scorer (currently none)."""


# -----------------------------------------------------------------------------
# LLM judge scorers
# -----------------------------------------------------------------------------


class FactualityOptions(ScorerOptions):
    """Options for the Factuality scorer (currently none)."""


class TonalityOptions(ScorerOptions):
    """Options for the Tonality scorer.

    A weight of zero (or less) excludes the dimension. When every weight is
    zero the dimensions are weighted equally.

    Attributes:
        professionalism_weight: Raw weight for professionalism.
        kindness_weight: Raw weight for kindness.
        clarity_weight: Raw weight for clarity.
        helpfulness_weight: Raw weight for helpfulness.
        threshold: Minimum per-dimension score for weighted dimensions.
            Any weighted dimension below it zeroes the result. 0.0 disables.

    """

    professionalism_weight: float = Field(default=0.0)
    kindness_weight: float = Field(default=0.0)
    clarity_weight: float = Field(default=0.0)
    helpfulness_weight: float = Field(default=0.0)
    threshold: float = Field(default=0.0, ge=0.0, le=1.0)

    def weights(self) -> tuple[float, float, float, float]:
        """Return raw weights in dimension order."""
        return (
            self.professionalism_weight,
            self.kindness_weight,
            self.clarity_weight,
            self.helpfulness_weight,
        )


class ToneRubricOptions(TonalityOptions):
    """Options for the free-text ToneRubric scorer (same as Tonality)."""


class ModerationOptions(ScorerOptions):
    """Options for the Moderation scorer.

    Attributes:
        threshold: Confidence above which a category is flagged. Values
            of zero or less fall back to the default.
        categories: Categories to check. Empty means all.

    """

    threshold: float = Field(default=DEFAULT_MODERATION_THRESHOLD, le=1.0)
    categories: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Reject category names the moderation provider does not report."""
        unknown = [c for c in v if c not in MODERATION_CATEGORIES]
        if unknown:
            raise ValueError(f"Unknown moderation categories: {', '.join(unknown)}")
        return v

    def effective_threshold(self) -> float:
        """Return the threshold actually applied."""
        if self.threshold <= 0:
            return DEFAULT_MODERATION_THRESHOLD
        return self.threshold


# -----------------------------------------------------------------------------
# Suite configuration
# -----------------------------------------------------------------------------


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO")
    format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and validate the level name."""
        level = v.upper().strip()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid logging level: {v}")
        return level


class ScorerSuiteConfig(BaseModel):
    """A set of scorers described in one configuration file.

    A scorer is enabled when its section is present (an empty mapping
    enables it with default options).

    Maps to config/defaults.yaml merged with an optional override file.
    """

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    exact_match: ExactMatchOptions | None = None
    embedding_similarity: EmbeddingSimilarityOptions | None = None
    factuality: FactualityOptions | None = None
    tonality: TonalityOptions | None = None
    tone_rubric: ToneRubricOptions | None = None
    moderation: ModerationOptions | None = None

    def enabled_scorers(self) -> list[str]:
        """Return the names of the configured scorer sections."""
        names = [
            "exact_match",
            "embedding_similarity",
            "factuality",
            "tonality",
            "tone_rubric",
            "moderation",
        ]
        return [name for name in names if getattr(self, name) is not None]
