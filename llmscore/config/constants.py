"""Shared constants for llmscore configuration.

This module is the single source of truth for scoring defaults.
Import from here rather than hardcoding values at call sites.
"""

# Grade letters of the judge rubric, best first.
GRADE_LETTERS: tuple[str, ...] = ("A", "B", "C", "D", "E")

# Confidence reported for a dimension when the judge omits it.
DEFAULT_CONFIDENCE: float = 0.7

# Moderation confidence above which a category is flagged.
DEFAULT_MODERATION_THRESHOLD: float = 0.5

DEFAULT_CONFIG_FILE: str = "config/defaults.yaml"
