"""Contracts for the external services scorers delegate to.

These are implemented by library consumers (a hosted LLM client, an
embedding endpoint, a moderation API). Implementations signal failure by
raising; scorers catch the exception and report it on ``Score.error``.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field

# Developer-friendly names matching the Google Cloud Natural Language
# moderation categories.
MODERATION_CATEGORIES: tuple[str, ...] = (
    "Toxic",
    "Derogatory",
    "Violent",
    "Sexual",
    "Insult",
    "Profanity",
    "DeathHarmTragedy",
    "FirearmsWeapons",
    "PublicSafety",
    "Health",
    "ReligionBelief",
    "IllicitDrugs",
    "WarConflict",
    "Finance",
    "Politics",
    "Legal",
)


@runtime_checkable
class LLMGenerator(Protocol):
    """Text and structured generation backed by an LLM."""

    def generate(self, prompt: str) -> str:
        """Generate free text for ``prompt``."""
        ...

    def structured_generate(self, prompt: str, schema: dict[str, Any]) -> dict[str, Any]:
        """Generate a JSON object conforming to ``schema``.

        Args:
            prompt: The prompt text.
            schema: A JSON schema describing the expected object.

        Returns:
            The decoded object. Callers must still validate it.

        """
        ...


@runtime_checkable
class Embedder(Protocol):
    """Produces vector embeddings for text."""

    def embed(self, text: str) -> Sequence[float]:
        """Return the embedding vector for ``text``."""
        ...


class ModerationCategory(BaseModel):
    """A safety category with the provider's confidence."""

    name: str = Field(..., description="Category name")
    confidence: float = Field(..., allow_inf_nan=False, description="Confidence (0.0 to 1.0)")


class ModerationResult(BaseModel):
    """Result of a moderation call."""

    categories: list[ModerationCategory] = Field(default_factory=list)


@runtime_checkable
class ModerationProvider(Protocol):
    """Content moderation service."""

    def moderate(self, content: str) -> ModerationResult:
        """Analyze ``content`` and return per-category confidences."""
        ...
