"""Base types shared by every scorer.

``ScoreInputs`` is an immutable Pydantic model; ``Score`` is a plain
dataclass so that metadata can hold arbitrary values (raw judge
responses, lists of evidence, ...).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from llmscore.core.errors import ScoringError


class ScoreInputs(BaseModel):
    """Inputs for a single scoring call.

    Attributes:
        output: The text under evaluation.
        expected: Optional reference text.
        input: Optional prompt or context the output was produced for.

    """

    model_config = ConfigDict(frozen=True)

    output: str = Field(default="", description="Text under evaluation")
    expected: str = Field(default="", description="Reference text")
    input: str = Field(default="", description="Original prompt or context")


@dataclass
class Score:
    """Result of a scoring call.

    ``score`` and ``error`` are independent: a failed call reports a score
    of 0.0 together with the error, and a successful call can still score
    0.0.

    Attributes:
        name: Name of the scorer that produced the result.
        score: Value in [0, 1], 1 being best.
        metadata: Scorer-specific details for debugging and reporting.
        error: Failure that prevented evaluation, if any.

    """

    name: str
    score: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)
    error: ScoringError | None = None

    @property
    def ok(self) -> bool:
        """Whether the call completed without error."""
        return self.error is None


@runtime_checkable
class Scorer(Protocol):
    """Protocol implemented by every scorer."""

    name: str

    def score(self, inputs: ScoreInputs) -> Score:
        """Evaluate ``inputs`` and return a Score."""
        ...
