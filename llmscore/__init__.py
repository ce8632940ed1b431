"""llmscore - scorers for evaluating LLM outputs.

Three families of scorers share one result type:
    - heuristic: exact string match
    - embedding: cosine similarity of output and expected embeddings
    - LLM judge: factuality, tone rubrics and content moderation
"""

from llmscore.config import ConfigLoader, ConfigurationError, ScorerSuiteConfig
from llmscore.core import (
    DependencyFailureError,
    DependencyUnavailableError,
    Embedder,
    LLMGenerator,
    MissingExpectedValueError,
    ModerationProvider,
    ResponseValidationError,
    Score,
    ScoreInputs,
    Scorer,
    ScoringError,
)
from llmscore.factory import Embedding, Heuristic, LLMJudge, build_scorers

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Config
    "ConfigLoader",
    "ConfigurationError",
    "ScorerSuiteConfig",
    # Core
    "DependencyFailureError",
    "DependencyUnavailableError",
    "Embedder",
    "LLMGenerator",
    "MissingExpectedValueError",
    "ModerationProvider",
    "ResponseValidationError",
    "Score",
    "ScoreInputs",
    "Scorer",
    "ScoringError",
    # Factories
    "Embedding",
    "Heuristic",
    "LLMJudge",
    "build_scorers",
]
