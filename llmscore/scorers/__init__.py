"""Scorer implementations.

Every scorer follows the ``Scorer`` protocol: a ``name`` and a
``score(ScoreInputs) -> Score`` method that reports failures on the
returned ``Score`` instead of raising.
"""

from llmscore.scorers.base import BaseScorer, RubricScorer
from llmscore.scorers.embedding import EmbeddingSimilarityScorer
from llmscore.scorers.factuality import FACTUALITY_FIELDS, FactualityScorer
from llmscore.scorers.heuristic import ExactMatchScorer
from llmscore.scorers.moderation import ModerationScorer
from llmscore.scorers.tonality import TonalityScorer, ToneRubricScorer

__all__ = [
    "FACTUALITY_FIELDS",
    "BaseScorer",
    "EmbeddingSimilarityScorer",
    "ExactMatchScorer",
    "FactualityScorer",
    "ModerationScorer",
    "RubricScorer",
    "TonalityScorer",
    "ToneRubricScorer",
]
