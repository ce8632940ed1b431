"""Entry points for building scorers.

Scorers are grouped by the collaborator they need, so a caller configures
the LLM or embedder once and asks for as many scorers as it wants:

    judge = LLMJudge(llm=my_llm)
    tone = judge.tonality(TonalityOptions(clarity_weight=2.0, threshold=0.5))
    facts = judge.factuality()

``build_scorers`` does the same from a ``ScorerSuiteConfig``.
"""

from __future__ import annotations

import logging

from llmscore.config.models import (
    EmbeddingSimilarityOptions,
    ExactMatchOptions,
    FactualityOptions,
    ModerationOptions,
    ScorerSuiteConfig,
    TonalityOptions,
    ToneRubricOptions,
)
from llmscore.core.interfaces import Embedder, LLMGenerator, ModerationProvider
from llmscore.core.types import Scorer
from llmscore.scorers.embedding import EmbeddingSimilarityScorer
from llmscore.scorers.factuality import FactualityScorer
from llmscore.scorers.heuristic import ExactMatchScorer
from llmscore.scorers.moderation import ModerationScorer
from llmscore.scorers.tonality import TonalityScorer, ToneRubricScorer

logger = logging.getLogger(__name__)


class LLMJudge:
    """Factory for scorers that rely on a judge LLM or a moderation provider."""

    def __init__(
        self,
        llm: LLMGenerator | None = None,
        moderation: ModerationProvider | None = None,
    ) -> None:
        """Initialize the factory.

        Args:
            llm: Judge LLM shared by the judge scorers.
            moderation: Moderation provider for the Moderation scorer.

        """
        self.llm = llm
        self.moderation_provider = moderation

    def factuality(self, options: FactualityOptions | None = None) -> FactualityScorer:
        """Create a Factuality scorer."""
        return FactualityScorer(self.llm, options)

    def tonality(self, options: TonalityOptions | None = None) -> TonalityScorer:
        """Create a Tonality scorer."""
        return TonalityScorer(self.llm, options)

    def tone_rubric(self, options: ToneRubricOptions | None = None) -> ToneRubricScorer:
        """Create a free-text ToneRubric scorer."""
        return ToneRubricScorer(self.llm, options)

    def moderation(self, options: ModerationOptions | None = None) -> ModerationScorer:
        """Create a Moderation scorer."""
        return ModerationScorer(self.moderation_provider, options)


class Embedding:
    """Factory for embedding-based scorers."""

    def __init__(self, embedder: Embedder | None = None) -> None:
        self.embedder = embedder

    def similarity(
        self, options: EmbeddingSimilarityOptions | None = None
    ) -> EmbeddingSimilarityScorer:
        """Create an EmbeddingSimilarity scorer."""
        return EmbeddingSimilarityScorer(self.embedder, options)


class Heuristic:
    """Factory for scorers that need no collaborator."""

    def exact_match(self, options: ExactMatchOptions | None = None) -> ExactMatchScorer:
        """Create an ExactMatch scorer."""
        return ExactMatchScorer(options)


def build_scorers(
    config: ScorerSuiteConfig,
    llm: LLMGenerator | None = None,
    embedder: Embedder | None = None,
    moderation: ModerationProvider | None = None,
) -> dict[str, Scorer]:
    """Build every scorer enabled in a suite configuration.

    Missing collaborators are not an error here; the affected scorers
    report ``DependencyUnavailableError`` when they are used.

    Args:
        config: Suite configuration.
        llm: Judge LLM.
        embedder: Embedding service.
        moderation: Moderation provider.

    Returns:
        Scorers keyed by their configuration section name, in section order.

    """
    judge = LLMJudge(llm=llm, moderation=moderation)
    builders = {
        "exact_match": lambda opts: Heuristic().exact_match(opts),
        "embedding_similarity": lambda opts: Embedding(embedder).similarity(opts),
        "factuality": judge.factuality,
        "tonality": judge.tonality,
        "tone_rubric": judge.tone_rubric,
        "moderation": judge.moderation,
    }

    scorers: dict[str, Scorer] = {}
    for section in config.enabled_scorers():
        scorers[section] = builders[section](getattr(config, section))

    logger.info(f"Built {len(scorers)} scorers: {', '.join(scorers) or 'none'}")
    return scorers
