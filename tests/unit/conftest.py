"""Shared fixtures for llmscore unit tests.

Python justification: Required for pytest testing framework.
"""

from unittest.mock import MagicMock

import pytest

from llmscore.core.interfaces import ModerationCategory, ModerationResult


@pytest.fixture
def mock_llm() -> MagicMock:
    """Judge LLM whose responses are set per test."""
    llm = MagicMock()
    llm.structured_generate.return_value = {}
    llm.generate.return_value = ""
    return llm


@pytest.fixture
def mock_embedder() -> MagicMock:
    """Embedder returning a fixed unit vector."""
    embedder = MagicMock()
    embedder.embed.return_value = [1.0, 0.0, 0.0]
    return embedder


@pytest.fixture
def mock_moderation() -> MagicMock:
    """Moderation provider reporting two low-confidence categories."""
    provider = MagicMock()
    provider.moderate.return_value = ModerationResult(
        categories=[
            ModerationCategory(name="Toxic", confidence=0.1),
            ModerationCategory(name="Violent", confidence=0.2),
        ]
    )
    return provider


@pytest.fixture
def all_a_response() -> dict:
    """Structured tonality response with every dimension graded A."""
    return {
        "professionalism": "A",
        "kindness": "A",
        "clarity": "A",
        "helpfulness": "A",
    }
