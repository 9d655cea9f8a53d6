"""Shared fixtures for the text analysis tests."""

import pytest

from text_analysis.domain.analyzer import TextAnalyzer
from text_analysis.domain.lexicon import Lexicon
from text_analysis.infra.lexicon_repo import load_default_lexicon, load_default_stop_words


@pytest.fixture
def lexicon() -> Lexicon:
    """The bundled lexicon."""
    return load_default_lexicon()


@pytest.fixture
def stop_words():
    return load_default_stop_words()


@pytest.fixture
def small_lexicon() -> Lexicon:
    return Lexicon.from_mapping(
        {
            "positive": ["good", "great"],
            "negative": ["bad", "awful"],
            "neutral": ["okay"],
        }
    )


@pytest.fixture
def analyzer(lexicon, stop_words) -> TextAnalyzer:
    return TextAnalyzer(lexicon=lexicon, stop_words=stop_words)


@pytest.fixture
def client():
    """FastAPI test client with fresh in-memory display state."""
    from fastapi.testclient import TestClient

    from text_analysis.app.main import app
    from text_analysis.services import analysis_service

    analysis_service.reset_state()
    with TestClient(app) as c:
        yield c
    analysis_service.reset_state()
