from __future__ import annotations

import logging
from functools import lru_cache
from typing import AbstractSet, Optional

from text_analysis.domain.frequency import (
    DEFAULT_MIN_LENGTH,
    DEFAULT_TOP_N,
    rank_frequencies,
)
from text_analysis.domain.lexicon import Lexicon
from text_analysis.domain.linguistic import analyze_linguistics
from text_analysis.domain.models import AnalysisResult
from text_analysis.domain.sentiment import score_sentiment
from text_analysis.domain.tokenizer import split_words, tokenize, trim
from text_analysis.infra.lexicon_repo import (
    load_default_lexicon,
    load_default_stop_words,
)

logger = logging.getLogger(__name__)


class TextAnalyzer:
    def __init__(
        self,
        lexicon: Optional[Lexicon] = None,
        stop_words: Optional[AbstractSet[str]] = None,
        *,
        min_length: int = DEFAULT_MIN_LENGTH,
        top_n: int = DEFAULT_TOP_N,
    ):
        """
        Text analyzer over a fixed lexicon and stop-word set.

        Args:
            lexicon: sentiment marker words; the bundled lexicon when None
            stop_words: words excluded from frequency ranking; bundled when None
            min_length: shortest token kept for frequency ranking
            top_n: size of the frequency table
        """
        if lexicon is None:
            lexicon = load_default_lexicon()
        if stop_words is None:
            stop_words = load_default_stop_words()

        self.lexicon = lexicon
        self.stop_words = frozenset(stop_words)
        self.min_length = min_length
        self.top_n = top_n

    def analyze(self, text: str) -> Optional[AnalysisResult]:
        """
        Analyze one text.

        Returns None when the text is empty or blank (whitespace or BOM); otherwise a
        fully populated AnalysisResult. Deterministic and free of shared
        state, so concurrent callers need no coordination.
        """
        if not trim(text):
            return None

        tokens = tokenize(text)
        words = split_words(text)

        sentiment = score_sentiment(tokens, self.lexicon)
        linguistic_features = analyze_linguistics(text, tokens, words)
        word_frequency = rank_frequencies(
            tokens,
            self.stop_words,
            min_length=self.min_length,
            top_n=self.top_n,
        )

        logger.debug(
            "analyzed text: tokens=%d score=%.4f classification=%s",
            len(tokens),
            sentiment.score,
            sentiment.classification.value,
        )

        return AnalysisResult(
            sentiment=sentiment,
            linguistic_features=linguistic_features,
            word_frequency=word_frequency,
        )


@lru_cache(maxsize=1)
def get_default_analyzer() -> TextAnalyzer:
    """Process-wide analyzer over the bundled lexicon (read-only, shareable)."""
    return TextAnalyzer()


def analyze(text: str, analyzer: Optional[TextAnalyzer] = None) -> Optional[AnalysisResult]:
    return (analyzer or get_default_analyzer()).analyze(text)
