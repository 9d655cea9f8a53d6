from __future__ import annotations

from collections import Counter
from typing import Sequence

from text_analysis.domain.lexicon import Lexicon, LexiconCategory
from text_analysis.domain.models import (
    Classification,
    EmotionBreakdown,
    SentimentResult,
    WordAnalysis,
)

# Fixed classification thresholds; a score exactly on a threshold is Neutral.
POSITIVE_THRESHOLD = 0.1
NEGATIVE_THRESHOLD = -0.1


def classify_score(score: float) -> Classification:
    if score > POSITIVE_THRESHOLD:
        return Classification.POSITIVE
    if score < NEGATIVE_THRESHOLD:
        return Classification.NEGATIVE
    return Classification.NEUTRAL


def score_sentiment(tokens: Sequence[str], lexicon: Lexicon) -> SentimentResult:
    """
    Lexicon-based sentiment of a token sequence.

    score = (positive - negative) / word_count, where repeats count.
    Emotion ratios are independent per category; tokens not in the lexicon
    contribute to none of them.

    Empty input returns a zero score, Neutral, and all-zero ratios.
    """
    word_count = len(tokens)
    if word_count == 0:
        return SentimentResult(
            score=0.0,
            classification=Classification.NEUTRAL,
            word_count=0,
            emotions=EmotionBreakdown(),
            word_analysis=WordAnalysis(),
        )

    # single pass over the tokens
    counts: Counter = Counter()
    for token in tokens:
        category = lexicon.classify(token)
        if category is not None:
            counts[category] += 1

    positive = counts[LexiconCategory.POSITIVE]
    negative = counts[LexiconCategory.NEGATIVE]
    neutral = counts[LexiconCategory.NEUTRAL]

    score = (positive - negative) / word_count

    return SentimentResult(
        score=score,
        classification=classify_score(score),
        word_count=word_count,
        emotions=EmotionBreakdown(
            joy=positive / word_count,
            sadness=negative / word_count,
            neutral=neutral / word_count,
        ),
        word_analysis=WordAnalysis(
            positive_words=positive,
            negative_words=negative,
            neutral_words=neutral,
        ),
    )
