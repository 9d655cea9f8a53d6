from __future__ import annotations

import re
from typing import Sequence

from text_analysis.domain.models import LinguisticFeatures, ReadingLevel

_PUNCTUATION_RE = re.compile(r"[.,!?]")

ADVANCED_WORD_LENGTH = 5
INTERMEDIATE_WORD_LENGTH = 4


def reading_level_for(average_word_length: float) -> ReadingLevel:
    """Three-tier reading level; comparisons are strict (5.0 is Intermediate)."""
    if average_word_length > ADVANCED_WORD_LENGTH:
        return ReadingLevel.ADVANCED
    if average_word_length > INTERMEDIATE_WORD_LENGTH:
        return ReadingLevel.INTERMEDIATE
    return ReadingLevel.BASIC


def analyze_linguistics(
    text: str,
    tokens: Sequence[str],
    words: Sequence[str],
) -> LinguisticFeatures:
    """Complexity metrics of one text.

    Args:
        text: original text (punctuation density is measured on it)
        tokens: output of tokenize(text)
        words: output of split_words(text)
    """
    if words:
        average_word_length = sum(len(w) for w in words) / len(words)
    else:
        average_word_length = 0.0

    unique_word_count = len(set(tokens))
    word_diversity = len(tokens) / max(1, unique_word_count)
    punctuation_density = len(_PUNCTUATION_RE.findall(text)) / max(1, len(text))

    return LinguisticFeatures(
        average_word_length=average_word_length,
        reading_level=reading_level_for(average_word_length),
        word_diversity=word_diversity,
        punctuation_density=punctuation_density,
        unique_word_count=unique_word_count,
    )
