from __future__ import annotations

from collections import Counter
from typing import AbstractSet, Sequence, Tuple

from text_analysis.domain.models import FrequencyEntry

DEFAULT_MIN_LENGTH = 3
DEFAULT_TOP_N = 10


def rank_frequencies(
    tokens: Sequence[str],
    stop_words: AbstractSet[str],
    min_length: int = DEFAULT_MIN_LENGTH,
    top_n: int = DEFAULT_TOP_N,
) -> Tuple[FrequencyEntry, ...]:
    """Top-N most frequent tokens after dropping stop words and short tokens.

    Counts descending; equal counts keep the order in which each word first
    appeared (Counter keeps insertion order and sorted() is stable).
    """
    counts: Counter = Counter(
        token
        for token in tokens
        if len(token) >= min_length and token not in stop_words
    )
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return tuple(FrequencyEntry(word=word, count=count) for word, count in ranked[:top_n])
