from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Mapping, Optional


class LexiconCategory(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


def _normalize(words: Optional[Iterable[str]]) -> FrozenSet[str]:
    if not words:
        return frozenset()
    return frozenset(w.strip().lower() for w in words if w and w.strip())


@dataclass(frozen=True)
class Lexicon:
    """Fixed positive / negative / neutral marker word sets.

    The three sets are expected to be disjoint. The word -> category lookup
    is built once; if a word does appear in more than one set, the first
    category in (positive, negative, neutral) order wins.
    """

    positive: FrozenSet[str]
    negative: FrozenSet[str]
    neutral: FrozenSet[str]
    _lookup: Dict[str, LexiconCategory] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        lookup: Dict[str, LexiconCategory] = {}
        for category, words in (
            (LexiconCategory.POSITIVE, self.positive),
            (LexiconCategory.NEGATIVE, self.negative),
            (LexiconCategory.NEUTRAL, self.neutral),
        ):
            for word in sorted(words):
                lookup.setdefault(word, category)
        object.__setattr__(self, "_lookup", lookup)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Iterable[str]]) -> "Lexicon":
        return cls(
            positive=_normalize(data.get("positive")),
            negative=_normalize(data.get("negative")),
            neutral=_normalize(data.get("neutral")),
        )

    def classify(self, word: str) -> Optional[LexiconCategory]:
        """Category of ``word`` or None when it carries no marker."""
        return self._lookup.get(word)

    def overlaps(self) -> FrozenSet[str]:
        """Words listed in more than one category."""
        return (
            (self.positive & self.negative)
            | (self.positive & self.neutral)
            | (self.negative & self.neutral)
        )
