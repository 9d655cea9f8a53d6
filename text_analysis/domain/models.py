"""Immutable result records produced by the analysis engine.

Attribute names are snake_case; ``to_dict`` produces the camelCase shape
used by the JSON API and the export document.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple


class Classification(str, Enum):
    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


class ReadingLevel(str, Enum):
    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


@dataclass(frozen=True)
class EmotionBreakdown:
    """Independent per-category ratios over the token count (not normalised)."""

    joy: float = 0.0
    sadness: float = 0.0
    neutral: float = 0.0


@dataclass(frozen=True)
class WordAnalysis:
    positive_words: int = 0
    negative_words: int = 0
    neutral_words: int = 0


@dataclass(frozen=True)
class SentimentResult:
    score: float
    classification: Classification
    word_count: int
    emotions: EmotionBreakdown
    word_analysis: WordAnalysis

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "classification": self.classification.value,
            "wordCount": self.word_count,
            "emotions": {
                "joy": self.emotions.joy,
                "sadness": self.emotions.sadness,
                "neutral": self.emotions.neutral,
            },
            "wordAnalysis": {
                "positiveWords": self.word_analysis.positive_words,
                "negativeWords": self.word_analysis.negative_words,
                "neutralWords": self.word_analysis.neutral_words,
            },
        }


@dataclass(frozen=True)
class LinguisticFeatures:
    average_word_length: float
    reading_level: ReadingLevel
    word_diversity: float
    punctuation_density: float
    unique_word_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "averageWordLength": self.average_word_length,
            "readingLevel": self.reading_level.value,
            "wordDiversity": self.word_diversity,
            "punctuationDensity": self.punctuation_density,
            "uniqueWordCount": self.unique_word_count,
        }


@dataclass(frozen=True)
class FrequencyEntry:
    word: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "count": self.count}


@dataclass(frozen=True)
class AnalysisResult:
    """Sentiment + linguistic features + frequency table for one text."""

    sentiment: SentimentResult
    linguistic_features: LinguisticFeatures
    word_frequency: Tuple[FrequencyEntry, ...]

    def to_dict(self) -> Dict[str, Any]:
        word_frequency: List[Dict[str, Any]] = [
            entry.to_dict() for entry in self.word_frequency
        ]
        return {
            "sentiment": self.sentiment.to_dict(),
            "linguisticFeatures": self.linguistic_features.to_dict(),
            "wordFrequency": word_frequency,
        }
