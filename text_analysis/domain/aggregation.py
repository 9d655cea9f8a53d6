from __future__ import annotations
from typing import Any, Dict, List

from text_analysis.domain.models import AnalysisResult

# display scaling of the linguistic radar chart
_RADAR_SCALES = {
    "Word Diversity": 100,
    "Avg Word Length": 10,
    "Punctuation Density": 500,
}
_UNIQUE_WORDS_DIVISOR = 5


def build_sentiment_distribution(result: AnalysisResult) -> Dict[str, float]:
    """Positive / negative / neutral shares of the tokens, in percent.

    Neutral here is every token without polarity (100 - positive - negative),
    which differs from the lexicon's neutral emotion ratio.
    """
    if result.sentiment.word_count == 0:
        return {"positive": 0.0, "negative": 0.0, "neutral": 0.0}

    emotions = result.sentiment.emotions
    positive = emotions.joy * 100
    negative = emotions.sadness * 100
    return {
        "positive": positive,
        "negative": negative,
        "neutral": 100 - positive - negative,
    }


def build_linguistic_radar(result: AnalysisResult) -> List[Dict[str, Any]]:
    """Radar-chart points: one {subject, value} per linguistic feature."""
    features = result.linguistic_features
    return [
        {
            "subject": "Word Diversity",
            "value": features.word_diversity * _RADAR_SCALES["Word Diversity"],
        },
        {
            "subject": "Avg Word Length",
            "value": features.average_word_length * _RADAR_SCALES["Avg Word Length"],
        },
        {
            "subject": "Punctuation Density",
            "value": features.punctuation_density * _RADAR_SCALES["Punctuation Density"],
        },
        {
            "subject": "Unique Words",
            "value": features.unique_word_count / _UNIQUE_WORDS_DIVISOR,
        },
    ]


def build_summary(result: AnalysisResult) -> List[str]:
    """Short human-readable lines for the summary box."""
    distribution = build_sentiment_distribution(result)
    features = result.linguistic_features
    return [
        f"Classification: {result.sentiment.classification.value}",
        f"Positive Sentiment: {distribution['positive']:.2f}%",
        f"Negative Sentiment: {distribution['negative']:.2f}%",
        f"Unique Words: {features.unique_word_count}",
        f"Average Word Length: {features.average_word_length:.2f}",
        f"Reading Level: {features.reading_level.value}",
    ]


def build_charts(result: AnalysisResult) -> Dict[str, Any]:
    return {
        "sentiment_distribution": build_sentiment_distribution(result),
        "word_frequency": [entry.to_dict() for entry in result.word_frequency],
        "linguistic_radar": build_linguistic_radar(result),
    }
