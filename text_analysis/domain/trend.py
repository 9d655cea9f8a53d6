"""Display trend built from a supplied history of sentiment scores.

The trend is a pure function of its input: the same history always gives
the same points. Keeping the history is the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple


@dataclass(frozen=True)
class TrendPoint:
    """
    - label: display label of the point (e.g. ISO timestamp)
    - score: sentiment on a 0-100 display scale (50 is neutral)
    """

    label: str
    score: float

    def to_dict(self) -> dict:
        return {"date": self.label, "score": self.score}


def to_display_score(score: float) -> float:
    """Map a [-1, 1] sentiment score onto 0-100, clamped."""
    return min(100.0, max(0.0, 50.0 + score * 50.0))


def build_trend(history: Iterable[Tuple[str, float]], limit: int = 4) -> List[TrendPoint]:
    """Last ``limit`` (label, score) entries of ``history`` as trend points, oldest first."""
    if limit <= 0:
        return []
    entries = list(history)[-limit:]
    return [TrendPoint(label=label, score=to_display_score(score)) for label, score in entries]
