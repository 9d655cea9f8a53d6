from __future__ import annotations

import logging
import random
import threading
from collections import deque
from datetime import datetime
from typing import Any, Deque, Dict, Optional, Tuple

from text_analysis.core.config import (
    LEXICON_PATH,
    MAX_UPLOAD_BYTES,
    MIN_TEXT_LENGTH,
    TREND_HISTORY_SIZE,
)
from text_analysis.domain.analyzer import TextAnalyzer
from text_analysis.domain.models import AnalysisResult
from text_analysis.domain.trend import build_trend
from text_analysis.exceptions import AnalysisError, TextInputError
from text_analysis.infra.export_repo import to_export_json
from text_analysis.infra.lexicon_repo import load_lexicon, load_stop_words
from text_analysis.usecases.analyze_text import run_text_analysis_usecase

logger = logging.getLogger(__name__)

# example texts for the "random simulation" button
SIMULATION_EXAMPLES = (
    "This is a great day! Everything is wonderful and amazing.",
    "The project was challenging but ultimately very successful and rewarding.",
    "Sometimes things are not as bad as they seem. There's always hope and opportunity.",
    "Technology continues to advance at an incredible pace, bringing both excitement and challenges.",
)

# module-wide analyzer (lexicon loaded once, not per request)
_analyzer = TextAnalyzer(
    lexicon=load_lexicon(LEXICON_PATH),
    stop_words=load_stop_words(LEXICON_PATH),
)

# =========================
# in-memory display state (last result + trend history), guarded by one lock
# =========================
_state_lock = threading.Lock()
_last_result: Optional[AnalysisResult] = None
_history: Deque[Tuple[str, float]] = deque(maxlen=max(1, TREND_HISTORY_SIZE))


def _record(result: AnalysisResult, analyzed_at: str) -> list:
    global _last_result
    with _state_lock:
        _last_result = result
        _history.append((analyzed_at, result.sentiment.score))
        snapshot = list(_history)
    return [p.to_dict() for p in build_trend(snapshot, limit=TREND_HISTORY_SIZE)]


def analyze_text(text: Optional[str]) -> Dict[str, Any]:
    """
    Single-text analysis service entrypoint.
    - input validation + engine + chart views (usecase)
    - last result kept for export
    - trend history updated
    """
    out = run_text_analysis_usecase(text, analyzer=_analyzer, min_length=MIN_TEXT_LENGTH)
    result: AnalysisResult = out.pop("analysis")

    analyzed_at = datetime.now().isoformat(timespec="seconds")
    out["trend"] = _record(result, analyzed_at)
    out["analyzed_at"] = analyzed_at
    return out


def decode_upload(filename: str, raw: bytes) -> str:
    """Decode an uploaded text file (UTF-8, BOM tolerated)."""
    if len(raw) > MAX_UPLOAD_BYTES:
        raise TextInputError(
            f"File '{filename}' is larger than the {MAX_UPLOAD_BYTES}-byte limit."
        )
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise TextInputError(f"File '{filename}' is not a UTF-8 text file.") from e


def analyze_uploaded_file(filename: str, raw: bytes) -> Dict[str, Any]:
    text = decode_upload(filename, raw)
    logger.info("Uploaded file decoded: %s (%d chars)", filename, len(text))
    out = analyze_text(text)
    out["text"] = text
    return out


def random_simulation() -> Dict[str, Any]:
    """Analyze one of the example texts, picked at random."""
    text = random.choice(SIMULATION_EXAMPLES)
    out = analyze_text(text)
    out["text"] = text
    return out


def get_last_export() -> str:
    """Export JSON of the most recent analysis."""
    with _state_lock:
        result = _last_result
    if result is None:
        raise AnalysisError("No analysis to export yet. Analyze a text first.")
    return to_export_json(result)


def lexicon_stats() -> Dict[str, Any]:
    """Sizes of the lexicon and stop-word set the service analyzes with."""
    lexicon = _analyzer.lexicon
    return {
        "lexicon": {
            "positive": len(lexicon.positive),
            "negative": len(lexicon.negative),
            "neutral": len(lexicon.neutral),
        },
        "stop_words": len(_analyzer.stop_words),
        "source": str(LEXICON_PATH),
    }


def reset_state() -> None:
    """Forget the last result and the trend history."""
    global _last_result
    with _state_lock:
        _last_result = None
        _history.clear()
