from __future__ import annotations
import logging
from typing import Any, Dict, Optional

from text_analysis.domain.aggregation import build_charts, build_summary
from text_analysis.domain.analyzer import TextAnalyzer, get_default_analyzer
from text_analysis.domain.tokenizer import trim
from text_analysis.exceptions import AnalysisError, TextInputError

logger = logging.getLogger(__name__)


def _validate_input(text: Optional[str], min_length: int) -> str:
    trimmed = trim(text) if text is not None else ""
    if not trimmed:
        raise TextInputError("Please enter text to analyze.")
    if len(trimmed) < min_length:
        raise TextInputError(
            f"Please enter more text for analysis (at least {min_length} characters)."
        )
    return text


def run_text_analysis_usecase(
    text: Optional[str],
    analyzer: Optional[TextAnalyzer] = None,
    min_length: int = 0,
) -> Dict[str, Any]:
    """Full analysis of one text for the presentation layer."""
    # 1) input validation
    text = _validate_input(text, min_length)

    # 2) engine
    analyzer = analyzer or get_default_analyzer()
    result = analyzer.analyze(text)
    if result is None:
        raise AnalysisError("The analyzer returned no result for non-empty text.")

    logger.info(
        "Text analyzed: length=%d words=%d classification=%s",
        len(text),
        result.sentiment.word_count,
        result.sentiment.classification.value,
    )

    # 3) chart / summary views
    return {
        "analysis": result,
        "result": result.to_dict(),
        "charts": build_charts(result),
        "summary": build_summary(result),
    }
