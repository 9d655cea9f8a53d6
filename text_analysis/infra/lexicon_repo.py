# text_analysis/infra/lexicon_repo.py
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import FrozenSet

from text_analysis.domain.lexicon import Lexicon
from text_analysis.exceptions import LexiconLoadError
from text_analysis.infra.paths import LEXICON_PATH
from text_analysis.infra.yaml_io import load_yaml_mapping

logger = logging.getLogger(__name__)


@lru_cache
def load_lexicon(path: Path = LEXICON_PATH) -> Lexicon:
    """
    Load the sentiment lexicon from YAML.

    Expected layout:
        sentiment_lexicon:
          positive: [...]
          negative: [...]
          neutral: [...]
    """
    data = load_yaml_mapping(path)
    section = data.get("sentiment_lexicon")
    if not isinstance(section, dict):
        raise LexiconLoadError(f"'sentiment_lexicon' section missing in {path}.")

    for key in ("positive", "negative", "neutral"):
        words = section.get(key, [])
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise LexiconLoadError(f"'sentiment_lexicon.{key}' in {path} must be a list of words.")

    lexicon = Lexicon.from_mapping(section)

    overlaps = lexicon.overlaps()
    if overlaps:
        logger.warning(
            "Lexicon %s lists words under more than one category: %s",
            path,
            ", ".join(sorted(overlaps)),
        )

    logger.info(
        "Lexicon loaded: positive=%d negative=%d neutral=%d (%s)",
        len(lexicon.positive),
        len(lexicon.negative),
        len(lexicon.neutral),
        path,
    )
    return lexicon


@lru_cache
def load_stop_words(path: Path = LEXICON_PATH) -> FrozenSet[str]:
    """Load the stop-word list (top-level 'stop_words') from YAML."""
    data = load_yaml_mapping(path)
    words = data.get("stop_words", [])
    if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
        raise LexiconLoadError(f"'stop_words' in {path} must be a list of words.")
    return frozenset(w.strip().lower() for w in words if w.strip())


def load_default_lexicon() -> Lexicon:
    return load_lexicon(LEXICON_PATH)


def load_default_stop_words() -> FrozenSet[str]:
    return load_stop_words(LEXICON_PATH)
