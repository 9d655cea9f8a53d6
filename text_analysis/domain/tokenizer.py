"""Text normalisation into tokens and whitespace words.

- tokenize: lowercased runs of [A-Za-z0-9_], left-to-right
- split_words: punctuation stripped first, then whitespace split
  (used only for average word length)
"""

from __future__ import annotations

import re
from typing import List

_TOKEN_RE = re.compile(r"[A-Za-z0-9_]+")
_NON_WORD_RE = re.compile(r"[^A-Za-z0-9_\s]")
# whitespace and BOM at either end
_EDGE_BLANK_RE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim(text: str) -> str:
    """Strip leading and trailing whitespace, U+FEFF included."""
    if not text:
        return ""
    return _EDGE_BLANK_RE.sub("", text)


def tokenize(text: str) -> List[str]:
    """Return the lowercased word tokens of ``text`` in order."""
    if not text:
        return []
    return _TOKEN_RE.findall(text.lower())


def split_words(text: str) -> List[str]:
    """Strip punctuation, then split on whitespace runs.

    Empty strings never appear in the output, so blank input yields [].
    """
    if not text:
        return []
    return _NON_WORD_RE.sub("", text).split()
