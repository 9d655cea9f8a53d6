# text_analysis/exceptions.py
"""
Exceptions raised by the text analysis service.

TextAnalysisError is the common base; each subclass also derives from the
builtin it specialises, so callers catching OSError or ValueError still see it.

- LexiconLoadError : lexicon / stop-word YAML could not be loaded
- TextInputError   : submitted text or uploaded file rejected
- AnalysisError    : no result could be produced or exported
"""


class TextAnalysisError(Exception):
    """Base class of every error this package raises on purpose."""


class LexiconLoadError(TextAnalysisError, IOError):
    """Lexicon or stop-word data file could not be loaded."""


class TextInputError(TextAnalysisError, ValueError):
    """Text or uploaded file failed validation."""


class AnalysisError(TextAnalysisError, RuntimeError):
    """Analysis could not be produced or exported."""
