# text_analysis/infra/paths.py
from pathlib import Path
from typing import Optional

from text_analysis.core.config import EXPORT_FILENAME, LEXICON_PATH, OUTPUT_DIR


def export_path(output_dir: Optional[Path] = None) -> Path:
    """Path of the export document; the directory is created on demand."""
    directory = output_dir or OUTPUT_DIR
    directory.mkdir(parents=True, exist_ok=True)
    return directory / EXPORT_FILENAME


__all__ = ["LEXICON_PATH", "OUTPUT_DIR", "export_path"]
