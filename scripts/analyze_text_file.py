# scripts/analyze_text_file.py
"""Analyze one text file and write text_analysis_export.json.

Usage:
    python -m scripts.analyze_text_file notes.txt --out output/
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from text_analysis.core.config import LEXICON_PATH, OUTPUT_DIR
from text_analysis.domain.aggregation import build_summary
from text_analysis.domain.analyzer import TextAnalyzer
from text_analysis.exceptions import TextAnalysisError
from text_analysis.infra.export_repo import save_export
from text_analysis.infra.lexicon_repo import load_lexicon, load_stop_words

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("path", help="UTF-8 text file to analyze")
    ap.add_argument("--out", default=str(OUTPUT_DIR), help="output directory for the export JSON")
    ap.add_argument("--lexicon", default=str(LEXICON_PATH), help="lexicon / stop-word YAML path")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s - %(message)s")

    try:
        text = Path(args.path).read_text(encoding="utf-8-sig")

        lexicon_path = Path(args.lexicon)
        analyzer = TextAnalyzer(
            lexicon=load_lexicon(lexicon_path),
            stop_words=load_stop_words(lexicon_path),
        )
    except (OSError, UnicodeDecodeError, TextAnalysisError) as e:
        logger.error("Cannot analyze %s: %s", args.path, e)
        return 2

    result = analyzer.analyze(text)
    if result is None:
        logger.warning("%s is empty; nothing to export.", args.path)
        return 1

    for line in build_summary(result):
        print(line)

    path = save_export(result, Path(args.out))
    print(f"saved: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
