# text_analysis/infra/export_repo.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from text_analysis.domain.models import AnalysisResult
from text_analysis.exceptions import AnalysisError
from text_analysis.infra.paths import export_path


def to_export_json(result: AnalysisResult) -> str:
    """
    Serialize an analysis result to the export JSON document.

    allow_nan=False: a non-finite metric is a bug, never a valid export.
    """
    try:
        return json.dumps(result.to_dict(), ensure_ascii=False, indent=2, allow_nan=False)
    except ValueError as e:
        raise AnalysisError(f"Analysis result could not be exported: {e}") from e


def save_export(result: AnalysisResult, output_dir: Optional[Path] = None) -> Path:
    """
    Write the export document to <output_dir>/text_analysis_export.json.

    e.g. output/text_analysis_export.json
    """
    path = export_path(output_dir)
    path.write_text(to_export_json(result), encoding="utf-8")
    return path
