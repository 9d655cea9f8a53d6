# text_analysis/app/routes_export.py
from __future__ import annotations
import logging
from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response

from text_analysis.core.config import EXPORT_FILENAME
from text_analysis.exceptions import AnalysisError
from text_analysis.services.analysis_service import get_last_export

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/export")
async def export_last_analysis():
    """
    Download the most recent analysis as text_analysis_export.json.

    Nothing analyzed yet -> error envelope (404).
    """
    try:
        document = get_last_export()
    except AnalysisError as e:
        logger.warning("Export requested with nothing to export: %s", e)
        return JSONResponse(
            status_code=404,
            content={"status": "error", "error_type": "analysis_error", "message": str(e)},
        )

    return Response(
        content=document,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )
