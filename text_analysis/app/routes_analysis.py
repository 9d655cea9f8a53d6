# text_analysis/app/routes_analysis.py
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Literal, Optional, Union
from fastapi import APIRouter, File, UploadFile
from pydantic import BaseModel, Field
from text_analysis.core.config import MAX_UPLOAD_BYTES
from text_analysis.services.analysis_service import (
    analyze_text,
    analyze_uploaded_file,
    random_simulation,
)
from text_analysis.exceptions import AnalysisError, TextInputError

logger = logging.getLogger(__name__)
router = APIRouter()

# ---------------------------
# Request schema
# ---------------------------

class AnalyzeRequest(BaseModel):
    text: str = Field(..., description="Text to analyze")

# ---------------------------
# Response schemas
# ---------------------------

class TrendPointModel(BaseModel):
    date: str
    score: float


class AnalyzeSuccessResponse(BaseModel):
    status: Literal["ok"] = "ok"
    analyzed_at: str
    result: Dict[str, Any]
    charts: Dict[str, Any]
    summary: List[str]
    trend: List[TrendPointModel]
    text: Optional[str] = None


class AnalyzeErrorResponse(BaseModel):
    status: Literal["error"] = "error"
    error_type: str
    message: str


AnalyzeResponse = Union[AnalyzeSuccessResponse, AnalyzeErrorResponse]


def _run(action: Callable[[], Dict[str, Any]]) -> AnalyzeResponse:
    try:
        return AnalyzeSuccessResponse(**action())

    except TextInputError as e:
        logger.warning("Text input error: %s", e)
        return AnalyzeErrorResponse(
            error_type="text_input_error",
            message=str(e),
        )

    except AnalysisError as e:
        logger.error("Analysis error: %s", e)
        return AnalyzeErrorResponse(
            error_type="analysis_error",
            message=str(e),
        )

    except Exception:
        logger.exception("Unexpected internal error")
        return AnalyzeErrorResponse(
            error_type="internal_error",
            message="An internal error occurred during text analysis. Please try again.",
        )

# ---------------------------
# Routes
# ---------------------------

@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_text_route(req: AnalyzeRequest):
    """
    Single-text analysis API.

    - input: text
    - output: sentiment, linguistic features, word frequency + chart data + trend
    """
    return _run(lambda: analyze_text(req.text))


@router.post("/analyze/file", response_model=AnalyzeResponse)
async def analyze_file_route(file: UploadFile = File(...)):
    """Analyze the contents of an uploaded text file."""
    # at most one byte past the cap
    raw = await file.read(MAX_UPLOAD_BYTES + 1)
    filename = file.filename or "upload.txt"
    return _run(lambda: analyze_uploaded_file(filename, raw))


@router.get("/simulate", response_model=AnalyzeResponse)
async def simulate_route():
    """Analyze a random example text (the UI's 'Random Simulation' button)."""
    return _run(random_simulation)
