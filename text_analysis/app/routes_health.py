# text_analysis/app/routes_health.py

from __future__ import annotations
from fastapi import APIRouter

from text_analysis.services.analysis_service import lexicon_stats

router = APIRouter()

@router.get("/health")
async def health():
    """
    Health check with the loaded word-list sizes.

    The lexicon is loaded when the service module is imported, so an
    empty category here points at a bad TEXT_ANALYSIS_LEXICON file.
    """
    return {
        "status": "ok",
        "service": "text-analysis",
        **lexicon_stats(),
    }
