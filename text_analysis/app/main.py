#text_analysis/app/main.py
from __future__ import annotations
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from text_analysis.core.config import CORS_ORIGINS, STATIC_DIR, LOG_LEVEL
from text_analysis.app.routes_analysis import router as analysis_router
from text_analysis.app.routes_export import router as export_router
from text_analysis.app.routes_pages import router as pages_router
from text_analysis.app.routes_health import router as health_router
from text_analysis.services.analysis_service import lexicon_stats

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request."


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies get the same error envelope as analysis failures."""
    logger.warning("Request validation failed on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=422,
        content={
            "status": "error",
            "error_type": "validation_error",
            "message": _validation_message(exc),
        },
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Text Analyzer",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(pages_router)
    app.include_router(analysis_router)
    app.include_router(export_router)
    app.include_router(health_router)

    app.mount(
        "/static",
        StaticFiles(directory=str(STATIC_DIR)),
        name="static",
    )

    stats = lexicon_stats()
    logger.info(
        "Text analysis app initialized. (log_level=%s, lexicon=%s, stop_words=%d)",
        LOG_LEVEL,
        stats["lexicon"],
        stats["stop_words"],
    )
    return app

app = create_app()
