# text_analysis/app/routes_pages.py
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from text_analysis.core.config import MIN_TEXT_LENGTH, TEMPLATES_DIR

router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

@router.get("/", response_class=HTMLResponse)
async def show_index(request: Request):
    """
    Input + result page.

    Analysis results are fetched by main.js from /analyze and rendered in
    the browser; the template only provides the layout.
    """
    return templates.TemplateResponse(
        request,
        "input.html",
        {"min_text_length": MIN_TEXT_LENGTH},
    )
