# text_analysis/core/config.py
from pathlib import Path
import os

from dotenv import load_dotenv

# project root (the directory holding pyproject.toml)
BASE_DIR = Path(__file__).resolve().parents[2]
PACKAGE_DIR = Path(__file__).resolve().parents[1]

# frontend templates / static files (shipped inside the package)
TEMPLATES_DIR = PACKAGE_DIR / "frontend" / "templates"
STATIC_DIR = PACKAGE_DIR / "frontend" / "static"

# .env
ENV_PATH = BASE_DIR / ".env"
if ENV_PATH.exists():
    load_dotenv(ENV_PATH)


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None:
        return default
    try:
        return int(v)
    except ValueError:
        return default


# log level (.env LOG_LEVEL, default INFO)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# CORS
# - CORS_ORIGINS="http://localhost:3000,http://127.0.0.1:8000" in .env
# - unset: allow all (["*"])
_cors_raw = os.getenv("CORS_ORIGINS", "")
if _cors_raw:
    CORS_ORIGINS = [o.strip() for o in _cors_raw.split(",") if o.strip()]
else:
    CORS_ORIGINS = ["*"]

# lexicon / stop-word data table
DEFAULT_LEXICON_PATH = PACKAGE_DIR / "data" / "lexicon.yaml"
LEXICON_PATH = Path(os.getenv("TEXT_ANALYSIS_LEXICON", str(DEFAULT_LEXICON_PATH)))

# web input rules
MIN_TEXT_LENGTH = _env_int("MIN_TEXT_LENGTH", 10)
MAX_UPLOAD_BYTES = _env_int("MAX_UPLOAD_BYTES", 1024 * 1024)

# in-memory display trend
TREND_HISTORY_SIZE = _env_int("TREND_HISTORY_SIZE", 4)

# export
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(BASE_DIR / "output")))
EXPORT_FILENAME = "text_analysis_export.json"
