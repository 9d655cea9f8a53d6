# text_analysis/infra/yaml_io.py
from pathlib import Path
from typing import Any, Dict

import yaml

from text_analysis.exceptions import LexiconLoadError


def load_yaml_mapping(path: Path) -> Dict[str, Any]:
    """Load a YAML data table whose top level must be a mapping."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise LexiconLoadError(f"Failed to read data file {path}: {e}") from e

    if not isinstance(data, dict):
        raise LexiconLoadError(f"Data file {path} must contain a mapping.")
    return data
