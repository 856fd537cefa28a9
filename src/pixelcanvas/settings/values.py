"""Package defaults loaded from YAML.

The master source is ``values.yml`` in this package. On import we attempt
to load and parse it; a missing or corrupt file falls back to the literals
below so the application can still run.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

__all__ = ["CANVAS_DEFAULTS", "EXPORT_DEFAULTS", "LOGGING_DEFAULTS", "LOG_LEVELS"]

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

# --- Fallback literals -------------------------------------------------------
_FALLBACK_CANVAS = {"width": 40, "height": 30}
_FALLBACK_EXPORT = {"output_dir": "."}
_FALLBACK_LOGGING = {"level": "WARNING"}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.warning("could not load %s: %s", path, e)
        return {}
    return data if isinstance(data, dict) else {}


def _section(data: Dict[str, Any], key: str, fallback: Dict[str, Any]) -> Dict[str, Any]:
    raw = data.get(key)
    merged = dict(fallback)
    if isinstance(raw, dict):
        merged.update({k: v for k, v in raw.items() if k in fallback})
    return merged


def _positive_int(v: Any, default: int) -> int:
    try:
        n = int(v)
    except (TypeError, ValueError):
        return default
    return n if n > 0 else default


_DATA = _load_yaml(_YAML_PATH)

CANVAS_DEFAULTS: Dict[str, int] = {
    k: _positive_int(v, _FALLBACK_CANVAS[k])
    for k, v in _section(_DATA, "canvas", _FALLBACK_CANVAS).items()
}
EXPORT_DEFAULTS: Dict[str, str] = {
    k: str(v) for k, v in _section(_DATA, "export", _FALLBACK_EXPORT).items()
}
LOGGING_DEFAULTS: Dict[str, str] = _section(_DATA, "logging", _FALLBACK_LOGGING)
if str(LOGGING_DEFAULTS.get("level", "")).upper() not in LOG_LEVELS:
    LOGGING_DEFAULTS["level"] = _FALLBACK_LOGGING["level"]
else:
    LOGGING_DEFAULTS["level"] = str(LOGGING_DEFAULTS["level"]).upper()
