from __future__ import annotations
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional
import json
import logging
import math
import random

from utils.file_handler import BEST_RESULT_PATH, CORPUS_PATH

log = logging.getLogger(__name__)

SETTINGS_FILE = Path("settings.json")


@dataclass
class Settings:
    corpus_path: str = CORPUS_PATH
    best_result_path: str = BEST_RESULT_PATH
    sample_size: int = 200
    words_per_line: int = 5
    visible_lines: int = 3
    session_seconds: float = 60.0
    seed: Optional[int] = None
    log_file: str = "app.log"

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


_POSITIVE = ("sample_size", "words_per_line", "visible_lines", "session_seconds")
_PATHS = ("corpus_path", "best_result_path", "log_file")


def _valid(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if name in _PATHS:
        return isinstance(value, str) and bool(value)
    if name == "seed":
        return value is None or isinstance(value, int)
    if name == "session_seconds":
        return isinstance(value, (int, float)) and math.isfinite(value) and value > 0
    if name in _POSITIVE:
        return isinstance(value, int) and value > 0
    return False


def _settings_from_dict(d: Dict[str, Any]) -> Settings:
    known = {f.name for f in fields(Settings)}
    unknown = set(d.keys()) - known
    if unknown:
        log.warning("Ignoring unknown settings: %s", ", ".join(sorted(unknown)))
    values = {}
    for k, v in d.items():
        if k not in known:
            continue
        if not _valid(k, v):
            log.warning("Invalid value for setting %s: %r, using default", k, v)
            continue
        values[k] = float(v) if k == "session_seconds" else v
    return Settings(**values)


def load_settings(path: Path | str = SETTINGS_FILE) -> Settings:
    """Load settings.json (if present). A broken file never stops the app."""
    path = Path(path)
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("settings must be a JSON object")
        return _settings_from_dict(data)
    except (OSError, ValueError, TypeError) as e:
        log.warning("Failed to load settings from %s: %s", path, e)
        return Settings()
