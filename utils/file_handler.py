import json
import os
import tempfile
from pathlib import Path
from typing import Any

CORPUS_PATH = "scripts/words.json"
BEST_RESULT_PATH = "best_result.json"


def read_json(path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json_atomic(path, data: Any, indent: int = 2):
    """Write to a temp file in the same directory, then rename over `path`."""
    target = Path(path)
    folder = target.parent
    if str(folder) not in ("", "."):
        os.makedirs(folder, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=str(folder))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=indent)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, target)
    except BaseException:
        try:
            os.remove(tmp)
        except OSError:
            pass
        raise
