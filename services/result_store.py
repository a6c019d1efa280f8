# services/result_store.py
from __future__ import annotations
import json
import logging

from app.calculation import score
from app.errors import StoreError
from app.state import Result
from utils.file_handler import BEST_RESULT_PATH, read_json, write_json_atomic

log = logging.getLogger(__name__)


class ResultStore:
    """Keeps the single best result on disk."""

    def __init__(self, path=BEST_RESULT_PATH):
        self.path = path

    def load_best(self) -> Result:
        try:
            data = read_json(self.path)
        except FileNotFoundError:
            return Result()
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StoreError(f"cannot read best result {self.path}: {e}") from e
        return Result.from_dict(data)

    def save_if_better(self, candidate: Result) -> bool:
        """Persist `candidate` if it beats the stored best. Returns True if it was written."""
        try:
            best = self.load_best()
        except StoreError as e:
            log.warning("Stored best result is unusable, replacing it: %s", e)
            best = Result()

        new_score = score(candidate.typing_speed, candidate.accuracy)
        best_score = score(best.typing_speed, best.accuracy)
        if not (new_score > best_score or best.is_empty):
            return False

        try:
            write_json_atomic(self.path, candidate.to_dict(), indent=2)
        except (OSError, TypeError, ValueError) as e:
            raise StoreError(f"cannot write best result {self.path}: {e}") from e
        return True
