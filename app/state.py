from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from app.errors import StoreError

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class SessionState(Enum):
    MENU = "menu"
    AWAITING_START = "awaiting_start"
    ACTIVE = "active"
    FINISHED = "finished"


@dataclass
class Keystroke:
    t: float
    char: str
    correct: bool


@dataclass(frozen=True)
class Result:
    typing_speed: int = 0
    accuracy: float = 0.0
    timestamp: str = ""

    @classmethod
    def now(cls, typing_speed: int, accuracy: float) -> "Result":
        return cls(typing_speed, accuracy, datetime.now().strftime(TIMESTAMP_FORMAT))

    @property
    def is_empty(self) -> bool:
        # 0/0 is the "no record yet" sentinel
        return self.typing_speed == 0 and self.accuracy == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "typingSpeed": self.typing_speed,
            "accuracy": self.accuracy,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, d: Any) -> "Result":
        if not isinstance(d, dict):
            raise StoreError("result record must be a JSON object")
        speed = d.get("typingSpeed", 0)
        acc = d.get("accuracy", 0.0)
        stamp = d.get("timestamp", "")
        if isinstance(speed, bool) or not isinstance(speed, int):
            raise StoreError(f"typingSpeed must be an integer, got {speed!r}")
        if isinstance(acc, bool) or not isinstance(acc, (int, float)):
            raise StoreError(f"accuracy must be a number, got {acc!r}")
        if not isinstance(stamp, str):
            raise StoreError(f"timestamp must be a string, got {stamp!r}")
        return cls(speed, float(acc), stamp)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of the engine handed to the renderer each frame."""
    state: SessionState
    visible_lines: List[str] = field(default_factory=list)
    current_line: str = ""
    cursor: int = 0
    typed_text: str = ""
    correct_text: str = ""
    remaining: str = "00:00"
    attempted: int = 0
    correct: int = 0
    accuracy: float = 0.0
    result: Optional[Result] = None
    best: Optional[Result] = None
    is_new_record: bool = False
    keystrokes: List[Keystroke] = field(default_factory=list)
