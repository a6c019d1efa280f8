from dataclasses import dataclass
from typing import List, Sequence

from app.state import Keystroke


@dataclass
class AccuracyCounter:
    attempted: int = 0
    correct: int = 0

    def record_attempt(self, was_correct: bool):
        self.attempted += 1
        if was_correct:
            self.correct += 1

    def accuracy_percent(self) -> float:
        if self.attempted == 0:
            return 0.0
        return 100.0 * self.correct / self.attempted

    def reset(self):
        self.attempted = 0
        self.correct = 0


def score(speed: int, accuracy: float) -> float:
    return speed * (accuracy / 100)


def keystrokes_per_second(keystrokes: Sequence[Keystroke], duration: float) -> List[int]:
    """
    Correct keystrokes bucketed per whole second of the session.
    One bucket per started second of `duration`; late keystrokes land in the last one.
    """
    buckets = max(1, int(duration + 0.999))
    out = [0] * buckets
    for k in keystrokes:
        if not k.correct:
            continue
        idx = min(buckets - 1, max(0, int(k.t)))
        out[idx] += 1
    return out
