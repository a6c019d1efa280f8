import random

import pytest

from services.word_corpus import WordCorpus


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, t: float = 1000.0):
        self.t = t

    def __call__(self) -> float:
        return self.t

    def advance(self, secs: float):
        self.t += secs


class ListCorpus:
    """Hands out the same pool every session, in a fixed order."""

    def __init__(self, words):
        self.words = list(words)
        self.calls = 0

    def new_pool(self, n):
        self.calls += 1
        return self.words[:n]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def small_corpus():
    return {"привет": 6, "мир": 3, "кот": 3, "дом": 3, "сон": 3}


@pytest.fixture
def seeded_corpus(small_corpus):
    return WordCorpus(small_corpus, random.Random(42))
