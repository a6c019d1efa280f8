# services/word_corpus.py
from __future__ import annotations
import json
import logging
import random
from typing import Dict, List, Optional

from app.errors import LoadError
from utils.file_handler import read_json

log = logging.getLogger(__name__)

DEFAULT_SAMPLE_SIZE = 200


def load_corpus(path) -> Dict[str, int]:
    """Read a {word: length} JSON mapping. Any problem with the file is a LoadError."""
    try:
        data = read_json(path)
    except FileNotFoundError as e:
        raise LoadError(f"corpus file not found: {path}") from e
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise LoadError(f"cannot read corpus {path}: {e}") from e

    if not isinstance(data, dict):
        raise LoadError(f"corpus {path} must be a JSON object of word -> length")
    for word, length in data.items():
        if isinstance(length, bool) or not isinstance(length, int):
            raise LoadError(f"corpus {path}: length of {word!r} is not an integer")
    if not data:
        raise LoadError(f"corpus {path} is empty")
    return data


def make_word_pool(corpus: Dict[str, int], n: int = DEFAULT_SAMPLE_SIZE,
                   rng: Optional[random.Random] = None) -> List[str]:
    if not corpus:
        raise LoadError("cannot build a word pool from an empty corpus")
    if n <= 0:
        raise ValueError(f"sample size must be positive, got {n}")
    rng = rng or random.Random()
    keys = sorted(corpus)
    if n > len(keys):
        log.warning("Corpus has %d words, sampling all of them instead of %d", len(keys), n)
        n = len(keys)
    # sample() already returns the selection in random order
    return rng.sample(keys, n)


class WordCorpus:
    def __init__(self, words: Dict[str, int], rng: Optional[random.Random] = None):
        if not words:
            raise LoadError("corpus is empty")
        self.words = words
        self.rng = rng or random.Random()

    @classmethod
    def from_file(cls, path, rng: Optional[random.Random] = None) -> "WordCorpus":
        words = load_corpus(path)
        log.info("Loaded %d words from %s", len(words), path)
        return cls(words, rng)

    def __len__(self) -> int:
        return len(self.words)

    def new_pool(self, n: int = DEFAULT_SAMPLE_SIZE) -> List[str]:
        return make_word_pool(self.words, n, self.rng)
