"""
Build the word corpus (scripts/words.json) from a plain-text source.

    python -m utils.dictionary_maker [words.txt] [words.json]
"""
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable

from utils.file_handler import CORPUS_PATH, write_json_atomic

log = logging.getLogger(__name__)

SOURCE_PATH = "scripts/words.txt"


def _keep(ch: str) -> str:
    if ch == " " or "а" <= ch <= "я" or ch == "ё":
        return ch
    if ch in ("\n", "-"):
        return " "
    return ""


def clean_text(text: str) -> str:
    """Lowercase, keep Cyrillic letters and spaces; newlines and hyphens split words."""
    return "".join(_keep(ch) for ch in text.lower())


def make_word_map(words: Iterable[str]) -> Dict[str, int]:
    return {w: len(w) for w in words}


def build_corpus(src=SOURCE_PATH, dst=CORPUS_PATH) -> Dict[str, int]:
    text = Path(src).read_text(encoding="utf-8")
    words = make_word_map(clean_text(text).split())
    write_json_atomic(dst, words, indent=1)
    log.info("Wrote %d words to %s", len(words), dst)
    return words


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
    args = sys.argv[1:]
    try:
        build_corpus(*args[:2])
    except OSError as e:
        log.error("Failed to build corpus: %s", e)
        sys.exit(1)
