""" Tests for building the word corpus from raw text. """

import json
from pathlib import Path

from services.word_corpus import load_corpus
from utils.dictionary_maker import build_corpus, clean_text, make_word_map


def test_clean_text() -> None:
    assert clean_text("Привет, Мир!") == "привет мир"
    assert clean_text("кто-то\nёж") == "кто то ёж"
    assert clean_text("hello 123 кот") == "  кот"


def test_word_map_counts_codepoints() -> None:
    assert make_word_map(["привет", "ёж", "ёж"]) == {"привет": 6, "ёж": 2}


def test_build_corpus_round_trip(tmp_path) -> None:
    src = tmp_path / "words.txt"
    dst = tmp_path / "out" / "words.json"
    src.write_text("Кот и пёс.\nКот спит.", encoding="utf-8")
    words = build_corpus(src, dst)
    assert words == {"кот": 3, "и": 1, "пёс": 3, "спит": 4}
    assert load_corpus(dst) == words
    assert "пёс" in dst.read_text(encoding="utf-8")
    assert json.loads(dst.read_text(encoding="utf-8")) == words


def test_bundled_corpus_loads() -> None:
    corpus = load_corpus(Path(__file__).parent.parent / "scripts" / "words.json")
    assert all(len(w) == n for w, n in corpus.items())
