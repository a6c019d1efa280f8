""" Tests for loading the corpus file and sampling word pools. """

import json
import random

import pytest

from app.errors import LoadError
from services.word_corpus import WordCorpus, load_corpus, make_word_pool


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_load_corpus(tmp_path, small_corpus) -> None:
    p = _write(tmp_path / "words.json", json.dumps(small_corpus, ensure_ascii=False))
    assert load_corpus(p) == small_corpus


def test_missing_corpus(tmp_path) -> None:
    with pytest.raises(LoadError):
        load_corpus(tmp_path / "nope.json")


@pytest.mark.parametrize("text", ["{not json", "[1, 2, 3]", '{"кот": "три"}', '{"кот": true}', "{}"])
def test_malformed_corpus(tmp_path, text) -> None:
    p = _write(tmp_path / "words.json", text)
    with pytest.raises(LoadError):
        load_corpus(p)


def test_pool_is_a_sample_without_replacement() -> None:
    corpus = {f"слово{i}": 5 + len(str(i)) for i in range(500)}
    pool = make_word_pool(corpus, 200, random.Random(1))
    assert len(pool) == 200
    assert len(set(pool)) == 200
    assert set(pool) <= set(corpus)


def test_pool_clamped_to_corpus_size(small_corpus) -> None:
    pool = make_word_pool(small_corpus, 200, random.Random(3))
    assert sorted(pool) == sorted(small_corpus)


def test_pool_is_reproducible_with_a_seed(small_corpus) -> None:
    reordered = dict(reversed(list(small_corpus.items())))
    a = make_word_pool(small_corpus, 5, random.Random(7))
    b = make_word_pool(reordered, 5, random.Random(7))
    assert a == b


def test_empty_corpus_and_bad_size() -> None:
    with pytest.raises(LoadError):
        make_word_pool({}, 10)
    with pytest.raises(ValueError):
        make_word_pool({"кот": 3}, 0)
    with pytest.raises(LoadError):
        WordCorpus({})


def test_word_corpus_from_file(tmp_path, small_corpus) -> None:
    p = _write(tmp_path / "words.json", json.dumps(small_corpus, ensure_ascii=False))
    corpus = WordCorpus.from_file(p, random.Random(0))
    assert len(corpus) == 5
    assert sorted(corpus.new_pool()) == sorted(small_corpus)
