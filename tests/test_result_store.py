""" Tests for persisting the best result. """

import json

import pytest

from app.errors import StoreError
from app.state import Result
from services.result_store import ResultStore


@pytest.fixture
def store(tmp_path):
    return ResultStore(tmp_path / "best_result.json")


def test_missing_file_is_empty_best(store) -> None:
    assert store.load_best() == Result()
    assert store.load_best().is_empty


def test_first_result_is_always_saved(store) -> None:
    r = Result(3, 10.0, "2024-01-01 10:00:00")
    assert store.save_if_better(r)
    assert store.load_best() == r


def test_saved_file_layout(store) -> None:
    store.save_if_better(Result(50, 90.0, "2024-01-01 10:00:00"))
    text = store.path.read_text(encoding="utf-8")
    assert json.loads(text) == {"typingSpeed": 50, "accuracy": 90.0, "timestamp": "2024-01-01 10:00:00"}
    assert '\n  "typingSpeed": 50' in text


def test_worse_result_keeps_best(store) -> None:
    first = Result(50, 90.0, "2024-01-01 10:00:00")
    assert store.save_if_better(first)
    assert not store.save_if_better(Result(40, 95.0, "2024-01-01 10:05:00"))
    assert store.load_best() == first


def test_equal_score_does_not_replace(store) -> None:
    first = Result(50, 90.0, "a")
    store.save_if_better(first)
    assert not store.save_if_better(Result(45, 100.0, "b"))
    assert store.load_best() == first


def test_better_result_replaces(store) -> None:
    store.save_if_better(Result(50, 90.0, "a"))
    better = Result(60, 80.0, "b")
    assert store.save_if_better(better)
    assert store.load_best() == better


@pytest.mark.parametrize("text", ["{oops", "[]", '{"typingSpeed": "fast"}', '{"accuracy": null}'])
def test_malformed_file(store, text) -> None:
    store.path.write_text(text, encoding="utf-8")
    with pytest.raises(StoreError):
        store.load_best()
    # a broken record never blocks a new one
    r = Result(1, 50.0, "c")
    assert store.save_if_better(r)
    assert store.load_best() == r


def test_write_failure_is_store_error(tmp_path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("", encoding="utf-8")
    store = ResultStore(blocker / "best_result.json")
    with pytest.raises(StoreError):
        store.save_if_better(Result(10, 100.0, "d"))


def test_no_temp_files_left(store, tmp_path) -> None:
    store.save_if_better(Result(10, 100.0, "x"))
    store.save_if_better(Result(20, 100.0, "y"))
    assert [p.name for p in tmp_path.iterdir()] == ["best_result.json"]
