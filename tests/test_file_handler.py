""" Tests for the JSON file helpers. """

from utils.file_handler import read_json, write_json_atomic


def test_write_then_read(tmp_path) -> None:
    p = tmp_path / "nested" / "data.json"
    write_json_atomic(p, {"слово": 5})
    assert read_json(p) == {"слово": 5}
    assert "слово" in p.read_text(encoding="utf-8")


def test_overwrite_replaces_whole_file(tmp_path) -> None:
    p = tmp_path / "data.json"
    write_json_atomic(p, {"a": 1, "b": [1, 2, 3]})
    write_json_atomic(p, {"c": 2})
    assert read_json(p) == {"c": 2}
    assert sorted(x.name for x in tmp_path.iterdir()) == ["data.json"]
