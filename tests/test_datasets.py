import pytest
from pathlib import Path
from packages.datasets import (
    DEFAULT_ROOT_WORD, START_WORDS_PATH, WordListProvider, pretty_summary, unique_preserve_order,
    validate_root_words,
)


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_root_words_happy_path(tmp_path: Path):
    p = tmp_path / "start.txt"
    _write(p, ["silkworm", "listened", "painters"])
    rep = validate_root_words(str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["min_length"] == 8
    s = pretty_summary(rep)
    assert "start.txt" in s and s.endswith("OK")


def test_validate_root_words_flags_errors(tmp_path: Path):
    p = tmp_path / "start.txt"
    # 'Silk' uppercase, 'cat' too short, '???' invalid chars, dupe 'listened'
    p.write_text("listened\nSilk\ncat\n???\nlistened\n", encoding="utf-8")
    rep = validate_root_words(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_root_words_missing(tmp_path: Path):
    rep = validate_root_words(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False


def test_bundled_start_words_are_valid():
    assert validate_root_words(str(START_WORDS_PATH))["passed"] is True


def test_provider_is_seeded():
    words = ["silkworm", "listened", "painters", "reaction"]
    a = WordListProvider(words, seed=7)
    b = WordListProvider(words, seed=7)
    picks = [a.pick_root_word() for _ in range(10)]
    assert picks == [b.pick_root_word() for _ in range(10)]
    assert set(picks) <= set(words)


def test_provider_empty_list_falls_back(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("\n\n", encoding="utf-8")
    assert WordListProvider.from_file(p).pick_root_word() == DEFAULT_ROOT_WORD


def test_provider_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        WordListProvider.from_file(tmp_path / "start.txt")


def test_unique_preserve_order():
    assert unique_preserve_order(["worm", "silk", "worm", "milk", "silk"]) == ["worm", "silk", "milk"]
