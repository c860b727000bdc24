from pathlib import Path

from packages.datasets import read_lines, write_lines
from script.clean_wordlist import clean
from script.fetch_wordlist import clean_words


def test_clean_words_filters_and_dedupes():
    lines = ["Worm", "silk\r", "ow", "don't", "worm", "", "milk"]
    assert clean_words(lines) == ["worm", "silk", "milk"]


def test_clean_keeps_first_occurrence_then_sorts():
    words = ["worm", "silk", "worm", "café", "ow"]
    assert clean(words, alpha_only=True, min_length=3) == ["worm", "silk"]
    assert clean(words, sort=True) == ["café", "ow", "silk", "worm"]


def test_fetched_words_round_trip_through_write_lines(tmp_path: Path):
    out = tmp_path / "data" / "words_en.txt"
    write_lines(clean_words(["silk", "worm", "silk"]), out)
    assert read_lines(out) == ["silk", "worm"]
