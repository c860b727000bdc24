from .validator import validate_root_words, pretty_summary
from .io import read_lines, write_lines, load_words, unique_preserve_order
from .provider import WordListProvider, DEFAULT_ROOT_WORD, START_WORDS_PATH

__all__ = [
    "validate_root_words",
    "pretty_summary",
    "read_lines",
    "write_lines",
    "load_words",
    "unique_preserve_order",
    "WordListProvider",
    "DEFAULT_ROOT_WORD",
    "START_WORDS_PATH",
]
