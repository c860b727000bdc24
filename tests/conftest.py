import pytest

from packages.dictionary import WordListDictionary
from packages.engine import ValidationEngine
from packages.session import SessionController

# Deterministic stand-in for a real English dictionary.
WORDS = [
    "silk", "worm", "milk", "owl", "owls", "slow", "lower", "mows", "mis", "ilk",
    "line", "lines", "listen", "silent", "enlist", "tin", "ten", "net", "lisp",
    "silkworm",
]


@pytest.fixture
def dictionary():
    return WordListDictionary({"en": WORDS})


@pytest.fixture
def engine(dictionary):
    return ValidationEngine(dictionary)


@pytest.fixture
def controller(engine):
    c = SessionController(engine)
    c.start_new_round(lambda: "silkworm")
    return c
