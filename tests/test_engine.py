from dataclasses import fields
import pytest
from packages.engine import (
    Accepted, Rejected, RejectReason, ValidationEngine, can_spell, normalize, score,
)
from packages.session import Session


def _can_spell_by_removal(word, root):
    # Reference: consume one matching letter from the root per letter used.
    pool = list(root)
    for ch in word:
        if ch in pool:
            pool.remove(ch)
        else:
            return False
    return True


# --- anagram-subset golden tests ---
@pytest.mark.parametrize("word,root,expected", [
    ("line", "listen", True),
    ("lisp", "listen", False),
    ("ll", "listen", False),
    ("silent", "listen", True),
    ("tinsel", "listen", True),
    ("listens", "listen", False),
    ("worm", "silkworm", True),
    ("mooring", "silkworm", False),
    ("", "silkworm", True),
])
def test_can_spell_golden(word, root, expected):
    assert can_spell(word, root) is expected


@pytest.mark.parametrize("word,root", [
    ("aab", "abc"), ("abc", "aabbcc"), ("cab", "abc"), ("abcd", "abc"),
    ("moon", "monsoon"), ("noon", "monsoon"), ("sonso", "monsoon"), ("xyz", "zyx"),
    ("eee", "tree"), ("tee", "tree"), ("rete", "tree"),
])
def test_can_spell_matches_removal_method(word, root):
    assert can_spell(word, root) == _can_spell_by_removal(word, root)


@pytest.mark.parametrize("root,word,expected", [
    ("silkworm", "silk", 5),
    ("silkworm", "owl", 6),
    ("listen", "silent", 1),
])
def test_score(root, word, expected):
    assert score(root, word) == expected


def test_normalize():
    assert normalize("  WoRm \n") == "worm"
    assert normalize(" \t ") == ""


def test_blank_input_is_ignored(engine):
    s = Session("silkworm")
    assert engine.evaluate(s, "") is None
    assert engine.evaluate(s, "   \n") is None


def test_accepts_and_scores(engine):
    s = Session("silkworm")
    assert engine.evaluate(s, "Silk ") == Accepted(5)


@pytest.mark.parametrize("raw,reason", [
    ("silkworm", RejectReason.SAME_AS_ROOT),
    ("  SILKWORM ", RejectReason.SAME_AS_ROOT),
    ("a", RejectReason.TOO_SHORT),
    ("xy", RejectReason.TOO_SHORT),      # also unspellable; length wins
    ("lisp", RejectReason.NOT_SPELLABLE_FROM_ROOT),  # real word, wrong letters
    ("silkworms", RejectReason.NOT_SPELLABLE_FROM_ROOT),
    ("zzz", RejectReason.NOT_SPELLABLE_FROM_ROOT),   # also not a word; spellability wins
    ("wormk", RejectReason.NOT_A_REAL_WORD),
])
def test_rejection_reasons(engine, raw, reason):
    s = Session("silkworm")
    assert engine.evaluate(s, raw) == Rejected(reason)


# --- earliest failing rule wins when the word is already in the history ---
@pytest.mark.parametrize("history,raw,reason", [
    (["ow"], "ow", RejectReason.TOO_SHORT),          # length before originality
    (["lisp"], "LISP", RejectReason.ALREADY_USED),   # originality before spellability
    (["silkworm"], "silkworm", RejectReason.SAME_AS_ROOT),
])
def test_rejection_order_with_history(engine, history, raw, reason):
    s = Session("silkworm", accepted_words=history)
    assert engine.evaluate(s, raw) == Rejected(reason)


def test_originality_checked_before_dictionary(dictionary):
    # "worm" was accepted earlier but is no longer in the dictionary:
    # the duplicate is still reported as ALREADY_USED.
    engine = ValidationEngine(dictionary)
    s = Session("silkworm", accepted_words=["worm"], score=5)
    dictionary._words["en"].discard("worm")
    assert engine.evaluate(s, "worm") == Rejected(RejectReason.ALREADY_USED)


def test_length_boundary(engine):
    s = Session("silkworm")
    assert engine.evaluate(s, "owl") == Accepted(6)
    assert engine.evaluate(s, "ow") == Rejected(RejectReason.TOO_SHORT)


def test_evaluate_is_pure(engine):
    s = Session("silkworm", accepted_words=["silk"], score=5)
    before = s.copy()
    first = engine.evaluate(s, "worm")
    second = engine.evaluate(s, "worm")
    assert first == second == Accepted(5)
    assert s == before


def test_dictionary_receives_configured_language():
    seen = []

    class Recorder:
        def is_real_word(self, word, language):
            seen.append((word, language))
            return True

    engine = ValidationEngine(Recorder(), language="en-GB")
    assert engine.evaluate(Session("silkworm"), "MILK") == Accepted(5)
    assert seen == [("milk", "en-GB")]


def test_verdicts_carry_only_their_payload():
    assert [f.name for f in fields(Accepted)] == ["score_delta"]
    assert [f.name for f in fields(Rejected)] == ["reason"]
    assert not hasattr(Accepted(5), "accepted")
    assert not hasattr(Rejected(RejectReason.TOO_SHORT), "accepted")
