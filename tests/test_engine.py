import pytest
from wordlebot.engine import (
    LetterFeedback, Outcome, filter_candidates, filter_correct_positions,
    is_consistent, is_solved, is_valid_word, parse_feedback, score, to_pattern,
)

A, P, C = Outcome.ABSENT, Outcome.PRESENT, Outcome.CORRECT


def fb(word, outcomes):
    return tuple(LetterFeedback(i, ch, o) for i, (ch, o) in enumerate(zip(word, outcomes)))


# --- scoring golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("raise", "crane", "YY--G"),
    ("speed", "abide", "--Y-Y"),
    ("settle", "letter", "-GGGYY"),
    ("kitten", "tinket", "YGYYGY"),
])
def test_score_golden(guess, answer, expected):
    assert to_pattern(score(guess, answer)) == expected


def test_score_rejects_length_mismatch():
    with pytest.raises(ValueError):
        score("crane", "cranes")


# --- feedback filter ---
def test_filter_apple_feedback():
    words = ["amble", "angle"]  # "apple" already consumed as the guess
    feedback = fb("apple", [C, A, A, P, C])
    # 'present' is not used; amble starts with a, ends with e and has no p
    assert filter_candidates(words, feedback) == ["amble", "angle"]


def test_filter_all_present_is_noop():
    words = ["stare", "tears", "rates", "aster"]
    feedback = fb("arets", [P, P, P, P, P])
    assert filter_candidates(words, feedback) == words


def test_filter_absent_is_global_membership():
    words = ["crane", "plumb", "waltz"]
    feedback = fb("rough", [A, A, A, A, A])
    # 'r' reported at slot 0 still removes "crane", which has it at slot 1
    assert filter_candidates(words, feedback) == ["waltz"]


def test_filter_preserves_input_order():
    words = ["zebra", "cobra", "album", "umbra"]
    feedback = fb("xxbra", [A, A, C, C, C])
    assert filter_candidates(words, feedback) == ["zebra", "cobra", "umbra"]


def test_filter_result_is_consistent_with_feedback():
    words = ["crane", "crate", "trace", "grace", "brace", "crone", "cried"]
    feedback = fb("crust", [C, C, A, A, P])
    out = filter_candidates(words, feedback)
    assert out == ["crane", "crate", "crone", "cried"]
    for w in out:
        for item in feedback:
            if item.outcome is C:
                assert w[item.slot] == item.letter
            if item.outcome is A:
                assert item.letter not in w


def test_correct_pass_is_idempotent():
    words = ["crane", "crate", "trace", "grace", "brace"]
    feedback = fb("xrace", [A, C, C, C, C])
    once = filter_correct_positions(words, feedback)
    twice = filter_correct_positions(once, feedback)
    assert once == twice == ["trace", "grace", "brace"]


def test_correct_pass_without_correct_entries_keeps_everything():
    words = ["abcde", "vwxyz"]
    assert filter_correct_positions(words, fb("qqqqq", [A] * 5)) == words


def test_is_consistent_ignores_present():
    assert is_consistent("angle", fb("tenor", [A, P, P, A, A])) is True
    assert is_consistent("angle", fb("glean", [P, P, P, P, A])) is False


# --- parsing ---
def test_parse_feedback_sorts_and_lowercases():
    payload = [
        {"slot": 2, "guess": "P", "result": "absent"},
        {"slot": 0, "guess": "a", "result": "correct"},
        {"slot": 1, "guess": "p", "result": "present"},
    ]
    out = parse_feedback(payload, 3)
    assert [x.slot for x in out] == [0, 1, 2]
    assert out[2] == LetterFeedback(2, "p", Outcome.ABSENT)
    assert to_pattern(out) == "GY-"


@pytest.mark.parametrize("payload", [
    {"slot": 0, "guess": "a", "result": "correct"},                      # not a list
    [{"slot": 0, "guess": "a", "result": "correct"}],                    # too short
    [{"slot": 0, "guess": "a"}, {"slot": 1, "guess": "b", "result": "absent"}],  # missing key
    [{"slot": 0, "guess": "a", "result": "correct"},
     {"slot": 0, "guess": "b", "result": "absent"}],                     # duplicate slot
    [{"slot": 0, "guess": "a", "result": "correct"},
     {"slot": 5, "guess": "b", "result": "absent"}],                     # slot out of range
    [{"slot": 0, "guess": "a", "result": "correct"},
     {"slot": 1, "guess": "b", "result": "green"}],                      # unknown outcome
    [{"slot": 0, "guess": "ab", "result": "correct"},
     {"slot": 1, "guess": "b", "result": "absent"}],                     # not a single letter
    [{"slot": False, "guess": "a", "result": "correct"},
     {"slot": 1, "guess": "b", "result": "absent"}],                     # bool slot
    ["a", "b"],                                                          # entries not objects
    [{"slot": 0, "guess": "\u00e9", "result": "correct"},
     {"slot": 1, "guess": "b", "result": "absent"}],                     # non-ASCII letter
])
def test_parse_feedback_rejects_malformed(payload):
    with pytest.raises(ValueError):
        parse_feedback(payload, 2)


def test_is_solved():
    assert is_solved(fb("crane", [C] * 5)) is True
    assert is_solved(fb("crane", [C, C, C, C, P])) is False
    assert is_solved(()) is False


def test_is_valid_word():
    assert is_valid_word("Crane", 5) is True
    assert is_valid_word("cranes", 5) is False
    assert is_valid_word("cr4ne", 5) is False
    assert is_valid_word(None, 5) is False
