from pathlib import Path

import pytest

from wordlebot.datasets import DictionaryLoadError, load_words, pretty_summary, validate_wordlist


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlist_happy_path(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["crane", "raise", "stare", "abacus", ""])

    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is True
    assert rep["count"] == 3
    assert rep["skipped_lines"] == 1  # 'abacus' is the wrong length; blanks ignored
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_wordlist_flags_duplicates_and_empty(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["Crane", "crane", "???"])
    rep = validate_wordlist(5, str(words))
    assert rep["passed"] is True
    assert any("duplicate" in msg for msg in rep["issues"])

    rep = validate_wordlist(8, str(words))
    assert rep["passed"] is False
    assert any("0 words" in msg for msg in rep["issues"])


def test_validate_wordlist_missing_file(tmp_path: Path):
    rep = validate_wordlist(5, str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "FAIL" in pretty_summary(rep)


def test_load_words_filters_and_keeps_order(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["  Stare ", "crane", "it's", "cranes", "STARE", "abide", "cafés"])
    assert load_words(words, 5) == ["stare", "crane", "abide"]


def test_load_words_other_length(tmp_path: Path):
    words = tmp_path / "words.txt"
    _write(words, ["absolute", "crane", "Abstract"])
    assert load_words(str(words), 8) == ["absolute", "abstract"]


def test_load_words_missing_file(tmp_path: Path):
    with pytest.raises(DictionaryLoadError):
        load_words(tmp_path / "missing.txt", 5)


def test_load_words_not_utf8(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_bytes(b"crane\n\xff\xfe\n")
    with pytest.raises(DictionaryLoadError):
        load_words(words, 5)


def test_load_words_directory(tmp_path: Path):
    with pytest.raises(DictionaryLoadError):
        load_words(tmp_path, 5)


def test_validate_wordlist_unreadable(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_bytes(b"crane\n\xff\xfe\n")
    rep = validate_wordlist(5, str(words))
    assert rep["exists"] is True and rep["passed"] is False
    assert any("unreadable" in msg for msg in rep["issues"])
