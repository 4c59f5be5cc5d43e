from pathlib import Path

import pytest

from apps.cli import run, run_multi


def _words(tmp_path: Path, lines) -> str:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def test_run_offline_solves(tmp_path: Path, capsys):
    words = _words(tmp_path, ["apple", "amble", "angle", "abacus"])
    run.main(["--words", words, "--N", "5", "--answer", "angle", "--outdir", str(tmp_path / "rep")])
    out = capsys.readouterr().out
    assert "listSize: 3" in out
    assert "Guessed the word correctly: angle (3 guesses)" in out
    assert list((tmp_path / "rep").glob("session_*.csv"))


def test_run_exhausted_exit_code(tmp_path: Path):
    words = _words(tmp_path, ["speed", "abide"])
    with pytest.raises(SystemExit) as exc:
        run.main(["--words", words, "--N", "5", "--answer", "abide"])
    assert exc.value.code == 1


def test_run_missing_dictionary_exit_code(tmp_path: Path):
    with pytest.raises(SystemExit) as exc:
        run.main(["--words", str(tmp_path / "missing.txt"), "--answer", "crane"])
    assert exc.value.code == 3


def test_run_multi_offline(tmp_path: Path, capsys):
    words = _words(tmp_path, ["crane", "slate", "pious", "dumbo", "fight"])
    outdir = tmp_path / "batch"
    run_multi.main(["--words", words, "--offline", "--sessions", "4", "--progress", "off",
                    "--outdir", str(outdir)])
    out = capsys.readouterr().out
    assert "Solved 4/4" in out
    assert list((outdir / "first").glob("run_*_manifest.json"))


def _unreadable(tmp_path: Path):
    bad = tmp_path / "words.txt"
    bad.write_bytes(b"crane\n\xff\xfe\n")
    return [str(bad), str(tmp_path)]  # not UTF-8, and a directory


def test_run_unreadable_dictionary_exit_code(tmp_path: Path):
    for path in _unreadable(tmp_path):
        with pytest.raises(SystemExit) as exc:
            run.main(["--words", path, "--N", "5", "--answer", "crane"])
        assert exc.value.code == 3


def test_run_multi_unreadable_dictionary_exit_code(tmp_path: Path):
    for path in _unreadable(tmp_path):
        with pytest.raises(SystemExit) as exc:
            run_multi.main(["--words", path, "--offline", "--progress", "off",
                            "--outdir", str(tmp_path / "batch")])
        assert exc.value.code == 3
