import csv
import json
from pathlib import Path

from wordlebot.harness import SessionConfig, run_session, write_csv, write_manifest
from wordlebot.oracle import LocalOracle


def test_write_csv_expands_history(tmp_path: Path):
    words = ["apple", "amble", "angle"]
    solved = run_session(LocalOracle("angle"), words, SessionConfig(word_length=5, seed=1))
    failed = run_session(LocalOracle("abide"), ["speed", "abide"], SessionConfig(word_length=5, seed=2))
    for r in (solved, failed):
        r["strategy_id"] = "first"

    out = write_csv([solved, failed], str(tmp_path / "out" / "run.csv"), N=5)

    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 2
    assert rows[0]["status"] == "solved" and rows[0]["answer"] == "angle"
    assert rows[0]["guess_1"] == "apple" and rows[0]["patt_1"] == "'G--GG"
    assert rows[0]["guess_3"] == "angle"
    assert rows[1]["status"] == "exhausted" and rows[1]["answer"] == ""
    assert rows[1]["guess_3"] == ""  # padded to the longest history
    assert rows[1]["error"]


def test_write_manifest(tmp_path: Path):
    path = write_manifest({"run_id": "x", "num_sessions": 1}, str(tmp_path / "m" / "manifest.json"))
    assert json.loads(Path(path).read_text(encoding="utf-8"))["num_sessions"] == 1
