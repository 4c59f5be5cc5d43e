# apps/cli/run.py
"""
CLI entry point for solving one puzzle against the oracle.

This script:
  1) Loads the words of length N in dictionary order (exit 3 if unreadable).
  2) Validates the word list (prints counts + SHA for length N).
  3) Plays one session against the HTTP oracle (or, with --answer, against a
     local oracle that knows the hidden word) and prints every round.
  4) Optionally writes a one-row CSV + JSON manifest to --outdir.

Exit status: 0 solved, 1 candidates exhausted, 2 oracle failure,
3 word list unreadable.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from wordlebot.datasets import DictionaryLoadError, load_words, pretty_summary, validate_wordlist
from wordlebot.engine import to_pattern
from wordlebot.harness import DEFAULT_SEED, SessionConfig, SessionState, run_session
from wordlebot.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordlebot.oracle import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, HttpOracle, LocalOracle
from wordlebot.solvers import DEFAULT_STRATEGY, get_strategy_ids

logger = logging.getLogger("wordlebot.cli")

EXIT_CODES = {
    SessionState.SOLVED.value: 0,
    SessionState.EXHAUSTED.value: 1,
    SessionState.ORACLE_ERROR.value: 2,
}
EXIT_DICTIONARY = 3


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordlebot - solve one puzzle against the oracle")
    ap.add_argument("--words", default="words.txt", help="path to the dictionary (one word per line)")
    ap.add_argument("--N", type=int, default=5, help="word length (e.g., 5 or 8)")
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED,
                    help="oracle seed (pins the hidden word for the session)")
    ap.add_argument("--base-url", default=DEFAULT_BASE_URL, help="oracle root URL")
    ap.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT,
                    help="per-request timeout in seconds")
    ap.add_argument("--strategy", default=DEFAULT_STRATEGY, choices=get_strategy_ids(),
                    help="guess-selection strategy")
    ap.add_argument("--answer", help="play offline against this hidden word instead of the HTTP oracle")
    ap.add_argument("--outdir", help="if set, write a CSV + manifest for the session here")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging verbosity")
    return ap


def main(argv=None):
    """
    Parse CLI args, load the dictionary, play one session and report it.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # 1) Load candidates; an unreadable dictionary ends the run before any guess
    try:
        words = load_words(args.words, args.N)
    except DictionaryLoadError as e:
        logger.error("Failed to load word list: %s", e)
        raise SystemExit(EXIT_DICTIONARY)

    # 2) Validate the word list and print a one-liner summary
    rep = validate_wordlist(args.N, args.words)
    print(pretty_summary(rep))
    print(f"listSize: {len(words)}")

    # 3) Play
    config = SessionConfig(word_length=args.N, seed=args.seed, base_url=args.base_url,
                           timeout=args.timeout, strategy=args.strategy)
    if args.answer:
        oracle = LocalOracle(args.answer)
        r = run_session(oracle, words, config)
    else:
        with HttpOracle(config.base_url, timeout=config.timeout) as oracle:
            r = run_session(oracle, words, config)
    r["strategy_id"] = config.strategy

    for i, (guess, feedback) in enumerate(r["history"], 1):
        print(f"{i:>3}. {guess}  {to_pattern(feedback)}")

    if r["success"]:
        print(f"Guessed the word correctly: {r['answer']} ({r['guesses']} guesses)")
    else:
        print(f"Failed ({r['status']}): {r['error']}")

    # 4) Optional report
    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        csv_path = write_csv([r], str(outdir / f"session_{run_id}.csv"), N=args.N)
        manifest_path = write_manifest({
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlist": rep,
            "num_sessions": 1,
            "num_solved": int(r["success"]),
        }, str(outdir / f"session_{run_id}_manifest.json"))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")

    code = EXIT_CODES[r["status"]]
    if code:
        raise SystemExit(code)


if __name__ == "__main__":
    main()
