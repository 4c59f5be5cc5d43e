# apps/cli/run_multi.py
"""
Run many sessions (one per oracle seed) in one shot with progress.

Seeds are --seed, --seed+1, ..., --seed+K-1. With --offline the hidden word of
each seed is drawn from the word list itself, so no network is needed.

Writes: <outdir>/<strategy>/run_<timestamp>.csv + _manifest.json
"""

from __future__ import annotations
import argparse, logging, sys, time
from pathlib import Path
from typing import Iterable, Iterator

from tqdm import tqdm

from wordlebot.datasets import DictionaryLoadError, load_words, pretty_summary, validate_wordlist
from wordlebot.harness import DEFAULT_SEED, SessionConfig, run_batch
from wordlebot.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordlebot.oracle import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, HttpOracle, SeededOracle
from wordlebot.solvers import DEFAULT_STRATEGY, get_strategy_ids

logger = logging.getLogger("wordlebot.cli")


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _plain_progress(seeds: Iterable[int], total: int, label: str) -> Iterator[int]:
    """Yield seeds while writing a throttled one-line status to stderr."""
    start = time.time()
    last_print = 0.0
    idx = 0
    for idx, seed in enumerate(seeds, 1):
        yield seed
        now = time.time()
        if (now - last_print >= 1.0) or (idx == total):
            elapsed = now - start
            rate = (idx / elapsed) if elapsed > 0 else 0.0
            remaining = (total - idx) / rate if rate > 0 else 0.0
            pct = 100.0 * idx / max(1, total)
            sys.stderr.write(
                f"\r[{label}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s")
            sys.stderr.flush()
            last_print = now
    if idx:
        sys.stderr.write("\n")
        sys.stderr.flush()


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordlebot - run many seeded sessions")
    ap.add_argument("--strategy", default=DEFAULT_STRATEGY, choices=get_strategy_ids())
    ap.add_argument("--N", type=int, default=5)
    ap.add_argument("--words", default="words.txt")
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED, help="first seed")
    ap.add_argument("--sessions", type=int, default=10, help="number of seeds to play")
    ap.add_argument("--offline", action="store_true",
                    help="draw hidden words from the word list instead of calling the oracle")
    ap.add_argument("--base-url", default=DEFAULT_BASE_URL)
    ap.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT)
    ap.add_argument("--outdir", default="reports/batch")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.sessions < 1:
        raise SystemExit("--sessions must be >= 1")

    # 1) load + validate once; an unreadable list stops before any session
    try:
        words = load_words(args.words, args.N)
    except DictionaryLoadError as e:
        logger.error("Failed to load word list: %s", e)
        raise SystemExit(3)
    rep = validate_wordlist(args.N, args.words)
    print(pretty_summary(rep))

    config = SessionConfig(word_length=args.N, seed=args.seed, base_url=args.base_url,
                           timeout=args.timeout, strategy=args.strategy)
    seeds = range(args.seed, args.seed + args.sessions)

    # 2) progress wrapper around the seed sequence
    mode = _progress_mode(args.progress)
    if mode == "bar":
        iterator = tqdm(seeds, ncols=80, desc=args.strategy, unit="session")
    elif mode == "plain":
        iterator = _plain_progress(seeds, len(seeds), args.strategy)
    else:
        iterator = seeds

    # 3) run sessions sequentially; failures are recorded per session
    if args.offline:
        if not words:
            raise SystemExit("--offline needs a non-empty word list")
        results = run_batch(SeededOracle(words), words, config=config, seeds=iterator)
    else:
        with HttpOracle(config.base_url, timeout=config.timeout) as oracle:
            results = run_batch(oracle, words, config=config, seeds=iterator)
    for r in results:
        r["strategy_id"] = args.strategy

    solved = [r for r in results if r["success"]]
    avg = (sum(r["guesses"] for r in solved) / len(solved)) if solved else 0.0
    print(f"Solved {len(solved)}/{len(results)} (avg guesses when solved: {avg:.2f})")

    # 4) write outputs under <outdir>/<strategy>/
    run_id = timestamp_id()
    sdir = Path(args.outdir) / args.strategy
    csv_path = write_csv(results, str(sdir / f"run_{run_id}.csv"), N=args.N)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_sessions": len(results),
        "num_solved": len(solved),
        "statuses": {s: sum(1 for r in results if r["status"] == s)
                     for s in sorted({r["status"] for r in results})},
    }
    manifest_path = write_manifest(manifest, str(sdir / f"run_{run_id}_manifest.json"))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
