"""
Cut a raw dictionary down to the words a session of length N can use.

Features:
- Keeps only alphabetic words of exactly N letters, lowercased.
- Removes duplicates, preserving original order by default (stable dedupe);
  the default guess strategy plays words in this order.
- Optional sorting AFTER dedupe (alphabetical).
- Writes to --out (default: <input stem>_<N>.txt next to the input).

Usage:
    python -m script.prepare_wordlist --in words.txt --N 8
"""

import argparse
from pathlib import Path

from wordlebot.datasets import load_words, write_words


def main(argv=None):
    ap = argparse.ArgumentParser(description="Filter a word list to one word length.")
    ap.add_argument("--in", dest="inp", required=True, help="input .txt file")
    ap.add_argument("--N", type=int, required=True, help="word length to keep")
    ap.add_argument("--out", dest="out", help="output file (default: <stem>_<N>.txt)")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe (otherwise keep original order)")
    args = ap.parse_args(argv)

    inp = Path(args.inp)
    outp = Path(args.out) if args.out else inp.with_name(f"{inp.stem}_{args.N}.txt")

    words = load_words(inp, args.N)
    if args.sort:
        words = sorted(words)

    write_words(words, outp)
    print(f"Input: {inp} -> Output: {outp} ({len(words)} words of length {args.N})")


if __name__ == "__main__":
    main()
