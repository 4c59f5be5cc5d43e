from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_words(p: Path | str) -> List[str]:
    """
    Stripped, non-blank lines of a UTF-8 word list, in file order.
    OSError / UnicodeDecodeError propagate; the loader maps them.
    """
    with Path(p).open("r", encoding="utf-8") as f:
        return [s for s in (ln.strip() for ln in f) if s]


def write_words(words: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line (UTF-8, trailing newline), creating parent dirs.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8", newline="\n") as f:
        for w in words:
            f.write(w + "\n")
    return str(p)


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out
