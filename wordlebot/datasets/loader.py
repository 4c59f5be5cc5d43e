"""
Dictionary loader: turns a raw word list into the initial candidate list.

Rules:
  - one word per line, surrounding whitespace ignored
  - only ASCII letters (mixed case accepted, lowercased on load)
  - exact length N
  - duplicates dropped, first occurrence wins (dictionary order is kept,
    the default strategy depends on it)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from wordlebot.engine import is_valid_word
from .io import read_words, unique_preserve_order

logger = logging.getLogger(__name__)


class DictionaryLoadError(Exception):
    """The word list could not be read. Fatal before any guess is made."""


def load_words(path: Path | str, N: int) -> List[str]:
    """
    Load the words of length N from `path`.

    Raises:
        DictionaryLoadError if the file is missing, is not a readable file,
        or is not valid UTF-8.
    """
    try:
        lines = read_words(path)
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"cannot read word list {path}: {e}") from e

    words = [w.lower() for w in lines if is_valid_word(w, N)]
    words = unique_preserve_order(words)
    logger.info("loaded %d words of length %d from %s", len(words), N, path)
    return words
