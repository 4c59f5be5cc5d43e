from .validator import validate_wordlist, pretty_summary
from .io import read_words, write_words, unique_preserve_order
from .loader import DictionaryLoadError, load_words

__all__ = ["validate_wordlist", "pretty_summary", "load_words", "DictionaryLoadError"]
