from .feedback import (
    FeedbackSet,
    LetterFeedback,
    Outcome,
    is_solved,
    parse_feedback,
    to_pattern,
)
from .scoring import score
from .constraints import filter_candidates, filter_correct_positions, is_consistent
from .validation import is_valid_word

__all__ = [
    "FeedbackSet", "LetterFeedback", "Outcome",
    "parse_feedback", "is_solved", "to_pattern",
    "score",
    "filter_candidates", "filter_correct_positions", "is_consistent",
    "is_valid_word",
]
