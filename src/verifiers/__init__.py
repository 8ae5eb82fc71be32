"""Word verification for word-scramble."""

from .verify import validate, is_original, is_possible, is_real, WordChecker, DEFAULT_LANGUAGE
from .models import (
    ValidationVerdict,
    ACCEPTED,
    REJECTED_EMPTY,
    REJECTED_DUPLICATE_OR_ROOT,
    REJECTED_IMPOSSIBLE_LETTERS,
    REJECTED_NOT_A_REAL_WORD,
    REJECTIONS,
)
from .parsing import normalize_word
from .data import check_word, is_supported_language, WordList, DEFAULT_MIN_ZIPF

__all__ = [
    # Main verification
    "validate",
    "is_original",
    "is_possible",
    "is_real",
    "WordChecker",
    "DEFAULT_LANGUAGE",
    # Verdicts
    "ValidationVerdict",
    "ACCEPTED",
    "REJECTED_EMPTY",
    "REJECTED_DUPLICATE_OR_ROOT",
    "REJECTED_IMPOSSIBLE_LETTERS",
    "REJECTED_NOT_A_REAL_WORD",
    "REJECTIONS",
    # Parsing
    "normalize_word",
    # Dictionary
    "check_word",
    "is_supported_language",
    "DEFAULT_MIN_ZIPF",
    "WordList",
]
