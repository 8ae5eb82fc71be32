"""Dictionary oracles for word realness checks."""

from .frequency import check_word, is_supported_language, DEFAULT_MIN_ZIPF, MIN_WORD_LENGTH
from .word_list import WordList

__all__ = ["check_word", "is_supported_language", "DEFAULT_MIN_ZIPF", "MIN_WORD_LENGTH", "WordList"]
