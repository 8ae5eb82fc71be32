"""
Word verification module for validating submitted words against a root word.

Rules, checked in order (the first failing rule decides the verdict):
1. Emptiness (nothing left after normalization)
2. Originality (not already used, not the root word itself)
3. Possibility (spellable from the root word's letters, counting repeats)
4. Realness (recognized by the dictionary oracle in the configured language)
"""

from typing import Callable, Collection

from .models import (
    ValidationVerdict,
    ACCEPTED,
    REJECTED_EMPTY,
    REJECTED_DUPLICATE_OR_ROOT,
    REJECTED_IMPOSSIBLE_LETTERS,
    REJECTED_NOT_A_REAL_WORD,
)
from .parsing import normalize_word


# (word, language) -> recognized?
WordChecker = Callable[[str, str], bool]

DEFAULT_LANGUAGE = "en"


def is_original(word: str, root_word: str, used_words: Collection[str]) -> bool:
    """Check the word has not been accepted yet and is not the root word."""
    return word not in used_words and word != root_word


def is_possible(word: str, root_word: str) -> bool:
    """
    Check the word can be spelled from the root word's letters.

    Each letter of the root word may be used at most once, so "ab" fits
    "aabb" but "aaa" does not.
    """
    remaining = list(root_word.lower())

    for letter in word:
        if letter not in remaining:
            return False
        remaining.remove(letter)

    return True


def is_real(word: str, is_real_word: WordChecker, language: str = DEFAULT_LANGUAGE) -> bool:
    """Ask the dictionary oracle whether the word is recognized in `language`."""
    return bool(is_real_word(word, language))


def validate(
    candidate: str,
    root_word: str,
    used_words: Collection[str],
    is_real_word: WordChecker,
    language: str = DEFAULT_LANGUAGE,
) -> ValidationVerdict:
    """
    Main validation function: decides whether a candidate is acceptable.

    Args:
        candidate: Raw submitted word (normalized here)
        root_word: Current root word (lowercase)
        used_words: Words already accepted this round
        is_real_word: Dictionary oracle, called as is_real_word(word, language)
        language: Language tag passed to the oracle

    Returns:
        ACCEPTED, or the verdict of the first rule the candidate breaks
    """
    word = normalize_word(candidate)

    if not word:
        return REJECTED_EMPTY

    if not is_original(word, root_word, used_words):
        return REJECTED_DUPLICATE_OR_ROOT

    if not is_possible(word, root_word):
        return REJECTED_IMPOSSIBLE_LETTERS

    if not is_real(word, is_real_word, language):
        return REJECTED_NOT_A_REAL_WORD

    return ACCEPTED
