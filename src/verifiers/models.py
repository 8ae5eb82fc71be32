"""Data models for word verification."""

from typing import Literal


ValidationVerdict = Literal[
    "ACCEPTED",
    "REJECTED_EMPTY",
    "REJECTED_DUPLICATE_OR_ROOT",
    "REJECTED_IMPOSSIBLE_LETTERS",
    "REJECTED_NOT_A_REAL_WORD",
]

# Verdict constants
ACCEPTED: ValidationVerdict = "ACCEPTED"
REJECTED_EMPTY: ValidationVerdict = "REJECTED_EMPTY"
REJECTED_DUPLICATE_OR_ROOT: ValidationVerdict = "REJECTED_DUPLICATE_OR_ROOT"
REJECTED_IMPOSSIBLE_LETTERS: ValidationVerdict = "REJECTED_IMPOSSIBLE_LETTERS"
REJECTED_NOT_A_REAL_WORD: ValidationVerdict = "REJECTED_NOT_A_REAL_WORD"

REJECTIONS = (
    REJECTED_EMPTY,
    REJECTED_DUPLICATE_OR_ROOT,
    REJECTED_IMPOSSIBLE_LETTERS,
    REJECTED_NOT_A_REAL_WORD,
)
