"""
Pydantic models for the game layer.

Configuration and state snapshots live here; the session logic itself is in
session.py.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, model_validator

from ..verifiers.data import DEFAULT_MIN_ZIPF


DEFAULT_ROOT_WORD = "silkworm"
MIN_ROOT_LENGTH = 3


class GameConfig(BaseModel):
    """Configuration for a game of word scramble."""
    language: str = "en"
    start_words: Optional[str] = None  # Path to a start-word list; bundled list if unset
    fallback_root_word: Optional[str] = DEFAULT_ROOT_WORD
    min_root_length: int = Field(default=MIN_ROOT_LENGTH, ge=1)
    seed: Optional[int] = None
    word_list: Optional[str] = None  # Path to a dictionary word list; wordfreq if unset
    min_zipf: float = Field(default=DEFAULT_MIN_ZIPF, ge=0.0)

    @model_validator(mode="after")
    def check_fallback_length(self) -> "GameConfig":
        """The fallback root word must itself be a valid root word."""
        if self.fallback_root_word is not None:
            fallback = self.fallback_root_word.strip().lower()
            if len(fallback) < self.min_root_length:
                raise ValueError(
                    f"fallback_root_word '{fallback}' is shorter than "
                    f"min_root_length ({self.min_root_length})"
                )
            self.fallback_root_word = fallback
        return self


class SessionState(BaseModel):
    """Snapshot of a session handed to the presentation layer."""
    root_word: Optional[str] = None
    score: int = 0
    used_words: List[str] = Field(default_factory=list)
