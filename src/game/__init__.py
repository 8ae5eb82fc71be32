"""Game layer for word-scramble."""

from .models import GameConfig, SessionState, DEFAULT_ROOT_WORD, MIN_ROOT_LENGTH
from .root_words import RootWordSource, BUNDLED_START_WORDS
from .session import (
    GameSession,
    GameError,
    NoActiveRoundError,
    RootWordUnavailableError,
    UnsupportedLanguageError,
)
from .messages import VERDICT_MESSAGES, format_verdict

__all__ = [
    "GameConfig",
    "SessionState",
    "DEFAULT_ROOT_WORD",
    "MIN_ROOT_LENGTH",
    "RootWordSource",
    "BUNDLED_START_WORDS",
    "GameSession",
    "GameError",
    "NoActiveRoundError",
    "RootWordUnavailableError",
    "UnsupportedLanguageError",
    "VERDICT_MESSAGES",
    "format_verdict",
]
