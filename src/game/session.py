"""
Game session: owns the root word, accepted words and score for one round.

Validation is delegated to the verifiers package; the session only applies
the outcome to its own state.
"""

from functools import partial
from typing import Callable, List, Optional
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .models import GameConfig, SessionState, DEFAULT_ROOT_WORD, MIN_ROOT_LENGTH
from .root_words import RootWordSource, BUNDLED_START_WORDS
from ..verifiers.data import check_word, is_supported_language, WordList
from ..verifiers.models import ValidationVerdict, ACCEPTED
from ..verifiers.parsing import normalize_word
from ..verifiers.verify import validate, WordChecker, DEFAULT_LANGUAGE


class GameError(Exception):
    """Base class for game configuration and usage errors."""


class NoActiveRoundError(GameError):
    """Raised when a word is submitted before any round has started."""


class RootWordUnavailableError(GameError):
    """Raised when no root word can be obtained and no fallback is configured."""


class UnsupportedLanguageError(GameError):
    """Raised when the dictionary has no words for the configured language."""


class GameSession(BaseModel):
    """
    Manages the state of one word scramble game.

    Attributes:
        is_real_word: Dictionary oracle, called as is_real_word(word, language)
        language: Language tag passed to the oracle
        root_words: Optional default source used by start_round
        fallback_root_word: Root word used when the source yields nothing
        min_root_length: Shortest acceptable root word
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    is_real_word: WordChecker
    language: str = DEFAULT_LANGUAGE
    root_words: Optional[RootWordSource] = None
    fallback_root_word: Optional[str] = DEFAULT_ROOT_WORD
    min_root_length: int = Field(default=MIN_ROOT_LENGTH, ge=1)

    _root_word: Optional[str] = PrivateAttr(default=None)
    _used_words: List[str] = PrivateAttr(default_factory=list)
    _score: int = PrivateAttr(default=0)

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        is_real_word: Optional[WordChecker] = None,
    ) -> "GameSession":
        """
        Factory method to create a session wired from a configuration.

        Args:
            config: Optional GameConfig instance (defaults if omitted)
            is_real_word: Optional oracle overriding the configured dictionary

        Returns:
            A new GameSession with no active round

        Raises:
            UnsupportedLanguageError: If no word list is configured and
                wordfreq has no dictionary for the language
        """
        if config is None:
            config = GameConfig()

        if is_real_word is None:
            if config.word_list:
                is_real_word = WordList.load(config.word_list, language=config.language).is_recognized
            else:
                if not is_supported_language(config.language):
                    raise UnsupportedLanguageError(
                        f"No dictionary available for language '{config.language}'"
                    )
                is_real_word = partial(check_word, min_zipf=config.min_zipf)

        root_words = RootWordSource.load(
            config.start_words or BUNDLED_START_WORDS,
            seed=config.seed,
            min_length=config.min_root_length,
        )

        return cls(
            is_real_word=is_real_word,
            language=config.language,
            root_words=root_words,
            fallback_root_word=config.fallback_root_word,
            min_root_length=config.min_root_length,
        )

    @property
    def root_word(self) -> Optional[str]:
        """Current root word, or None before the first round."""
        return self._root_word

    @property
    def score(self) -> int:
        return self._score

    @property
    def used_words(self) -> List[str]:
        """Accepted words, most recent first."""
        return self._used_words.copy()

    @property
    def in_round(self) -> bool:
        return self._root_word is not None

    def start_round(self, pick_root_word: Optional[Callable[[], Optional[str]]] = None) -> str:
        """
        Start a new round, discarding any round in progress.

        Args:
            pick_root_word: Root word source; defaults to this session's
                root_words.pick when omitted

        Returns:
            The new root word

        Raises:
            RootWordUnavailableError: If the source yields no usable word
                and no fallback is configured
        """
        if pick_root_word is None and self.root_words is not None:
            pick_root_word = self.root_words.pick

        picked = pick_root_word() if pick_root_word is not None else None
        root_word = normalize_word(picked) if picked else ""

        if len(root_word) < self.min_root_length:
            root_word = normalize_word(self.fallback_root_word or "")

        if len(root_word) < self.min_root_length:
            raise RootWordUnavailableError(
                "No root word available and no usable fallback_root_word configured"
            )

        self._root_word = root_word
        self._used_words = []
        self._score = 0
        return root_word

    def submit(self, candidate: str) -> ValidationVerdict:
        """
        Submit a word for the current round.

        Accepted words go to the front of used_words and add their length to
        the score. Rejections leave the session unchanged.

        Raises:
            NoActiveRoundError: If start_round has not been called
        """
        if self._root_word is None:
            raise NoActiveRoundError("Call start_round() before submitting words")

        word = normalize_word(candidate)
        verdict = validate(word, self._root_word, self._used_words, self.is_real_word, self.language)

        if verdict == ACCEPTED:
            self._used_words.insert(0, word)
            self._update_score(word)

        return verdict

    def _update_score(self, word: str) -> None:
        self._score += len(word)

    def get_state(self) -> SessionState:
        """Get a snapshot of the current session state."""
        return SessionState(
            root_word=self._root_word,
            score=self._score,
            used_words=self.used_words,
        )
