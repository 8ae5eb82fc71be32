"""In-memory word list dictionary."""

from pathlib import Path
from typing import Iterable, Set

from pydantic import BaseModel, Field


class WordList(BaseModel):
    """
    A fixed dictionary of lowercase words for a single language.

    File format is one word per line; blank lines are skipped.
    """

    language: str = "en"
    words: Set[str] = Field(default_factory=set)

    @classmethod
    def from_words(cls, words: Iterable[str], language: str = "en") -> "WordList":
        """Build a word list from any iterable of words."""
        cleaned = {w.strip().lower() for w in words}
        cleaned.discard("")
        return cls(language=language, words=cleaned)

    @classmethod
    def load(cls, path: str | Path, language: str = "en") -> "WordList":
        """
        Load a word list from a newline-delimited text file.

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Word list file not found: {path}")

        with open(path, encoding="utf-8") as f:
            return cls.from_words(f, language=language)

    def is_recognized(self, word: str, language: str) -> bool:
        """True if the word is listed and the language matches this list."""
        return language == self.language and word.lower() in self.words

    def __len__(self) -> int:
        return len(self.words)
