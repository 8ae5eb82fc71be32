import random
from pathlib import Path
from typing import List, Optional
from pydantic import BaseModel, Field, PrivateAttr

from .models import MIN_ROOT_LENGTH


BUNDLED_START_WORDS = Path(__file__).parent / "data" / "start.txt"


class RootWordSource(BaseModel):
    """
    Picks root words at random from a fixed candidate list.

    Attributes:
        words: Candidate root words (lowercase)
        seed: Optional random seed for reproducibility
    """

    words: List[str] = Field(default_factory=list)
    seed: Optional[int] = None
    _rng: random.Random = PrivateAttr(default=None)

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    @classmethod
    def load(
        cls,
        path: str | Path = BUNDLED_START_WORDS,
        seed: Optional[int] = None,
        min_length: int = MIN_ROOT_LENGTH,
    ) -> "RootWordSource":
        """
        Load candidate root words from a newline-delimited file.

        Blank lines and words shorter than `min_length` are dropped.

        Raises:
            FileNotFoundError: If the file doesn't exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Start word list not found: {path}")

        words = []
        for line in path.read_text(encoding="utf-8").split("\n"):
            word = line.strip().lower()
            if len(word) >= min_length:
                words.append(word)

        return cls(words=words, seed=seed)

    @property
    def words_available(self) -> int:
        """Number of candidate root words."""
        return len(self.words)

    def pick(self) -> Optional[str]:
        """Draw one root word, or None if the list is empty."""
        if not self.words:
            return None
        return self._rng.choice(self.words)
