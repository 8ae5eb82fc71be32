"""User-facing messages for rejected submissions."""

from typing import Dict, Optional, Tuple

from ..verifiers.models import (
    ValidationVerdict,
    REJECTED_DUPLICATE_OR_ROOT,
    REJECTED_IMPOSSIBLE_LETTERS,
    REJECTED_NOT_A_REAL_WORD,
)


# Empty submissions are ignored silently, so they have no entry.
VERDICT_MESSAGES: Dict[str, Tuple[str, str]] = {
    REJECTED_DUPLICATE_OR_ROOT: ("Word used already", "Be more original."),
    REJECTED_IMPOSSIBLE_LETTERS: ("Word not possible", "You can't spell that word from '{root_word}'!"),
    REJECTED_NOT_A_REAL_WORD: ("Word not recognized", "You can't just make them up, you know!"),
}


def format_verdict(verdict: ValidationVerdict, root_word: str = "") -> Optional[Tuple[str, str]]:
    """
    Get the (title, message) pair to show for a verdict.

    Returns None for verdicts that need no message (acceptance, empty input).
    """
    if verdict not in VERDICT_MESSAGES:
        return None
    title, message = VERDICT_MESSAGES[verdict]
    return title, message.format(root_word=root_word)
