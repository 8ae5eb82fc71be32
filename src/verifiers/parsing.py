"""Candidate word normalization."""


def normalize_word(candidate: str) -> str:
    """Lowercase the candidate and strip surrounding whitespace."""
    return candidate.strip().lower()
