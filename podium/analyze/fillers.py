"""
podium.analyze.fillers - Filler word lexicon and detection.

Single-token and two-word phrase matching run as separate passes. A word
inside a matched phrase can still match on its own, so counts may include
both; callers rely on this.
"""

from __future__ import annotations

from collections.abc import Sequence

from podium.models import Word

FILLER_TOKENS = frozenset(
    {
        "um",
        "uh",
        "er",
        "erm",
        "hmm",
        "ah",
        "like",
        "basically",
        "actually",
        "literally",
        "so",
        "right",
        "okay",
        "well",
    }
)

FILLER_PHRASES = frozenset({"you know", "sort of", "kind of", "i mean"})


def normalize_token(text: str) -> str:
    """Lowercase and strip surrounding whitespace for lexicon lookup."""
    return text.strip().lower()


def is_filler_token(word: Word) -> bool:
    return normalize_token(word.text) in FILLER_TOKENS


def filler_token_indices(words: Sequence[Word]) -> list[int]:
    """Indices of words that are single-token fillers, in order."""
    return [i for i, w in enumerate(words) if is_filler_token(w)]


def detect_fillers(words: Sequence[Word]) -> list[str]:
    """Find every filler occurrence in the word list.

    Single-token matches come first (original word text, in order),
    followed by two-word phrase matches (lowercased phrase, in order).
    Phrase matching slides over every adjacent pair.

    Args:
        words: Ordered word list

    Returns:
        List of matched filler strings; its length is the filler count
    """
    found = [w.text for w in words if is_filler_token(w)]

    for i in range(len(words) - 1):
        phrase = f"{normalize_token(words[i].text)} {normalize_token(words[i + 1].text)}"
        if phrase in FILLER_PHRASES:
            found.append(phrase)

    return found
