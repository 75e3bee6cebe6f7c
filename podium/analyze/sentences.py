"""
podium.analyze.sentences - Sentence structure from transcript text.

Works on the raw text only; timing plays no part.
"""

from __future__ import annotations

import re

from podium.models import SentenceStats
from podium.utils import round_int

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
RUN_ON_SENTENCE_WORDS = 25


def split_sentences(text: str) -> list[str]:
    """Split on runs of . ! ? and drop blank fragments."""
    return [s for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


def sentence_stats(
    text: str | None,
    run_on_words: int = RUN_ON_SENTENCE_WORDS,
) -> SentenceStats | None:
    """Average, longest, and shortest sentence length plus run-on count.

    Args:
        text: Full transcript text
        run_on_words: Sentences with more words than this are run-ons

    Returns:
        SentenceStats, or None if the text has no sentences
    """
    sentences = split_sentences(text or "")
    if not sentences:
        return None

    counts = [len(s.split()) for s in sentences]

    return SentenceStats(
        avg_words_per_sentence=round_int(sum(counts) / len(counts)),
        longest_sentence=max(counts),
        shortest_sentence=min(counts),
        run_on_sentences=sum(1 for c in counts if c > run_on_words),
    )
