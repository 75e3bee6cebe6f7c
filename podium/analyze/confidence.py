"""
podium.analyze.confidence - Recognition confidence and clarity.

Confidence metrics exist only when the provider supplied per-word
confidence. Clarity combines average confidence with how close the pace
is to ideal and how much of the recording is speech.
"""

from __future__ import annotations

from collections.abc import Sequence

from podium.analyze.fluency import IDEAL_WPM_MAX, IDEAL_WPM_MIN
from podium.models import LowConfidenceWord, Word
from podium.utils import round_int

LOW_CONFIDENCE_THRESHOLD = 0.7
MAX_EXAMPLES = 20
CLARITY_TARGET_WPM = 140


def confidence_metrics(
    words: Sequence[Word],
    threshold: float = LOW_CONFIDENCE_THRESHOLD,
    max_examples: int = MAX_EXAMPLES,
) -> tuple[int | None, list[LowConfidenceWord] | None]:
    """Average confidence score and the first low-confidence words.

    Args:
        words: Ordered word list
        threshold: Words strictly below this confidence are reported
        max_examples: Cap on reported low-confidence words

    Returns:
        Tuple of (confidence_score, low_confidence_words); both None when
        no word carries a confidence value
    """
    scored = [w for w in words if w.confidence is not None]
    if not scored:
        return None, None

    mean = sum(w.confidence for w in scored) / len(scored)
    score = round_int(mean * 100)

    low = [
        LowConfidenceWord(word=w.text, confidence=w.confidence, timestamp=w.start)
        for w in scored
        if w.confidence < threshold
    ][:max_examples]

    return score, low or None


def clarity_score(
    confidence_score: int | None,
    wpm: int | None,
    silence_ratio: float | None,
    ideal_wpm_min: int = IDEAL_WPM_MIN,
    ideal_wpm_max: int = IDEAL_WPM_MAX,
) -> int | None:
    """Composite of confidence, pace closeness to ideal, and articulation.

    Returns None unless confidence, a non-zero wpm, and silence ratio are
    all available.
    """
    if confidence_score is None or not wpm or silence_ratio is None:
        return None

    confidence_factor = confidence_score / 100
    if ideal_wpm_min <= wpm <= ideal_wpm_max:
        pace_factor = 1.0
    else:
        pace_factor = max(0.5, 1 - abs(wpm - CLARITY_TARGET_WPM) / 200)
    articulation_factor = max(0.5, 1 - silence_ratio)

    return round_int(confidence_factor * pace_factor * articulation_factor * 100)
