"""
podium.analyze.timeline - Pace timeline segmentation.

Splits the transcript into fixed-width windows starting at the first
word, measures WPM per window, and derives momentum (end pace vs. start
pace), rhythm variation (spread of window paces), and the best-delivered
windows.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from podium.analyze.basic import duration_minutes
from podium.analyze.fillers import is_filler_token
from podium.analyze.fluency import IDEAL_WPM_MAX, IDEAL_WPM_MIN
from podium.models import PaceSegment, PeakSegment, Word
from podium.utils import round_int

SEGMENT_DURATION_MS = 30000
PEAK_SEGMENT_COUNT = 3
PEAK_TARGET_WPM = 140


def words_in_window(words: Sequence[Word], start_ms: int, end_ms: int) -> list[Word]:
    """Words whose start falls in [start_ms, end_ms)."""
    return [w for w in words if start_ms <= w.start < end_ms]


def pace_timeline(
    words: Sequence[Word],
    segment_duration_ms: int = SEGMENT_DURATION_MS,
) -> list[PaceSegment] | None:
    """Per-window WPM across the transcript.

    The final window is clipped to the last word's end. Windows without
    any word are skipped rather than reported as zero.

    Args:
        words: Ordered word list
        segment_duration_ms: Window width in milliseconds

    Returns:
        Ordered list of windows, or None if no window holds a word
    """
    if not words:
        return None

    last_end = words[-1].end
    segments = []
    window_start = words[0].start

    while window_start < last_end:
        window_end = min(window_start + segment_duration_ms, last_end)
        in_window = words_in_window(words, window_start, window_end)

        if in_window:
            minutes = duration_minutes(window_end - window_start)
            segments.append(
                PaceSegment(
                    start_ms=window_start,
                    end_ms=window_end,
                    wpm=round_int(len(in_window) / minutes),
                    word_count=len(in_window),
                )
            )

        window_start = window_end

    return segments or None


def momentum_score(timeline: Sequence[PaceSegment] | None) -> int | None:
    """Last window WPM as a percentage of the first.

    Above 100 means the speaker sped up. Needs at least two windows.
    """
    if not timeline or len(timeline) < 2:
        return None

    first_wpm = timeline[0].wpm
    if first_wpm == 0:
        return 100

    return round_int(timeline[-1].wpm / first_wpm * 100)


def rhythm_variation(timeline: Sequence[PaceSegment] | None) -> int | None:
    """Population standard deviation of window WPMs. Needs at least two windows."""
    if not timeline or len(timeline) < 2:
        return None

    wpms = np.array([s.wpm for s in timeline], dtype=float)
    return round_int(float(np.std(wpms)))


def score_segment(
    wpm: int,
    filler_count: int,
    ideal_min: int = IDEAL_WPM_MIN,
    ideal_max: int = IDEAL_WPM_MAX,
) -> int:
    """Score a window out of 100: half for pace, half for few fillers."""
    if ideal_min <= wpm <= ideal_max:
        wpm_score = 50.0
    else:
        wpm_score = max(0.0, 50 - abs(wpm - PEAK_TARGET_WPM) / 2)
    filler_score = max(0, 50 - filler_count * 10)
    return round_int(wpm_score + filler_score)


def peak_segments(
    words: Sequence[Word],
    timeline: Sequence[PaceSegment] | None,
    count: int = PEAK_SEGMENT_COUNT,
    ideal_wpm_min: int = IDEAL_WPM_MIN,
    ideal_wpm_max: int = IDEAL_WPM_MAX,
) -> list[PeakSegment] | None:
    """Best-scoring windows, highest first; ties keep timeline order."""
    if not timeline:
        return None

    scored = []
    for segment in timeline:
        in_window = words_in_window(words, segment.start_ms, segment.end_ms)
        filler_count = sum(1 for w in in_window if is_filler_token(w))
        scored.append(
            PeakSegment(
                start_ms=segment.start_ms,
                end_ms=segment.end_ms,
                wpm=segment.wpm,
                filler_count=filler_count,
                score=score_segment(segment.wpm, filler_count, ideal_wpm_min, ideal_wpm_max),
            )
        )

    scored.sort(key=lambda s: s.score, reverse=True)
    return scored[:count]
