"""
podium.analyze.fluency - Composite fluency score and labels.

The score is the sum of four piecewise-linear components:

    pace               0-40   full inside the ideal WPM range
    silence ratio      0-30   full between 10% and 25%
    filler rate        0-20   full at <= 2 fillers per minute
    pause naturalness  0-10   full at 3-8 pauses per minute

The breakpoints encode the product's notion of natural delivery and are
kept exactly as calibrated.
"""

from __future__ import annotations

from podium.utils import round_int

IDEAL_WPM_MIN = 120
IDEAL_WPM_MAX = 160


def pace_component(
    wpm: float,
    ideal_min: int = IDEAL_WPM_MIN,
    ideal_max: int = IDEAL_WPM_MAX,
) -> float:
    if ideal_min <= wpm <= ideal_max:
        return 40.0
    if wpm < ideal_min:
        return max(0.0, wpm / ideal_min * 40)
    return max(0.0, 40 - (wpm - ideal_max) / 40)


def silence_component(silence_ratio: float) -> float:
    if 0.10 <= silence_ratio <= 0.25:
        return 30.0
    if silence_ratio < 0.10:
        return silence_ratio / 0.10 * 30
    return max(0.0, 30 - (silence_ratio - 0.25) * 80)


def filler_component(filler_per_minute: float) -> float:
    if filler_per_minute <= 2:
        return 20.0
    if filler_per_minute <= 5:
        return 20 - (filler_per_minute - 2) * 5
    return max(0.0, 5 - (filler_per_minute - 5))


def pause_component(pause_count: int, duration_minutes: float) -> float:
    pauses_per_minute = pause_count / duration_minutes
    if 3 <= pauses_per_minute <= 8:
        return 10.0
    if pauses_per_minute < 3:
        return pauses_per_minute / 3 * 10
    return max(0.0, 10 - (pauses_per_minute - 8) * 2)


def fluency_score(
    wpm: float,
    silence_ratio: float,
    filler_per_minute: float,
    pause_count: int,
    duration_minutes: float,
    ideal_wpm_min: int = IDEAL_WPM_MIN,
    ideal_wpm_max: int = IDEAL_WPM_MAX,
) -> int:
    """Compute the 0-100 fluency score.

    Args:
        wpm: Overall words per minute
        silence_ratio: Unrounded silence / duration ratio
        filler_per_minute: Unrounded filler rate
        pause_count: Number of gaps above the pause threshold
        duration_minutes: Floored speaking duration in minutes

    Returns:
        Integer score clamped to [0, 100]
    """
    total = (
        pace_component(wpm, ideal_wpm_min, ideal_wpm_max)
        + silence_component(silence_ratio)
        + filler_component(filler_per_minute)
        + pause_component(pause_count, duration_minutes)
    )
    return round_int(max(0.0, min(100.0, total)))


def get_fluency_label(score: float) -> str:
    """Human-readable label for a fluency score."""
    if score >= 85:
        return "Excellent"
    elif score >= 70:
        return "Good"
    elif score >= 55:
        return "Fair"
    elif score >= 40:
        return "Needs Improvement"
    return "Poor"


def get_wpm_label(
    wpm: float,
    ideal_min: int = IDEAL_WPM_MIN,
    ideal_max: int = IDEAL_WPM_MAX,
) -> str:
    """Human-readable label for a speaking pace."""
    if wpm < 100:
        return "Too Slow"
    elif wpm < ideal_min:
        return "Slow"
    elif wpm <= ideal_max:
        return "Good Pace"
    elif wpm <= 180:
        return "Fast"
    return "Too Fast"
