"""
podium.analyze.basic - Basic aggregation pass.

One linear scan over the words producing word count, duration, overall
pace, silence and pause totals, per-speaker talk time, and filler
occurrences. Everything else in the engine builds on these numbers.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from podium.analyze.fillers import detect_fillers
from podium.models import Word
from podium.utils import round_int

PAUSE_THRESHOLD_MS = 800
MIN_DURATION_MINUTES = 0.01
DEFAULT_SPEAKER = "Speaker 1"


@dataclass
class BasicStats:
    """Unrounded aggregates from the basic pass.

    Duration runs from the first word's start to the last word's end;
    silence before the first word or after the last is not counted.
    """

    word_count: int
    total_duration_ms: int
    duration_minutes: float
    wpm: int
    total_silence_ms: int
    silence_ratio: float
    pause_durations: list[int] = field(default_factory=list)
    talk_time_by_speaker_ms: dict[str, int] = field(default_factory=dict)
    fillers: list[str] = field(default_factory=list)
    filler_per_minute: float = 0.0

    @property
    def pause_count(self) -> int:
        return len(self.pause_durations)

    @property
    def avg_pause_duration_ms(self) -> int:
        if not self.pause_durations:
            return 0
        return round_int(sum(self.pause_durations) / len(self.pause_durations))

    @property
    def filler_count(self) -> int:
        return len(self.fillers)


def duration_minutes(duration_ms: float) -> float:
    """Convert milliseconds to minutes, floored to avoid division blow-up."""
    return max(duration_ms / 60000, MIN_DURATION_MINUTES)


def word_gaps(words: Sequence[Word]) -> list[int]:
    """Gap between each adjacent pair (next.start - current.end); may be negative."""
    return [words[i + 1].start - words[i].end for i in range(len(words) - 1)]


def talk_time_by_speaker(
    words: Sequence[Word],
    default_speaker: str = DEFAULT_SPEAKER,
) -> dict[str, int]:
    """Sum word durations per speaker label, in first-appearance order."""
    totals: dict[str, int] = {}
    for word in words:
        speaker = word.speaker or default_speaker
        totals[speaker] = totals.get(speaker, 0) + (word.end - word.start)
    return totals


def aggregate(
    words: Sequence[Word],
    pause_threshold_ms: int = PAUSE_THRESHOLD_MS,
    default_speaker: str = DEFAULT_SPEAKER,
) -> BasicStats:
    """Run the basic aggregation pass.

    Args:
        words: Non-empty, start-ordered word list
        pause_threshold_ms: Gaps strictly longer than this count as pauses
        default_speaker: Talk-time key for words without a speaker label

    Returns:
        BasicStats with unrounded ratios
    """
    total_duration_ms = words[-1].end - words[0].start
    minutes = duration_minutes(total_duration_ms)
    wpm = round_int(len(words) / minutes)

    total_silence_ms = 0
    pauses: list[int] = []
    for gap in word_gaps(words):
        if gap > 0:
            total_silence_ms += gap
            if gap > pause_threshold_ms:
                pauses.append(gap)

    silence_ratio = total_silence_ms / total_duration_ms if total_duration_ms > 0 else 0.0

    fillers = detect_fillers(words)

    return BasicStats(
        word_count=len(words),
        total_duration_ms=total_duration_ms,
        duration_minutes=minutes,
        wpm=wpm,
        total_silence_ms=total_silence_ms,
        silence_ratio=silence_ratio,
        pause_durations=pauses,
        talk_time_by_speaker_ms=talk_time_by_speaker(words, default_speaker),
        fillers=fillers,
        filler_per_minute=len(fillers) / minutes,
    )
