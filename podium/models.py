"""
podium.models - Input and output data models.

Word is the provider-supplied input unit. DeliveryMetrics is the single
artifact produced by the engine; every field is derived from the input
words and transcript text.

Attributes are snake_case in Python and serialize to camelCase
(``overallWpm``, ``silenceRatio``, ...) via ``to_dict()``. Optional
metrics are ``None`` when not applicable and are left out of the
serialized form, so callers read a missing key as "not applicable",
never as zero.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Word(BaseModel):
    """A single transcribed word with millisecond timing."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    start: int
    end: int
    text: str
    confidence: float | None = None
    speaker: str | None = None


class TranscriptInput(BaseModel):
    """Provider payload: full transcript text plus word-level timings."""

    model_config = ConfigDict(extra="ignore")

    text: str | None = ""
    words: list[Word] = Field(default_factory=list)


class MetricsModel(BaseModel):
    """Base for output models: camelCase aliases, lookup by field name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class LowConfidenceWord(MetricsModel):
    word: str
    confidence: float
    timestamp: int


class LongestPause(MetricsModel):
    duration_ms: int
    timestamp: int
    before_word: str | None = None
    after_word: str | None = None


class PaceSegment(MetricsModel):
    start_ms: int
    end_ms: int
    wpm: int
    word_count: int


class SentenceStats(MetricsModel):
    avg_words_per_sentence: int
    longest_sentence: int
    shortest_sentence: int
    run_on_sentences: int


class FillerHotspot(MetricsModel):
    start_ms: int
    end_ms: int
    fillers: list[str]
    count: int


class PeakSegment(MetricsModel):
    start_ms: int
    end_ms: int
    wpm: int
    filler_count: int
    score: int


class CriticalMoment(MetricsModel):
    timestamp: int
    issue: Literal["filler_cluster", "long_pause", "unclear_speech"]
    severity: Literal["low", "medium", "high"]
    details: str


class SpeakerInterruption(MetricsModel):
    timestamp: int
    interrupter: str
    interrupted: str
    duration_ms: int


class BreathingPause(MetricsModel):
    timestamp: int
    pause_duration_ms: int
    estimated: bool = True


class DeliveryMetrics(MetricsModel):
    """Delivery and fluency metrics for one transcript."""

    overall_wpm: int = 0
    silence_ratio: float = 0.0
    total_silence_ms: int = 0
    pause_count: int = 0
    avg_pause_duration_ms: int = 0
    talk_time_by_speaker_ms: dict[str, int] = Field(default_factory=dict)
    filler_per_minute: float = 0.0
    fluency_score: int = 0
    filler_words: list[str] = Field(default_factory=list)

    confidence_score: int | None = None
    low_confidence_words: list[LowConfidenceWord] | None = None
    longest_pause: LongestPause | None = None
    pace_timeline: list[PaceSegment] | None = None
    momentum_score: int | None = None
    sentence_stats: SentenceStats | None = None
    filler_hotspots: list[FillerHotspot] | None = None
    rhythm_variation: int | None = None
    peak_segments: list[PeakSegment] | None = None
    clarity_score: int | None = None
    critical_moments: list[CriticalMoment] | None = None
    speaker_interruptions: list[SpeakerInterruption] | None = None
    breathing_pattern: list[BreathingPause] | None = None
