"""
podium.analyze.engine - Delivery metrics coordinator.

Runs the analysis passes in dependency order over one immutable word
list and assembles a DeliveryMetrics:

    basic aggregation -> fluency -> confidence/clarity -> pace timeline
    -> sentence structure -> hotspots and anomalies

Passes share no state; each receives only the inputs it needs. An empty
word list yields a zero-valued result rather than an error.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from podium.analyze.anomalies import (
    breathing_pattern,
    critical_moments,
    filler_hotspots,
    longest_pause,
    speaker_interruptions,
)
from podium.analyze.basic import aggregate
from podium.analyze.confidence import clarity_score, confidence_metrics
from podium.analyze.fluency import fluency_score
from podium.analyze.sentences import sentence_stats
from podium.analyze.timeline import momentum_score, pace_timeline, peak_segments, rhythm_variation
from podium.config import EngineConfig
from podium.io import parse_transcript
from podium.logging import logger
from podium.models import DeliveryMetrics, Word
from podium.utils import round_half_up
from podium.validation import is_sorted_by_start


def compute(
    words: Sequence[Word],
    transcript_text: str | None = "",
    config: EngineConfig | None = None,
) -> DeliveryMetrics:
    """Compute delivery metrics for one transcript.

    Words are assumed to be ordered by start time and are not re-sorted;
    unordered input is logged as a warning and analyzed as given.

    Args:
        words: Word-level transcript from the speech provider
        transcript_text: Full transcript text, used for sentence structure
        config: Analysis thresholds (defaults when omitted)

    Returns:
        Fully populated DeliveryMetrics
    """
    config = config or EngineConfig()
    words = list(words)

    if not words:
        logger.debug("No words in transcript; returning empty metrics")
        return DeliveryMetrics()

    if not is_sorted_by_start(words):
        logger.warning("Words are not ordered by start time; metrics may be unreliable")

    basic = aggregate(
        words,
        pause_threshold_ms=config.pause_threshold_ms,
        default_speaker=config.default_speaker,
    )
    logger.debug(
        "Basic pass: %d words over %d ms, %d wpm, %d pauses, %d fillers",
        basic.word_count,
        basic.total_duration_ms,
        basic.wpm,
        basic.pause_count,
        basic.filler_count,
    )

    fluency = fluency_score(
        wpm=basic.wpm,
        silence_ratio=basic.silence_ratio,
        filler_per_minute=basic.filler_per_minute,
        pause_count=basic.pause_count,
        duration_minutes=basic.duration_minutes,
        ideal_wpm_min=config.ideal_wpm_min,
        ideal_wpm_max=config.ideal_wpm_max,
    )

    confidence, low_confidence = confidence_metrics(
        words,
        threshold=config.low_confidence_threshold,
        max_examples=config.max_examples,
    )
    clarity = clarity_score(
        confidence,
        basic.wpm,
        basic.silence_ratio,
        ideal_wpm_min=config.ideal_wpm_min,
        ideal_wpm_max=config.ideal_wpm_max,
    )

    timeline = pace_timeline(words, segment_duration_ms=config.segment_duration_ms)
    peaks = peak_segments(
        words,
        timeline,
        count=config.peak_segment_count,
        ideal_wpm_min=config.ideal_wpm_min,
        ideal_wpm_max=config.ideal_wpm_max,
    )
    logger.debug("Pace timeline: %d window(s)", len(timeline or []))

    sentences = sentence_stats(transcript_text, run_on_words=config.run_on_sentence_words)

    hotspots = filler_hotspots(words, window_ms=config.hotspot_window_ms)
    pause = longest_pause(words, pause_threshold_ms=config.pause_threshold_ms)
    moments = critical_moments(
        words,
        hotspots,
        pause,
        unclear_threshold=config.unclear_confidence_threshold,
        unclear_gap_ms=config.unclear_gap_ms,
    )
    logger.debug("Critical moments: %d", len(moments or []))

    return DeliveryMetrics(
        overall_wpm=basic.wpm,
        silence_ratio=round_half_up(basic.silence_ratio, 3),
        total_silence_ms=basic.total_silence_ms,
        pause_count=basic.pause_count,
        avg_pause_duration_ms=basic.avg_pause_duration_ms,
        talk_time_by_speaker_ms=basic.talk_time_by_speaker_ms,
        filler_per_minute=round_half_up(basic.filler_per_minute, 1),
        fluency_score=fluency,
        filler_words=basic.fillers[: config.max_examples],
        confidence_score=confidence,
        low_confidence_words=low_confidence,
        longest_pause=pause,
        pace_timeline=timeline,
        momentum_score=momentum_score(timeline),
        sentence_stats=sentences,
        filler_hotspots=hotspots,
        rhythm_variation=rhythm_variation(timeline),
        peak_segments=peaks,
        clarity_score=clarity,
        critical_moments=moments,
        speaker_interruptions=speaker_interruptions(words, gap_ms=config.interruption_gap_ms),
        breathing_pattern=breathing_pattern(
            words,
            min_ms=config.breath_min_ms,
            max_ms=config.breath_max_ms,
        ),
    )


def compute_from_result(
    result: dict[str, Any],
    config: EngineConfig | None = None,
) -> DeliveryMetrics:
    """Compute metrics straight from a provider transcript payload.

    Args:
        result: Dict with a "words" list and optional "text"
        config: Analysis thresholds

    Returns:
        DeliveryMetrics for the payload

    Raises:
        TranscriptError: If the payload is malformed
    """
    transcript = parse_transcript(result)
    return compute(transcript.words, transcript.text, config=config)

