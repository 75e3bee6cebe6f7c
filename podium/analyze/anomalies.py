"""
podium.analyze.anomalies - Hotspots, critical moments, and turn-taking.

Consumes filler tags, gaps, and confidence from the word list to find:

- filler hotspots: fillers clustered inside a rolling window
- the longest pause above the pause threshold
- critical moments: dense filler clusters, a very long pause, and runs
  of barely recognized words
- speaker interruptions: overlapping or near-instant speaker changes
- breathing pattern: gaps in the typical breath range (an estimate)
"""

from __future__ import annotations

from collections.abc import Sequence

from podium.analyze.basic import PAUSE_THRESHOLD_MS
from podium.analyze.fillers import filler_token_indices
from podium.models import (
    BreathingPause,
    CriticalMoment,
    FillerHotspot,
    LongestPause,
    SpeakerInterruption,
    Word,
)
from podium.utils import round_half_up, round_int

HOTSPOT_WINDOW_MS = 10000

CRITICAL_FILLER_COUNT = 3
HIGH_FILLER_COUNT = 4
CRITICAL_PAUSE_MS = 2000
HIGH_PAUSE_MS = 3000

UNCLEAR_CONFIDENCE_THRESHOLD = 0.5
UNCLEAR_GAP_MS = 3000
UNCLEAR_CLUSTER_SIZE = 3

INTERRUPTION_GAP_MS = 200
BREATH_MIN_MS = 600
BREATH_MAX_MS = 1500


def filler_hotspots(
    words: Sequence[Word],
    window_ms: int = HOTSPOT_WINDOW_MS,
) -> list[FillerHotspot] | None:
    """Greedy clusters of single-token fillers.

    A cluster opens at a filler and absorbs following fillers that start
    within window_ms of the opening filler's start. Clusters with fewer
    than two fillers are dropped.
    """
    indices = filler_token_indices(words)
    if len(indices) < 2:
        return None

    hotspots = []
    i = 0
    while i < len(indices):
        first = words[indices[i]]
        tokens = [first.text]
        last = i

        for j in range(i + 1, len(indices)):
            if words[indices[j]].start - first.start <= window_ms:
                tokens.append(words[indices[j]].text)
                last = j
            else:
                break

        if len(tokens) >= 2:
            hotspots.append(
                FillerHotspot(
                    start_ms=first.start,
                    end_ms=words[indices[last]].end,
                    fillers=tokens,
                    count=len(tokens),
                )
            )

        i = last + 1

    return hotspots or None


def longest_pause(
    words: Sequence[Word],
    pause_threshold_ms: int = PAUSE_THRESHOLD_MS,
) -> LongestPause | None:
    """Largest gap above the pause threshold; the earliest wins a tie."""
    longest = None
    max_gap = 0

    for current, following in zip(words, words[1:]):
        gap = following.start - current.end
        if gap > max_gap and gap > pause_threshold_ms:
            max_gap = gap
            longest = LongestPause(
                duration_ms=gap,
                timestamp=current.end,
                before_word=current.text,
                after_word=following.text,
            )

    return longest


def _unclear_speech_moments(
    words: Sequence[Word],
    threshold: float,
    gap_ms: int,
) -> list[CriticalMoment]:
    unclear = [w for w in words if w.confidence is not None and w.confidence < threshold]

    clusters: list[list[Word]] = []
    for word in unclear:
        if clusters and word.start - clusters[-1][-1].end < gap_ms:
            clusters[-1].append(word)
        else:
            clusters.append([word])

    return [
        CriticalMoment(
            timestamp=cluster[0].start,
            issue="unclear_speech",
            severity="medium",
            details=f"{len(cluster)} unclear words",
        )
        for cluster in clusters
        if len(cluster) >= UNCLEAR_CLUSTER_SIZE
    ]


def critical_moments(
    words: Sequence[Word],
    hotspots: Sequence[FillerHotspot] | None,
    pause: LongestPause | None,
    unclear_threshold: float = UNCLEAR_CONFIDENCE_THRESHOLD,
    unclear_gap_ms: int = UNCLEAR_GAP_MS,
) -> list[CriticalMoment] | None:
    """Collect flagged moments, ordered by timestamp.

    Args:
        words: Ordered word list
        hotspots: Output of filler_hotspots
        pause: Output of longest_pause
        unclear_threshold: Confidence below which a word is unclear
        unclear_gap_ms: Max gap between unclear words in one cluster

    Returns:
        Time-ordered moments, or None if nothing was flagged
    """
    moments = []

    for hotspot in hotspots or []:
        if hotspot.count >= CRITICAL_FILLER_COUNT:
            seconds = round_int((hotspot.end_ms - hotspot.start_ms) / 1000)
            moments.append(
                CriticalMoment(
                    timestamp=hotspot.start_ms,
                    issue="filler_cluster",
                    severity="high" if hotspot.count >= HIGH_FILLER_COUNT else "medium",
                    details=f"{hotspot.count} filler words in {seconds}s",
                )
            )

    if pause is not None and pause.duration_ms > CRITICAL_PAUSE_MS:
        seconds = round_half_up(pause.duration_ms / 1000, 1)
        moments.append(
            CriticalMoment(
                timestamp=pause.timestamp,
                issue="long_pause",
                severity="high" if pause.duration_ms > HIGH_PAUSE_MS else "medium",
                details=f"{seconds:.1f}s pause",
            )
        )

    moments.extend(_unclear_speech_moments(words, unclear_threshold, unclear_gap_ms))

    moments.sort(key=lambda m: m.timestamp)
    return moments or None


def speaker_interruptions(
    words: Sequence[Word],
    gap_ms: int = INTERRUPTION_GAP_MS,
) -> list[SpeakerInterruption] | None:
    """Speaker changes with an overlap or a gap shorter than gap_ms.

    Both words need a speaker label. duration_ms is the overlap, zero
    for a quick but non-overlapping handover.
    """
    events = []

    for current, following in zip(words, words[1:]):
        if not current.speaker or not following.speaker:
            continue
        if current.speaker == following.speaker:
            continue

        gap = following.start - current.end
        if gap < gap_ms:
            events.append(
                SpeakerInterruption(
                    timestamp=following.start,
                    interrupter=following.speaker,
                    interrupted=current.speaker,
                    duration_ms=max(0, -gap),
                )
            )

    return events or None


def breathing_pattern(
    words: Sequence[Word],
    min_ms: int = BREATH_MIN_MS,
    max_ms: int = BREATH_MAX_MS,
) -> list[BreathingPause] | None:
    """Gaps within the breath range, marked as estimates.

    Computed independently of pause counting; the ranges overlap.
    """
    pauses = []
    for current, following in zip(words, words[1:]):
        gap = following.start - current.end
        if min_ms <= gap <= max_ms:
            pauses.append(
                BreathingPause(timestamp=current.end, pause_duration_ms=gap, estimated=True)
            )

    return pauses or None
