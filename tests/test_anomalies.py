"""Tests for podium.analyze.anomalies module."""

from __future__ import annotations

from podium.analyze.anomalies import (
    breathing_pattern,
    critical_moments,
    filler_hotspots,
    longest_pause,
    speaker_interruptions,
)
from podium.models import FillerHotspot, LongestPause, Word


def _hotspot_words(word_factory) -> list[Word]:
    return word_factory(
        [
            ("um", 0, 300),
            ("we", 1000, 1200),
            ("uh", 2000, 2300),
            ("like", 4000, 4300),
            ("so", 15000, 15200),
            ("then", 20000, 20200),
            ("um", 30000, 30300),
            ("well", 35000, 35300),
        ]
    )


class TestFillerHotspots:
    def test_greedy_clusters(self, word_factory) -> None:
        hotspots = filler_hotspots(_hotspot_words(word_factory))

        assert len(hotspots) == 2
        assert hotspots[0].start_ms == 0
        assert hotspots[0].end_ms == 4300
        assert hotspots[0].fillers == ["um", "uh", "like"]
        assert hotspots[0].count == 3
        assert hotspots[1].start_ms == 30000
        assert hotspots[1].fillers == ["um", "well"]

    def test_window_measured_from_first_filler(self, word_factory) -> None:
        words = word_factory([("um", 0, 100), ("uh", 9000, 9100), ("er", 12000, 12100)])
        hotspots = filler_hotspots(words)
        assert len(hotspots) == 1
        assert hotspots[0].fillers == ["um", "uh"]

    def test_window_edge_is_inclusive(self, word_factory) -> None:
        words = word_factory([("um", 0, 100), ("uh", 10000, 10100)])
        assert filler_hotspots(words)[0].count == 2

    def test_lone_fillers_not_reported(self, word_factory) -> None:
        words = word_factory([("um", 0, 100), ("uh", 20000, 20100)])
        assert filler_hotspots(words) is None

    def test_fewer_than_two_fillers(self, even_words: list[Word]) -> None:
        assert filler_hotspots(even_words) is None


class TestLongestPause:
    def test_earliest_of_equal_pauses(self, word_factory) -> None:
        words = word_factory(
            [
                ("a", 0, 100),
                ("b", 1000, 1100),
                ("c", 3600, 3700),
                ("d", 6200, 6300),
            ]
        )
        pause = longest_pause(words)

        assert pause.duration_ms == 2500
        assert pause.timestamp == 1100
        assert pause.before_word == "b"
        assert pause.after_word == "c"

    def test_threshold_must_be_exceeded(self, word_factory) -> None:
        words = word_factory([("a", 0, 100), ("b", 900, 1000)])
        assert longest_pause(words) is None

    def test_no_pause(self, even_words: list[Word]) -> None:
        assert longest_pause(even_words) is None


class TestCriticalMoments:
    def test_filler_cluster_severity(self) -> None:
        hotspots = [
            FillerHotspot(start_ms=0, end_ms=4300, fillers=["um", "uh", "like"], count=3),
            FillerHotspot(start_ms=20000, end_ms=25000, fillers=["um"] * 4, count=4),
            FillerHotspot(start_ms=40000, end_ms=41000, fillers=["um", "uh"], count=2),
        ]
        moments = critical_moments([], hotspots, None)

        assert len(moments) == 2
        assert moments[0].issue == "filler_cluster"
        assert moments[0].severity == "medium"
        assert moments[0].details == "3 filler words in 4s"
        assert moments[1].severity == "high"
        assert moments[1].details == "4 filler words in 5s"

    def test_long_pause_severity(self) -> None:
        medium = LongestPause(duration_ms=2500, timestamp=1100, before_word="a", after_word="b")
        high = LongestPause(duration_ms=3500, timestamp=1100, before_word="a", after_word="b")

        moment = critical_moments([], None, medium)[0]
        assert moment.issue == "long_pause"
        assert moment.severity == "medium"
        assert moment.details == "2.5s pause"

        assert critical_moments([], None, high)[0].severity == "high"

    def test_pause_of_two_seconds_not_critical(self) -> None:
        pause = LongestPause(duration_ms=2000, timestamp=0, before_word="a", after_word="b")
        assert critical_moments([], None, pause) is None

    def test_unclear_speech_cluster_at_end_is_flushed(self, word_factory) -> None:
        words = word_factory(
            [
                ("clear", 0, 100, 0.95),
                ("mm", 500, 600, 0.3),
                ("hrm", 1000, 1100, 0.2),
                ("bzz", 1500, 1600, 0.4),
            ]
        )
        moments = critical_moments(words, None, None)

        assert len(moments) == 1
        assert moments[0].issue == "unclear_speech"
        assert moments[0].severity == "medium"
        assert moments[0].timestamp == 500
        assert moments[0].details == "3 unclear words"

    def test_unclear_cluster_resets_after_gap(self, word_factory) -> None:
        words = word_factory(
            [
                ("a", 0, 100, 0.3),
                ("b", 500, 600, 0.3),
                ("c", 10000, 10100, 0.3),
                ("d", 10500, 10600, 0.3),
                ("e", 11000, 11100, 0.3),
            ]
        )
        moments = critical_moments(words, None, None)

        assert len(moments) == 1
        assert moments[0].timestamp == 10000

    def test_two_unclear_clusters(self, word_factory) -> None:
        words = word_factory(
            [(f"w{i}", i * 500, i * 500 + 100, 0.1) for i in range(3)]
            + [(f"x{i}", 20000 + i * 500, 20000 + i * 500 + 100, 0.1) for i in range(4)]
        )
        moments = critical_moments(words, None, None)
        assert [m.details for m in moments] == ["3 unclear words", "4 unclear words"]

    def test_zero_confidence_is_unclear(self, word_factory) -> None:
        words = word_factory([(f"w{i}", i * 500, i * 500 + 100, 0.0) for i in range(3)])
        assert critical_moments(words, None, None)[0].details == "3 unclear words"

    def test_missing_confidence_ignored(self, even_words: list[Word]) -> None:
        assert critical_moments(even_words, None, None) is None

    def test_sorted_by_timestamp(self, word_factory) -> None:
        hotspots = [
            FillerHotspot(start_ms=8000, end_ms=9000, fillers=["um", "uh", "er"], count=3)
        ]
        pause = LongestPause(duration_ms=3100, timestamp=5000, before_word="a", after_word="b")
        words = word_factory([(f"w{i}", i * 100, i * 100 + 50, 0.2) for i in range(3)])

        moments = critical_moments(words, hotspots, pause)

        assert [m.issue for m in moments] == ["unclear_speech", "long_pause", "filler_cluster"]


class TestSpeakerInterruptions:
    def test_overlap_recorded(self, word_factory) -> None:
        words = word_factory([("so", 0, 1000, None, "A"), ("wait", 850, 1200, None, "B")])
        events = speaker_interruptions(words)

        assert len(events) == 1
        assert events[0].duration_ms == 150
        assert events[0].timestamp == 850
        assert events[0].interrupter == "B"
        assert events[0].interrupted == "A"

    def test_quick_handover_has_zero_overlap(self, word_factory) -> None:
        words = word_factory([("so", 0, 1000, None, "A"), ("yes", 1100, 1300, None, "B")])
        assert speaker_interruptions(words)[0].duration_ms == 0

    def test_gap_at_limit_is_not_interruption(self, word_factory) -> None:
        words = word_factory([("so", 0, 1000, None, "A"), ("yes", 1200, 1300, None, "B")])
        assert speaker_interruptions(words) is None

    def test_same_speaker_ignored(self, word_factory) -> None:
        words = word_factory([("so", 0, 1000, None, "A"), ("and", 900, 1300, None, "A")])
        assert speaker_interruptions(words) is None

    def test_missing_speaker_ignored(self, word_factory) -> None:
        words = word_factory([("so", 0, 1000, None, "A"), ("and", 900, 1300)])
        assert speaker_interruptions(words) is None


class TestBreathingPattern:
    def test_breath_range_inclusive(self, word_factory) -> None:
        words = word_factory(
            [
                ("a", 0, 100),
                ("b", 699, 800),
                ("c", 1400, 1500),
                ("d", 3000, 3100),
                ("e", 4601, 4700),
            ]
        )
        pauses = breathing_pattern(words)

        assert [p.pause_duration_ms for p in pauses] == [600, 1500]
        assert [p.timestamp for p in pauses] == [800, 1500]
        assert all(p.estimated for p in pauses)

    def test_overlaps_formal_pauses(self, word_factory) -> None:
        words = word_factory([("a", 0, 100), ("b", 1100, 1200)])
        assert breathing_pattern(words)[0].pause_duration_ms == 1000

    def test_no_breaths(self, even_words: list[Word]) -> None:
        assert breathing_pattern(even_words) is None
