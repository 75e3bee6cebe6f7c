"""
podium.benchmarks - Comparison against typical speaking contexts.

Benchmarks are approximate averages from various speech contexts.
"""

from __future__ import annotations

from typing import Any

BENCHMARKS: list[dict[str, Any]] = [
    {"label": "Podcasters", "wpm": 160, "fluency": 75},
    {"label": "Presenters", "wpm": 145, "fluency": 82},
    {"label": "Conversations", "wpm": 165, "fluency": 68},
    {"label": "News Anchors", "wpm": 150, "fluency": 88},
]


def compare_to_benchmarks(wpm: int, fluency: int) -> list[dict[str, Any]]:
    """Difference between the speaker's pace/fluency and each benchmark.

    Args:
        wpm: Speaker's overall words per minute
        fluency: Speaker's fluency score

    Returns:
        One dict per benchmark with 'label', 'wpm', 'fluency',
        'wpm_diff', and 'fluency_diff' (positive means above benchmark)
    """
    return [
        {
            **benchmark,
            "wpm_diff": wpm - benchmark["wpm"],
            "fluency_diff": fluency - benchmark["fluency"],
        }
        for benchmark in BENCHMARKS
    ]


def format_diff(diff: int) -> str:
    """Signed difference for display, e.g. "+5", "-3", "0"."""
    return f"+{diff}" if diff > 0 else str(diff)
