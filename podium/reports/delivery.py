"""
podium.reports.delivery - Delivery insights report.

Renders one transcript's DeliveryMetrics as a self-contained HTML page:
headline scores with labels, pace timeline, best segments, filler
hotspots, critical moments, and benchmark comparison.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from podium.analyze.fluency import get_fluency_label, get_wpm_label
from podium.benchmarks import compare_to_benchmarks, format_diff
from podium.models import DeliveryMetrics
from podium.reports.generator import ReportGenerator
from podium.utils import format_duration_ms, format_timestamp_ms, get_score_class


def build_report_data(metrics: DeliveryMetrics, title: str = "Delivery Insights") -> dict[str, Any]:
    """Flatten metrics into template-ready values."""
    timeline = metrics.pace_timeline or []
    max_wpm = max((s.wpm for s in timeline), default=0)

    pace_rows = [
        {
            "range": f"{format_timestamp_ms(s.start_ms)} - {format_timestamp_ms(s.end_ms)}",
            "wpm": s.wpm,
            "word_count": s.word_count,
            "bar_pct": round(s.wpm / max_wpm * 100) if max_wpm else 0,
        }
        for s in timeline
    ]

    benchmarks = [
        {
            **b,
            "wpm_diff_label": format_diff(b["wpm_diff"]),
            "fluency_diff_label": format_diff(b["fluency_diff"]),
        }
        for b in compare_to_benchmarks(metrics.overall_wpm, metrics.fluency_score)
    ]

    longest = metrics.longest_pause

    return {
        "title": title,
        "overall_wpm": metrics.overall_wpm,
        "wpm_label": get_wpm_label(metrics.overall_wpm),
        "fluency_score": metrics.fluency_score,
        "fluency_label": get_fluency_label(metrics.fluency_score),
        "fluency_class": get_score_class(metrics.fluency_score),
        "clarity_score": metrics.clarity_score,
        "confidence_score": metrics.confidence_score,
        "momentum_score": metrics.momentum_score,
        "rhythm_variation": metrics.rhythm_variation,
        "silence_pct": round(metrics.silence_ratio * 100, 1),
        "total_silence": format_duration_ms(metrics.total_silence_ms),
        "pause_count": metrics.pause_count,
        "avg_pause_ms": metrics.avg_pause_duration_ms,
        "filler_per_minute": metrics.filler_per_minute,
        "filler_words": metrics.filler_words,
        "longest_pause": (
            {
                "duration": f"{longest.duration_ms / 1000:.1f}s",
                "at": format_timestamp_ms(longest.timestamp),
                "before_word": longest.before_word,
                "after_word": longest.after_word,
            }
            if longest
            else None
        ),
        "talk_time": [
            {"speaker": speaker, "duration": format_duration_ms(ms)}
            for speaker, ms in metrics.talk_time_by_speaker_ms.items()
        ],
        "pace_rows": pace_rows,
        "peak_segments": [
            {
                "range": f"{format_timestamp_ms(p.start_ms)} - {format_timestamp_ms(p.end_ms)}",
                "wpm": p.wpm,
                "filler_count": p.filler_count,
                "score": p.score,
            }
            for p in metrics.peak_segments or []
        ],
        "filler_hotspots": [
            {
                "at": format_timestamp_ms(h.start_ms),
                "count": h.count,
                "fillers": ", ".join(h.fillers),
            }
            for h in metrics.filler_hotspots or []
        ],
        "critical_moments": [
            {
                "at": format_timestamp_ms(m.timestamp),
                "issue": m.issue.replace("_", " "),
                "severity": m.severity,
                "details": m.details,
            }
            for m in metrics.critical_moments or []
        ],
        "sentence_stats": (
            metrics.sentence_stats.model_dump() if metrics.sentence_stats else None
        ),
        "benchmarks": benchmarks,
        "metrics": metrics.to_dict(),
    }


def generate_delivery_report(
    metrics: DeliveryMetrics,
    output_path: Path,
    title: str = "Delivery Insights",
    open_browser: bool = False,
) -> Path:
    """Generate the delivery insights report.

    Args:
        metrics: Computed delivery metrics
        output_path: Where to write the HTML file
        title: Report heading (usually the transcript name)
        open_browser: Whether to open in browser

    Returns:
        Path to generated report
    """
    data = build_report_data(metrics, title=title)

    generator = ReportGenerator()
    result_path = generator.render("delivery.html", data, output_path)

    if open_browser:
        generator.open_in_browser(result_path)

    return result_path
