"""Tests for podium.reports - delivery insights HTML report."""

from __future__ import annotations

from pathlib import Path

import pytest

from podium.analyze.engine import compute_from_result
from podium.exceptions import ReportError
from podium.models import DeliveryMetrics
from podium.reports.delivery import build_report_data, generate_delivery_report
from podium.reports.generator import ReportGenerator


class TestBuildReportData:
    def test_empty_metrics(self) -> None:
        data = build_report_data(DeliveryMetrics())

        assert data["title"] == "Delivery Insights"
        assert data["pace_rows"] == []
        assert data["longest_pause"] is None
        assert data["sentence_stats"] is None
        assert data["fluency_class"] == "low"
        assert len(data["benchmarks"]) == 4

    def test_sample_metrics(self, sample_result: dict) -> None:
        data = build_report_data(compute_from_result(sample_result), title="Interview")

        assert data["overall_wpm"] == 150
        assert data["talk_time"] == [
            {"speaker": "A", "duration": "1s"},
            {"speaker": "B", "duration": "0s"},
        ]
        assert data["pace_rows"][0]["bar_pct"] == 100
        assert data["longest_pause"]["before_word"] == "today."
        assert data["metrics"]["overallWpm"] == 150


class TestGenerateDeliveryReport:
    def test_writes_html(self, tmp_path: Path, sample_result: dict) -> None:
        metrics = compute_from_result(sample_result)
        output = tmp_path / "reports" / "delivery.html"

        path = generate_delivery_report(metrics, output, title="Delivery Insights: interview")

        assert path == output
        html = output.read_text(encoding="utf-8")
        assert "Delivery Insights: interview" in html
        assert "News Anchors" in html
        assert '"overallWpm": 150' in html

    def test_missing_template_raises(self, tmp_path: Path) -> None:
        generator = ReportGenerator(template_dir=tmp_path)
        with pytest.raises(ReportError):
            generator.render("missing.html", {}, tmp_path / "out.html")
