"""
podium.reports - HTML report generation.

Generates a self-contained delivery insights report for one transcript.
"""

from __future__ import annotations

from podium.reports.delivery import generate_delivery_report
from podium.reports.generator import ReportGenerator

__all__ = ["ReportGenerator", "generate_delivery_report"]
