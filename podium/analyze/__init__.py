"""
podium.analyze - Speech delivery analysis passes.

Independent, side-effect-free passes over one word list:
basic aggregation, fluency scoring, confidence/clarity, pace timeline,
sentence structure, and hotspot/anomaly detection. The engine module
runs them in dependency order and assembles DeliveryMetrics.
"""

from __future__ import annotations

from podium.analyze.engine import compute, compute_from_result

__all__ = ["compute", "compute_from_result"]
