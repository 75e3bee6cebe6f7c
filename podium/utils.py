"""
podium.utils - Shared utility functions.

Contains the rounding policy used by every metric and small formatting
helpers shared by the CLI and reports.
"""

from __future__ import annotations

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from negative infinity (0.5 -> 1, 2.5 -> 3).

    Every metric goes through this function so results are reproducible
    and do not depend on banker's rounding.

    Args:
        value: Number to round
        digits: Number of decimal places to keep

    Returns:
        Rounded value as a float
    """
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    """Round half up to the nearest integer."""
    return int(math.floor(value + 0.5))


def format_duration_ms(ms: float) -> str:
    """Format milliseconds as "Xm Ys" or "Ys".

    Args:
        ms: Duration in milliseconds

    Returns:
        Formatted string ("1m 5s" if >= 1 minute, otherwise "42s")
    """
    seconds = int(ms // 1000)
    minutes = seconds // 60
    remaining = seconds % 60
    if minutes > 0:
        return f"{minutes}m {remaining}s"
    return f"{seconds}s"


def format_timestamp_ms(ms: float) -> str:
    """Format a millisecond offset as M:SS."""
    total_seconds = int(ms // 1000)
    return f"{total_seconds // 60}:{total_seconds % 60:02d}"


def get_score_class(score: float) -> str:
    """Get CSS class for a 0-100 score badge.

    Args:
        score: Score from 0 to 100

    Returns:
        CSS class name: "filled" (high), "medium", or "low"
    """
    if score >= 70:
        return "filled"
    elif score >= 40:
        return "medium"
    return "low"
