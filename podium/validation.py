"""
podium.validation - Input precondition checks.

The engine trusts its input ordering. These helpers let callers (and the
coordinator's logging) see when that trust is misplaced without changing
any metric.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from podium.models import Word


def is_sorted_by_start(words: Sequence[Word]) -> bool:
    """Check that word start times never decrease."""
    return all(words[i].start <= words[i + 1].start for i in range(len(words) - 1))


def validate_words(words: Sequence[Word]) -> dict[str, Any]:
    """Validate word timing and confidence values and return warnings.

    Never raises; invalid input is reported, not rejected.

    Args:
        words: Word sequence as supplied by the provider

    Returns:
        Dict with 'valid', 'warnings', 'word_count'
    """
    warnings = []

    if not words:
        warnings.append("Transcript has no words. All metrics will be zero.")

    out_of_order = sum(1 for i in range(len(words) - 1) if words[i + 1].start < words[i].start)
    if out_of_order:
        warnings.append(
            f"{out_of_order} word(s) start before the preceding word. "
            "Words are not re-sorted; pace and pause metrics may be wrong."
        )

    negative = sum(1 for w in words if w.end < w.start)
    if negative:
        warnings.append(f"{negative} word(s) end before they start.")

    bad_confidence = sum(
        1 for w in words if w.confidence is not None and not 0.0 <= w.confidence <= 1.0
    )
    if bad_confidence:
        warnings.append(f"{bad_confidence} word(s) have confidence outside [0, 1].")

    return {
        "valid": not (out_of_order or negative or bad_confidence),
        "warnings": warnings,
        "word_count": len(words),
    }
