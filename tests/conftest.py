"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from podium.models import Word


def make_words(
    specs: list[tuple],
    speaker: str | None = None,
) -> list[Word]:
    """Build words from (text, start, end[, confidence[, speaker]]) tuples."""
    words = []
    for spec in specs:
        text, start, end = spec[:3]
        confidence = spec[3] if len(spec) > 3 else None
        word_speaker = spec[4] if len(spec) > 4 else speaker
        words.append(
            Word(text=text, start=start, end=end, confidence=confidence, speaker=word_speaker)
        )
    return words


@pytest.fixture
def even_words() -> list[Word]:
    """Ten 400 ms words starting every 500 ms from t=0."""
    texts = ["we", "are", "going", "to", "talk", "about", "the", "new", "product", "launch"]
    return [Word(text=t, start=i * 500, end=i * 500 + 400) for i, t in enumerate(texts)]


@pytest.fixture
def timeline_words() -> list[Word]:
    """Words spread over three populated 30 s windows with one empty window.

    0-30 s: 10 words, 30-60 s: 5 words, 60-90 s: none, 90-90.5 s: 1 word.
    """
    words = [Word(text=f"a{i}", start=i * 3000, end=i * 3000 + 500) for i in range(10)]
    words += [Word(text=f"b{i}", start=30000 + i * 6000, end=30000 + i * 6000 + 500) for i in range(5)]
    words.append(Word(text="end", start=90000, end=90500))
    return words


@pytest.fixture
def sample_result() -> dict:
    """Return a provider-style transcript payload."""
    return {
        "id": "transcript_001",
        "status": "completed",
        "text": "Um, so we are launching today. You know, it is big!",
        "words": [
            {"text": "Um,", "start": 0, "end": 300, "confidence": 0.62, "speaker": "A"},
            {"text": "so", "start": 400, "end": 600, "confidence": 0.95, "speaker": "A"},
            {"text": "we", "start": 700, "end": 850, "confidence": 0.98, "speaker": "A"},
            {"text": "are", "start": 900, "end": 1050, "confidence": 0.97, "speaker": "A"},
            {"text": "launching", "start": 1100, "end": 1600, "confidence": 0.91, "speaker": "A"},
            {"text": "today.", "start": 1650, "end": 2000, "confidence": 0.93, "speaker": "A"},
            {"text": "You", "start": 3200, "end": 3350, "confidence": 0.88, "speaker": "B"},
            {"text": "know,", "start": 3400, "end": 3600, "confidence": 0.90, "speaker": "B"},
            {"text": "it", "start": 3700, "end": 3800, "confidence": 0.96, "speaker": "B"},
            {"text": "is", "start": 3850, "end": 3950, "confidence": 0.97, "speaker": "B"},
            {"text": "big!", "start": 4000, "end": 4400, "confidence": 0.99, "speaker": "B"},
        ],
    }


@pytest.fixture
def transcript_file(tmp_path: Path, sample_result: dict) -> Path:
    """Write the sample payload to a JSON file."""
    path = tmp_path / "interview.json"
    path.write_text(json.dumps(sample_result), encoding="utf-8")
    return path


@pytest.fixture
def word_factory():
    """Return the make_words helper."""
    return make_words
