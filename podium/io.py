"""
podium.io - JSON read/write helpers, atomic file writes, transcript loading.

Centralized I/O utilities for the CLI and reports. The analysis engine
itself never touches the filesystem.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from podium.exceptions import TranscriptError
from podium.models import TranscriptInput


def read_json(path: Path) -> dict[str, Any]:
    """Read JSON file with UTF-8 encoding.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON data as dictionary

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If file contains invalid JSON
    """
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, data: dict[str, Any], indent: int = 2) -> None:
    """Write JSON file atomically with pretty formatting.

    Writes to a temp file first, then renames to prevent corruption
    on interruption.

    Args:
        path: Destination path for JSON file
        data: Data to write
        indent: Indentation level for pretty printing (default: 2)
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        delete=False,
        suffix=".tmp",
    ) as tmp:
        tmp_path = Path(tmp.name)
        try:
            json.dump(data, tmp, indent=indent, ensure_ascii=False)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise
    tmp_path.rename(path)


def parse_transcript(data: dict[str, Any]) -> TranscriptInput:
    """Validate a provider payload into a TranscriptInput.

    Args:
        data: Dict with "words" (list of word dicts) and optional "text"

    Returns:
        Validated transcript input

    Raises:
        TranscriptError: If the payload does not match the word schema
    """
    if not isinstance(data, dict):
        raise TranscriptError("Transcript payload must be a JSON object")
    try:
        return TranscriptInput.model_validate(data)
    except PydanticValidationError as e:
        raise TranscriptError(f"Malformed transcript: {e}") from e


def load_transcript(path: Path) -> TranscriptInput:
    """Read and validate a transcript JSON file.

    Raises:
        TranscriptError: If the file is missing, not JSON, or malformed
    """
    if not path.exists():
        raise TranscriptError(f"Transcript not found: {path}")

    try:
        data = read_json(path)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise TranscriptError(f"Invalid JSON in {path.name}: {e}") from e

    return parse_transcript(data)
