"""
podium.config - YAML config loading and validation.

Holds the thresholds used by the analysis passes. Defaults reproduce the
product's calibrated behavior; a podium.yaml file may override any of them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from podium.exceptions import ConfigError

CONFIG_FILENAME = "podium.yaml"


class EngineConfig(BaseModel):
    """Resolved thresholds for the delivery analysis passes."""

    pause_threshold_ms: int = Field(default=800, ge=0)
    segment_duration_ms: int = Field(default=30000, gt=0)
    hotspot_window_ms: int = Field(default=10000, gt=0)

    low_confidence_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    unclear_confidence_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    unclear_gap_ms: int = Field(default=3000, gt=0)

    interruption_gap_ms: int = Field(default=200, ge=0)
    breath_min_ms: int = Field(default=600, ge=0)
    breath_max_ms: int = Field(default=1500, ge=0)

    run_on_sentence_words: int = Field(default=25, gt=0)

    ideal_wpm_min: int = Field(default=120, gt=0)
    ideal_wpm_max: int = Field(default=160, gt=0)

    max_examples: int = Field(default=20, gt=0)
    peak_segment_count: int = Field(default=3, gt=0)
    default_speaker: str = "Speaker 1"

    @field_validator("ideal_wpm_max")
    @classmethod
    def validate_wpm_range(cls, v: int, info: ValidationInfo) -> int:
        low = info.data.get("ideal_wpm_min")
        if low is not None and v <= low:
            raise ValueError("ideal_wpm_max must be greater than ideal_wpm_min")
        return v

    @field_validator("breath_max_ms")
    @classmethod
    def validate_breath_range(cls, v: int, info: ValidationInfo) -> int:
        low = info.data.get("breath_min_ms")
        if low is not None and v < low:
            raise ValueError("breath_max_ms must not be less than breath_min_ms")
        return v


def load_config(path: Path) -> EngineConfig:
    """Load and validate configuration from a YAML file or a directory containing one."""
    config_file = path / CONFIG_FILENAME if path.is_dir() else path
    if not config_file.exists():
        raise ConfigError(f"No config file found at {config_file}")

    try:
        with open(config_file) as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_file}")

    try:
        return EngineConfig(**raw_config)
    except ValueError as e:
        raise ConfigError(f"Invalid config in {config_file}: {e}") from e


def create_default_config() -> dict[str, Any]:
    """Create a default config dict with every threshold spelled out."""
    return EngineConfig().model_dump()


def write_config(config: dict[str, Any], path: Path) -> None:
    """Write configuration to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
