"""
podium.exceptions - Custom exception classes.

All Podium-specific exceptions inherit from PodiumError.
"""


class PodiumError(Exception):
    """Base exception for all Podium errors."""

    pass


class ConfigError(PodiumError):
    """Configuration loading or validation error."""

    pass


class TranscriptError(PodiumError):
    """Transcript payload missing, unreadable, or malformed."""

    pass


class ReportError(PodiumError):
    """Report rendering error."""

    pass
