"""
podium.logging - Package logger and CLI logging setup.

The engine logs each analysis pass at DEBUG (word count, pace, pauses,
timeline windows, critical moments) and warns when input words are not
ordered by start time. The CLI's --verbose flag surfaces the DEBUG lines.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("podium")


def configure_logging(verbose: bool = False) -> None:
    """Route podium log records to stderr.

    Args:
        verbose: Show per-pass DEBUG records; otherwise only warnings
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )
