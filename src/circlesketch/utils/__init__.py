"""Utility functions for circles sketch.

This module provides utility functions including:

- Logging setup and configuration
- Run statistics tracking
- Stable number formatting for generated path and script text
"""

from circlesketch.utils.logging import (
    RunStats,
    SketchLogger,
    configure_logging,
)
from circlesketch.utils.numbers import format_number

__all__ = [
    "RunStats",
    "SketchLogger",
    "configure_logging",
    "format_number",
]
