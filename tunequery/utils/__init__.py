"""Utility modules for tunequery."""

from tunequery.utils.durations import format_duration, parse_duration
from tunequery.utils.output import (
    console,
    error,
    info,
    success,
    warning,
)

__all__ = [
    "console",
    "error",
    "format_duration",
    "info",
    "parse_duration",
    "success",
    "warning",
]
