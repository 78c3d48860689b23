"""Format and parse ``[H:]MM:SS`` durations."""

from __future__ import annotations


def format_duration(milliseconds: int) -> str:
    """Format milliseconds as ``MM:SS``, or ``H:MM:SS`` from one hour up."""
    seconds = milliseconds // 1000
    hours, remainder = divmod(seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def parse_duration(text: str) -> int:
    """Parse ``MM:SS`` or ``HH:MM:SS`` into total seconds.

    Raises:
        ValueError: If the text is not a duration.
    """
    parts = text.strip().split(":")
    if len(parts) not in (2, 3) or not all(p.isascii() and p.isdigit() for p in parts):
        raise ValueError(f"Not a duration: {text!r}")

    total = 0
    for part in parts:
        total = total * 60 + int(part)
    return total
