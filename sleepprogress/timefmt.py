"""Time formatting helpers."""

from datetime import datetime, timedelta


def plural(count: int, word: str) -> str:
    """Return '1 second' / '3 seconds'."""
    return f"{count} {word}{'' if count == 1 else 's'}"


def clock_time(moment: datetime) -> str:
    """Format a local time of day as HH:MM:SS."""
    return moment.strftime("%H:%M:%S")


def eta(start: datetime, seconds: int) -> datetime:
    return start + timedelta(seconds=seconds)


def format_duration(seconds: float) -> str:
    """
    Format a duration compactly.

    Examples:
        45 -> "45s", 125 -> "2m 5s", 3720 -> "1h 2m"
    """
    if seconds < 60:
        return f"{int(seconds)}s"
    elif seconds < 3600:
        minutes = int(seconds // 60)
        secs = int(seconds % 60)
        return f"{minutes}m {secs}s"
    else:
        hours = int(seconds // 3600)
        minutes = int((seconds % 3600) // 60)
        return f"{hours}h {minutes}m"
