"""Time utilities for webhook timestamps and message dates."""

import time
from datetime import UTC, date, datetime


def current_time_ms() -> int:
    """Current wall-clock time in milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def parse_linear_timestamp(ts_string: str | None) -> datetime | None:
    """
    Parse Linear ISO 8601 timestamp to timezone-aware datetime.
    Returns None if string is None or empty.

    Example input: "2024-10-19T14:30:00.000Z"
    Example output: datetime(2024, 10, 19, 14, 30, tzinfo=UTC)
    """
    if not ts_string:
        return None
    dt = datetime.fromisoformat(ts_string.replace("Z", "+00:00"))
    return dt if dt.tzinfo else dt.replace(tzinfo=UTC)


def parse_due_date(value: str) -> date:
    """
    Parse a Linear due date.

    Linear sends plain dates ("2024-10-05"), but full timestamps are
    accepted too and reduced to their date part.
    """
    if "T" in value:
        parsed = parse_linear_timestamp(value)
        if parsed is None:
            raise ValueError(f"Invalid due date: {value!r}")
        return parsed.date()
    return date.fromisoformat(value)


def format_due_date(value: str) -> str:
    """
    Format a Linear due date for chat messages.

    Example input: "2024-10-05"
    Example output: "Oct 5, 2024"
    """
    due = parse_due_date(value)
    return f"{due.strftime('%b')} {due.day}, {due.year}"
