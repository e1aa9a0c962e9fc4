"""Timestamp formatting utilities."""

from datetime import datetime, timezone


def today() -> str:
    """
    Get today's date in UTC.

    Returns:
        Date as YYYY-MM-DD
    """
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")
