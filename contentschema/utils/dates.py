"""
Date helpers for default values and filename placeholders.

Every function takes an optional clock so callers can pin the current time.
"""

from datetime import datetime

from ..types import Clock

DATE_FORMAT = "%Y-%m-%d"

# Placeholder name -> strftime directive
DATE_PLACEHOLDERS: dict[str, str] = {
    "year": "%Y",
    "month": "%m",
    "day": "%d",
    "hour": "%H",
    "minute": "%M",
    "second": "%S",
}


def now(clock: Clock | None = None) -> datetime:
    """Return the current local date and time from ``clock`` or the wall clock."""
    return clock() if clock is not None else datetime.now()


def today(clock: Clock | None = None) -> str:
    """Return the current local date formatted as ``YYYY-MM-DD``."""
    return now(clock).strftime(DATE_FORMAT)


def date_tokens(clock: Clock | None = None) -> dict[str, str]:
    """Return the date placeholder values for a single instant.

    Examples:
        >>> date_tokens(lambda: datetime(2024, 3, 7, 9, 5, 1))["month"]
        '03'
    """
    current = now(clock)
    return {name: current.strftime(directive) for name, directive in DATE_PLACEHOLDERS.items()}
