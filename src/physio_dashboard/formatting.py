"""
Display formatting for dashboard values.

Numbers are shown the way the assessment reports print them: integral values
without a decimal part ("15", not "15.0"), everything else with the shortest
representation that round-trips ("58.8", "1.63").
"""
from __future__ import annotations

from datetime import date, datetime

DATE_FORMAT = "%d/%m/%Y"


def format_number(value: float | int) -> str:
    """Format a number without a trailing '.0' for integral values."""
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def format_percent(value: float | int) -> str:
    """Plain percentage: 15 -> '15%'."""
    return f"{format_number(value)}%"


def format_signed_change(change: float | int) -> str:
    """
    Sign-aware delta used by stat cards.

    Positive deltas get an explicit '+'; zero and negative deltas get no
    prefix of their own (negatives keep their minus).

    Examples:
        >>> format_signed_change(18)
        '+18%'
        >>> format_signed_change(0)
        '0%'
        >>> format_signed_change(-2.5)
        '-2.5%'
    """
    prefix = "+" if change > 0 else ""
    return f"{prefix}{format_percent(change)}"


def format_result_change(change: float | int) -> str:
    """Delta used by result cards: always prefixed with '+'."""
    return f"+{format_percent(change)}"


def format_date(value: date) -> str:
    """Format a calendar date as DD/MM/YYYY."""
    return value.strftime(DATE_FORMAT)


def parse_date(text: str) -> date:
    """Parse a DD/MM/YYYY string. Raises ValueError on malformed input."""
    return datetime.strptime(text.strip(), DATE_FORMAT).date()
