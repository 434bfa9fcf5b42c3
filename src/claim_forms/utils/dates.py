"""
Date formatting matching the strings the job system has always printed on
certificates (moment.js tokens ``Do``, ``MM``, ``MMMM``, ``YYYY``).
"""

from datetime import date


def ordinal(day: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 23 -> '23rd'."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_day_month(value: date) -> str:
    """``Do,MM``, e.g. '19th,10'."""
    return f"{ordinal(value.day)},{value.month:02d}"


def format_long(value: date) -> str:
    """``MMMM Do, YYYY``, e.g. 'October 19th, 2026'."""
    return f"{value.strftime('%B')} {ordinal(value.day)}, {value.year}"


def format_iso(value: date) -> str:
    """``YYYY-MM-DD``."""
    return value.isoformat()


DATE_FORMATS = {
    "Do,MM": format_day_month,
    "MMMM Do, YYYY": format_long,
    "YYYY-MM-DD": format_iso,
}


def format_date(value: date, fmt: str) -> str:
    """Format *value* with one of the supported moment-style patterns."""
    try:
        formatter = DATE_FORMATS[fmt]
    except KeyError:
        raise ValueError(f"Unsupported date format: {fmt}") from None
    return formatter(value)
