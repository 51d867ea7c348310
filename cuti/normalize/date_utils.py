#!/usr/bin/env python3
"""
Date parsing utilities for scraped holiday tables.

The source pages print the day and month only ("1 Jan", "2 February");
the year always comes from the caller.

Handles:
- Abbreviated month: "1 Jan", "01 jan"
- Full month: "2 February"
"""

import calendar
import logging
import re
from datetime import datetime
from typing import List, Optional, Tuple

from ..constants import DATE_LAYOUTS, PARSE_YEAR

logger = logging.getLogger(__name__)

ISO_DATE_RE = re.compile(r'^\d{4,}-\d{2}-\d{2}$')


def _clean(date_str) -> str:
    """Collapse runs of whitespace and strip the ends."""
    if not isinstance(date_str, str):
        return ''
    return ' '.join(date_str.split())


def days_in_month(year: int, month: int) -> int:
    """
    Number of days in a month, for any positive year.

    Examples:
        >>> days_in_month(2024, 2)
        29
        >>> days_in_month(10000, 2)
        29
    """
    if month == 2 and calendar.isleap(year):
        return 29
    return calendar.mdays[month]


def parse_day_month(date_str: str, year: int,
                    layouts: Optional[List[str]] = None) -> Optional[Tuple[int, int]]:
    """
    Parse day/month text and check it exists in the given year.

    Text is parsed against a leap year so "29 Feb" is read; it is then
    rejected unless year is a leap year too.

    Args:
        date_str: Scraped date text
        year: Calendar year the text belongs to (any positive year)
        layouts: strptime layouts to try in order (default: DATE_LAYOUTS)

    Returns:
        (month, day) for the first layout that matches, None otherwise

    Examples:
        >>> parse_day_month("1 Jan", 2025)
        (1, 1)
        >>> parse_day_month("29 Feb", 2025) is None
        True
        >>> parse_day_month("Someday", 2025) is None
        True
    """
    text = _clean(date_str)
    if not text:
        return None

    for layout in layouts or DATE_LAYOUTS:
        try:
            parsed = datetime.strptime(f"{text} {PARSE_YEAR}", layout)
        except ValueError:
            continue
        if parsed.day > days_in_month(year, parsed.month):
            return None
        return (parsed.month, parsed.day)

    return None


def normalize_date(date_str: str, year: int) -> str:
    """
    Convert scraped date text to a canonical YYYY-MM-DD string.

    Never raises: text that matches no layout becomes a fallback marker
    "<year>-<text with spaces as hyphens>" and a warning is logged.

    Examples:
        >>> normalize_date("1 Jan", 2025)
        '2025-01-01'
        >>> normalize_date("2 February", 2025)
        '2025-02-02'
        >>> normalize_date(" Subject to change ", 2025)
        '2025-Subject-to-change'
    """
    parsed = parse_day_month(date_str, year)
    if parsed is not None:
        month, day = parsed
        return f"{year:04d}-{month:02d}-{day:02d}"

    logger.warning(f"Failed to parse date: {date_str!r}")
    return f"{year}-{_clean(date_str).replace(' ', '-')}"


def is_iso_date(value: str) -> bool:
    """
    Check whether value is a canonical date rather than a fallback marker.

    Examples:
        >>> is_iso_date("2025-01-01")
        True
        >>> is_iso_date("2025-Subject-to-change")
        False
    """
    return bool(value) and bool(ISO_DATE_RE.match(value))
