"""
Date Formatting

Parses loosely formatted date strings and formats single dates, ranges and durations.

Accepted inputs, in priority order:
- ISO-like: YYYY-MM or YYYY-MM-DD (anything after the month is ignored)
- MM/YYYY (M/YYYY also accepted)
- Month YYYY (case-insensitive month-name prefix: "march 2024", "Mar 2024")
- YYYY (month defaults to January)

Strings matching none of these are passed through unchanged; this is not an error.
"""

import re
from datetime import date
from typing import NamedTuple, Optional

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)

PRESENT_VALUES = ("present", "current")
PRESENT_LABEL = "Present"

ISO_PATTERN = re.compile(r"^(\d{4})-(\d{2})")
SLASH_PATTERN = re.compile(r"^(\d{1,2})/(\d{4})$")
MONTH_YEAR_PATTERN = re.compile(r"^([A-Za-z]+)\s+(\d{4})$")
YEAR_PATTERN = re.compile(r"^(\d{4})$")


class YearMonth(NamedTuple):
    year: int
    month: int


def _month_from_name(name: str) -> Optional[int]:
    lowered = name.lower()
    for index, month_name in enumerate(MONTH_NAMES):
        if month_name.lower().startswith(lowered):
            return index + 1
    return None


def parse_date(value: Optional[str]) -> Optional[YearMonth]:
    """
    Parse a date string into (year, month).

    Args:
        value: Loosely formatted date string

    Returns:
        YearMonth, or None when the string matches no accepted pattern or names a month
        outside 1-12

    Example:
        >>> parse_date("03/2024")
        YearMonth(year=2024, month=3)
    """
    if not value:
        return None

    trimmed = value.strip()
    parsed = None

    iso_match = ISO_PATTERN.match(trimmed)
    slash_match = SLASH_PATTERN.match(trimmed)
    month_year_match = MONTH_YEAR_PATTERN.match(trimmed)
    year_match = YEAR_PATTERN.match(trimmed)

    if iso_match:
        parsed = YearMonth(int(iso_match.group(1)), int(iso_match.group(2)))
    elif slash_match:
        parsed = YearMonth(int(slash_match.group(2)), int(slash_match.group(1)))
    elif month_year_match:
        month = _month_from_name(month_year_match.group(1))
        if month is not None:
            parsed = YearMonth(int(month_year_match.group(2)), month)
    elif year_match:
        parsed = YearMonth(int(year_match.group(1)), 1)

    if parsed is None or not 1 <= parsed.month <= 12:
        return None
    return parsed


def is_present(value: Optional[str]) -> bool:
    """True for the literal "present"/"current" markers (case-insensitive)."""
    return bool(value) and value.strip().lower() in PRESENT_VALUES


def format_date(value: Optional[str], date_format: str) -> str:
    """
    Format a date string.

    Args:
        value: Loosely formatted date string (or None)
        date_format: One of "MM/YYYY", "Month Year", "Mon YYYY", "YYYY"

    Returns:
        Formatted date; "" for empty input; "Present" for present/current markers;
        the input unchanged when it cannot be parsed or the format is unknown

    Examples:
        >>> format_date("2024-03", "Month Year")
        'March 2024'
        >>> format_date("03/2024", "Mon YYYY")
        'Mar 2024'
        >>> format_date("not-a-date", "YYYY")
        'not-a-date'
    """
    if not value:
        return ""

    if is_present(value):
        return PRESENT_LABEL

    parsed = parse_date(value)
    if parsed is None:
        return value

    year, month = parsed
    if date_format == "MM/YYYY":
        return f"{month:02d}/{year}"
    elif date_format == "Month Year":
        return f"{MONTH_NAMES[month - 1]} {year}"
    elif date_format == "Mon YYYY":
        return f"{MONTH_ABBREVIATIONS[month - 1]} {year}"
    elif date_format == "YYYY":
        return f"{year}"
    return value


def format_date_range(
    start: Optional[str],
    end: Optional[str],
    is_current: Optional[bool],
    date_format: str,
) -> str:
    """
    Format a start/end pair as "{start} - {end}".

    When is_current is true the end is forced to "Present". With only one side present,
    that side is returned alone; with neither, "".

    Example:
        >>> format_date_range("2020-01", None, True, "YYYY")
        '2020 - Present'
    """
    start_text = format_date(start, date_format)
    end_text = PRESENT_LABEL if is_current else format_date(end, date_format)

    if not start_text and not end_text:
        return ""
    if not start_text:
        return end_text
    if not end_text:
        return start_text
    return f"{start_text} - {end_text}"


def _pluralize(count: int, singular: str, plural: str) -> str:
    return f"1 {singular}" if count == 1 else f"{count} {plural}"


def calculate_duration(
    start: Optional[str],
    end: Optional[str],
    is_current: Optional[bool],
    today: Optional[date] = None,
) -> str:
    """
    Elapsed time between two dates as "{X yrs} {Y mos}".

    Zero parts are omitted ("3 mos", "2 yrs"); singular forms are "1 yr" and "1 mo".
    When is_current is true the end is today. Returns "" when the start is missing or
    unparseable, or when there is no usable end. Negative spans count as zero months.

    Args:
        start: Start date string
        end: End date string (ignored when is_current)
        is_current: Whether the engagement is ongoing
        today: Reference date for ongoing engagements (defaults to date.today())

    Examples:
        >>> calculate_duration("2020-01", "2021-07", False)
        '1 yr 6 mos'
        >>> calculate_duration("2020-01", "2020-04", False)
        '3 mos'
    """
    start_parsed = parse_date(start)
    if start_parsed is None:
        return ""

    if is_current:
        today = today or date.today()
        end_parsed = YearMonth(today.year, today.month)
    elif end:
        end_parsed = parse_date(end)
        if end_parsed is None:
            return ""
    else:
        return ""

    total_months = (end_parsed.year - start_parsed.year) * 12 + (
        end_parsed.month - start_parsed.month
    )
    total_months = max(0, total_months)
    years, months = divmod(total_months, 12)

    if years == 0:
        return _pluralize(months, "mo", "mos")
    if months == 0:
        return _pluralize(years, "yr", "yrs")
    return f"{_pluralize(years, 'yr', 'yrs')} {_pluralize(months, 'mo', 'mos')}"
