"""Unit tests for date parsing, formatting and durations."""

from datetime import date

import pytest

from folio.contexts.content.dates import (
    YearMonth,
    calculate_duration,
    format_date,
    format_date_range,
    parse_date,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        ("2024-03", YearMonth(2024, 3)),
        ("2024-03-15", YearMonth(2024, 3)),
        ("3/2024", YearMonth(2024, 3)),
        ("03/2024", YearMonth(2024, 3)),
        ("March 2024", YearMonth(2024, 3)),
        ("Mar 2024", YearMonth(2024, 3)),
        ("2024", YearMonth(2024, 1)),
        ("  2024-11  ", YearMonth(2024, 11)),
    ],
)
def test_parse_date_accepted_patterns(value, expected):
    assert parse_date(value) == expected


@pytest.mark.unit
@pytest.mark.parametrize("value", ["", None, "2024-13", "13/2024", "Smarch 2024", "sometime"])
def test_parse_date_rejects(value):
    assert parse_date(value) is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "date_format,expected",
    [
        ("MM/YYYY", "03/2024"),
        ("Month Year", "March 2024"),
        ("Mon YYYY", "Mar 2024"),
        ("YYYY", "2024"),
    ],
)
def test_format_date_all_formats(date_format, expected):
    assert format_date("2024-03", date_format) == expected


@pytest.mark.unit
def test_format_date_edge_cases():
    assert format_date("", "Month Year") == ""
    assert format_date(None, "Month Year") == ""
    assert format_date("present", "YYYY") == "Present"
    assert format_date("Current", "MM/YYYY") == "Present"
    # Unparseable input passes through unchanged
    assert format_date("Summer '19", "Month Year") == "Summer '19"
    assert format_date("2024-03", "DD.MM.YYYY") == "2024-03"


@pytest.mark.unit
def test_format_date_range():
    assert format_date_range("2020-01", "2022-06", False, "Mon YYYY") == "Jan 2020 - Jun 2022"
    assert format_date_range("2020-01", "2022-06", True, "YYYY") == "2020 - Present"
    assert format_date_range("2020-01", None, False, "YYYY") == "2020"
    assert format_date_range(None, "2022-06", False, "YYYY") == "2022"
    assert format_date_range(None, None, False, "YYYY") == ""
    assert format_date_range(None, None, True, "YYYY") == "Present"


@pytest.mark.unit
@pytest.mark.parametrize(
    "start,end,expected",
    [
        ("2020-01", "2021-07", "1 yr 6 mos"),
        ("2020-01", "2020-04", "3 mos"),
        ("2020-01", "2020-02", "1 mo"),
        ("2020-01", "2022-01", "2 yrs"),
        ("2020-01", "2021-01", "1 yr"),
        ("2020-01", "2020-01", "0 mos"),
        ("2021-06", "2020-01", "0 mos"),
    ],
)
def test_calculate_duration(start, end, expected):
    assert calculate_duration(start, end, False) == expected


@pytest.mark.unit
def test_calculate_duration_current_uses_today():
    assert calculate_duration("2023-01", None, True, today=date(2024, 3, 10)) == "1 yr 2 mos"


@pytest.mark.unit
def test_calculate_duration_missing_inputs():
    assert calculate_duration(None, "2020-01", False) == ""
    assert calculate_duration("garbage", "2020-01", False) == ""
    assert calculate_duration("2020-01", None, False) == ""
    assert calculate_duration("2020-01", "garbage", False) == ""
