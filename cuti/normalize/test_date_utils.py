#!/usr/bin/env python3
"""
Tests for date_utils.py
"""

import logging
import re

from cuti.normalize.date_utils import is_iso_date, normalize_date, parse_day_month


def test_abbreviated_month():
    tests = [
        ('1 Jan', 2025, '2025-01-01'),
        ('9 Mar', 2025, '2025-03-09'),
        ('31 Dec', 2024, '2024-12-31'),
        ('01 Feb', 2026, '2026-02-01'),
    ]

    for date_str, year, expected in tests:
        result = normalize_date(date_str, year)
        assert result == expected, f"{date_str!r}: expected {expected}, got {result}"


def test_full_month():
    assert normalize_date('2 February', 2025) == '2025-02-02'
    assert normalize_date('31 August', 2025) == '2025-08-31'
    assert normalize_date('16 September', 2030) == '2030-09-16'


def test_month_names_ignore_case():
    assert normalize_date('1 JAN', 2025) == '2025-01-01'
    assert normalize_date('25 december', 2025) == '2025-12-25'


def test_surrounding_whitespace():
    assert normalize_date('  1 Jan ', 2025) == '2025-01-01'
    assert normalize_date('1 May', 2025) == '2025-05-01'


def test_year_comes_from_caller():
    """Output year is always the supplied year, zero-padded fields."""
    for year in (1999, 2025, 2031):
        result = normalize_date('5 Jun', year)
        assert re.match(r'^\d{4}-\d{2}-\d{2}$', result)
        assert result.startswith(f"{year}-")
        assert result == f"{year}-06-05"


def test_leap_day():
    assert normalize_date('29 Feb', 2024) == '2024-02-29'
    # Not a date in 2025
    assert normalize_date('29 Feb', 2025) == '2025-29-Feb'


def test_years_outside_four_digits():
    """Any positive year works, not only 1000-9999."""
    assert normalize_date('1 Jan', 1) == '0001-01-01'
    assert normalize_date('31 Dec', 999) == '0999-12-31'
    assert normalize_date('1 Jan', 10000) == '10000-01-01'
    assert normalize_date('2 February', 12345) == '12345-02-02'

    for year in (1, 999, 10000):
        result = normalize_date('1 Jan', year)
        assert re.match(r'^\d{4,}-01-01$', result)
        assert int(result.split('-')[0]) == year
        assert is_iso_date(result)


def test_leap_day_far_years():
    assert normalize_date('29 Feb', 4) == '0004-02-29'
    assert normalize_date('29 Feb', 10000) == '10000-02-29'
    assert normalize_date('29 Feb', 1900) == '1900-29-Feb'


def test_fallback_strips_whitespace():
    assert normalize_date(' TBC ', 2025) == '2025-TBC'
    assert normalize_date('To  be\tconfirmed', 2025) == '2025-To-be-confirmed'
    assert normalize_date('   ', 2025) == '2025-'


def test_fallback_marker():
    assert normalize_date('Subject to change', 2025) == '2025-Subject-to-change'
    assert normalize_date('', 2025) == '2025-'
    assert normalize_date('1 Jan 2025', 2025) == '2025-1-Jan-2025'


def test_fallback_is_deterministic_and_logged(caplog):
    with caplog.at_level(logging.WARNING, logger='cuti.normalize.date_utils'):
        first = normalize_date('Hari Raya (TBC)', 2025)
        second = normalize_date('Hari Raya (TBC)', 2025)

    assert first == second == '2025-Hari-Raya-(TBC)'
    assert '2025' in first
    assert 'Failed to parse date' in caplog.text


def test_parse_day_month():
    assert parse_day_month('1 Jan', 2025) == (1, 1)
    assert parse_day_month('29 Feb', 2024) == (2, 29)
    assert parse_day_month('29 Feb', 2023) is None
    assert parse_day_month('30 Feb', 2024) is None

    assert parse_day_month('not a date', 2025) is None
    assert parse_day_month(None, 2025) is None
    assert parse_day_month('1 January', 2025, layouts=['%d %b %Y']) is None


def test_is_iso_date():
    assert is_iso_date('2025-01-01')
    assert not is_iso_date('2025-Subject-to-change')
    assert not is_iso_date('2025-29-Feb')
    assert not is_iso_date('')
