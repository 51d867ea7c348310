#!/usr/bin/env python3
"""
publicholidays.com.my state page scraper.

Uses Playwright since the holiday tables are rendered in the browser.
Each call renders one state's page for one year and returns per-state
Holiday records. The page layout is not guaranteed by the site, so table
discovery is best-effort: a missing heading or table yields no rows rather
than an error.
"""

import logging
import time
from typing import List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeout

from ..constants import (
    BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    MIN_ROW_CELLS,
    NATIONAL,
    STATES,
    TABLE_CLASS,
    TABLE_SELECTOR,
    URL_TEMPLATE,
)
from ..models import Holiday
from ..normalize.date_utils import normalize_date
from ..normalize.states import normalize_state

logger = logging.getLogger(__name__)


# Finds the h2 mentioning the year and reads the table right after it.
# Returns [] when either is missing.
EXTRACT_ROWS_JS = """
([year, tableClass]) => {
    const yearHeader = Array.from(document.querySelectorAll("h2"))
        .find(h => h.innerText.includes(String(year)));
    if (!yearHeader) return [];

    const table = yearHeader.nextElementSibling;
    if (!table || !table.classList.contains(tableClass)) return [];

    return Array.from(table.querySelectorAll("tbody tr")).map(tr =>
        Array.from(tr.querySelectorAll("td")).map(td => td.innerText.trim())
    );
}
"""


class FetchError(Exception):
    """A state page could not be fetched or rendered."""

    def __init__(self, state: str, year: int, message: str):
        super().__init__(f"error loading {state} ({year}): {message}")
        self.state = state
        self.year = year


class FetchTimeout(FetchError):
    """The page or its holiday table did not appear within the timeout."""


class NavigationFailure(FetchError):
    """The browser failed to load the page."""


def build_url(state: str, year: int, base_url: str = BASE_URL) -> str:
    """
    Build the holiday page URL for a state and year.

    Examples:
        >>> build_url('johor', 2025)
        'https://publicholidays.com.my/johor/2025-dates/'
    """
    return URL_TEMPLATE.format(base_url=base_url.rstrip('/'), state=state, year=year)


def extract_rows(page, year: int, timeout: Optional[float] = None) -> List[List[str]]:
    """
    Run the in-page table query and return the raw cell texts per row.

    The query goes through wait_for_function so it is bounded by timeout
    (milliseconds, None = Playwright default). The script always returns an
    array, which is truthy, so the wait ends on the first evaluation.

    Returns [] if the page has no heading for the year or no holiday
    table after it.
    """
    handle = page.wait_for_function(EXTRACT_ROWS_JS, arg=[year, TABLE_CLASS],
                                    timeout=timeout)
    try:
        rows = handle.json_value()
    finally:
        handle.dispose()
    return rows or []


def rows_to_holidays(rows: List[List[str]], state: str, year: int) -> List[Holiday]:
    """Convert raw [date, day, name, ...] rows to single-state records."""
    canonical_state = normalize_state(state)
    holidays = []

    for row in rows:
        if len(row) < MIN_ROW_CELLS:
            continue
        holidays.append(Holiday(
            date=normalize_date(row[0], year),
            day=row[1],
            name=row[2],
            states=[canonical_state],
        ))

    return holidays


def _remaining_ms(deadline: float, state: str, year: int) -> float:
    remaining = deadline - time.monotonic()
    if remaining <= 0:
        raise FetchTimeout(state, year, "timed out")
    return remaining * 1000


def fetch_state(session, state: str, year: int,
                timeout: float = DEFAULT_TIMEOUT_SECONDS,
                base_url: str = BASE_URL) -> List[Holiday]:
    """
    Scrape one state's holiday page.

    Args:
        session: Started BrowserSession (anything with a Playwright .page)
        state: Canonical state identifier, not 'national'
        year: Year to fetch
        timeout: Seconds allowed for the whole fetch
        base_url: Site root

    Returns:
        Per-state Holiday records, [] if the page had no usable table

    Raises:
        ValueError: For 'national' or an unknown state
        FetchTimeout: If the page or table did not render in time
        NavigationFailure: For any other browser error
    """
    if state == NATIONAL:
        raise ValueError("The national holiday set has no page of its own")
    if state not in STATES:
        raise ValueError(f"Unknown state: {state}")

    url = build_url(state, year, base_url)
    logger.info(f"Fetching {state} ({year}) - {url}")

    page = session.page
    deadline = time.monotonic() + timeout

    try:
        page.goto(url, wait_until='domcontentloaded',
                  timeout=_remaining_ms(deadline, state, year))
        page.wait_for_selector(TABLE_SELECTOR, state='visible',
                               timeout=_remaining_ms(deadline, state, year))
        rows = extract_rows(page, year,
                            timeout=_remaining_ms(deadline, state, year))
    except PlaywrightTimeout as e:
        raise FetchTimeout(state, year, str(e)) from e
    except PlaywrightError as e:
        raise NavigationFailure(state, year, str(e)) from e

    if not rows:
        logger.warning(f"No rows found for {state} in {year}; page may have changed")
        return []

    holidays = rows_to_holidays(rows, state, year)
    logger.info(f"Fetched {len(holidays)} rows for {state} ({year})")
    return holidays
