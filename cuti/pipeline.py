#!/usr/bin/env python3
"""
Main pipeline orchestrator.

Runs the full holiday pipeline for one year:
1. Ingest - Render each state page and extract its holiday table
2. Normalize - Canonical dates and state identifiers (per row)
3. Merge - Consolidate observances shared by several states
4. Export - Write JSON or CSV

States are fetched one at a time through a single browser session. A state
that fails or times out is skipped; the run continues with the rest.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from playwright.sync_api import Error as PlaywrightError

from .config import load_config
from .constants import BASE_URL, DEFAULT_TIMEOUT_SECONDS, DEFAULT_YEAR, NATIONAL, STATES
from .export.export_holidays import (
    ExportError,
    UnsupportedFormatError,
    export_holidays,
    holiday_stats,
    normalize_format,
    print_stats,
)
from .ingest.browser import BrowserSession
from .ingest.holiday_scraper import FetchError, fetch_state
from .merge.consolidate import consolidate
from .models import Holiday

logger = logging.getLogger(__name__)


def run_pipeline(session, year: int, states: Optional[List[str]] = None,
                 timeout: float = DEFAULT_TIMEOUT_SECONDS,
                 base_url: str = BASE_URL,
                 fetcher: Callable = fetch_state) -> List[Holiday]:
    """
    Fetch every state page for a year and consolidate the results.

    Args:
        session: Started BrowserSession shared by all fetches
        year: Year to fetch
        states: State identifiers in processing order (default: STATES)
        timeout: Seconds allowed per state
        base_url: Site root
        fetcher: Per-state fetch function (default: fetch_state)

    Returns:
        Consolidated holidays sorted by date. States that failed contribute
        nothing.

    Raises:
        ValueError: If states holds an unknown identifier (checked before
            any fetch)
    """
    states = STATES if states is None else states
    unknown = [s for s in states if s not in STATES]
    if unknown:
        raise ValueError(f"Unknown state(s): {', '.join(unknown)}")

    all_holidays: List[Holiday] = []
    failed = []

    for i, state in enumerate(states):
        if state == NATIONAL:
            # Covered by the state pages
            logger.info(f"[{i + 1}/{len(states)}] Skipping {state} (no page of its own)")
            continue

        logger.info(f"[{i + 1}/{len(states)}] Fetching {state} ({year})...")
        try:
            holidays = fetcher(session, state, year, timeout=timeout, base_url=base_url)
        except FetchError as e:
            logger.error(f"Failed to fetch {state} ({year}): {e}")
            failed.append(state)
            continue

        all_holidays.extend(holidays)

    if failed:
        logger.warning(f"Skipped {len(failed)} state(s): {', '.join(failed)}")

    return consolidate(all_holidays)


def main():
    parser = argparse.ArgumentParser(
        description='Scrape Malaysian public holidays for one year',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m cuti.pipeline --year 2025                 # holidays.json
  python -m cuti.pipeline -y 2026 -f csv -o out/2026  # out/2026.csv
  python -m cuti.pipeline --headless --timeout 30
  python -m cuti.pipeline --config settings.json
"""
    )

    parser.add_argument('--year', '-y', type=int, default=DEFAULT_YEAR,
                        help=f'Year to fetch holidays for (default: {DEFAULT_YEAR})')
    parser.add_argument('--format', '-f', type=str, default='json',
                        help='Output format: json or csv (default: json)')
    parser.add_argument('--out', '-o', type=str, default='holidays',
                        help='Output file name without extension (default: holidays)')
    parser.add_argument('--headless', action='store_true', default=None,
                        help='Run Chromium in headless mode')
    parser.add_argument('--timeout', type=float, default=None,
                        help=f'Seconds allowed per state (default: {DEFAULT_TIMEOUT_SECONDS:g})')
    parser.add_argument('--config', '-c', type=Path, default=None,
                        help='JSON file overriding default settings')
    parser.add_argument('--no-stats', action='store_true',
                        help='Disable summary output')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose logging')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # Fail before any network work
    try:
        fmt = normalize_format(args.format)
    except UnsupportedFormatError as e:
        parser.error(str(e))

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        logger.error(f"Invalid config: {e}")
        sys.exit(1)

    if args.headless is not None:
        config['headless'] = args.headless
    if args.timeout is not None:
        if args.timeout <= 0:
            parser.error("--timeout must be positive")
        config['timeout'] = args.timeout

    try:
        with BrowserSession(
            headless=config['headless'],
            blocked_resource_types=config['blocked_resource_types'],
            blocked_url_patterns=config['blocked_url_patterns'],
        ) as session:
            holidays = run_pipeline(session, args.year,
                                    timeout=config['timeout'],
                                    base_url=config['base_url'])
    except PlaywrightError as e:
        logger.error(f"Browser error: {e}")
        sys.exit(1)

    try:
        path = export_holidays(holidays, args.out, fmt)
    except ExportError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"Holidays written to {path}")

    if not args.no_stats:
        print_stats(holiday_stats(holidays))

    sys.exit(0)


if __name__ == '__main__':
    main()
