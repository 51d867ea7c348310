#!/usr/bin/env python3
"""
Write consolidated holidays to JSON or CSV.

JSON: array of {"date", "day", "name", "states"} objects, 2-space indent.
CSV:  header Date,Day,Name,States; states joined with ";".
"""

import csv
import json
import logging
from collections import Counter
from pathlib import Path
from typing import Dict, List, Union

from ..constants import CSV_HEADER, CSV_STATE_SEPARATOR, OUTPUT_FORMATS
from ..models import Holiday
from ..normalize.date_utils import is_iso_date

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ExportError(Exception):
    """The output file could not be written."""


class UnsupportedFormatError(ValueError):
    """The output format is neither json nor csv."""


def normalize_format(fmt: str) -> str:
    """
    Validate an output format selector (case-insensitive).

    Examples:
        >>> normalize_format('JSON')
        'json'
    """
    normalized = (fmt or '').strip().lower()
    if normalized not in OUTPUT_FORMATS:
        raise UnsupportedFormatError(f"Unsupported format: {fmt}")
    return normalized


def output_path(out: PathLike, fmt: str) -> Path:
    """Append the format extension to the base output name."""
    return Path(f"{out}.{normalize_format(fmt)}")


def save_json(path: PathLike, holidays: List[Holiday]) -> None:
    data = [h.to_dict() for h in holidays]
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def load_json(path: PathLike) -> List[Holiday]:
    """Read an exported JSON file back into Holiday records."""
    with open(path, encoding='utf-8') as f:
        data = json.load(f)
    return [Holiday.from_dict(item) for item in data]


def save_csv(path: PathLike, holidays: List[Holiday]) -> None:
    with open(path, 'w', encoding='utf-8', newline='') as f:
        writer = csv.writer(f, lineterminator='\n')
        writer.writerow(CSV_HEADER)
        for h in holidays:
            writer.writerow([h.date, h.day, h.name, CSV_STATE_SEPARATOR.join(h.states)])


WRITERS = {
    'json': save_json,
    'csv': save_csv,
}


def export_holidays(holidays: List[Holiday], out: PathLike, fmt: str = 'json') -> Path:
    """
    Write holidays to <out>.<fmt>.

    Args:
        holidays: Consolidated records
        out: Output file name without extension
        fmt: 'json' or 'csv' (case-insensitive)

    Returns:
        Path of the written file

    Raises:
        UnsupportedFormatError: For any other format
        ExportError: If the file cannot be created or written
    """
    fmt = normalize_format(fmt)
    path = output_path(out, fmt)

    try:
        if path.parent != Path('.'):
            path.parent.mkdir(parents=True, exist_ok=True)
        WRITERS[fmt](path, holidays)
    except OSError as e:
        raise ExportError(f"Could not write {path}: {e}") from e

    return path


def holiday_stats(holidays: List[Holiday]) -> Dict:
    """
    Summarize a consolidated holiday list.

    Returns:
        Dict with total, multi_state, unparsed_dates and per_state counts
    """
    per_state = Counter()
    for h in holidays:
        per_state.update(h.states)

    return {
        'total': len(holidays),
        'multi_state': sum(1 for h in holidays if len(h.states) > 1),
        'unparsed_dates': sum(1 for h in holidays if not is_iso_date(h.date)),
        'per_state': dict(sorted(per_state.items())),
    }


def print_stats(stats: Dict) -> None:
    """Log a holiday summary produced by holiday_stats()."""
    logger.info(f"Holidays: {stats['total']} ({stats['multi_state']} observed in several states)")
    if stats['unparsed_dates']:
        logger.warning(f"Unparsed dates: {stats['unparsed_dates']}")
    for state, count in stats['per_state'].items():
        logger.info(f"  {state}: {count}")
