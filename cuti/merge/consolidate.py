#!/usr/bin/env python3
"""
Consolidate per-state holiday records into multi-state records.

Two records describe the same observance when date and name match exactly.
The weekday label is not part of the key since a state may list the same
holiday on a different day.
"""

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Tuple

from ..models import Holiday

logger = logging.getLogger(__name__)


def unique(items: Iterable[str]) -> List[str]:
    """
    Remove duplicates, keeping first-seen order.

    Examples:
        >>> unique(['johor', 'kedah', 'johor'])
        ['johor', 'kedah']
    """
    seen = set()
    out = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def consolidate(holidays: Iterable[Holiday]) -> List[Holiday]:
    """
    Merge records sharing (date, name) and sort by date.

    Args:
        holidays: Per-state records, usually one state each

    Returns:
        New Holiday records, one per distinct (date, name), sorted by date.
        The first record seen for a key supplies the weekday label.
    """
    merged: Dict[Tuple[str, str], Holiday] = {}
    count = 0

    for holiday in holidays:
        count += 1
        key = holiday.merge_key

        existing = merged.get(key)
        if existing is not None:
            existing.states = unique(existing.states + list(holiday.states))
        else:
            merged[key] = replace(holiday, states=unique(holiday.states))

    # Stable sort: same-date holidays keep first-seen order
    result = sorted(merged.values(), key=lambda h: h.date)

    logger.debug(f"Consolidated {count} records into {len(result)} holidays")
    return result
