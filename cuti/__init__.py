"""
Malaysian public holiday scraper.

Pipeline stages:
1. Ingest - Render each state's holiday page and extract table rows
2. Normalize - Canonical dates and state identifiers
3. Merge - Consolidate per-state observances by (date, name)
4. Export - Write JSON or CSV
"""

__version__ = '0.1.0'
