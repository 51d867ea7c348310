"""
Page ingestion.

- browser: the shared Chromium session (one per run)
- holiday_scraper: renders one state's page for one year and extracts its
  holiday table into per-state Holiday records
"""
