"""
Normalization of scraped text.

- date_utils: "1 Jan" + year -> "YYYY-01-01"
- states: free-text region labels -> canonical state identifiers
"""
