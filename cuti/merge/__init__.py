"""
Merging of per-state holiday records.

Combines the observations collected from each state page:
- Records with the same date and name become one record
- State lists are unioned and deduplicated
- Output is sorted by date
"""
