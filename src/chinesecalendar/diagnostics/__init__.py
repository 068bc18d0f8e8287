"""Diagnostics package.

- round_trip, new_years_table: always available, plain-text output
- new_year_scatter: optional (requires the diagnostics extras)
"""

__all__ = ["round_trip", "new_years_table", "new_year_scatter"]
