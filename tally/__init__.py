"""
Tally - league standings from match results.

This package reads semicolon-delimited match records and produces a
ranked tournament table.
"""

__version__ = "0.1.0"
