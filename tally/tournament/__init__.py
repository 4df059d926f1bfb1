"""
Tournament tallying for Tally.

This package contains the match parser and the table aggregator/ranker.
"""

from .errors import TallyError, MalformedRecord, UnknownOutcome, UnreadableRecord
from .models import Outcome, Order, Match, TableRow, Table
from .parser import parse_input, parse_record, parse_outcome
from .table import build_table, tally

__all__ = [
    "TallyError", "MalformedRecord", "UnknownOutcome", "UnreadableRecord",
    "Outcome", "Order", "Match", "TableRow", "Table",
    "parse_input", "parse_record", "parse_outcome",
    "build_table", "tally",
]
