"""
Match result parser for Tally.

Input is semicolon-delimited text, one match per line:

    Allegoric Alaskans;Blithering Badgers;win

The outcome is given from the home (first) team's point of view.
"""

import csv
import io

from .errors import MalformedRecord, UnknownOutcome, UnreadableRecord
from .models import Match, Outcome

DELIMITER = ";"
FIELDS_PER_RECORD = 3

OUTCOMES = {outcome.value: outcome for outcome in Outcome}


def parse_input(lines, strict=False):
    """
    Parse match records into a list of matches.

    Blank lines are skipped. Parsing stops at the first malformed record.

    Args:
        lines: Iterable of text lines (an open file works), or a string
        strict: Raise UnknownOutcome for unrecognised outcome tokens
            instead of counting them as a loss

    Returns:
        list: Match objects in input order

    Raises:
        MalformedRecord: A record does not have exactly three fields
        UnknownOutcome: Only when strict is set
        UnreadableRecord: The csv reader rejected the input
    """
    if isinstance(lines, str):
        lines = io.StringIO(lines, newline="")

    reader = csv.reader(lines, delimiter=DELIMITER)
    matches = []
    try:
        for record in reader:
            if not record:
                continue
            matches.append(parse_record(record, strict=strict,
                                        line_number=reader.line_num))
    except csv.Error as e:
        raise UnreadableRecord(str(e), reader.line_num) from e
    return matches


def parse_record(record, strict=False, line_number=None):
    """Build a Match from a list of three fields."""
    if len(record) != FIELDS_PER_RECORD:
        raise MalformedRecord(record, line_number)

    home, away, token = record
    return Match(home, away, parse_outcome(token, strict=strict,
                                           line_number=line_number))


def parse_outcome(token, strict=False, line_number=None):
    """
    Look up an outcome token.

    Matching is exact and case-sensitive. Unknown tokens count as a loss
    unless strict is set.
    """
    if token in OUTCOMES:
        return OUTCOMES[token]
    if strict:
        raise UnknownOutcome(token, line_number)
    return Outcome.LOSS
