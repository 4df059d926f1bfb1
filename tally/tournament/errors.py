"""
Errors raised while reading match results.
"""


class TallyError(Exception):
    """Base class for all tally errors."""


class MalformedRecord(TallyError):
    """A record did not have exactly three fields."""

    def __init__(self, record, line_number=None):
        self.record = record
        self.line_number = line_number
        where = f"record on line {line_number}" if line_number else "record"
        super().__init__(
            f"{where}: wrong number of fields (want 3, got {len(record)}): "
            f"{';'.join(record)!r}"
        )


class UnknownOutcome(TallyError):
    """An outcome token was not one of win, draw or loss."""

    def __init__(self, token, line_number=None):
        self.token = token
        self.line_number = line_number
        where = f" on line {line_number}" if line_number else ""
        super().__init__(
            f"unknown outcome {token!r}{where} (expected win, draw or loss)"
        )


class UnreadableRecord(TallyError):
    """The delimited text itself could not be read."""

    def __init__(self, reason, line_number=None):
        self.reason = reason
        self.line_number = line_number
        where = f"line {line_number}: " if line_number else ""
        super().__init__(f"{where}{reason}")
