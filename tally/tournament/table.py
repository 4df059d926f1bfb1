"""
Table aggregation and ranking for Tally.

build_table() folds matches into one row per team; Table.sort() ranks the
rows. tally() does both and ranks in descending order.
"""

from .models import Order, Table, TableRow


def apply_outcome(rows, team, outcome):
    """
    Record an outcome against a team, creating its row on first sight.

    Args:
        rows: Mapping of team name to TableRow
        team: Team name
        outcome: Outcome from this team's point of view

    Returns:
        TableRow: the updated row
    """
    row = rows.get(team)
    if row is None:
        row = rows[team] = TableRow(team)
    row.record(outcome)
    return row


def build_table(matches):
    """
    Build an unsorted table from a sequence of matches.

    Every team seen as home or away gets exactly one row.

    Args:
        matches: Iterable of Match

    Returns:
        Table: rows in no particular order
    """
    rows = {}
    for match in matches:
        apply_outcome(rows, match.home, match.outcome)
        apply_outcome(rows, match.away, match.outcome.mirrored())
    return Table(rows.values())


def tally(matches):
    """
    Build the tournament table and rank it by points, descending.

    Use build_table() and Table.sort() directly for ascending order or
    unsorted rows.
    """
    return build_table(matches).sort(Order.DESC)
