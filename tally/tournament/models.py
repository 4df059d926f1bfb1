"""
Data models for the Tally system.

This module defines the values that flow through the tallying pipeline:
match outcomes, parsed matches, per-team table rows and the table itself.
"""

import enum
from collections import namedtuple


class Outcome(enum.Enum):
    """Result of a match. The value is the token used in the input."""
    WIN = "win"
    DRAW = "draw"
    LOSS = "loss"

    @property
    def points(self):
        """Points earned for this outcome."""
        return _POINTS[self]

    def mirrored(self):
        """Return the outcome as seen by the other team."""
        return _MIRRORED[self]


_POINTS = {
    Outcome.WIN: 3,
    Outcome.DRAW: 1,
    Outcome.LOSS: 0,
}

_MIRRORED = {
    Outcome.WIN: Outcome.LOSS,
    Outcome.DRAW: Outcome.DRAW,
    Outcome.LOSS: Outcome.WIN,
}


class Order(enum.Enum):
    """Sort direction for a table."""
    ASC = "asc"
    DESC = "desc"


class Match(namedtuple("Match", ["home", "away", "outcome"])):
    """
    A single played fixture.

    The outcome is the result of the home team.
    """
    __slots__ = ()

    def __repr__(self):
        return f"<Match({self.home!r} vs {self.away!r}: {self.outcome.value})>"


class TableRow:
    """
    Running aggregate of one team's results.

    Points are derived from the won/drawn counters, so the row can only be
    changed through record().
    """

    def __init__(self, team):
        self.team = team
        self.matches_played = 0
        self.matches_won = 0
        self.matches_drawn = 0
        self.matches_lost = 0

    @property
    def points(self):
        return (self.matches_won * Outcome.WIN.points
                + self.matches_drawn * Outcome.DRAW.points
                + self.matches_lost * Outcome.LOSS.points)

    def record(self, outcome):
        """
        Count one more match for this team.

        Args:
            outcome: Outcome from this team's point of view
        """
        self.matches_played += 1
        if outcome is Outcome.WIN:
            self.matches_won += 1
        elif outcome is Outcome.DRAW:
            self.matches_drawn += 1
        else:
            self.matches_lost += 1

    def as_tuple(self):
        """Return (team, played, won, drawn, lost, points)."""
        return (self.team, self.matches_played, self.matches_won,
                self.matches_drawn, self.matches_lost, self.points)

    def __eq__(self, other):
        if not isinstance(other, TableRow):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    __hash__ = None

    def __repr__(self):
        return (f"<TableRow(team='{self.team}', mp={self.matches_played}, "
                f"w={self.matches_won}, d={self.matches_drawn}, "
                f"l={self.matches_lost}, p={self.points})>")


class Table:
    """
    The tournament table.

    Row order is meaningless until sort() has been called.
    """

    def __init__(self, rows=None):
        self.rows = list(rows) if rows is not None else []

    def sort(self, order=Order.DESC):
        """
        Rank the rows in place.

        Rows are ordered by points. Ties on points are broken by team name
        in the same direction, so a descending table lists the greater name
        first.

        Args:
            order: Order member or its string value ("asc" or "desc")

        Returns:
            Table: this table
        """
        order = Order(order)
        self.rows.sort(key=lambda row: (row.points, row.team),
                       reverse=order is Order.DESC)
        return self

    def teams(self):
        """Team names in current row order."""
        return [row.team for row in self.rows]

    def __iter__(self):
        return iter(self.rows)

    def __len__(self):
        return len(self.rows)

    def __repr__(self):
        return f"<Table(rows={len(self.rows)})>"
