"""
Fixed-width text rendering of a tournament table.
"""

DEFAULT_WIDTH = 30
COLUMNS = ("MP", "W", "D", "L", "P")


def format_header(width=DEFAULT_WIDTH):
    cells = " | ".join(f"{name:>2}" for name in COLUMNS)
    return f"{'Team':<{width}} | {cells}"


def format_row(row, width=DEFAULT_WIDTH):
    """Format one TableRow; long team names are cut to width."""
    team, *counts = row.as_tuple()
    cells = " | ".join(f"{count:>2}" for count in counts)
    return f"{team:<{width}.{width}} | {cells}"


def render_table(table, width=DEFAULT_WIDTH):
    """
    Render a table as text, one line per row under a header.

    Args:
        table: Table (or any iterable of TableRow) in display order
        width: Width of the team name column

    Returns:
        str: the rendered table, newline terminated
    """
    lines = [format_header(width)]
    lines.extend(format_row(row, width) for row in table)
    return "\n".join(lines) + "\n"
