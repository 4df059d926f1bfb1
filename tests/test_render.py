from tally.render import format_header, format_row, render_table
from tally.tournament import Table, TableRow, tally

EXPECTED = """\
Team                           | MP |  W |  D |  L |  P
Devastating Donkeys            |  3 |  2 |  1 |  0 |  7
Allegoric Alaskans             |  3 |  2 |  0 |  1 |  6
Blithering Badgers             |  3 |  1 |  0 |  2 |  3
Courageous Californians        |  3 |  0 |  1 |  2 |  1
"""


def test_render_table(matches):
    assert render_table(tally(matches)) == EXPECTED


def test_render_empty_table():
    assert render_table(Table()) == format_header() + "\n"


def test_long_team_name_is_truncated():
    row = TableRow("Supercalifragilistic Expialidocious FC")
    line = format_row(row, width=10)
    assert line == "Supercalif |  0 |  0 |  0 |  0 |  0"


def test_header_width():
    assert format_header(width=6) == "Team   | MP |  W |  D |  L |  P"
