import pytest

from tally.tournament import parse_input

FIXTURE = """
Allegoric Alaskans;Blithering Badgers;win
Devastating Donkeys;Courageous Californians;draw
Devastating Donkeys;Allegoric Alaskans;win
Courageous Californians;Blithering Badgers;loss
Blithering Badgers;Devastating Donkeys;loss
Allegoric Alaskans;Courageous Californians;win
"""

DESC_TEAMS = [
    "Devastating Donkeys",
    "Allegoric Alaskans",
    "Blithering Badgers",
    "Courageous Californians",
]


@pytest.fixture
def fixture_text():
    return FIXTURE


@pytest.fixture
def matches():
    return parse_input(FIXTURE)


@pytest.fixture
def desc_teams():
    return list(DESC_TEAMS)
