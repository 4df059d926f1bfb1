"""
Command-line interface for Tally.

This module provides the main entry point for the tally command.
"""

import click

from tally import __version__
from tally.render import DEFAULT_WIDTH, render_table
from tally.tournament import Order, TallyError, build_table, parse_input


@click.command()
@click.argument('input_file', type=click.File('r'), default='-', required=False)
@click.option('--order', type=click.Choice([o.value for o in Order]),
              default=Order.DESC.value, show_default=True,
              help='Rank by points ascending or descending')
@click.option('--strict', is_flag=True,
              help='Reject outcomes other than win, draw or loss')
@click.option('--width', type=click.IntRange(min=4), default=DEFAULT_WIDTH,
              show_default=True, help='Width of the team column')
@click.option('--verbose', is_flag=True, help='Print progress to stderr')
@click.version_option(__version__, prog_name='tally')
def main(input_file, order, strict, width, verbose):
    """Tally match results into a league table.

    Reads INPUT_FILE, or stdin when it is omitted. Each line holds
    home team, away team and the home result, separated by semicolons:

    \b
        Allegoric Alaskans;Blithering Badgers;win
    """
    if verbose:
        source = getattr(input_file, 'name', '<stdin>')
        click.echo(f"Reading matches from {source}...", err=True)

    try:
        matches = parse_input(input_file, strict=strict)
    except TallyError as e:
        raise click.ClickException(str(e)) from e
    except UnicodeDecodeError as e:
        raise click.ClickException(f"input is not valid text: {e}") from e

    if verbose:
        click.echo(f"Parsed {len(matches)} matches", err=True)

    table = build_table(matches).sort(order)

    if verbose:
        click.echo(f"Ranked {len(table)} teams ({order})", err=True)

    click.echo(render_table(table, width=width), nl=False)


if __name__ == '__main__':
    main()
