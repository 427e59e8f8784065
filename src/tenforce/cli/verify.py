# src/tenforce/cli/verify.py
"""CLI command for checking the archetype rules against every sequence."""

from __future__ import annotations

import logging
import sys

import click

from tenforce.archetypes.base import Archetype
from tenforce.archetypes.verify import (
    EXPECTED_COUNTS,
    EXPECTED_TOTAL,
    RuleConsistencyError,
    check_expected_counts,
    verify_all,
)

logger = logging.getLogger(__name__)


@click.command()
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def main(verbose: bool):
    """Run every valid sequence through the archetype rules.

    Fails if a sequence matches more than one rule, matches none, or if the
    number of sequences per archetype differs from the expected counts.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        paths = verify_all()
    except RuleConsistencyError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Number of paths, expecting {EXPECTED_TOTAL}: {sum(paths.values())}")
    for archetype in Archetype:
        click.echo(
            f"  {archetype.value:<10} ({archetype.meta.value:<8}) "
            f"{paths.get(archetype, 0):>3}, expecting {EXPECTED_COUNTS[archetype]}"
        )

    try:
        check_expected_counts(paths)
    except RuleConsistencyError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo("All rules consistent.")


if __name__ == "__main__":
    main()
