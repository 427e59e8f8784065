# src/tenforce/cli/classify.py
"""CLI command for resolving the archetype of a card sequence."""

from __future__ import annotations

import json
import logging
import sys

import click

from tenforce.archetypes import (
    InvalidSequenceError,
    PHILOSOPHY_BY_ARCHETYPE,
    format_sequence,
    get_archetype,
    parse_sequence,
)
from tenforce.cards.consequences import consequences_of_card
from tenforce.cards.schema import CardColor, Era, card_color
from tenforce.display import ARCHETYPE_CSS_COLORS

logger = logging.getLogger(__name__)


@click.command()
@click.argument("cell")
@click.argument("creature")
@click.argument("tribal")
@click.argument("civilization")
@click.option("-j", "--json", "as_json", is_flag=True, help="Output JSON instead of text")
@click.option("--lenient", is_flag=True, help="Print 'none' instead of failing on an invalid sequence")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def main(cell: str, creature: str, tribal: str, civilization: str, as_json: bool, lenient: bool, verbose: bool):
    """Resolve the archetype of a sequence of four cards.

    Cards are given by name, one per era, e.g.:

        tenforce-classify skipped carnivore friendly economic
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        sequence = parse_sequence([cell, creature, tribal, civilization])
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    try:
        archetype = get_archetype(sequence, null_if_invalid=lenient)
    except InvalidSequenceError as e:
        click.echo(f"Error: {e}", err=True)
        click.echo("Skipped cards may only come before played cards.", err=True)
        sys.exit(1)

    if archetype is None:
        click.echo(json.dumps({"archetype": None}) if as_json else "none")
        return

    consequences = {}
    for era, card in zip(Era, sequence):
        if card_color(card) != CardColor.BLACK:
            consequences[card.name.lower()] = [c.name.lower() for c in consequences_of_card(card, era)]

    result = {
        "sequence": format_sequence(sequence),
        "archetype": archetype.value,
        "meta_archetype": archetype.meta.value,
        "philosophy": PHILOSOPHY_BY_ARCHETYPE[archetype].value,
        "color": ARCHETYPE_CSS_COLORS[archetype],
        "consequences": consequences,
    }

    if as_json:
        click.echo(json.dumps(result, indent=2))
        return

    click.echo(f"Sequence:   {result['sequence']}")
    click.echo(f"Archetype:  {result['archetype']} ({result['meta_archetype']})")
    click.echo(f"Philosophy: {result['philosophy']}")
    click.echo(f"Color:      {result['color']}")
    for card_name, names in consequences.items():
        click.echo(f"  {card_name}: {', '.join(names)}")


if __name__ == "__main__":
    main()
