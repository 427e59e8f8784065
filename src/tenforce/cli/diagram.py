# src/tenforce/cli/diagram.py
"""CLI command for writing the archetype diagram as SVG."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from tenforce.diagram.generate import DiagramConfig, generate_svg, svg_to_string
from tenforce.display import fill_properties

logger = logging.getLogger(__name__)


@click.command()
@click.option("-o", "--output", type=click.Path(), default="10force.svg", help="Output file path")
@click.option("--side", type=float, default=800, help="Side of the big triangle, in pixels")
@click.option("--hexfactor", type=float, default=1 / 3, help="Size of the center hexagon, from 0 to 1")
@click.option("--colors/--no-colors", default=True, help="Fill each region with its archetype color")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def main(output: str, side: float, hexfactor: float, colors: bool, verbose: bool):
    """Write the ten-archetype triangle diagram to an SVG file."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    try:
        config = DiagramConfig(
            side=side,
            hexfactor=hexfactor,
            properties_per_archetype=fill_properties() if colors else {},
        )
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    out_path = Path(output)
    if out_path.parent != Path("."):
        out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(svg_to_string(generate_svg(config)))
    logger.debug(f"Diagram config: {config}")
    click.echo(f"Saved to {out_path}")


if __name__ == "__main__":
    main()
