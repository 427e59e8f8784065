"""SVG diagram of the ten archetypes.

The big triangle has one vertex per color: red at the top, green bottom
left, blue bottom right. Pure archetypes sit in the corners, tendency and
half archetypes along the edges, and the wanderer in the central hexagon.
"""

from __future__ import annotations

import logging
import math
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

import numpy as np

from tenforce.archetypes.base import Archetype

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

Point = Tuple[float, float]


@dataclass(frozen=True)
class DiagramConfig:
    """Diagram geometry and per-archetype SVG attributes."""

    side: float = 800  # Side of the big triangle
    # Proportional to the perimeter of the center hexagon. At 0 there is no
    # hexagon; at 1 the six edge archetypes have no room left.
    hexfactor: float = 1 / 3
    # Excluded from the hash; equal configs still hash equal.
    properties_per_archetype: Mapping[Archetype, Mapping[str, str]] = field(
        default_factory=dict, hash=False,
    )

    def __post_init__(self):
        """Validate geometry bounds and freeze the attribute mapping."""
        if not (math.isfinite(self.side) and self.side > 0):
            raise ValueError(f"side must be a positive finite number, got {self.side}")
        if not (math.isfinite(self.hexfactor) and 0 <= self.hexfactor <= 1):
            raise ValueError(f"hexfactor must be between 0 and 1, got {self.hexfactor}")
        object.__setattr__(self, "properties_per_archetype", MappingProxyType({
            archetype: MappingProxyType(dict(attrs))
            for archetype, attrs in self.properties_per_archetype.items()
        }))


@dataclass(frozen=True)
class Polygon:
    """A diagram region."""

    id: str
    points: Tuple[Point, ...]
    attributes: Optional[Mapping[str, str]] = None


def triangle_height(side: float) -> float:
    """Height of an equilateral triangle."""
    return math.sqrt(3) / 2 * side


def lerp(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """Point between a (t=0) and b (t=1)."""
    return a + t * (b - a)


def _as_points(*arrays: np.ndarray) -> Tuple[Point, ...]:
    return tuple((float(p[0]), float(p[1])) for p in arrays)


def generate_polygons(config: DiagramConfig) -> List[Polygon]:
    """Compute the base triangle and the ten archetype regions."""
    side = config.side
    height = triangle_height(side)
    props = config.properties_per_archetype

    # Vertices where a single color is maximal
    r = np.array([side / 2, 0.0])
    g = np.array([0.0, height])
    b = np.array([float(side), height])

    # Edge points, named after the two areas they separate on the edge
    warrior_zealot = lerp(r, g, 1 / 3)       # red red green
    zealot_shaman = lerp(r, g, 2 / 3)        # green green red
    warrior_scientist = lerp(r, b, 1 / 3)    # red red blue
    scientist_trader = lerp(r, b, 2 / 3)     # blue blue red
    shaman_diplomat = lerp(g, b, 1 / 3)      # green green blue
    diplomat_trader = lerp(g, b, 2 / 3)      # blue blue green

    center = (r + g + b) / 3

    # Hexagon vertices, shared with the two edge areas they touch
    knight_zealot = lerp(center, warrior_zealot, config.hexfactor)
    zealot_ecologist = lerp(center, zealot_shaman, config.hexfactor)
    ecologist_diplomat = lerp(center, shaman_diplomat, config.hexfactor)
    diplomat_bard = lerp(center, diplomat_trader, config.hexfactor)
    scientist_bard = lerp(center, scientist_trader, config.hexfactor)
    knight_scientist = lerp(center, warrior_scientist, config.hexfactor)

    regions = [
        (Archetype.WARRIOR, (r, warrior_zealot, warrior_scientist)),
        (Archetype.SHAMAN, (zealot_shaman, g, shaman_diplomat)),
        (Archetype.TRADER, (scientist_trader, diplomat_trader, b)),
        (Archetype.KNIGHT, (warrior_zealot, knight_zealot, knight_scientist, warrior_scientist)),
        (Archetype.ZEALOT, (warrior_zealot, zealot_shaman, zealot_ecologist, knight_zealot)),
        (Archetype.ECOLOGIST, (zealot_shaman, shaman_diplomat, ecologist_diplomat, zealot_ecologist)),
        (Archetype.DIPLOMAT, (ecologist_diplomat, shaman_diplomat, diplomat_trader, diplomat_bard)),
        (Archetype.BARD, (scientist_bard, diplomat_bard, diplomat_trader, scientist_trader)),
        (Archetype.SCIENTIST, (warrior_scientist, knight_scientist, scientist_bard, scientist_trader)),
        (Archetype.WANDERER, (knight_zealot, zealot_ecologist, ecologist_diplomat, diplomat_bard, scientist_bard, knight_scientist)),
    ]

    polygons = [Polygon(id="base", points=_as_points(r, g, b))]
    for archetype, points in regions:
        polygons.append(Polygon(
            id=archetype.value,
            points=_as_points(*points),
            attributes=props.get(archetype),
        ))
    return polygons


def _format_number(value: float) -> str:
    return str(int(value)) if value == int(value) else repr(float(value))


def points_to_string(points: Tuple[Point, ...]) -> str:
    """SVG ``points`` attribute value."""
    return " ".join(f"{_format_number(x)},{_format_number(y)}" for x, y in points)


def generate_svg(config: Optional[DiagramConfig] = None) -> ET.Element:
    """Build the ``<svg>`` element of the diagram."""
    if config is None:
        config = DiagramConfig()

    svg = ET.Element("svg", {
        "xmlns": SVG_NS,
        "width": _format_number(config.side),
        "height": _format_number(triangle_height(config.side)),
    })
    group = ET.SubElement(svg, "g", {
        "stroke": "black",
        "stroke-width": "1",
        "fill": "none",
    })

    polygons = generate_polygons(config)
    for polygon in polygons:
        attrs: Dict[str, str] = {
            "id": polygon.id,
            "points": points_to_string(polygon.points),
        }
        if polygon.attributes:
            attrs.update(polygon.attributes)
        ET.SubElement(group, "polygon", attrs)

    logger.debug(f"Generated diagram with {len(polygons)} polygons (side={config.side})")
    return svg


def svg_to_string(svg: ET.Element) -> str:
    """Serialize an SVG element."""
    return ET.tostring(svg, encoding="unicode")
