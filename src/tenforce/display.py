"""CSS colors for cards and archetypes."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional

from tenforce.archetypes.base import Archetype
from tenforce.cards.schema import CardColor


CARD_CSS_COLORS: Mapping[CardColor, str] = MappingProxyType({
    CardColor.BLACK: "#000000",
    CardColor.RED: "#CE3F17",
    CardColor.GREEN: "#4DEC5F",
    CardColor.BLUE: "#4ABDDA",
})

ARCHETYPE_CSS_COLORS: Mapping[Archetype, str] = MappingProxyType({
    Archetype.WANDERER: "#939699",

    Archetype.WARRIOR: "#CE3F17",
    Archetype.SHAMAN: "#4DEC5F",
    Archetype.TRADER: "#4ABDDA",

    Archetype.KNIGHT: "#CE469A",
    Archetype.ECOLOGIST: "#A3CE46",
    Archetype.BARD: "#48BC8D",

    Archetype.DIPLOMAT: "#C6CB47",
    Archetype.SCIENTIST: "#5046CE",
    Archetype.ZEALOT: "#A646CE",
})


def fill_properties(
    colors: Optional[Mapping[Archetype, str]] = None,
) -> Dict[Archetype, Dict[str, str]]:
    """SVG fill attributes for each archetype, for the diagram renderer."""
    if colors is None:
        colors = ARCHETYPE_CSS_COLORS
    return {archetype: {"fill": color} for archetype, color in colors.items()}
