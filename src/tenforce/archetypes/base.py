"""Archetype enumerations."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from tenforce.cards.schema import CardColor


class MetaArchetype(Enum):
    """Families of archetypes, by how the colors of a sequence are spread."""

    WANDERER = "wanderer"  # No colored card at all
    PURE = "pure"          # Concentrated on one color
    TENDENCY = "tendency"  # All three colors, one of them doubled (1-1-2)
    HALF = "half"          # Exactly two colors


class Archetype(Enum):
    """The ten archetypes a sequence of cards resolves to."""

    WANDERER = "wanderer"

    # Pure, maximizing red/green/blue cards
    WARRIOR = "warrior"
    SHAMAN = "shaman"
    TRADER = "trader"

    # Tendency, tending towards red/green/blue cards
    KNIGHT = "knight"
    ECOLOGIST = "ecologist"
    BARD = "bard"

    # Half, between green+blue, red+blue and red+green cards
    DIPLOMAT = "diplomat"
    SCIENTIST = "scientist"
    ZEALOT = "zealot"

    @property
    def meta(self) -> MetaArchetype:
        """The family this archetype belongs to."""
        return _META[self]

    @property
    def color(self) -> Optional[CardColor]:
        """The dominant color of a pure or tendency archetype, the excluded
        color of a half archetype, None for the wanderer."""
        return _COLOR.get(self)


_META = {
    Archetype.WANDERER: MetaArchetype.WANDERER,
    Archetype.WARRIOR: MetaArchetype.PURE,
    Archetype.SHAMAN: MetaArchetype.PURE,
    Archetype.TRADER: MetaArchetype.PURE,
    Archetype.KNIGHT: MetaArchetype.TENDENCY,
    Archetype.ECOLOGIST: MetaArchetype.TENDENCY,
    Archetype.BARD: MetaArchetype.TENDENCY,
    Archetype.DIPLOMAT: MetaArchetype.HALF,
    Archetype.SCIENTIST: MetaArchetype.HALF,
    Archetype.ZEALOT: MetaArchetype.HALF,
}

PURE_BY_COLOR = {
    CardColor.RED: Archetype.WARRIOR,
    CardColor.GREEN: Archetype.SHAMAN,
    CardColor.BLUE: Archetype.TRADER,
}

TENDENCY_BY_COLOR = {
    CardColor.RED: Archetype.KNIGHT,
    CardColor.GREEN: Archetype.ECOLOGIST,
    CardColor.BLUE: Archetype.BARD,
}

# Keyed by the color that is absent from the sequence.
HALF_BY_EXCLUDED_COLOR = {
    CardColor.RED: Archetype.DIPLOMAT,
    CardColor.GREEN: Archetype.SCIENTIST,
    CardColor.BLUE: Archetype.ZEALOT,
}

_COLOR = {
    **{archetype: color for color, archetype in PURE_BY_COLOR.items()},
    **{archetype: color for color, archetype in TENDENCY_BY_COLOR.items()},
    **{archetype: color for color, archetype in HALF_BY_EXCLUDED_COLOR.items()},
}
