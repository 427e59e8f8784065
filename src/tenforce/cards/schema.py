"""Core card schema types and enumerations."""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple, Type, Union


class CardColor(IntEnum):
    """Card colors. BLACK is the neutral color of a skipped card."""

    BLACK = 0
    RED = 1
    GREEN = 2
    BLUE = 3


class Era(IntEnum):
    """Game eras, in play order."""

    CELL = 0
    CREATURE = 1
    TRIBAL = 2
    CIVILIZATION = 3
    SPACE = 4


# Card values equal their color values, so SKIPPED aliases BLACK in every era.

class CellCard(IntEnum):
    """Cards played at the end of the Cell era."""

    SKIPPED = 0
    CARNIVORE = 1
    HERBIVORE = 2
    OMNIVORE = 3


class CreatureCard(IntEnum):
    """Cards played at the end of the Creature era."""

    SKIPPED = 0
    PREDATOR = 1
    SOCIAL = 2
    ADAPTABLE = 3


class TribalCard(IntEnum):
    """Cards played at the end of the Tribal era."""

    SKIPPED = 0
    AGGRESSIVE = 1
    FRIENDLY = 2
    INDUSTRIOUS = 3


class CivilizationCard(IntEnum):
    """Cards played at the end of the Civilization era."""

    SKIPPED = 0
    MILITARY = 1
    RELIGIOUS = 2
    ECONOMIC = 3


Card = Union[CellCard, CreatureCard, TribalCard, CivilizationCard]

# One card per era with cards, in play order.
Sequence = Tuple[CellCard, CreatureCard, TribalCard, CivilizationCard]

CARD_TYPES: Tuple[Type[IntEnum], ...] = (CellCard, CreatureCard, TribalCard, CivilizationCard)

CARD_TYPE_BY_ERA = {
    Era.CELL: CellCard,
    Era.CREATURE: CreatureCard,
    Era.TRIBAL: TribalCard,
    Era.CIVILIZATION: CivilizationCard,
}


def card_color(card: Card) -> CardColor:
    """Return the color of any card."""
    return CardColor(int(card))


def colored_cards(card_type: Type[IntEnum]) -> list:
    """Return the non-skipped cards of a card type, in color order."""
    return [card for card in card_type if card_color(card) != CardColor.BLACK]
