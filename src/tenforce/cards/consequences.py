"""Downstream consequences unlocked by each played card."""

from __future__ import annotations

from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from tenforce.cards.schema import (
    Card, CardColor, CellCard, CreatureCard, TribalCard, CivilizationCard,
    Era, CARD_TYPE_BY_ERA, card_color,
)


class CreatureConsequence(IntEnum):
    """Consequences active during the Creature era."""

    RAGING_ROAR = 1
    SIREN_SONG = 2
    SUMMON_FLOCK = 3


class TribalConsequence(IntEnum):
    """Consequences active during the Tribal era."""

    # From cell cards
    TRAPS = 1
    REFRESHING_STORM = 2
    FLYING_FISH = 3
    # From creature cards
    FIRE_BOMBS = 4
    FIREWORKS = 5
    BEASTMASTER = 6


class CivilizationConsequence(IntEnum):
    """Consequences active during the Civilization era."""

    # From cell cards
    INVULNERABILITY = 1
    HEALING_AURA = 2
    STATIC_BOMB = 3
    # From creature cards
    MIGHTY_BOMB = 4
    DIPLO_DERVISH = 5
    BRIBE_BOMB = 6
    # From tribal cards
    GADGET_BOMB = 7
    BLACK_CLOUD = 8
    AD_BLITZ = 9


class SpaceConsequence(IntEnum):
    """Consequences active during the Space era."""

    # From cell cards
    POWER_MONGER = 1
    SOCIAL_SUAVE = 2
    GENTLE_GENERALIST = 3
    # From creature cards
    PRIME_SPECIMEN = 4
    PLEASING_PERFORMANCE = 5
    SPEED_DEMON = 6
    # From tribal cards
    ARMS_DEALER = 7
    GRACIOUS_GREETING = 8
    COLONY_CRAZE = 9
    # From civilization cards
    PIRATE_B_GONE = 10
    GREEN_KEEPER = 11
    SPICE_SAVANT = 12


Consequence = Union[CreatureConsequence, TribalConsequence, CivilizationConsequence, SpaceConsequence]

# Each consequence enum, indexed by the era it is active in.
CONSEQUENCE_TYPE_BY_ERA = {
    Era.CREATURE: CreatureConsequence,
    Era.TRIBAL: TribalConsequence,
    Era.CIVILIZATION: CivilizationConsequence,
    Era.SPACE: SpaceConsequence,
}


CELL_CARD_CONSEQUENCES: Mapping[CellCard, Tuple[CreatureConsequence, TribalConsequence, CivilizationConsequence, SpaceConsequence]] = MappingProxyType({
    CellCard.CARNIVORE: (CreatureConsequence.RAGING_ROAR, TribalConsequence.TRAPS, CivilizationConsequence.INVULNERABILITY, SpaceConsequence.POWER_MONGER),
    CellCard.HERBIVORE: (CreatureConsequence.SIREN_SONG, TribalConsequence.REFRESHING_STORM, CivilizationConsequence.HEALING_AURA, SpaceConsequence.SOCIAL_SUAVE),
    CellCard.OMNIVORE: (CreatureConsequence.SUMMON_FLOCK, TribalConsequence.FLYING_FISH, CivilizationConsequence.STATIC_BOMB, SpaceConsequence.GENTLE_GENERALIST),
})

CREATURE_CARD_CONSEQUENCES: Mapping[CreatureCard, Tuple[TribalConsequence, CivilizationConsequence, SpaceConsequence]] = MappingProxyType({
    CreatureCard.PREDATOR: (TribalConsequence.FIRE_BOMBS, CivilizationConsequence.MIGHTY_BOMB, SpaceConsequence.PRIME_SPECIMEN),
    CreatureCard.SOCIAL: (TribalConsequence.FIREWORKS, CivilizationConsequence.DIPLO_DERVISH, SpaceConsequence.PLEASING_PERFORMANCE),
    CreatureCard.ADAPTABLE: (TribalConsequence.BEASTMASTER, CivilizationConsequence.BRIBE_BOMB, SpaceConsequence.SPEED_DEMON),
})

TRIBAL_CARD_CONSEQUENCES: Mapping[TribalCard, Tuple[CivilizationConsequence, SpaceConsequence]] = MappingProxyType({
    TribalCard.AGGRESSIVE: (CivilizationConsequence.GADGET_BOMB, SpaceConsequence.ARMS_DEALER),
    TribalCard.FRIENDLY: (CivilizationConsequence.BLACK_CLOUD, SpaceConsequence.GRACIOUS_GREETING),
    TribalCard.INDUSTRIOUS: (CivilizationConsequence.AD_BLITZ, SpaceConsequence.COLONY_CRAZE),
})

CIVILIZATION_CARD_CONSEQUENCES: Mapping[CivilizationCard, Tuple[SpaceConsequence]] = MappingProxyType({
    CivilizationCard.MILITARY: (SpaceConsequence.PIRATE_B_GONE,),
    CivilizationCard.RELIGIOUS: (SpaceConsequence.GREEN_KEEPER,),
    CivilizationCard.ECONOMIC: (SpaceConsequence.SPICE_SAVANT,),
})

CARD_CONSEQUENCES_BY_ERA = {
    Era.CELL: CELL_CARD_CONSEQUENCES,
    Era.CREATURE: CREATURE_CARD_CONSEQUENCES,
    Era.TRIBAL: TRIBAL_CARD_CONSEQUENCES,
    Era.CIVILIZATION: CIVILIZATION_CARD_CONSEQUENCES,
}


def consequences_of_card(card: Union[Card, Enum], era: Era) -> Tuple[Consequence, ...]:
    """Compute the consequences a card unlocks in every later era.

    A card of color ``c`` played in era ``e`` unlocks consequence number
    ``3 * e + c`` in each of the ``SPACE - e`` following eras. Archetype
    cards, played in the Space era, unlock nothing.

    Args:
        card: The played card (an archetype when era is SPACE)
        era: The era the card was played in

    Returns:
        One consequence per later era, in era order

    Raises:
        ValueError: If the card is a skipped card, or does not belong to the era
    """
    era = Era(era)
    if era == Era.SPACE:
        return ()

    card_type = CARD_TYPE_BY_ERA[era]
    if not isinstance(card, card_type):
        raise ValueError(f"{card!r} is not a {card_type.__name__}")

    color = card_color(card)
    if color == CardColor.BLACK:
        raise ValueError(f"Skipped {era.name.lower()} card has no consequences")

    number = 3 * era + color
    return tuple(
        CONSEQUENCE_TYPE_BY_ERA[Era(later)](number)
        for later in range(era + 1, Era.SPACE + 1)
    )


def lookup_consequences(card: Card, era: Era) -> Tuple[Consequence, ...]:
    """Look a card up in the per-era consequence tables."""
    era = Era(era)
    if era == Era.SPACE:
        return ()
    if not isinstance(card, CARD_TYPE_BY_ERA[era]):
        raise ValueError(f"{card!r} is not a {CARD_TYPE_BY_ERA[era].__name__}")
    try:
        return CARD_CONSEQUENCES_BY_ERA[era][card]
    except KeyError:
        raise ValueError(f"Skipped {era.name.lower()} card has no consequences") from None
