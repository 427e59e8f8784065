"""Tests for the card schema."""

import pytest
from tenforce.cards.schema import (
    CardColor, CellCard, CreatureCard, TribalCard, CivilizationCard,
    Era, CARD_TYPES, CARD_TYPE_BY_ERA, card_color, colored_cards,
)


def test_skipped_cards_are_black() -> None:
    """Every era's skipped card has the neutral color."""
    for card_type in CARD_TYPES:
        assert card_color(card_type.SKIPPED) == CardColor.BLACK


@pytest.mark.parametrize("card,color", [
    (CellCard.CARNIVORE, CardColor.RED),
    (CellCard.HERBIVORE, CardColor.GREEN),
    (CellCard.OMNIVORE, CardColor.BLUE),
    (CreatureCard.PREDATOR, CardColor.RED),
    (CreatureCard.SOCIAL, CardColor.GREEN),
    (CreatureCard.ADAPTABLE, CardColor.BLUE),
    (TribalCard.AGGRESSIVE, CardColor.RED),
    (TribalCard.FRIENDLY, CardColor.GREEN),
    (TribalCard.INDUSTRIOUS, CardColor.BLUE),
    (CivilizationCard.MILITARY, CardColor.RED),
    (CivilizationCard.RELIGIOUS, CardColor.GREEN),
    (CivilizationCard.ECONOMIC, CardColor.BLUE),
])
def test_card_color(card, color) -> None:
    """Colored cards map 1:1 to red, green and blue."""
    assert card_color(card) is color


def test_card_types_follow_era_order() -> None:
    """Card types are listed in play order, one per era before Space."""
    assert CARD_TYPES == tuple(CARD_TYPE_BY_ERA[era] for era in Era if era != Era.SPACE)
    assert Era.SPACE not in CARD_TYPE_BY_ERA


def test_colored_cards_excludes_skipped() -> None:
    """Colored cards of a type are its three non-skipped values."""
    assert colored_cards(TribalCard) == [
        TribalCard.AGGRESSIVE, TribalCard.FRIENDLY, TribalCard.INDUSTRIOUS,
    ]
