"""Tests for card consequences."""

import pytest
from tenforce.archetypes.base import Archetype
from tenforce.cards.consequences import (
    CELL_CARD_CONSEQUENCES, CREATURE_CARD_CONSEQUENCES,
    TRIBAL_CARD_CONSEQUENCES, CIVILIZATION_CARD_CONSEQUENCES,
    CreatureConsequence, TribalConsequence, CivilizationConsequence, SpaceConsequence,
    consequences_of_card, lookup_consequences,
)
from tenforce.cards.schema import (
    CellCard, CreatureCard, TribalCard, CivilizationCard, Era, colored_cards,
)


class TestTablesMatchClosedForm:
    """The consequence tables agree with the closed-form computation."""

    @pytest.mark.parametrize("card", colored_cards(CellCard))
    def test_cell_cards(self, card):
        assert CELL_CARD_CONSEQUENCES[card] == consequences_of_card(card, Era.CELL)

    @pytest.mark.parametrize("card", colored_cards(CreatureCard))
    def test_creature_cards(self, card):
        assert CREATURE_CARD_CONSEQUENCES[card] == consequences_of_card(card, Era.CREATURE)

    @pytest.mark.parametrize("card", colored_cards(TribalCard))
    def test_tribal_cards(self, card):
        assert TRIBAL_CARD_CONSEQUENCES[card] == consequences_of_card(card, Era.TRIBAL)

    @pytest.mark.parametrize("card", colored_cards(CivilizationCard))
    def test_civilization_cards(self, card):
        assert CIVILIZATION_CARD_CONSEQUENCES[card] == consequences_of_card(card, Era.CIVILIZATION)

    def test_archetype_cards_have_no_consequences(self):
        for archetype in Archetype:
            assert consequences_of_card(archetype, Era.SPACE) == ()


def test_one_consequence_per_later_era() -> None:
    """A card unlocks one consequence in each following era, typed by era."""
    result = consequences_of_card(CellCard.HERBIVORE, Era.CELL)

    assert result == (
        CreatureConsequence.SIREN_SONG,
        TribalConsequence.REFRESHING_STORM,
        CivilizationConsequence.HEALING_AURA,
        SpaceConsequence.SOCIAL_SUAVE,
    )
    assert [type(c) for c in result] == [
        CreatureConsequence, TribalConsequence, CivilizationConsequence, SpaceConsequence,
    ]


def test_civilization_card_unlocks_space_consequence() -> None:
    """Economic civilization unlocks the last space consequence."""
    assert consequences_of_card(CivilizationCard.ECONOMIC, Era.CIVILIZATION) == (
        SpaceConsequence.SPICE_SAVANT,
    )


def test_skipped_card_raises() -> None:
    """Skipped cards unlock nothing and are rejected."""
    with pytest.raises(ValueError, match="Skipped"):
        consequences_of_card(TribalCard.SKIPPED, Era.TRIBAL)
    with pytest.raises(ValueError, match="Skipped"):
        lookup_consequences(TribalCard.SKIPPED, Era.TRIBAL)


def test_card_of_wrong_era_raises() -> None:
    """A card is only looked up in its own era."""
    with pytest.raises(ValueError, match="not a CellCard"):
        consequences_of_card(CreatureCard.PREDATOR, Era.CELL)
    with pytest.raises(ValueError, match="not a TribalCard"):
        lookup_consequences(CellCard.CARNIVORE, Era.TRIBAL)


def test_lookup_matches_tables() -> None:
    """Table lookup returns the recorded tuple."""
    assert lookup_consequences(CreatureCard.ADAPTABLE, Era.CREATURE) == (
        TribalConsequence.BEASTMASTER,
        CivilizationConsequence.BRIBE_BOMB,
        SpaceConsequence.SPEED_DEMON,
    )
    assert lookup_consequences(Archetype.BARD, Era.SPACE) == ()
