"""Tests for display color tables."""

import re

from tenforce.archetypes.base import Archetype
from tenforce.cards.schema import CardColor
from tenforce.display import ARCHETYPE_CSS_COLORS, CARD_CSS_COLORS, fill_properties

HEX_COLOR = re.compile(r"^#[0-9A-F]{6}$")


def test_every_color_has_css() -> None:
    assert set(CARD_CSS_COLORS) == set(CardColor)
    assert all(HEX_COLOR.match(c) for c in CARD_CSS_COLORS.values())


def test_every_archetype_has_css() -> None:
    assert set(ARCHETYPE_CSS_COLORS) == set(Archetype)
    assert all(HEX_COLOR.match(c) for c in ARCHETYPE_CSS_COLORS.values())


def test_pure_archetypes_use_card_colors() -> None:
    """Pure archetypes are drawn in the color of their cards."""
    for archetype in (Archetype.WARRIOR, Archetype.SHAMAN, Archetype.TRADER):
        assert ARCHETYPE_CSS_COLORS[archetype] == CARD_CSS_COLORS[archetype.color]


def test_fill_properties() -> None:
    props = fill_properties()
    assert props[Archetype.WANDERER] == {"fill": "#939699"}
    assert len(props) == 10


def test_fill_properties_custom_colors() -> None:
    props = fill_properties({Archetype.BARD: "#FFFFFF"})
    assert props == {Archetype.BARD: {"fill": "#FFFFFF"}}
