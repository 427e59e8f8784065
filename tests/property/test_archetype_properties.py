"""Property-based tests for archetype resolution."""

import pytest
from hypothesis import given, strategies as st
from tenforce.archetypes import (
    Archetype, InvalidSequenceError, MetaArchetype, color_counter,
    get_archetype, is_consistent,
)
from tenforce.cards.schema import (
    CardColor, CellCard, CreatureCard, TribalCard, CivilizationCard, card_color,
)

any_sequence = st.tuples(
    st.sampled_from(CellCard),
    st.sampled_from(CreatureCard),
    st.sampled_from(TribalCard),
    st.sampled_from(CivilizationCard),
)
valid_sequence = any_sequence.filter(is_consistent)


@given(sequence=any_sequence)
def test_consistency_property(sequence) -> None:
    """Property: consistent iff no skipped card follows a played card."""
    colors = [card_color(card) for card in sequence]
    first_played = next((i for i, c in enumerate(colors) if c != CardColor.BLACK), len(colors))
    expected = all(c != CardColor.BLACK for c in colors[first_played:])

    assert is_consistent(sequence) == expected


@given(sequence=any_sequence)
def test_invalid_sequences_raise_or_return_none(sequence) -> None:
    """Property: inconsistent sequences are rejected in both modes."""
    if is_consistent(sequence):
        assert get_archetype(sequence, null_if_invalid=True) is not None
    else:
        assert get_archetype(sequence, null_if_invalid=True) is None
        with pytest.raises(InvalidSequenceError):
            get_archetype(sequence)


@given(sequence=valid_sequence)
def test_determinism_property(sequence) -> None:
    """Property: the same sequence always resolves to the same archetype."""
    assert get_archetype(sequence) is get_archetype(sequence)


@given(sequence=valid_sequence)
def test_meta_archetype_matches_color_spread(sequence) -> None:
    """Property: the family of the archetype follows from the color counts."""
    counter = color_counter(sequence)
    meta = get_archetype(sequence).meta
    counts = sorted(counter.values())

    if not counts:
        assert meta is MetaArchetype.WANDERER
    elif len(counts) == 1 or counts[-1] >= 3 or counts == [1, 1, 1]:
        assert meta is MetaArchetype.PURE
    elif counts == [1, 1, 2]:
        assert meta is MetaArchetype.TENDENCY
    else:
        assert meta is MetaArchetype.HALF


@given(sequence=valid_sequence)
def test_archetype_color_property(sequence) -> None:
    """Property: pure and tendency archetypes carry a played color, half
    archetypes the one color that was not played."""
    counter = color_counter(sequence)
    archetype = get_archetype(sequence)

    if archetype.meta in (MetaArchetype.PURE, MetaArchetype.TENDENCY):
        assert counter[archetype.color] >= 1
    elif archetype.meta is MetaArchetype.HALF:
        assert archetype.color not in counter
    else:
        assert archetype is Archetype.WANDERER
