"""Card sequences: validation, color counting and enumeration."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator

from tenforce.cards.schema import (
    CardColor, CellCard, CreatureCard, TribalCard, CivilizationCard,
    Sequence, CARD_TYPES, card_color,
)


class InvalidSequenceError(ValueError):
    """A sequence skips a card after a card was already played."""

    pass


def is_consistent(sequence: Sequence) -> bool:
    """Check that skipped cards only lead the sequence.

    Once a colored card is played, every later era must have a card too.
    The all-skipped sequence is consistent.
    """
    is_skipped = True
    for card in sequence:
        if card_color(card) != CardColor.BLACK:
            is_skipped = False
        elif not is_skipped:
            return False
    return True


def validate_sequence(sequence: Sequence) -> Sequence:
    """Check the shape and consistency of a sequence.

    Args:
        sequence: One card per era, Cell to Civilization

    Returns:
        The sequence as a tuple

    Raises:
        InvalidSequenceError: If a slot holds the wrong card type, the
            length is not 4, or a card is skipped after a played one
    """
    sequence = tuple(sequence)
    if len(sequence) != len(CARD_TYPES):
        raise InvalidSequenceError(
            f"Expected {len(CARD_TYPES)} cards, got {len(sequence)}"
        )
    for card, card_type in zip(sequence, CARD_TYPES):
        if not isinstance(card, card_type):
            raise InvalidSequenceError(f"{card!r} is not a {card_type.__name__}")
    if not is_consistent(sequence):
        raise InvalidSequenceError(f"Invalid sequence: {format_sequence(sequence)}")
    return sequence  # type: ignore[return-value]


def color_counter(sequence: Sequence) -> Counter:
    """Number of cards of each color, skipped cards excluded."""
    counter: Counter = Counter()
    for card in sequence:
        color = card_color(card)
        if color != CardColor.BLACK:
            counter[color] += 1
    return counter


def generate_all_valid_sequences() -> Iterator[Sequence]:
    """Yield every consistent sequence, skipped-first within each era."""
    for cell in CellCard:
        for creature in CreatureCard:
            if creature == CreatureCard.SKIPPED and cell != CellCard.SKIPPED:
                continue

            for tribal in TribalCard:
                if tribal == TribalCard.SKIPPED and creature != CreatureCard.SKIPPED:
                    continue

                for civilization in CivilizationCard:
                    if civilization == CivilizationCard.SKIPPED and tribal != TribalCard.SKIPPED:
                        continue

                    yield (cell, creature, tribal, civilization)


def parse_sequence(names: Iterable[str]) -> Sequence:
    """Build a sequence from card names such as ``carnivore`` or ``skipped``.

    Raises:
        ValueError: If a name is not a card of its era
    """
    names = list(names)
    if len(names) != len(CARD_TYPES):
        raise ValueError(f"Expected {len(CARD_TYPES)} card names, got {len(names)}")

    cards = []
    for name, card_type in zip(names, CARD_TYPES):
        try:
            cards.append(card_type[name.strip().upper()])
        except KeyError:
            choices = ", ".join(card.name.lower() for card in card_type)
            raise ValueError(
                f"Unknown {card_type.__name__} {name!r} (expected one of: {choices})"
            ) from None
    return tuple(cards)  # type: ignore[return-value]


def format_sequence(sequence: Sequence) -> str:
    """Human-readable sequence, e.g. ``skipped/predator/friendly/economic``."""
    return "/".join(card.name.lower() for card in sequence)
