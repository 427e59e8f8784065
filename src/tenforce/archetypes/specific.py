"""Per-family archetype rules.

Each rule returns an archetype of its family, or None when the sequence
does not belong to it. The rules are evaluated in order by the classifier
(wanderer, pure, tendency, half); they are written so that at most one of
pure, tendency and half matches any consistent sequence.
"""

from __future__ import annotations

from collections import Counter
from typing import Optional

from tenforce.archetypes.base import (
    Archetype, PURE_BY_COLOR, TENDENCY_BY_COLOR, HALF_BY_EXCLUDED_COLOR,
)
from tenforce.cards.schema import CardColor, Sequence, card_color


def get_wanderer(counter: Counter) -> Optional[Archetype]:
    """Wanderer when no colored card was played."""
    return Archetype.WANDERER if len(counter) == 0 else None


def get_pure(sequence: Sequence, counter: Counter) -> Optional[Archetype]:
    """Pure archetype of a single dominant color.

    - every played card has the same color,
    - or at least three cards share a color,
    - or exactly one card of each color was played, in which case the
      civilization card decides.
    """
    if len(counter) == 1:
        (color,) = counter
        return PURE_BY_COLOR[color]

    for color, count in counter.items():
        if count >= 3:
            return PURE_BY_COLOR[color]

    if all(counter[color] == 1 for color in PURE_BY_COLOR):
        return PURE_BY_COLOR.get(card_color(sequence[-1]))

    return None


def get_tendency(counter: Counter) -> Optional[Archetype]:
    """Tendency archetype: all three colors, one of them twice (1-1-2)."""
    if len(counter) != 3:
        return None
    for color, count in counter.items():
        if count == 2:
            return TENDENCY_BY_COLOR[color]
    return None


def get_half(counter: Counter) -> Optional[Archetype]:
    """Half archetype: exactly two colors, neither played three times."""
    if len(counter) != 2 or any(count >= 3 for count in counter.values()):
        return None
    for color in (CardColor.RED, CardColor.GREEN, CardColor.BLUE):
        if color not in counter:
            return HALF_BY_EXCLUDED_COLOR[color]
    return None
