"""Archetype resolution from a card sequence."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from tenforce.archetypes.base import Archetype
from tenforce.archetypes.sequence import (
    InvalidSequenceError, color_counter, format_sequence, validate_sequence,
)
from tenforce.archetypes.specific import get_half, get_pure, get_tendency, get_wanderer
from tenforce.cards.schema import Sequence

logger = logging.getLogger(__name__)


class CascadeDefectError(RuntimeError):
    """No archetype rule matched a consistent sequence."""

    pass


class OnInvalid(Enum):
    """What to do with an inconsistent sequence."""

    RAISE = "raise"  # Raise InvalidSequenceError
    NONE = "none"    # Return None


def get_archetype(sequence: Sequence, null_if_invalid: bool = False) -> Optional[Archetype]:
    """Resolve the archetype of a sequence.

    Rules are tried in order, first match wins:

    - no colored card: wanderer
    - all cards of one color, three of a color, or one of each color with
      the civilization card breaking the tie: pure of that color
    - all three colors with one doubled (1-1-2): tendency of that color
    - exactly two colors: half, named after the missing color

    Args:
        sequence: One card per era, Cell to Civilization
        null_if_invalid: Return None instead of raising for an inconsistent
            sequence

    Returns:
        The archetype, or None if the sequence is invalid and
        null_if_invalid is set

    Raises:
        InvalidSequenceError: If the sequence is invalid and null_if_invalid
            is not set
        CascadeDefectError: If no rule matched (a defect in the rules)
    """
    try:
        sequence = validate_sequence(sequence)
    except InvalidSequenceError:
        if null_if_invalid:
            logger.debug(f"Ignoring invalid sequence {sequence!r}")
            return None
        raise

    counter = color_counter(sequence)
    archetype = (
        get_wanderer(counter)
        or get_pure(sequence, counter)
        or get_tendency(counter)
        or get_half(counter)
    )
    if archetype is None:
        raise CascadeDefectError(
            f"No archetype for {format_sequence(sequence)} (colors: {dict(counter)})"
        )

    logger.debug(f"{format_sequence(sequence)} -> {archetype.value}")
    return archetype


def classify(
    sequence: Sequence,
    on_invalid: Union[OnInvalid, str] = OnInvalid.RAISE,
) -> Optional[Archetype]:
    """Resolve the archetype of a sequence, choosing how invalid input is handled.

    ``on_invalid`` is ``OnInvalid.RAISE`` (default) or ``OnInvalid.NONE``,
    or the matching strings ``"raise"`` / ``"none"``.
    """
    mode = OnInvalid(on_invalid)
    return get_archetype(sequence, null_if_invalid=mode is OnInvalid.NONE)
