"""Exhaustive consistency check of the archetype rules.

Every valid sequence is run through the pure, tendency and half rules
independently. Each sequence must match exactly one of them, except the
all-skipped sequence which matches none and is the wanderer.
"""

from __future__ import annotations

import logging
from collections import Counter
from types import MappingProxyType
from typing import Mapping

from tenforce.archetypes.base import Archetype
from tenforce.archetypes.sequence import color_counter, format_sequence, generate_all_valid_sequences
from tenforce.archetypes.specific import get_half, get_pure, get_tendency, get_wanderer
from tenforce.cards.schema import CardColor, card_color

logger = logging.getLogger(__name__)


class RuleConsistencyError(AssertionError):
    """The archetype rules overlap, leave a gap, or miscount."""

    pass


EXPECTED_COUNTS: Mapping[Archetype, int] = MappingProxyType({
    Archetype.WANDERER: 1,
    Archetype.WARRIOR: 14,
    Archetype.SHAMAN: 14,
    Archetype.TRADER: 14,
    Archetype.KNIGHT: 12,
    Archetype.ECOLOGIST: 12,
    Archetype.BARD: 12,
    Archetype.DIPLOMAT: 14,
    Archetype.SCIENTIST: 14,
    Archetype.ZEALOT: 14,
})

EXPECTED_TOTAL = sum(EXPECTED_COUNTS.values())  # 121


def verify_all() -> Counter:
    """Count the valid sequences resolving to each archetype.

    Returns:
        Counter of archetype -> number of sequences

    Raises:
        RuleConsistencyError: If a sequence matches two rules, or matches
            none without being all-skipped
    """
    paths: Counter = Counter()

    for sequence in generate_all_valid_sequences():
        counter = color_counter(sequence)
        pure = get_pure(sequence, counter)
        tendency = get_tendency(counter)
        half = get_half(counter)

        matches = [a for a in (pure, tendency, half) if a is not None]
        if len(matches) > 1:
            names = " and ".join(a.meta.value for a in matches)
            raise RuleConsistencyError(
                f"Sequence {format_sequence(sequence)} matched both {names}"
            )

        if matches:
            paths[matches[0]] += 1
            continue

        if any(card_color(card) != CardColor.BLACK for card in sequence):
            raise RuleConsistencyError(
                f"Sequence {format_sequence(sequence)} matched no rule"
            )
        if get_wanderer(counter) is None:
            raise RuleConsistencyError(
                f"Sequence {format_sequence(sequence)} is all skipped but not a wanderer"
            )
        paths[Archetype.WANDERER] += 1

    logger.debug(f"Verified {sum(paths.values())} sequences")
    return paths


def check_expected_counts(paths: Mapping[Archetype, int]) -> None:
    """Compare per-archetype counts against the expected combinatorics.

    Raises:
        RuleConsistencyError: Listing every archetype with the wrong count
    """
    errors = []
    total = sum(paths.values())
    if total != EXPECTED_TOTAL:
        errors.append(f"total: expected {EXPECTED_TOTAL}, got {total}")
    for archetype, expected in EXPECTED_COUNTS.items():
        actual = paths.get(archetype, 0)
        if actual != expected:
            errors.append(f"{archetype.value}: expected {expected}, got {actual}")

    if errors:
        raise RuleConsistencyError("; ".join(errors))
