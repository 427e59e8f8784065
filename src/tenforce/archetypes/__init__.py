"""Archetype resolution for card sequences."""

from tenforce.archetypes.base import Archetype, MetaArchetype
from tenforce.archetypes.resolve import (
    CascadeDefectError,
    OnInvalid,
    classify,
    get_archetype,
)
from tenforce.archetypes.philosophies import Philosophy, PHILOSOPHY_BY_ARCHETYPE
from tenforce.archetypes.sequence import (
    InvalidSequenceError,
    color_counter,
    format_sequence,
    generate_all_valid_sequences,
    is_consistent,
    parse_sequence,
    validate_sequence,
)

__all__ = [
    # Types
    "Archetype",
    "MetaArchetype",
    "Philosophy",
    "PHILOSOPHY_BY_ARCHETYPE",
    # Classification
    "classify",
    "get_archetype",
    "OnInvalid",
    "CascadeDefectError",
    # Sequences
    "InvalidSequenceError",
    "color_counter",
    "format_sequence",
    "generate_all_valid_sequences",
    "is_consistent",
    "parse_sequence",
    "validate_sequence",
]
