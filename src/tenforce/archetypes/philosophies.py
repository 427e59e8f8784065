"""Philosophy held by each archetype."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from tenforce.archetypes.base import Archetype


class Philosophy(Enum):
    """Guiding philosophy of an archetype; several archetypes may share one."""

    CHANCE = "chance"
    ORDER = "order"
    LIFE = "life"
    FORCE = "force"
    SCIENCE = "science"
    HARMONY = "harmony"
    PROSPERITY = "prosperity"
    FAITH = "faith"


PHILOSOPHY_BY_ARCHETYPE = MappingProxyType({
    Archetype.BARD: Philosophy.CHANCE,
    Archetype.DIPLOMAT: Philosophy.ORDER,
    Archetype.ECOLOGIST: Philosophy.LIFE,
    Archetype.KNIGHT: Philosophy.FORCE,
    Archetype.SCIENTIST: Philosophy.SCIENCE,
    Archetype.SHAMAN: Philosophy.HARMONY,
    Archetype.TRADER: Philosophy.PROSPERITY,
    Archetype.WANDERER: Philosophy.ORDER,
    Archetype.WARRIOR: Philosophy.FORCE,
    Archetype.ZEALOT: Philosophy.FAITH,
})
