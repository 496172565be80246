"""Faction identifiers and gender lookup keys."""

import logging
from enum import Enum
from typing import Literal

logger = logging.getLogger(__name__)


class Faction(str, Enum):
    """Closed set of factions that drive every trait pool."""

    CASTAWAY = "castaway"
    NATIVE = "native"
    MERCENARY = "mercenary"


GenderKey = Literal["male", "female"]

# Map-level identifiers that collapse onto a faction.
FACTION_ALIASES: dict[str, Faction] = {
    "castaway": Faction.CASTAWAY,
    "castaways": Faction.CASTAWAY,
    "native": Faction.NATIVE,
    "natives": Faction.NATIVE,
    "natives_clan1": Faction.NATIVE,
    "natives_clan2": Faction.NATIVE,
    "islander": Faction.NATIVE,
    "mercenary": Faction.MERCENARY,
    "mercenaries": Faction.MERCENARY,
}


def normalize_faction(raw: str | Faction | None) -> Faction:
    """Resolve any raw faction identifier to a Faction.

    Unknown or missing identifiers resolve to castaway.

    Examples:
        >>> normalize_faction("natives_clan2")
        <Faction.NATIVE: 'native'>
        >>> normalize_faction("tourist")
        <Faction.CASTAWAY: 'castaway'>
    """
    if isinstance(raw, Faction):
        return raw
    if not raw:
        return Faction.CASTAWAY
    faction = FACTION_ALIASES.get(raw.strip().lower())
    if faction is None:
        logger.debug("Unknown faction %r, using castaway", raw)
        return Faction.CASTAWAY
    return faction


def lookup_gender(gender: str | None) -> GenderKey:
    """Return the pool key for a gender.

    Only ``male`` selects the male pools; every other value, including
    custom ones, reads from the female pools. The record keeps the
    original value.
    """
    if gender is not None and gender.strip().lower() == "male":
        return "male"
    return "female"
