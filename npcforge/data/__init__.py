"""Trait databases keyed by faction and gender."""

from npcforge.data.factions import Faction, lookup_gender, normalize_faction

__all__ = ["Faction", "lookup_gender", "normalize_faction"]
