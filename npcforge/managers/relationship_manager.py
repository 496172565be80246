"""Relationship scalars toward the player and other characters."""

import logging
from dataclasses import dataclass
from typing import Literal

from npcforge.schemas.character import CharacterRecord, Relationship
from npcforge.schemas.memory import ConversationPhase
from npcforge.services.derived_metrics import calculate_mood, conversation_phase_for
from npcforge.managers.base import BaseManager

logger = logging.getLogger(__name__)

RelationshipStat = Literal["opinion", "trust", "respect", "fear", "romantic"]

PLAYER = "player"

# Opinion is signed; every other scalar is 0-100.
STAT_BOUNDS: dict[str, tuple[int, int]] = {
    "opinion": (-100, 100),
    "trust": (0, 100),
    "respect": (0, 100),
    "fear": (0, 100),
    "romantic": (0, 100),
}


@dataclass
class KnownCharacter:
    """Another character this one has a relationship with."""

    record: CharacterRecord
    relationship: Relationship


class RelationshipManager(BaseManager):
    """Adjusts relationship scalars and keeps derived state in step.

    Targets are either ``"player"`` or another character's id. Links to
    other characters are stored by id; a target that is no longer in the
    directory is skipped.
    """

    def get_relationship(self, npc_id: str, target: str = PLAYER) -> Relationship | None:
        record = self._get(npc_id)
        if record is None:
            return None
        if target == PLAYER:
            return record.relationships.player
        return record.relationships.known_npcs.get(target)

    def _relationship_for_update(self, record: CharacterRecord, target: str) -> Relationship | None:
        if target == PLAYER:
            return record.relationships.player
        known = record.relationships.known_npcs
        if target not in known:
            if target not in self.directory or target == record.id:
                return None
            known[target] = Relationship(first_met=self.now())
        return known[target]

    def adjust_relationship(
        self,
        npc_id: str,
        stat: RelationshipStat,
        amount: int | float,
        target: str = PLAYER,
    ) -> Relationship | None:
        """Add ``amount`` to one scalar, clamped into its range.

        Adjusting the player relationship also refreshes the cached mood.

        Returns:
            The updated relationship, or None when either side is unknown.

        Raises:
            ValueError: If ``stat`` is not a relationship scalar.
        """
        if stat not in STAT_BOUNDS:
            raise ValueError(f"Unknown relationship stat: {stat}")

        record = self._get(npc_id)
        if record is None:
            logger.debug("adjust_relationship: %s not found", npc_id)
            return None
        rel = self._relationship_for_update(record, target)
        if rel is None:
            logger.debug("adjust_relationship: target %s not found", target)
            return None

        min_val, max_val = STAT_BOUNDS[stat]
        setattr(rel, stat, self._clamp(getattr(rel, stat) + amount, min_val, max_val))
        rel.last_interaction = self.now()

        if target == PLAYER:
            record.state.mood = calculate_mood(record)
        return rel

    def apply_changes(
        self,
        npc_id: str,
        changes: dict[str, int | float],
        target: str = PLAYER,
    ) -> Relationship | None:
        """Apply several scalar adjustments at once."""
        rel = None
        for stat, amount in changes.items():
            rel = self.adjust_relationship(npc_id, stat, amount, target)  # type: ignore[arg-type]
            if rel is None:
                return None
        return rel

    def meet(self, npc_id: str, other_id: str) -> bool:
        """Create default relationships in both directions."""
        record = self._get(npc_id)
        other = self._get(other_id)
        if record is None or other is None or npc_id == other_id:
            return False
        now = self.now()
        record.relationships.known_npcs.setdefault(other_id, Relationship(first_met=now))
        other.relationships.known_npcs.setdefault(npc_id, Relationship(first_met=now))
        return True

    def known_characters(self, npc_id: str) -> list[KnownCharacter]:
        """Characters this one knows who are still present."""
        record = self._get(npc_id)
        if record is None:
            return []
        known = []
        for other_id, rel in record.relationships.known_npcs.items():
            other = self.directory.get(other_id)
            if other is not None:
                known.append(KnownCharacter(record=other, relationship=rel))
        return known

    def update_conversation_phase(self, npc_id: str) -> ConversationPhase | None:
        record = self._get(npc_id)
        if record is None:
            return None
        return self.refresh_phase(record)

    @staticmethod
    def refresh_phase(record: CharacterRecord) -> ConversationPhase:
        """Recompute the phase from current scalars. It can go down as well as up."""
        record.memory.conversation_phase = conversation_phase_for(record.relationships.player)
        return record.memory.conversation_phase
