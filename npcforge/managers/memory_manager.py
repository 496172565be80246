"""Character memory: bounded event list with importance-based eviction."""

import logging

from npcforge.clock import Clock
from npcforge.schemas.character import CharacterRecord
from npcforge.schemas.memory import MemoryEvent
from npcforge.managers.base import BaseManager
from npcforge.world.population import PopulationDirectory

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 100

# Checked in order; first match wins.
EMOTIONAL_KEYWORDS: list[tuple[tuple[str, ...], int]] = [
    (("gift", "helped"), 2),
    (("saved", "rescued"), 3),
    (("attacked", "threatened"), -3),
    (("stole", "betrayed"), -2),
]


def emotional_impact(content: str) -> int:
    lowered = content.lower()
    for keywords, impact in EMOTIONAL_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return impact
    return 0


class MemoryManager(BaseManager):
    """Writes and recalls memory events.

    When a write pushes a record past ``capacity`` events, only the
    highest-importance events are kept (ties go to the older event). The
    survivors stay in the order they were remembered.
    """

    def __init__(
        self,
        directory: PopulationDirectory,
        clock: Clock | None = None,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        super().__init__(directory, clock)
        self.capacity = capacity

    def remember(self, npc_id: str, content: str, importance: float = 1.0) -> MemoryEvent | None:
        """Record an event for a character. Unknown ids are a no-op."""
        record = self._get(npc_id)
        if record is None:
            return None
        return self.add_memory(record, content, importance)

    def add_memory(self, record: CharacterRecord, content: str, importance: float = 1.0) -> MemoryEvent:
        event = MemoryEvent(
            content=content,
            timestamp=self.now(),
            importance=importance,
            emotional_impact=emotional_impact(content),
        )
        events = record.memory.events
        events.append(event)
        if len(events) > self.capacity:
            record.memory.events = self._evict(events)
        return event

    def _evict(self, events: list[MemoryEvent]) -> list[MemoryEvent]:
        ranked = sorted(range(len(events)), key=lambda i: (-events[i].importance, i))
        keep = sorted(ranked[: self.capacity])
        logger.debug("Evicting %d low-importance memories", len(events) - len(keep))
        return [events[i] for i in keep]

    def relevant_events(
        self,
        record: CharacterRecord,
        context: str = "",
        max_results: int = 5,
    ) -> list[MemoryEvent]:
        """Rank events by importance, keyword overlap with ``context`` and recency.

        Each keyword found in an event adds 0.5; events under 24 hours old
        add 1, under a week 0.5.
        """
        keywords = context.lower().split()
        now = self.now()

        scored = []
        for index, event in enumerate(record.memory.events):
            score = event.importance
            lowered = event.content.lower()
            score += 0.5 * sum(1 for keyword in keywords if keyword in lowered)

            hours = (now - event.timestamp).total_seconds() / 3600
            if hours < 24:
                score += 1
            elif hours < 168:
                score += 0.5
            scored.append((score, index, event))

        scored.sort(key=lambda item: (-item[0], item[1]))
        return [event for _, _, event in scored[:max_results]]

    def get_relevant_memories(self, npc_id: str, context: str = "", max_results: int = 5) -> list[str]:
        """Contents of the most relevant memories, best first."""
        record = self._get(npc_id)
        if record is None:
            return []
        return [event.content for event in self.relevant_events(record, context, max_results)]

    def recent_memories(self, npc_id: str, limit: int = 5) -> list[MemoryEvent]:
        record = self._get(npc_id)
        if record is None:
            return []
        return record.memory.events[-limit:]
