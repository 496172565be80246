"""Rumor propagation from a witness to nearby characters.

Single hop: only characters within range of the witness hear it, and
they do not pass it on.
"""

import logging
import re
from dataclasses import dataclass, field

from npcforge.clock import Clock
from npcforge.llm.base import TextGenerator
from npcforge.services.prompts import build_rumor_prompt
from npcforge.managers.base import BaseManager
from npcforge.managers.memory_manager import MemoryManager
from npcforge.managers.relationship_manager import RelationshipManager
from npcforge.world.hex_grid import axial_distance
from npcforge.world.population import PopulationDirectory

logger = logging.getLogger(__name__)

DEFAULT_RUMOR_RANGE = 3
RUMOR_IMPORTANCE = 3
RUMOR_TEMPERATURE = 0.7
RUMOR_MAX_TOKENS = 50

VIOLENCE_KEYWORDS = re.compile(r"kill|attack", re.IGNORECASE)
VIOLENCE_OPINION_PENALTY = -10
VIOLENCE_FEAR_INCREASE = 5


@dataclass
class RumorSpreadResult:
    """Result of spreading a rumor."""

    witness_id: str
    rumor_text: str
    hearer_ids: list[str] = field(default_factory=list)
    violent: bool = False
    generated: bool = True
    witness_found: bool = True


class RumorManager(BaseManager):
    """Turns a witnessed event into gossip heard by nearby characters."""

    def __init__(
        self,
        directory: PopulationDirectory,
        text_service: TextGenerator,
        memory: MemoryManager | None = None,
        relationships: RelationshipManager | None = None,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(directory, clock)
        self.text_service = text_service
        self.memory = memory or MemoryManager(directory, self.clock)
        self.relationships = relationships or RelationshipManager(directory, self.clock)

    @staticmethod
    def is_violent(event: str) -> bool:
        return VIOLENCE_KEYWORDS.search(event) is not None

    async def spread_rumor(
        self,
        event: str,
        witness_id: str,
        spread_range: int = DEFAULT_RUMOR_RANGE,
    ) -> RumorSpreadResult:
        """Spread a witnessed event to everyone within ``spread_range``.

        Args:
            event: What the witness saw.
            witness_id: Character who saw it.
            spread_range: Maximum axial distance from the witness.

        Returns:
            RumorSpreadResult naming the hearers. An unknown witness
            yields an empty result.
        """
        witness = self._get(witness_id)
        if witness is None:
            logger.warning("Rumor witness %s not found", witness_id)
            return RumorSpreadResult(
                witness_id=witness_id,
                rumor_text="",
                generated=False,
                witness_found=False,
            )

        generated = True
        try:
            rumor_text = await self.text_service.generate_text(
                build_rumor_prompt(event, witness),
                temperature=RUMOR_TEMPERATURE,
                max_tokens=RUMOR_MAX_TOKENS,
            )
        except Exception as e:
            logger.warning("Rumor generation failed for %s, using raw event: %s", witness.name, e)
            rumor_text = ""
        if not rumor_text.strip():
            rumor_text = event
            generated = False

        violent = self.is_violent(event)
        result = RumorSpreadResult(
            witness_id=witness_id,
            rumor_text=rumor_text,
            violent=violent,
            generated=generated,
        )

        origin = witness.tile
        for record in self.directory.all():
            if record.id == witness_id or axial_distance(origin, record.tile) > spread_range:
                continue
            self.memory.add_memory(record, f"Heard rumor: {rumor_text}", RUMOR_IMPORTANCE)
            record.memory.heard_rumors.append(rumor_text)
            if violent:
                self.relationships.adjust_relationship(record.id, "opinion", VIOLENCE_OPINION_PENALTY)
                self.relationships.adjust_relationship(record.id, "fear", VIOLENCE_FEAR_INCREASE)
            result.hearer_ids.append(record.id)

        logger.info("Rumor from %s reached %d characters", witness.name, len(result.hearer_ids))
        return result
