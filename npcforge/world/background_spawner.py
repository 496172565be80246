"""Sequential background population in small batches.

A batch is generated and inserted first, then enriched one member at a
time with a pause between calls. A conversation pauses the spawner; the
batch members still waiting for enrichment are queued and picked up
after it resumes.
"""

import asyncio
import logging
from typing import Awaitable, Callable

from npcforge.data.factions import normalize_faction
from npcforge.sampling import SeededRandom, weighted_choice, weighted_pool
from npcforge.schemas.character import CharacterRecord
from npcforge.schemas.template import GenerationTemplate
from npcforge.services.enrichment import NPCEnricher
from npcforge.world.population import PopulationDirectory

logger = logging.getLogger(__name__)

# Map identifiers weighted by how much territory each group holds.
FACTION_WEIGHTS = weighted_pool(
    [
        ("castaway", 1),
        ("natives_clan1", 3),
        ("natives_clan2", 3),
        ("mercenaries", 2),
    ]
)

Sleep = Callable[[float], Awaitable[None]]


class BackgroundSpawner:
    """Fills the population directory while the player is idle.

    Args:
        directory: Target directory; its cap stops the spawner.
        enricher: Optional enricher; without one records stay deterministic.
        batch_size: Characters generated per batch.
        delay: Seconds between enrichment calls and between batches.
        sleep: Awaitable sleep, replaceable in tests.
    """

    def __init__(
        self,
        directory: PopulationDirectory,
        enricher: NPCEnricher | None = None,
        batch_size: int = 3,
        delay: float = 2.0,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.directory = directory
        self.enricher = enricher
        self.batch_size = batch_size
        self.delay = delay
        self._sleep = sleep

        self.enabled = False
        self.paused = False
        self.current_batch = 0
        self.total_generated = 0
        self.queue: list[CharacterRecord] = []

    @property
    def rng(self) -> SeededRandom:
        return self.directory.pipeline.rng

    # =========================================================================
    # Control
    # =========================================================================

    def start(self) -> None:
        logger.info("Starting background generation")
        self.enabled = True
        self.paused = False

    def stop(self) -> None:
        logger.info("Stopping background generation")
        self.enabled = False

    def pause(self) -> None:
        """Pause while a conversation is active."""
        if self.enabled and not self.paused:
            logger.info("Pausing background generation")
            self.paused = True

    def resume(self) -> None:
        """Resume after a conversation; queued members are enriched next."""
        if self.enabled and self.paused:
            logger.info("Resuming background generation (%d queued)", len(self.queue))
            self.paused = False

    @property
    def can_run(self) -> bool:
        return self.enabled and not self.paused

    # =========================================================================
    # Work
    # =========================================================================

    def _next_template(self) -> GenerationTemplate:
        faction = normalize_faction(weighted_choice(self.rng, FACTION_WEIGHTS))
        gender = "female" if self.rng.next() > 0.5 else "male"
        return GenerationTemplate(faction=faction, gender=gender)

    async def run_batch(self) -> list[CharacterRecord]:
        """Generate, insert and enrich one batch.

        Returns:
            Records inserted by this batch.
        """
        if not self.can_run:
            return []
        if self.directory.is_full:
            logger.info("Population cap reached, stopping background generation")
            self.stop()
            return []

        self.current_batch += 1
        size = min(self.batch_size, self.directory.max_population - len(self.directory))
        generated: list[CharacterRecord] = []
        for _ in range(size):
            if not self.can_run:
                break
            record = self.directory.pipeline.generate(self._next_template())
            generated.append(self.directory.add(record))
            self.total_generated += 1

        logger.info(
            "Batch %d generated %d characters (total %d)",
            self.current_batch,
            len(generated),
            self.total_generated,
        )
        await self._enrich_all(generated)
        return generated

    async def _enrich_all(self, records: list[CharacterRecord]) -> None:
        if self.enricher is None:
            return
        for i, record in enumerate(records):
            if self.paused:
                self.queue.extend(records[i:])
                logger.info("Enrichment paused, %d queued", len(records) - i)
                return
            await self.enricher.enrich(record)
            if i < len(records) - 1:
                await self._sleep(self.delay)

    async def process_queue(self) -> int:
        """Enrich queued members until the queue empties or work pauses.

        Returns:
            Number of records enriched.
        """
        done = 0
        while self.queue and self.can_run:
            record = self.queue.pop(0)
            if self.enricher is not None and record.id in self.directory:
                await self.enricher.enrich(record)
                done += 1
                await self._sleep(self.delay)
        return done

    async def run(self, max_batches: int | None = None) -> int:
        """Run batches until stopped, paused, capped or ``max_batches`` is hit.

        Returns:
            Number of batches run.
        """
        batches = 0
        while self.can_run and (max_batches is None or batches < max_batches):
            if self.queue:
                await self.process_queue()
                continue
            await self.run_batch()
            batches += 1
            if self.can_run and not self.directory.is_full:
                await self._sleep(self.delay)
            elif self.directory.is_full:
                self.stop()
        return batches
