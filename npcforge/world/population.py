"""Population directory: owns every character record and its indices.

Three indices are kept in step: id -> record, tile -> ids and
faction -> ids. Records refer to each other only by id, so a despawned
character may still appear in someone else's ``known_npcs``; callers
treat a lookup miss as "no longer present".
"""

import logging
from typing import Any, Iterator

from npcforge.data.factions import Faction, normalize_faction
from npcforge.schemas.character import CharacterRecord
from npcforge.schemas.save import SavePayload
from npcforge.schemas.template import GenerationTemplate, Tile
from npcforge.services.enrichment import NPCEnricher
from npcforge.services.npc_generator import GenerationPipeline

logger = logging.getLogger(__name__)

DEFAULT_MAX_POPULATION = 50


class PopulationDirectory:
    """Indexed store of live character records.

    Args:
        pipeline: Generation pipeline used by ``spawn``.
        max_population: Cap enforced by ``spawn``.
        enricher: Optional AI enricher applied when ``spawn`` asks for it.
    """

    def __init__(
        self,
        pipeline: GenerationPipeline,
        max_population: int = DEFAULT_MAX_POPULATION,
        enricher: NPCEnricher | None = None,
    ) -> None:
        self.pipeline = pipeline
        self.max_population = max_population
        self.enricher = enricher
        self._records: dict[str, CharacterRecord] = {}
        self._by_tile: dict[tuple[int, int], list[str]] = {}
        self._by_faction: dict[Faction, list[str]] = {}

    # =========================================================================
    # Lifecycle
    # =========================================================================

    @property
    def is_full(self) -> bool:
        return len(self._records) >= self.max_population

    async def spawn(
        self,
        template: GenerationTemplate | None = None,
        enrich: bool = False,
    ) -> CharacterRecord | None:
        """Generate a character and add it to the world.

        Args:
            template: Generation template; every field is optional.
            enrich: Await AI enrichment before inserting. Failures leave
                the deterministic record as generated.

        Returns:
            The new record, or None when the population is at its cap.
        """
        if self.is_full:
            logger.warning("Population cap %d reached, spawn rejected", self.max_population)
            return None

        record = self.pipeline.generate(template)
        if enrich and self.enricher is not None:
            await self.enricher.enrich(record)
        return self.add(record)

    def add(self, record: CharacterRecord) -> CharacterRecord:
        """Insert a record into all indices.

        Ids that collide (only possible once a faction's name space is
        exhausted) get a ``_2``, ``_3``... suffix.
        """
        base_id = record.id
        npc_id = base_id
        suffix = 2
        while npc_id in self._records:
            npc_id = f"{base_id}_{suffix}"
            suffix += 1
        if npc_id != base_id:
            record.identity.id = npc_id

        self._records[npc_id] = record
        self._by_tile.setdefault(record.tile.key, []).append(npc_id)
        self._by_faction.setdefault(record.faction, []).append(npc_id)
        logger.info("Spawned %s (%s) at %s", record.name, npc_id, record.tile)
        return record

    def despawn(self, npc_id: str) -> CharacterRecord | None:
        """Remove a record from every index. Unknown ids are a no-op."""
        record = self._records.pop(npc_id, None)
        if record is None:
            return None
        self._unindex(self._by_tile, record.tile.key, npc_id)
        self._unindex(self._by_faction, record.faction, npc_id)
        logger.info("Despawned %s (%s)", record.name, npc_id)
        return record

    def move(self, npc_id: str, tile: Tile) -> bool:
        """Relocate a record and re-index it by tile."""
        record = self._records.get(npc_id)
        if record is None:
            return False
        self._unindex(self._by_tile, record.tile.key, npc_id)
        record.location.current_tile = tile
        self._by_tile.setdefault(tile.key, []).append(npc_id)
        return True

    def mark_dead(self, npc_id: str) -> bool:
        """Soft-mark a record not alive. It stays indexed."""
        record = self._records.get(npc_id)
        if record is None:
            return False
        record.state.is_alive = False
        record.state.activity = "dead"
        logger.info("%s (%s) marked dead", record.name, npc_id)
        return True

    def clear(self) -> None:
        self._records.clear()
        self._by_tile.clear()
        self._by_faction.clear()

    @staticmethod
    def _unindex(index: dict[Any, list[str]], key: Any, npc_id: str) -> None:
        ids = index.get(key)
        if not ids:
            return
        if npc_id in ids:
            ids.remove(npc_id)
        if not ids:
            del index[key]

    # =========================================================================
    # Lookups
    # =========================================================================

    def get(self, npc_id: str) -> CharacterRecord | None:
        return self._records.get(npc_id)

    def at_tile(self, tile: Tile) -> list[CharacterRecord]:
        return [self._records[i] for i in self._by_tile.get(tile.key, [])]

    def in_faction(self, faction: Faction | str) -> list[CharacterRecord]:
        return [self._records[i] for i in self._by_faction.get(normalize_faction(faction), [])]

    def all(self) -> list[CharacterRecord]:
        return list(self._records.values())

    def ids(self) -> list[str]:
        return list(self._records)

    def tile_index(self) -> dict[tuple[int, int], list[str]]:
        """Copy of the tile index."""
        return {key: list(ids) for key, ids in self._by_tile.items()}

    def faction_index(self) -> dict[Faction, list[str]]:
        """Copy of the faction index."""
        return {key: list(ids) for key, ids in self._by_faction.items()}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, npc_id: object) -> bool:
        return npc_id in self._records

    def __iter__(self) -> Iterator[CharacterRecord]:
        return iter(list(self._records.values()))

    # =========================================================================
    # Persistence
    # =========================================================================

    def to_payload(self) -> SavePayload:
        """Snapshot records and the used-name set."""
        return SavePayload(
            characters=[record.model_copy(deep=True) for record in self._records.values()],
            used_names=self.pipeline.names.used_names(),
        )

    def load_payload(self, data: SavePayload | dict[str, Any]) -> int:
        """Replace the population with a saved one.

        The payload is validated before anything is cleared, so a
        malformed payload leaves the directory untouched.

        Returns:
            Number of records loaded.

        Raises:
            SaveFormatError: If the payload is malformed.
        """
        payload = SavePayload.parse(data)
        self.clear()
        for record in payload.characters:
            self.add(record.model_copy(deep=True))
        self.pipeline.names.load_used_names(payload.used_names)
        logger.info("Loaded %d characters", len(self._records))
        return len(self._records)
