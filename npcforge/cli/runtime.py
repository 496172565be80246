"""Wiring shared by the CLI commands."""

from dataclasses import dataclass

from sqlalchemy.orm import Session

from npcforge.config import get_settings
from npcforge.data.names import NameAllocator
from npcforge.llm.factory import get_creative_provider, get_dialogue_provider
from npcforge.llm.text_service import TextService
from npcforge.managers.save_manager import SaveManager
from npcforge.sampling import SeededRandom, coerce_seed
from npcforge.services.enrichment import NPCEnricher
from npcforge.services.npc_generator import GenerationPipeline
from npcforge.world.population import PopulationDirectory


@dataclass
class World:
    """A directory loaded from (or destined for) a save slot."""

    slot: str
    directory: PopulationDirectory
    seed: int | str

    def save(self, db: Session) -> None:
        SaveManager(db).save_directory(self.slot, self.directory, world_seed=self.seed)


def build_directory(seed: int | str | None = None, enrich: bool = False) -> PopulationDirectory:
    """Fresh directory with a pipeline seeded from ``seed`` or settings."""
    settings = get_settings()
    rng = SeededRandom(coerce_seed(seed if seed is not None else settings.world_seed))
    enricher = NPCEnricher(TextService(get_creative_provider())) if enrich else None
    return PopulationDirectory(
        GenerationPipeline(names=NameAllocator(), rng=rng),
        max_population=settings.max_population,
        enricher=enricher,
    )


def open_world(db: Session, slot: str, enrich: bool = False) -> World | None:
    """Load a slot into a new directory.

    New spawns draw from a stream seeded by the slot seed plus the
    population size, so they do not replay the first characters.

    Returns:
        The world, or None if the slot does not exist.

    Raises:
        SaveFormatError: If the stored payload is malformed.
    """
    manager = SaveManager(db)
    payload = manager.load(slot)
    if payload is None:
        return None
    base_seed = coerce_seed(manager.get_world_seed(slot))
    stream_seed = f"{base_seed}/{len(payload.characters)}" if base_seed is not None else None
    directory = build_directory(stream_seed, enrich=enrich)
    directory.load_payload(payload)
    return World(
        slot=slot,
        directory=directory,
        seed=base_seed if base_seed is not None else directory.pipeline.rng.seed,
    )


def new_world(slot: str, seed: int | str | None = None, enrich: bool = False) -> World:
    directory = build_directory(seed, enrich=enrich)
    return World(slot=slot, directory=directory, seed=directory.pipeline.rng.seed)


def dialogue_text_service() -> TextService:
    return TextService(get_dialogue_provider())
