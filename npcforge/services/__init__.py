"""Generation, enrichment and portrait services."""

from npcforge.services.enrichment import EnrichmentResult, NPCEnricher
from npcforge.services.npc_generator import GenerationPipeline
from npcforge.services.portrait_service import PLACEHOLDER_PORTRAIT, PortraitService

__all__ = [
    "EnrichmentResult",
    "GenerationPipeline",
    "NPCEnricher",
    "PLACEHOLDER_PORTRAIT",
    "PortraitService",
]
