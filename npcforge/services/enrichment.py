"""Optional AI enrichment of generated characters.

Enrichment only adds: a backstory, extra quirks and secrets. The
deterministic fields produced by the generation pipeline are never
overwritten, so a failed call leaves a fully playable record.
"""

import json
import logging
import re

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from npcforge.llm.base import TextGenerator
from npcforge.llm.exceptions import StructuredOutputError
from npcforge.schemas.character import CharacterRecord
from npcforge.services.prompts import build_enrichment_prompt

logger = logging.getLogger(__name__)

ENRICHMENT_TEMPERATURE = 0.8
ENRICHMENT_MAX_TOKENS = 500

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


class EnrichmentResult(BaseModel):
    """Creative additions returned by the text service."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    backstory: str = ""
    additional_quirks: list[str] = Field(default_factory=list)
    secrets: list[str] = Field(default_factory=list)


def parse_enrichment(text: str) -> EnrichmentResult:
    """Pull the first JSON object out of free text.

    Raises:
        StructuredOutputError: If no JSON object is present.
        ValueError: If the JSON is invalid or has the wrong shape.
    """
    match = _JSON_OBJECT.search(text)
    if match is None:
        raise StructuredOutputError("No JSON object in enrichment response", raw_output=text)
    return EnrichmentResult.model_validate(json.loads(match.group(0)))


class NPCEnricher:
    """Adds AI-written backstory, quirks and secrets to a record."""

    def __init__(self, text_service: TextGenerator) -> None:
        self.text_service = text_service

    async def enrich(self, record: CharacterRecord) -> bool:
        """Enrich a record in place.

        Returns:
            True when the record was enriched. On failure the record keeps
            its deterministic content and ``meta.generated_by_ai`` is False.
        """
        try:
            text = await self.text_service.generate_text(
                build_enrichment_prompt(record),
                temperature=ENRICHMENT_TEMPERATURE,
                max_tokens=ENRICHMENT_MAX_TOKENS,
            )
            result = parse_enrichment(text)
        except Exception as e:
            logger.warning("Enrichment failed for %s: %s", record.name, e)
            record.meta.generated_by_ai = False
            return False

        if result.backstory:
            record.background.backstory = result.backstory
        record.personality.quirks.extend(result.additional_quirks)
        record.background.secrets.extend(result.secrets)
        record.meta.generated_by_ai = True
        logger.info("Enriched %s with AI backstory", record.name)
        return True
