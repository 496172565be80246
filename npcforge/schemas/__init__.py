"""Pydantic models for character records, templates and saves."""

from npcforge.schemas.background import (
    Background,
    BiographyBase,
    CastawayBackground,
    MercenaryBackground,
    NativeBackground,
)
from npcforge.schemas.character import (
    Appearance,
    Behavior,
    CharacterRecord,
    Identity,
    Meta,
    Personality,
    Relationship,
    Sexuality,
    Skills,
    Stats,
    Traits,
    Values,
)
from npcforge.schemas.memory import ConversationPhase, ConversationTurn, MemoryEvent
from npcforge.schemas.save import SaveFormatError, SavePayload
from npcforge.schemas.template import GenerationTemplate, ResolvedTemplate, Tile
