"""Memory events and conversation turns."""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import Field

from npcforge.schemas.base import RecordModel


class ConversationPhase(str, Enum):
    """How familiar a character is with the player."""

    EARLY = "early"
    FAMILIAR = "familiar"
    INTIMATE = "intimate"


class MemoryEvent(RecordModel):
    """Something a character experienced or heard about."""

    content: str
    timestamp: datetime
    importance: float = 1.0
    emotional_impact: int = Field(
        default=0,
        ge=-3,
        le=3,
        description="Signed feeling attached to the event",
    )


class ConversationTurn(RecordModel):
    """One line of a conversation with the player."""

    speaker: Literal["player", "npc"]
    message: str
    timestamp: datetime
