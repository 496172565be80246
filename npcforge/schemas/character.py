"""The character record and its sub-records.

A CharacterRecord is owned by the population directory and keyed by
``identity.id``. Links to other characters are stored as ids in
``relationships.known_npcs``, never as embedded records.
"""

from datetime import datetime
from typing import Any

from pydantic import Field, SerializationInfo, field_serializer, field_validator

from npcforge.data.factions import Faction
from npcforge.schemas.background import Background
from npcforge.schemas.base import RecordModel
from npcforge.schemas.memory import ConversationPhase, ConversationTurn, MemoryEvent
from npcforge.schemas.template import Tile


class Identity(RecordModel):
    id: str
    name: str
    first_name: str
    last_name: str
    title: str
    faction: Faction
    role: str


class Appearance(RecordModel):
    """Physical description. ``portrait`` is written by the portrait service."""

    gender: str
    age: int
    height: int = Field(description="Height in cm")
    skin_tone: str
    hair_color: str
    hair_style: str
    hair_length: str
    eye_color: str
    build: str
    clothing: str
    distinctive_features: list[str] = Field(default_factory=list)
    portrait: str | None = None


class Traits(RecordModel):
    """Big Five scores on a 0-100 scale."""

    openness: int = Field(default=50, ge=0, le=100)
    conscientiousness: int = Field(default=50, ge=0, le=100)
    extraversion: int = Field(default=50, ge=0, le=100)
    agreeableness: int = Field(default=50, ge=0, le=100)
    neuroticism: int = Field(default=50, ge=0, le=100)


class Values(RecordModel):
    honor: int = 50
    loyalty: int = 50
    ambition: int = 50
    compassion: int = 50
    pragmatism: int = 50
    tradition: int = 50


class Sexuality(RecordModel):
    orientation: str
    dominance: str
    intensity: str
    interests: list[str] = Field(default_factory=list)


class Personality(RecordModel):
    traits: Traits = Field(default_factory=Traits)
    values: Values = Field(default_factory=Values)
    sexuality: Sexuality
    quirks: list[str] = Field(default_factory=list)
    fears: list[str] = Field(default_factory=list)
    desires: list[str] = Field(default_factory=list)
    motivations: list[str] = Field(default_factory=list)


class Stats(RecordModel):
    health: int = 100
    max_health: int = 100
    stamina: int = 100
    max_stamina: int = 100
    strength: int = 50
    agility: int = 50
    intelligence: int = 50
    charisma: int = 50
    willpower: int = 50
    hunger: int = 100
    thirst: int = 100


class Skills(RecordModel):
    combat: int = 0
    hunting: int = 0
    crafting: int = 0
    diplomacy: int = 0
    survival: int = 0
    medicine: int = 0
    exploration: int = 0


class Relationship(RecordModel):
    """Scalar bundle toward the player or another character.

    Opinion spans [-100, 100]; the other scalars span [0, 100].
    """

    opinion: int = Field(default=50, ge=-100, le=100)
    trust: int = Field(default=20, ge=0, le=100)
    respect: int = Field(default=30, ge=0, le=100)
    fear: int = Field(default=0, ge=0, le=100)
    romantic: int = Field(default=0, ge=0, le=100)
    first_met: datetime | None = None
    last_interaction: datetime | None = None
    interaction_count: int = 0


class Relationships(RecordModel):
    player: Relationship = Field(default_factory=Relationship)
    known_npcs: dict[str, Relationship] = Field(default_factory=dict, alias="knownNPCs")

    @field_validator("known_npcs", mode="before")
    @classmethod
    def _pairs_to_mapping(cls, value: Any) -> Any:
        # Payloads store the map as an ordered list of [id, relationship] pairs.
        if isinstance(value, list):
            for pair in value:
                if not isinstance(pair, (list, tuple)) or len(pair) != 2 or not isinstance(pair[0], str):
                    raise ValueError(f"knownNPCs entries must be [id, relationship] pairs, got {pair!r}")
            return {npc_id: rel for npc_id, rel in value}
        return value

    @field_serializer("known_npcs")
    def _mapping_to_pairs(
        self, value: dict[str, Relationship], info: SerializationInfo
    ) -> list[list[Any]]:
        return [
            [npc_id, rel.model_dump(mode=info.mode, by_alias=info.by_alias)]
            for npc_id, rel in value.items()
        ]


class Location(RecordModel):
    current_tile: Tile = Field(default_factory=Tile)
    home_location: Tile = Field(default_factory=Tile)
    schedule: list[dict[str, Any]] = Field(default_factory=list)


class State(RecordModel):
    is_alive: bool = True
    is_conscious: bool = True
    mood: str = "neutral"
    activity: str = "idle"
    can_be_recruited: bool = False
    is_recruited: bool = False
    is_hostile: bool = False
    is_trader: bool = False
    quest_giver: bool = False


class Equipped(RecordModel):
    weapon: str | None = None
    armor: str | None = None
    accessory: str | None = None


class Inventory(RecordModel):
    items: list[dict[str, Any]] = Field(default_factory=list)
    equipped: Equipped = Field(default_factory=Equipped)
    currency: int = 0


class Memory(RecordModel):
    """Bounded event list plus conversation state."""

    events: list[MemoryEvent] = Field(default_factory=list)
    conversation_phase: ConversationPhase = ConversationPhase.EARLY
    conversation_history: list[ConversationTurn] = Field(default_factory=list)
    saw_player_steal: bool = False
    saw_player_kill: list[str] = Field(default_factory=list)
    heard_rumors: list[str] = Field(default_factory=list)


class DialogueSeeds(RecordModel):
    greeting: dict[str, str] = Field(default_factory=dict)
    topics: list[dict[str, str]] = Field(default_factory=list)
    barks: dict[str, list[str]] = Field(default_factory=dict)


class Behavior(RecordModel):
    """Scalars that steer autonomous behaviour."""

    aggression: int = 50
    courage: int = 50
    loyalty: int = 50
    alertness: int = 50
    routine_type: str = "wanderer"


class Meta(RecordModel):
    importance: str = "minor"
    can_die: bool = True
    tags: list[str] = Field(default_factory=list)
    generated_by_ai: bool = Field(default=False, alias="generatedByAI")
    created_at: datetime


class CharacterRecord(RecordModel):
    """Aggregate root for one NPC."""

    identity: Identity
    appearance: Appearance
    personality: Personality
    background: Background
    stats: Stats = Field(default_factory=Stats)
    skills: Skills = Field(default_factory=Skills)
    relationships: Relationships = Field(default_factory=Relationships)
    location: Location = Field(default_factory=Location)
    state: State = Field(default_factory=State)
    inventory: Inventory = Field(default_factory=Inventory)
    memory: Memory = Field(default_factory=Memory)
    dialogue: DialogueSeeds = Field(default_factory=DialogueSeeds)
    ai: Behavior = Field(default_factory=Behavior)
    meta: Meta

    @property
    def id(self) -> str:
        return self.identity.id

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def faction(self) -> Faction:
        return self.identity.faction

    @property
    def tile(self) -> Tile:
        return self.location.current_tile

    def to_payload(self) -> dict[str, Any]:
        """Serialize with camelCase keys for a save payload."""
        return self.model_dump(mode="json", by_alias=True)
