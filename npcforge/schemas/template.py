"""Spawn template and tile coordinates."""

from pydantic import BaseModel, ConfigDict, Field

from npcforge.data.factions import Faction


class Tile(BaseModel):
    """Axial hex coordinate."""

    model_config = ConfigDict(frozen=True)

    q: int = 0
    r: int = 0

    @property
    def key(self) -> tuple[int, int]:
        return (self.q, self.r)

    def __str__(self) -> str:
        return f"{self.q},{self.r}"


class GenerationTemplate(BaseModel):
    """Minimal input to the generation pipeline. Every field is optional."""

    faction: Faction | str | None = Field(
        default=None,
        description="Faction or raw map identifier (e.g. 'natives_clan1')",
    )
    gender: str | None = Field(
        default=None,
        description="Gender; drawn from the RNG when omitted",
    )
    age: int | None = Field(
        default=None,
        ge=0,
        le=150,
        description="Fixed age; overrides the drawn age",
    )
    role: str | None = Field(
        default=None,
        description="Role; drawn from the faction role pool when omitted",
    )
    tile: Tile | None = Field(
        default=None,
        description="Spawn tile; defaults to the origin",
    )


class ResolvedTemplate(BaseModel):
    """A template after the single defaulting step."""

    faction: Faction
    gender: str
    lookup_gender: str
    age: int | None = None
    role: str | None = None
    tile: Tile = Field(default_factory=Tile)
