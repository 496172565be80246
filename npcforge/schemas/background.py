"""Faction-shaped biographies.

Each faction carries different biographical fields. The variant is
selected by the ``faction`` tag; the shared fields live on
``BiographyBase`` so prompt builders can read them without branching.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from npcforge.schemas.base import RecordModel

AMNESIA = "unknown (amnesia)"
BLACKSTEEL = "Blacksteel Solutions"


class BiographyBase(RecordModel):
    """Fields every background has."""

    birthplace: str
    occupation: str
    education: str
    family_status: str
    backstory: str = ""
    formative_event: str = ""
    secrets: list[str] = Field(default_factory=list)


class CastawayBackground(BiographyBase):
    """Survivor with no memory of life before the island."""

    faction: Literal["castaway"] = "castaway"
    mysterious_skill: str
    dream_motif: str
    island_identity: str
    birthplace: str = AMNESIA
    occupation: str = AMNESIA
    education: str = AMNESIA
    family_status: str = AMNESIA


class NativeBackground(BiographyBase):
    """Islander with tribal lineage."""

    faction: Literal["native"] = "native"
    tribe: str
    lineage: str
    cultural_role: str
    sacred_knowledge: str
    education: str = "traditional tribal knowledge"


class MercenaryBackground(BiographyBase):
    """Blacksteel contractor."""

    faction: Literal["mercenary"] = "mercenary"
    employer: str = BLACKSTEEL
    rank: str
    specialization: str
    previous_experience: str
    mission_type: str
    contractor: str
    birthplace: str = "various (multinational)"
    education: str = "military training and combat experience"
    family_status: str = "typically estranged or secretive"


Background = Annotated[
    Union[CastawayBackground, NativeBackground, MercenaryBackground],
    Field(discriminator="faction"),
]
