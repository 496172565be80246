"""Named save slots holding population payloads."""

from sqlalchemy import Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from npcforge.database.models.base import Base, TimestampMixin


class SlotKind(str):
    """Save slot kinds."""

    MANUAL = "manual"
    AUTO = "auto"


class SaveSlot(Base, TimestampMixin):
    """A saved population.

    Attributes:
        id: Primary key.
        slot_name: Unique user-facing name.
        kind: manual or auto.
        world_seed: Seed the population was generated from, if known.
        character_count: Number of characters in the payload.
        payload: Save payload as JSON (characters plus used names).
    """

    __tablename__ = "save_slots"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    slot_name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False, index=True)
    kind: Mapped[str] = mapped_column(
        String(20),
        default=SlotKind.MANUAL,
        nullable=False,
        comment="Slot kind: manual, auto",
    )
    world_seed: Mapped[str | None] = mapped_column(String(100), nullable=True)
    character_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    payload: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        comment="Save payload: characters and usedNames",
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<SaveSlot {self.slot_name} ({self.kind}, {self.character_count} characters)>"
