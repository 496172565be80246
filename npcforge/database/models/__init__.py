"""SQLAlchemy models for the save store."""

from npcforge.database.models.base import Base, TimestampMixin
from npcforge.database.models.save_slot import SaveSlot, SlotKind

__all__ = ["Base", "TimestampMixin", "SaveSlot", "SlotKind"]
