"""Managers that read and mutate character records."""

from npcforge.managers.base import BaseManager
from npcforge.managers.dialogue_manager import DialogueManager, DialogueReply
from npcforge.managers.memory_manager import MemoryManager
from npcforge.managers.relationship_manager import RelationshipManager
from npcforge.managers.rumor_manager import RumorManager, RumorSpreadResult
from npcforge.managers.save_manager import SaveManager, SlotInfo

__all__ = [
    "BaseManager",
    "DialogueManager",
    "DialogueReply",
    "MemoryManager",
    "RelationshipManager",
    "RumorManager",
    "RumorSpreadResult",
    "SaveManager",
    "SlotInfo",
]
