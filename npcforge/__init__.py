"""npcforge - procedural NPC population for a persistent island world."""

__version__ = "0.1.0"
