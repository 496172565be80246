"""Dialogue turns with one character at a time.

Each turn builds a roleplay prompt, asks the text service for a line and
retries when the line repeats what the character said recently. Failures
of the text service never propagate out of ``talk``.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from npcforge.clock import Clock
from npcforge.llm.base import TextGenerator
from npcforge.llm.dialogue_quality import DialogueQualityJudge
from npcforge.schemas.character import CharacterRecord
from npcforge.schemas.memory import ConversationTurn
from npcforge.services.derived_metrics import calculate_mood
from npcforge.services.prompts import build_dialogue_prompt
from npcforge.managers.base import BaseManager
from npcforge.managers.memory_manager import MemoryManager
from npcforge.managers.relationship_manager import RelationshipManager
from npcforge.world.background_spawner import BackgroundSpawner
from npcforge.world.population import PopulationDirectory

logger = logging.getLogger(__name__)

NOT_FOUND_REPLY = "The person has left."
FALLBACK_REPLY = "...Sorry, I lost my train of thought."

DIALOGUE_MAX_TOKENS = 150
PROMPT_HISTORY_TURNS = 5
RECENT_UTTERANCES = 3
MEMORY_IMPORTANCE = 5
PROMPT_MEMORIES = 3


@dataclass
class ConversationSession:
    """The in-memory pointer to the active conversation."""

    npc_id: str
    started_at: datetime
    turns: list[ConversationTurn] = field(default_factory=list)


@dataclass
class DialogueReply:
    """Outcome of one dialogue turn.

    Attributes:
        npc_id: Character addressed.
        text: Line to show the player.
        attempts: Text service calls made.
        found: False when the character is not in the directory.
        fallback: True when no attempt produced a line.
    """

    npc_id: str
    text: str
    attempts: int = 0
    found: bool = True
    fallback: bool = False


class DialogueManager(BaseManager):
    """Runs conversations between the player and characters."""

    def __init__(
        self,
        directory: PopulationDirectory,
        text_service: TextGenerator,
        memory: MemoryManager | None = None,
        relationships: RelationshipManager | None = None,
        judge: DialogueQualityJudge | None = None,
        spawner: BackgroundSpawner | None = None,
        clock: Clock | None = None,
        max_attempts: int = 3,
        history_limit: int = 50,
    ) -> None:
        super().__init__(directory, clock)
        self.text_service = text_service
        self.memory = memory or MemoryManager(directory, self.clock)
        self.relationships = relationships or RelationshipManager(directory, self.clock)
        self.judge = judge or DialogueQualityJudge()
        self.spawner = spawner
        self.max_attempts = max_attempts
        self.history_limit = history_limit
        self.session: ConversationSession | None = None

    # =========================================================================
    # Session
    # =========================================================================

    @property
    def active_npc_id(self) -> str | None:
        return self.session.npc_id if self.session else None

    def start_conversation(self, npc_id: str) -> ConversationSession | None:
        """Make ``npc_id`` the active conversation.

        Any previous session pointer is dropped; turns already written to
        that character's record are kept.
        """
        if npc_id not in self.directory:
            return None
        self.session = ConversationSession(npc_id=npc_id, started_at=self.now())
        if self.spawner is not None:
            self.spawner.pause()
        return self.session

    def end_conversation(self) -> None:
        self.session = None
        if self.spawner is not None:
            self.spawner.resume()

    # =========================================================================
    # Turns
    # =========================================================================

    async def talk(self, npc_id: str, player_message: str, context: str = "") -> DialogueReply:
        """Handle one player line and return the character's reply.

        Args:
            npc_id: Character addressed.
            player_message: What the player said.
            context: Optional situation description for the prompt.
        """
        record = self._get(npc_id)
        if record is None:
            logger.warning("Dialogue target %s not found", npc_id)
            return DialogueReply(npc_id=npc_id, text=NOT_FOUND_REPLY, found=False)

        if self.session is None or self.session.npc_id != npc_id:
            self.start_conversation(npc_id)
        session = self.session

        mood = calculate_mood(record)
        record.state.mood = mood
        prompt = build_dialogue_prompt(
            record,
            player_message,
            mood=mood,
            memories=self.memory.relevant_events(record, player_message, PROMPT_MEMORIES),
            history=session.turns[-PROMPT_HISTORY_TURNS:] if session else [],
            context=context,
        )
        recent = [
            turn.message for turn in record.memory.conversation_history if turn.speaker == "npc"
        ][-RECENT_UTTERANCES:]

        reply, attempts = await self._generate(record, prompt, recent)
        if reply is None:
            logger.warning("No dialogue produced for %s after %d attempts", record.name, attempts)
            return DialogueReply(npc_id=npc_id, text=FALLBACK_REPLY, attempts=attempts, fallback=True)

        self._record_turn(record, player_message, reply)
        return DialogueReply(npc_id=npc_id, text=reply, attempts=attempts)

    async def _generate(
        self,
        record: CharacterRecord,
        prompt: str,
        recent: list[str],
    ) -> tuple[str | None, int]:
        """Ask for a line, regenerating while it repeats recent ones.

        The last candidate is returned as-is once attempts run out.
        """
        candidate: str | None = None
        attempts = 0
        for attempt in range(self.max_attempts):
            attempts += 1
            try:
                raw = await self.text_service.generate_text(
                    prompt,
                    temperature=self.judge.regeneration_temperature(attempt),
                    max_tokens=DIALOGUE_MAX_TOKENS,
                )
            except Exception as e:
                logger.warning("Dialogue attempt %d for %s failed: %s", attempts, record.name, e)
                continue

            text = self.judge.sanitize_response(raw)
            if not text:
                continue
            candidate = text
            if not self.judge.is_repetitive(candidate, recent):
                break
            strategy = self.judge.variation_strategy(record.relationships.player.interaction_count)
            logger.debug("Repetitive line from %s, retrying: %s", record.name, strategy)
            prompt += (
                "\n\nNOTE: Your previous response was too similar to recent messages. "
                f"{strategy}."
            )
        return candidate, attempts

    def _record_turn(self, record: CharacterRecord, player_message: str, reply: str) -> None:
        now = self.now()
        self.memory.add_memory(
            record,
            f'Talked with player: Player said "{player_message}"',
            MEMORY_IMPORTANCE,
        )

        rel = record.relationships.player
        if rel.first_met is None:
            rel.first_met = now
        rel.last_interaction = now
        rel.interaction_count += 1
        self.relationships.refresh_phase(record)
        record.state.mood = calculate_mood(record)

        turns = [
            ConversationTurn(speaker="player", message=player_message, timestamp=now),
            ConversationTurn(speaker="npc", message=reply, timestamp=now),
        ]
        history = record.memory.conversation_history
        history.extend(turns)
        if len(history) > self.history_limit:
            record.memory.conversation_history = history[-self.history_limit :]

        if self.session is not None and self.session.npc_id == record.id:
            self.session.turns.extend(turns)
