"""Pure functions deriving character metrics from current state.

Nothing here is cached; callers may store a result (e.g. ``state.mood``)
but it can always be recomputed from the record.
"""

import math
from dataclasses import dataclass

from npcforge.schemas.character import CharacterRecord, Personality, Relationship
from npcforge.schemas.memory import ConversationPhase


def _round_half_up(value: float) -> int:
    # Halves round up, never to even.
    return math.floor(value + 0.5)


def calculate_aggression(personality: Personality) -> int:
    """Low agreeableness, high neuroticism and low honor raise aggression."""
    traits = personality.traits
    return _round_half_up(
        0.4 * (100 - traits.agreeableness)
        + 0.3 * traits.neuroticism
        + 0.3 * (100 - personality.values.honor)
    )


def calculate_courage(personality: Personality) -> int:
    """Emotional stability plus honor and loyalty."""
    values = personality.values
    return _round_half_up(
        0.5 * (100 - personality.traits.neuroticism)
        + 0.25 * values.honor
        + 0.25 * values.loyalty
    )


def calculate_mood(record: CharacterRecord) -> str:
    """Derive mood from physical state, then fear, then regard for the player.

    Returns:
        One of suffering, desperate, terrified, afraid, joyful, friendly,
        neutral, wary, hostile.
    """
    stats = record.stats
    rel = record.relationships.player

    if stats.health < 30:
        return "suffering"
    if stats.hunger < 30 or stats.thirst < 30:
        return "desperate"
    if rel.fear > 70:
        return "terrified"
    if rel.fear > 40:
        return "afraid"

    score = (rel.opinion + rel.trust) / 2
    if score > 80:
        return "joyful"
    if score > 60:
        return "friendly"
    if score > 40:
        return "neutral"
    if score > 20:
        return "wary"
    return "hostile"


def conversation_phase_for(rel: Relationship) -> ConversationPhase:
    """Phase from ``(opinion + trust + romantic) / 3``. No hysteresis."""
    score = (rel.opinion + rel.trust + rel.romantic) / 3
    if score > 70:
        return ConversationPhase.INTIMATE
    if score > 40:
        return ConversationPhase.FAMILIAR
    return ConversationPhase.EARLY


def relationship_tone(rel: Relationship) -> str:
    """Short label used to steer dialogue. Fear takes precedence."""
    tone = "neutral"
    if rel.opinion > 50:
        tone = "friendly"
    if rel.opinion > 75:
        tone = "warm"
    if rel.opinion < -50:
        tone = "hostile"
    if rel.romantic > 60:
        tone = "flirtatious"
    if rel.fear > 70:
        tone = "fearful"
    return tone


def would_be_hostile(record: CharacterRecord) -> bool:
    """Whether the character would turn on the player right now."""
    rel = record.relationships.player
    if rel.opinion < -50:
        return True
    if rel.fear > 80 and record.ai.courage < 30:
        return False
    return record.state.is_hostile


_TRAIT_DESCRIPTORS: dict[str, tuple[str, str]] = {
    "openness": ("curious and creative", "traditional and practical"),
    "conscientiousness": ("disciplined and organized", "spontaneous and flexible"),
    "extraversion": ("outgoing and energetic", "reserved and quiet"),
    "agreeableness": ("compassionate and cooperative", "competitive and assertive"),
    "neuroticism": ("anxious and sensitive", "calm and resilient"),
}


@dataclass
class PersonalitySummary:
    """Prompt-ready personality digest."""

    traits: str
    values: str
    quirks: str

    def __str__(self) -> str:
        parts = [p for p in (self.traits, f"values {self.values}" if self.values else "") if p]
        return "; ".join(parts) or "unremarkable"


def personality_summary(personality: Personality) -> PersonalitySummary:
    """Describe traits above 70 or below 30, and the top three values."""
    descriptors = []
    for name, (high, low) in _TRAIT_DESCRIPTORS.items():
        score = getattr(personality.traits, name)
        if score > 70:
            descriptors.append(high)
        elif score < 30:
            descriptors.append(low)

    ranked = sorted(personality.values.model_dump().items(), key=lambda item: item[1], reverse=True)
    top_values = ", ".join(f"{name} ({value})" for name, value in ranked[:3])

    return PersonalitySummary(
        traits=", ".join(descriptors),
        values=top_values,
        quirks="; ".join(personality.quirks),
    )
