"""Prompt builders for enrichment, dialogue, rumors and portraits.

Each builder takes records and returns a plain string; nothing here
talks to a provider.
"""

from npcforge.schemas.background import CastawayBackground, MercenaryBackground, NativeBackground
from npcforge.schemas.character import Appearance, CharacterRecord
from npcforge.schemas.memory import ConversationTurn, MemoryEvent
from npcforge.services.derived_metrics import personality_summary, relationship_tone


# =============================================================================
# Enrichment
# =============================================================================


def backstory_context(record: CharacterRecord) -> str:
    """Faction-specific facts the backstory has to respect."""
    bg = record.background
    role = record.identity.role

    if isinstance(bg, CastawayBackground):
        return f"""CASTAWAY BACKSTORY CONTEXT:
- Has complete amnesia, no memory of life before the island
- Mysterious skill: {bg.mysterious_skill}
- Recurring dream: {bg.dream_motif}
- Island identity: {bg.island_identity}
- Current role: {role}

Generate a 2-3 sentence backstory about their NEW IDENTITY formed on the island.
DO NOT explain their past - they don't remember it.
Focus on: who they've become, how they cope, what drives them now."""

    if isinstance(bg, NativeBackground):
        return f"""NATIVE BACKSTORY CONTEXT:
- Tribe: {bg.tribe}
- Family lineage: {bg.lineage}
- Cultural role: {bg.cultural_role}
- Sacred knowledge: {bg.sacred_knowledge}
- Current role: {role}

Generate a 2-3 sentence backstory about their tribal history and place in island society.
Include: family connections, cultural significance, why they're at their current location."""

    if isinstance(bg, MercenaryBackground):
        return f"""MERCENARY BACKSTORY CONTEXT:
- Employer: {bg.employer} (PMC)
- Rank: {bg.rank}
- Specialization: {bg.specialization}
- Previous experience: {bg.previous_experience}
- Current mission: {bg.mission_type}
- Contracted by: {bg.contractor}
- Current role: {role}

Generate a 2-3 sentence backstory about their military background and current mission.
Include: why they joined, notable past operations, what they're doing on the island."""

    return ""


def build_enrichment_prompt(record: CharacterRecord) -> str:
    return f"""{backstory_context(record)}

Additionally generate:
1. ADDITIONAL QUIRKS (1-2 unique behavioral traits)
2. SECRETS (1-2 hidden elements that create drama/story potential)

Return ONLY valid JSON:
{{
  "backstory": "2-3 sentence backstory",
  "additionalQuirks": ["quirk1", "quirk2"],
  "secrets": ["secret1", "secret2"]
}}"""


# =============================================================================
# Dialogue
# =============================================================================

DIALOGUE_INSTRUCTIONS = """RESPOND AS {name}:
- Talk like a normal person, not a fortune cookie
- Use simple, direct language with no poetic metaphors or dramatic flourishes
- If they're practical, they give practical answers
- Match your tone to the relationship status ({tone})
- Keep the response natural and conversational (1-3 sentences)
- DO NOT use narration, actions in asterisks, or meta-commentary
- DO NOT refer to yourself in third person
- DO NOT repeat things you said in recent conversation
- Speak directly as the character"""

DIALOGUE_CONSTRAINTS = """CRITICAL SPEECH RULES:
- NO excessive punctuation (more than 3 dots in a row)
- NO references to tattoos, scars, or appearance unless directly asked
- NO unsolicited life lessons or philosophical musings
- Response must be direct dialogue only (no "She said:" or *actions*)
- Length: 1-3 sentences maximum
- If hostile (opinion < -50), be curt and unfriendly
- If fearful (fear > 70), be nervous and defensive
- If romantic (romantic > 60), include subtle flirtation
- Return ONLY the spoken dialogue, nothing else"""


def build_dialogue_prompt(
    record: CharacterRecord,
    player_message: str,
    mood: str,
    memories: list[MemoryEvent],
    history: list[ConversationTurn],
    context: str = "",
) -> str:
    """Assemble the roleplay prompt for one dialogue turn.

    Args:
        record: Speaking character.
        player_message: What the player just said.
        mood: Current mood label.
        memories: Relevant memories, most relevant first.
        history: Recent turns, oldest first.
        context: Optional description of the situation.
    """
    identity = record.identity
    rel = record.relationships.player
    tone = relationship_tone(rel)
    features = ", ".join(record.appearance.distinctive_features) or "unremarkable"

    sections = [
        f"""You are roleplaying as {identity.name}, {identity.title}.

CHARACTER PROFILE:
- Age: {record.appearance.age}, Gender: {record.appearance.gender}
- Faction: {identity.faction.value}
- Role: {identity.role}
- Personality: {personality_summary(record.personality)}
- Current Mood: {mood}
- Physical Description: {features}

RELATIONSHIP WITH PLAYER:
- Opinion: {rel.opinion}/100 ({tone})
- Trust: {rel.trust}/100
- Respect: {rel.respect}/100
- Fear: {rel.fear}/100
- Romantic Interest: {rel.romantic}/100
- Interaction Count: {rel.interaction_count}
- Conversation Phase: {record.memory.conversation_phase.value}"""
    ]

    if memories:
        lines = [
            f"{i}. {event.content} (importance: {event.importance:g})"
            for i, event in enumerate(memories, start=1)
        ]
        sections.append("RECENT RELEVANT MEMORIES:\n" + "\n".join(lines))

    if history:
        lines = [
            f'{"Player" if turn.speaker == "player" else identity.name}: "{turn.message}"'
            for turn in history
        ]
        sections.append("RECENT CONVERSATION:\n" + "\n".join(lines))

    sections.append(
        f"""CURRENT SITUATION:
{context or "You are talking with the player."}

PLAYER JUST SAID:
"{player_message}\""""
    )
    sections.append(DIALOGUE_INSTRUCTIONS.format(name=identity.name.upper(), tone=tone))
    sections.append(DIALOGUE_CONSTRAINTS)
    return "\n\n".join(sections)


def build_rumor_prompt(event: str, witness: CharacterRecord) -> str:
    return f"""{witness.name} witnessed this event: "{event}"

Based on their personality ({personality_summary(witness.personality)}), how would they describe this event when gossiping to other people on the island?

Generate a short rumor (1 sentence) they might spread. Make it reflect their personality:
- High agreeableness: sympathetic, downplay negatives
- Low agreeableness: harsh, exaggerate negatives
- High neuroticism: anxious, catastrophize
- High extraversion: dramatic, embellished

Return only the rumor text, no formatting."""


# =============================================================================
# Portraits
# =============================================================================

GENDER_NOUNS = {"female": "woman", "male": "man"}

BUILD_DESCRIPTIONS = {
    "petite": "petite, delicate build",
    "slim": "slim, lean build",
    "lean": "lean, wiry build",
    "average": "average, balanced build",
    "athletic": "athletic, toned build",
    "curvy": "curvy, voluptuous build",
    "muscular": "muscular, powerful build",
    "stocky": "stocky, solid build",
    "hulking": "hulking, massive build",
    "toned": "toned, fit build",
    "voluptuous": "voluptuous, full-figured build",
    "wiry": "wiry, sinewy build",
}

STYLE_DIRECTIVES = {
    "photorealistic": "photorealistic, highly detailed, 8k quality, professional photography, natural lighting, sharp focus, realistic textures",
    "anime": "anime style, manga aesthetic, cel shaded, vibrant colors, clean lines, Japanese animation style, expressive features",
    "artistic": "artistic style, painterly aesthetic, impressionist, brush strokes, artistic interpretation, creative composition, gallery quality",
    "cartoon": "cartoon style, comic book aesthetic, bold outlines, simplified shapes, bright colors, animated style, character illustration",
    "cinematic": "cinematic lighting, movie scene, dramatic composition, film quality, depth of field, atmospheric, professional cinematography",
}


def build_portrait_prompt(appearance: Appearance) -> str:
    """Physical description for the image provider."""
    noun = GENDER_NOUNS.get(appearance.gender.strip().lower(), "person")
    build = BUILD_DESCRIPTIONS.get(appearance.build, "average build")
    features = ", ".join(appearance.distinctive_features)
    return (
        f"Portrait of {noun}, {appearance.age} years old, {build}, "
        f"{appearance.skin_tone} skin, {appearance.hair_length} {appearance.hair_color} hair, "
        f"{appearance.hair_style}, {appearance.eye_color} eyes, {appearance.height}cm tall, "
        f"{features}, wearing {appearance.clothing}, confident expression, "
        "tropical island setting, profile portrait, studio lighting"
    )


def apply_style(prompt: str, style: str) -> str:
    """Append the style directive unless the prompt already names the style."""
    directive = STYLE_DIRECTIVES.get(style)
    if directive is None or style.lower() in prompt.lower():
        return prompt
    return f"{prompt}, {directive}"
