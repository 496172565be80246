"""Personality pools and generator.

Draw order: the five traits (openness, conscientiousness, extraversion,
agreeableness, neuroticism), orientation, dominance, intensity, interest
count and interests, then count-and-sample for quirks, fears and desires.
"""

from npcforge.data.factions import Faction, normalize_faction
from npcforge.sampling import (
    SeededRandom,
    WeightedOption,
    sample_unique,
    weighted_choice,
    weighted_pool,
)
from npcforge.schemas.character import Personality, Sexuality, Traits

TRAIT_NAMES = ("openness", "conscientiousness", "extraversion", "agreeableness", "neuroticism")

# Inclusive (min, max) per Big Five trait
TRAIT_RANGES: dict[Faction, dict[str, tuple[int, int]]] = {
    # Traumatized but resilient
    Faction.CASTAWAY: {
        "openness": (30, 80),
        "conscientiousness": (40, 90),
        "extraversion": (20, 70),
        "agreeableness": (30, 80),
        "neuroticism": (40, 90),
    },
    # Traditional, community-minded
    Faction.NATIVE: {
        "openness": (30, 70),
        "conscientiousness": (50, 90),
        "extraversion": (40, 80),
        "agreeableness": (50, 90),
        "neuroticism": (20, 60),
    },
    # Disciplined professionals
    Faction.MERCENARY: {
        "openness": (30, 70),
        "conscientiousness": (60, 95),
        "extraversion": (30, 70),
        "agreeableness": (10, 50),
        "neuroticism": (20, 60),
    },
}

ORIENTATIONS: list[WeightedOption[str]] = weighted_pool([
    ("heterosexual", 7),
    ("bisexual", 2),
    ("homosexual", 1),
    ("pansexual", 1),
])

DOMINANCE = ["dominant", "submissive", "switch", "neutral"]
INTENSITY = ["vanilla", "adventurous", "kinky", "extreme"]
INTERESTS = [
    "bondage", "roleplay", "outdoor", "voyeurism", "exhibitionism",
    "rough", "gentle", "sensual", "passionate", "experimental",
    "traditional", "romantic", "casual", "intense", "playful",
]

QUIRKS: dict[Faction, list[str]] = {
    Faction.CASTAWAY: [
        "constantly checks the horizon for ships",
        "hoards small items compulsively",
        "talks to themselves when alone",
        "can't sleep without sound of waves",
        "flinches at loud noises",
        "counts everything obsessively",
        "avoids deep water despite being on island",
        "keeps a journal with unreadable scrawl",
        "makes daily marks on a tree to track time",
        "refuses to eat certain foods that remind them of something",
        "mumbles in a language they don't remember",
        "obsessively maintains their appearance despite conditions",
        "saves every scrap of cloth or rope",
        "builds small cairns or markers everywhere",
    ],
    Faction.NATIVE: [
        "performs small rituals before eating",
        "speaks to ancestors when making decisions",
        "refuses to enter certain areas due to taboos",
        "reads omens in natural phenomena",
        "hums traditional songs while working",
        "touches specific trees for luck",
        "avoids stepping on certain plants",
        "makes offerings to spirits regularly",
        "tells stories using elaborate hand gestures",
        "interprets dreams as prophecies",
        "consults elders before any major decision",
        "wears traditional jewelry at all times",
        "performs cleansing rituals after conflict",
        "shares food with everyone before eating",
    ],
    Faction.MERCENARY: [
        "constantly scans surroundings for threats",
        "sleeps with weapon within reach",
        "uses military time exclusively",
        "maintains gear obsessively",
        "speaks in tactical jargon",
        "never sits with back to door",
        "takes measured bites and chews exactly same number",
        "checks magazine and clears weapon repeatedly",
        "maintains perfect posture at all times",
        "uses compass directions instead of left/right",
        "performs equipment check ritual before sleep",
        "refers to civilians with slight disdain",
        "keeps detailed operational notes",
        "practices tactical drills during downtime",
        "never discusses family or personal life",
    ],
}

FEARS: dict[Faction, list[str]] = {
    Faction.CASTAWAY: [
        "dying alone on the island",
        "never being rescued",
        "losing their remaining memories",
        "going completely insane",
        "being forgotten by the outside world",
        "the ocean and drowning",
        "starvation",
        "tropical storms",
        "isolation",
        "their past catching up to them",
    ],
    Faction.NATIVE: [
        "angering the island spirits",
        "breaking ancient taboos",
        "outsiders destroying sacred sites",
        "losing traditional ways",
        "being cursed by elders",
        "natural disasters as divine punishment",
        "failing their ancestors",
        "pollution or desecration of the island",
        "their children forgetting traditions",
        "prophecies of doom",
    ],
    Faction.MERCENARY: [
        "mission failure",
        "losing combat effectiveness",
        "betrayal by command",
        "being left behind",
        "losing control in combat",
        "not completing the contract",
        "appearing weak",
        "ambush or surprise attack",
        "their past operations being exposed",
        "dying for a corrupt cause",
    ],
}

DESIRES: dict[Faction, list[str]] = {
    Faction.CASTAWAY: [
        "rescue and return to civilization",
        "recovering their lost memories",
        "finding meaning in their new life",
        "building something permanent",
        "connecting with other survivors",
        "proving they can survive anything",
        "understanding why they were spared",
        "finding love despite circumstances",
        "escaping the island",
        "accepting this as their new home",
    ],
    Faction.NATIVE: [
        "protecting sacred sites",
        "preserving traditional knowledge",
        "maintaining harmony with nature",
        "raising strong children",
        "earning elder status",
        "defending the island from outsiders",
        "finding a worthy partner",
        "mastering ancestral skills",
        "receiving visions from spirits",
        "keeping their family line strong",
    ],
    Faction.MERCENARY: [
        "completing the mission",
        "getting paid and getting out",
        "advancing in Blacksteel ranks",
        "proving combat superiority",
        "surviving until contract ends",
        "finding worthy opponents",
        "maintaining professional reputation",
        "uncovering what Blacksteel is really doing here",
        "earning enough to retire",
        "power and control",
    ],
}


def _pick_some(rng: SeededRandom, pool: list[str], low: int, high: int) -> list[str]:
    return sample_unique(rng, pool, rng.randint(low, high))


def generate_personality(faction: Faction | str, rng: SeededRandom) -> Personality:
    """Build a personality for a faction.

    Values stay at their neutral defaults; only traits, sexuality and the
    quirk/fear/desire lists are drawn.
    """
    faction = normalize_faction(faction)
    ranges = TRAIT_RANGES[faction]
    traits = Traits(**{name: rng.randint(*ranges[name]) for name in TRAIT_NAMES})

    orientation = weighted_choice(rng, ORIENTATIONS)
    dominance = rng.choice(DOMINANCE)
    intensity = rng.choice(INTENSITY)
    interests = _pick_some(rng, INTERESTS, 2, 4)

    return Personality(
        traits=traits,
        sexuality=Sexuality(
            orientation=orientation,
            dominance=dominance,
            intensity=intensity,
            interests=interests,
        ),
        quirks=_pick_some(rng, QUIRKS[faction], 2, 3),
        fears=_pick_some(rng, FEARS[faction], 2, 3),
        desires=_pick_some(rng, DESIRES[faction], 2, 3),
    )
