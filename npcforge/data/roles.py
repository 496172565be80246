"""Roles, titles and role-based starting skills."""

from npcforge.data.factions import Faction, normalize_faction
from npcforge.sampling import SeededRandom
from npcforge.schemas.character import Skills

DEFAULT_ROLES: dict[Faction, list[str]] = {
    Faction.CASTAWAY: ["survivor", "scavenger", "wanderer", "refugee"],
    Faction.NATIVE: ["hunter", "gatherer", "elder", "warrior", "shaman"],
    Faction.MERCENARY: ["soldier", "scout", "captain", "enforcer"],
}

TITLES: dict[Faction, list[str]] = {
    Faction.CASTAWAY: ["Survivor", "Castaway", "Shipwreck Victim", "Stranded Sailor", "Lost Traveler"],
    Faction.NATIVE: ["Islander", "Local", "Native", "Village Elder", "Tribe Member"],
    Faction.MERCENARY: [
        "Blacksteel Operator",
        "Blacksteel Soldier",
        "PMC Contractor",
        "Blacksteel Enforcer",
        "Security Specialist",
    ],
}

# Role-based skill baselines (0-100). Roles not listed start untrained.
ROLE_SKILLS: dict[str, dict[str, int]] = {
    "survivor": {"survival": 40, "crafting": 20, "exploration": 20},
    "scavenger": {"exploration": 40, "crafting": 30, "survival": 20},
    "wanderer": {"exploration": 50, "survival": 30},
    "refugee": {"survival": 30, "diplomacy": 20, "medicine": 10},
    "hunter": {"hunting": 50, "survival": 30, "combat": 20},
    "gatherer": {"survival": 40, "medicine": 20, "exploration": 20},
    "elder": {"diplomacy": 50, "medicine": 30, "survival": 20},
    "warrior": {"combat": 50, "hunting": 20, "survival": 20},
    "shaman": {"medicine": 50, "diplomacy": 30},
    "soldier": {"combat": 50, "survival": 20},
    "scout": {"exploration": 40, "combat": 30, "survival": 20},
    "captain": {"combat": 40, "diplomacy": 40},
    "enforcer": {"combat": 60, "diplomacy": 10},
}


def pick_role(faction: Faction | str, rng: SeededRandom) -> str:
    """Draw a default role for the faction. One draw."""
    return rng.choice(DEFAULT_ROLES[normalize_faction(faction)])


def pick_title(faction: Faction | str, rng: SeededRandom) -> str:
    """Draw a title for the faction. One draw."""
    return rng.choice(TITLES[normalize_faction(faction)])


def starting_skills(role: str) -> Skills:
    """Return the skill baseline for a role. Consumes no draws."""
    return Skills(**ROLE_SKILLS.get(role.strip().lower(), {}))
