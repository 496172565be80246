"""Appearance pools and generator.

Draw order (one draw each unless noted): age, height, skin tone, hair
color, hair style, hair length, eye color, build, clothing, feature
count, then the unique feature draws.
"""

from npcforge.data.factions import Faction, lookup_gender, normalize_faction
from npcforge.sampling import (
    SeededRandom,
    WeightedOption,
    sample_unique,
    weighted_choice,
    weighted_pool,
)
from npcforge.schemas.character import Appearance


AGE_RANGES: dict[Faction, tuple[int, int]] = {
    Faction.CASTAWAY: (20, 60),
    Faction.NATIVE: (18, 70),
    Faction.MERCENARY: (25, 45),
}

HEIGHT_RANGES: dict[str, tuple[int, int]] = {
    "male": (165, 195),
    "female": (155, 180),
}

SKIN_TONES: dict[Faction, list[WeightedOption[str]]] = {
    Faction.CASTAWAY: weighted_pool([
        ("pale", 2), ("fair", 3), ("light tan", 2), ("olive", 2),
        ("tan", 1), ("brown", 1), ("dark brown", 1),
    ]),
    Faction.NATIVE: weighted_pool([
        ("golden tan", 3), ("deep tan", 3), ("bronze", 3),
        ("warm brown", 2), ("rich brown", 2), ("dark brown", 1),
    ]),
    Faction.MERCENARY: weighted_pool([
        ("pale", 2), ("fair", 2), ("olive", 2), ("tan", 2),
        ("brown", 2), ("dark brown", 2), ("ebony", 1),
    ]),
}

HAIR_COLORS: dict[Faction, list[WeightedOption[str]]] = {
    Faction.CASTAWAY: weighted_pool([
        ("blonde", 2), ("light brown", 3), ("brown", 3), ("dark brown", 2),
        ("black", 2), ("auburn", 1), ("red", 1), ("gray", 1), ("white", 1),
    ]),
    Faction.NATIVE: weighted_pool([
        ("black", 5), ("very dark brown", 3), ("dark brown", 2),
    ]),
    Faction.MERCENARY: weighted_pool([
        ("black", 3), ("dark brown", 3), ("brown", 2), ("blonde", 2),
        ("red", 1), ("gray", 1), ("shaved", 2), ("dyed black", 1),
    ]),
}

HAIR_STYLES: dict[str, dict[Faction, list[str]]] = {
    "male": {
        Faction.CASTAWAY: [
            "wild and unkempt", "shoulder-length and tangled", "pulled back in rough ponytail",
            "matted and sun-bleached", "scraggly beard and messy hair", "tied back with vine",
        ],
        Faction.NATIVE: [
            "traditional topknot", "long and flowing", "adorned with shells and flowers",
            "braided with ceremonial beads", "pulled back with bone clasp", "shaved sides with long top",
        ],
        Faction.MERCENARY: [
            "military buzz cut", "high and tight fade", "cropped short", "tactical crew cut",
            "shaved head", "slicked back", "military regulation",
        ],
    },
    "female": {
        Faction.CASTAWAY: [
            "wild and windswept", "long and tangled", "roughly braided",
            "sun-bleached and wavy", "tied back with torn cloth", "matted and messy",
        ],
        Faction.NATIVE: [
            "adorned with flowers and shells", "long flowing with traditional ornaments",
            "braided with colorful threads", "decorated with feathers",
            "woven with natural elements", "ceremonial style with beads",
        ],
        Faction.MERCENARY: [
            "tight military bun", "practical ponytail", "short tactical cut",
            "braided and secured", "regulation bob", "tight braids",
        ],
    },
}

HAIR_LENGTHS: dict[str, list[str]] = {
    "male": ["very short", "short", "medium", "shoulder-length", "long"],
    "female": ["short", "shoulder-length", "long", "very long"],
}

EYE_COLORS: list[WeightedOption[str]] = weighted_pool([
    ("brown", 4), ("dark brown", 4), ("hazel", 3), ("green", 2), ("blue", 2),
    ("gray", 1), ("amber", 1), ("emerald green", 0.5), ("ice blue", 0.5), ("violet", 0.3),
])

BODY_BUILDS: dict[str, dict[Faction, list[WeightedOption[str]]]] = {
    "male": {
        Faction.CASTAWAY: weighted_pool([
            ("lean", 3), ("average", 2), ("athletic", 2), ("muscular", 1), ("wiry", 2),
        ]),
        Faction.NATIVE: weighted_pool([
            ("athletic", 4), ("muscular", 3), ("lean", 2), ("stocky", 1),
        ]),
        Faction.MERCENARY: weighted_pool([
            ("muscular", 4), ("athletic", 3), ("stocky", 2), ("hulking", 1),
        ]),
    },
    "female": {
        Faction.CASTAWAY: weighted_pool([
            ("slim", 3), ("average", 2), ("athletic", 2), ("curvy", 2), ("petite", 1),
        ]),
        Faction.NATIVE: weighted_pool([
            ("athletic", 4), ("curvy", 3), ("average", 2), ("voluptuous", 1),
        ]),
        Faction.MERCENARY: weighted_pool([
            ("athletic", 4), ("muscular", 3), ("toned", 2), ("average", 1),
        ]),
    },
}

CLOTHING: dict[Faction, dict[str, list[str]]] = {
    Faction.CASTAWAY: {
        "male": [
            "tattered shirt and torn pants, barefoot",
            "ripped trousers and no shirt, sun-damaged",
            "makeshift loincloth from ship sail",
            "torn dress shirt and ragged slacks",
            "salvaged vest over bare chest, worn pants",
            "threadbare clothing held together with rope",
        ],
        "female": [
            "torn dress repurposed as wrap",
            "tattered blouse and makeshift skirt",
            "salvaged fabric tied as halter top and shorts",
            "ripped clothing fashioned into two-piece",
            "sun-bleached dress with many tears",
            "improvised clothing from ship materials",
        ],
    },
    Faction.NATIVE: {
        "male": [
            "traditional loincloth with ceremonial tattoos visible",
            "woven grass skirt and shell necklaces",
            "minimal tribal garments with body paint",
            "decorated loincloth and arm bands",
            "ceremonial wraps with natural dyes",
            "traditional island attire with feather ornaments",
        ],
        "female": [
            "woven grass skirt and shell top",
            "traditional sarong with flower lei",
            "ceremonial two-piece with natural decorations",
            "wrapped fabric skirt and decorative top",
            "island dress with traditional patterns",
            "minimal tribal garments with body paint and flowers",
        ],
    },
    Faction.MERCENARY: {
        "male": [
            "black tactical vest over combat shirt, cargo pants, boots",
            "urban camouflage fatigues with tactical gear",
            "combat uniform with Blacksteel insignia, armed",
            "tactical clothing, plate carrier, military boots",
            "dark military outfit with equipment harness",
            "PMC tactical gear, subdued patches, combat ready",
        ],
        "female": [
            "black tactical vest over fitted combat shirt, cargo pants",
            "tactical outfit with equipment harness, military boots",
            "combat uniform with Blacksteel patch, armed",
            "fitted tactical clothing with gear vest",
            "dark military outfit, plate carrier, boots",
            "PMC tactical gear, professional appearance",
        ],
    },
}

DISTINCTIVE_FEATURES: dict[Faction, list[str]] = {
    Faction.CASTAWAY: [
        "sun-damaged skin with freckles",
        "long scar across arm from shipwreck",
        "calloused hands from survival work",
        "haunted, tired eyes",
        "badly healed broken nose",
        "rope burn scars on wrists",
        "gaunt, weathered face",
        "missing tooth from accident",
        "deep scar on forehead",
        "perpetually sunburned shoulders",
        "wild, desperate eyes",
        "visible ribs from rationing",
        "salt-crusted hair",
        "permanent squint from sun glare",
    ],
    Faction.NATIVE: [
        "traditional tribal tattoos on arms",
        "ceremonial scarification patterns",
        "shell or bone piercings",
        "intricate facial tattoos",
        "flower tattoo on shoulder",
        "ritual scars on chest",
        "carved bone necklace",
        "traditional earlobe stretching",
        "sacred tribal markings",
        "decorative face paint",
        "ancestral tattoo sleeves",
        "ceremonial scars on back",
        "ritual piercings",
        "symbolic tattoos on hands",
    ],
    Faction.MERCENARY: [
        "combat scar across cheek",
        "military dog tags",
        "tactical gear tan lines",
        "shrapnel scars on arms",
        "unit tattoo on shoulder",
        "broken nose from combat",
        "knife scar on jaw",
        "Blacksteel insignia tattoo",
        "missing finger from operation",
        "burn scar on neck",
        "cold, calculating eyes",
        "professional posture and bearing",
        "visible gunshot scar",
        "military regulation appearance",
        "tactical calluses on hands",
    ],
}


def generate_appearance(faction: Faction | str, gender: str, rng: SeededRandom) -> Appearance:
    """Build an appearance record for a faction and gender.

    Args:
        faction: Faction or raw identifier.
        gender: Character gender, preserved as given on the record.
        rng: Random source.

    Returns:
        Appearance with 2-3 distinct distinctive features.
    """
    faction = normalize_faction(faction)
    pool_gender = lookup_gender(gender)

    age = rng.randint(*AGE_RANGES[faction])
    height = rng.randint(*HEIGHT_RANGES[pool_gender])
    skin_tone = weighted_choice(rng, SKIN_TONES[faction])
    hair_color = weighted_choice(rng, HAIR_COLORS[faction])
    hair_style = rng.choice(HAIR_STYLES[pool_gender][faction])
    hair_length = rng.choice(HAIR_LENGTHS[pool_gender])
    eye_color = weighted_choice(rng, EYE_COLORS)
    build = weighted_choice(rng, BODY_BUILDS[pool_gender][faction])
    clothing = rng.choice(CLOTHING[faction][pool_gender])

    feature_count = rng.randint(2, 3)
    features = sample_unique(rng, DISTINCTIVE_FEATURES[faction], feature_count)

    return Appearance(
        gender=gender,
        age=age,
        height=height,
        skin_tone=skin_tone,
        hair_color=hair_color,
        hair_style=hair_style,
        hair_length=hair_length,
        eye_color=eye_color,
        build=build,
        clothing=clothing,
        distinctive_features=features,
    )
