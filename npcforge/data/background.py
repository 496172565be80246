"""Background pools and generator.

Castaways remember nothing before the island, natives carry tribal
lineage, mercenaries carry a Blacksteel service record. Each faction
draws its fields in the order listed in its branch below.
"""

from npcforge.data.factions import Faction, normalize_faction
from npcforge.sampling import SeededRandom
from npcforge.schemas.background import (
    Background,
    CastawayBackground,
    MercenaryBackground,
    NativeBackground,
)

MYSTERIOUS_SKILLS = [
    "knows advanced first aid but doesn't remember training",
    "can tie complex knots without thinking",
    "speaks fragments of multiple languages",
    "instinctively knows hand-to-hand combat",
    "has deep knowledge of sailing",
    "understands engineering principles",
    "recognizes classical music",
    "knows gourmet cooking techniques",
    "can perform emergency surgery",
    "understands military tactics",
    "knows advanced mathematics",
    "can identify expensive wines",
    "has ballroom dancing muscle memory",
    "recognizes art and literature references",
]

DREAM_MOTIFS = [
    "recurring dream of a burning ship",
    "visions of a woman's face they can't place",
    "nightmares of being chased",
    "dreams of a grand estate",
    "memories of cold northern weather",
    "flashes of a wedding ceremony",
    "visions of violence and blood",
    "dreams of a crying child",
    "recurring image of a specific city skyline",
    "nightmare of drowning repeatedly",
    "vague memory of uniform and medals",
    "dream of running from authorities",
    "vision of a courtroom",
    "memory of a luxurious lifestyle",
]

ISLAND_IDENTITIES = [
    "a resourceful scavenger who knows every inch of the beach",
    "a paranoid loner who trusts no one",
    "a natural leader trying to organize other survivors",
    "a broken shell of a person barely hanging on",
    "a philosophical thinker who found peace in isolation",
    "a desperate survivor willing to do anything",
    "a helpful person who finds purpose in aiding others",
    "an obsessive builder constructing elaborate shelters",
    "a wanderer who can't stay in one place",
    "a mystic who believes the island chose them",
    "a pragmatic survivor focused on basics",
    "a social butterfly desperate for human connection",
]

TRIBES = [
    "the Kaimana tribe of the eastern shores",
    "the Moana people of the volcanic highlands",
    "the Alani clan of the northern reefs",
    "the Kahale tribe of the sacred valleys",
    "the Nalu people of the western beaches",
    "the Lani clan of the mountain villages",
    "the Kai tribe of the fishing grounds",
    "the Hoku people of the stargazer peaks",
]

LINEAGES = [
    "descended from a long line of chiefs",
    "child of renowned warriors",
    "from a family of spiritual healers",
    "offspring of master craftsmen",
    "heir to a fishing dynasty",
    "from a farming family of modest means",
    "child of a disgraced former leader",
    "orphan raised by the tribe collectively",
    "from a family of navigators and explorers",
    "descended from the island's first inhabitants",
]

CULTURAL_ROLES = [
    "apprentice shaman learning sacred rites",
    "warrior sworn to protect the tribe",
    "master fisherman providing for community",
    "storyteller preserving oral history",
    "craftsperson creating traditional items",
    "farmer tending ancestral lands",
    "navigator reading stars and currents",
    "healer using ancient medicine",
    "scout monitoring the island's borders",
    "elder advisor to the chief",
    "dancer performing ceremonial rituals",
    "hunter tracking in the jungle",
]

SACRED_KNOWLEDGE = [
    "knows the location of hidden sacred sites",
    "can interpret the will of ancestors",
    "understands the island's spiritual geography",
    "keeper of forbidden prophecies",
    "knows ancient taboos and their consequences",
    "can communicate with island spirits",
    "understands the sacred calendar",
    "knows ritual phrases in the old tongue",
    "can read omens in natural phenomena",
    "keeper of tribal genealogies",
]

RANKS = [
    "Operator (entry level)",
    "Senior Operator",
    "Team Leader",
    "Squad Commander",
    "Tactical Specialist",
    "Field Supervisor",
    "Operations Officer",
    "Security Consultant (veteran)",
]

SPECIALIZATIONS = [
    "Close Quarters Combat specialist",
    "Sniper and designated marksman",
    "Explosives and demolitions expert",
    "Communications and signals intelligence",
    "Medic and field trauma specialist",
    "Heavy weapons operator",
    "Reconnaissance and surveillance",
    "Vehicle and maritime operations",
    "Intelligence gathering and analysis",
    "Executive protection detail",
    "Unconventional warfare specialist",
    "Cyber warfare and electronic countermeasures",
]

PREVIOUS_EXPERIENCE = [
    "former special forces operator",
    "ex-military police investigator",
    "former infantry soldier",
    "ex-navy SEAL",
    "former marine raider",
    "ex-army ranger",
    "former intelligence operative",
    "ex-military pilot",
    "former combat medic",
    "ex-military contractor from another PMC",
    "former guerrilla fighter",
    "ex-law enforcement SWAT",
]

MISSION_TYPES = [
    "security detail for unknown VIP",
    "resource extraction protection",
    "area denial and territorial control",
    "search and acquisition of unknown asset",
    "intelligence gathering on island inhabitants",
    "establishing forward operating base",
    "neutralizing potential threats",
    "securing strategic locations",
    "monitoring and reporting island activities",
    "special operations with classified objectives",
]

CONTRACTORS = [
    "classified government contract",
    "multinational mining corporation",
    "pharmaceutical research company",
    "private billionaire collector",
    "biotech conglomerate",
    "archaeological expedition financier",
    "real estate development firm",
    "intelligence agency front company",
    "military weapons contractor",
    "unknown benefactor (need-to-know basis)",
]


def generate_background(faction: Faction | str, role: str, rng: SeededRandom) -> Background:
    """Build the faction-specific background.

    ``role`` is accepted for symmetry with the other generators; the
    drawn fields do not depend on it.
    """
    faction = normalize_faction(faction)

    if faction == Faction.NATIVE:
        return NativeBackground(
            tribe=rng.choice(TRIBES),
            lineage=rng.choice(LINEAGES),
            cultural_role=rng.choice(CULTURAL_ROLES),
            sacred_knowledge=rng.choice(SACRED_KNOWLEDGE),
            # Born in their tribe's territory
            birthplace=rng.choice(TRIBES),
            occupation=rng.choice(CULTURAL_ROLES),
            family_status=rng.choice(LINEAGES),
        )

    if faction == Faction.MERCENARY:
        return MercenaryBackground(
            rank=rng.choice(RANKS),
            specialization=rng.choice(SPECIALIZATIONS),
            previous_experience=rng.choice(PREVIOUS_EXPERIENCE),
            mission_type=rng.choice(MISSION_TYPES),
            contractor=rng.choice(CONTRACTORS),
            occupation=rng.choice(RANKS),
        )

    return CastawayBackground(
        mysterious_skill=rng.choice(MYSTERIOUS_SKILLS),
        dream_motif=rng.choice(DREAM_MOTIFS),
        island_identity=rng.choice(ISLAND_IDENTITIES),
    )
