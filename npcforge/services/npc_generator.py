"""Generation pipeline: template in, complete character record out.

The pipeline is the only place that knows the order in which the trait
databases consume the random stream. Keep that order stable; moving a
single draw changes every character generated after it.
"""

import logging
import re

from npcforge.clock import Clock, utc_now
from npcforge.data.appearance import generate_appearance
from npcforge.data.background import generate_background
from npcforge.data.factions import Faction, lookup_gender, normalize_faction
from npcforge.data.names import NameAllocator
from npcforge.data.personality import generate_personality
from npcforge.data.roles import pick_role, pick_title, starting_skills
from npcforge.sampling import SeededRandom
from npcforge.schemas.character import (
    Behavior,
    CharacterRecord,
    Identity,
    Location,
    Meta,
)
from npcforge.schemas.template import GenerationTemplate, ResolvedTemplate, Tile
from npcforge.services.derived_metrics import calculate_aggression, calculate_courage

logger = logging.getLogger(__name__)

# Who moves around and who stays put.
ROUTINES: dict[Faction, str] = {
    Faction.CASTAWAY: "wanderer",
    Faction.NATIVE: "villager",
    Faction.MERCENARY: "patrol",
}


def slugify(text: str) -> str:
    """Lowercase, with runs of non-alphanumerics collapsed to underscores."""
    return re.sub(r"[^a-z0-9]+", "_", text.lower()).strip("_")


def record_id(faction: Faction, full_name: str) -> str:
    return f"{faction.value}_{slugify(full_name)}"


class GenerationPipeline:
    """Builds character records from generation templates.

    Args:
        names: Allocator that keeps names unique per faction.
        rng: Shared random stream.
        clock: Source of creation timestamps.
    """

    def __init__(
        self,
        names: NameAllocator | None = None,
        rng: SeededRandom | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.names = names or NameAllocator()
        self.rng = rng or SeededRandom()
        self.clock = clock or utc_now

    def resolve_template(self, template: GenerationTemplate | None = None) -> ResolvedTemplate:
        """Apply every default once.

        Draws from the random stream only when the gender is missing.
        """
        template = template or GenerationTemplate()
        faction = normalize_faction(template.faction)

        gender = template.gender
        if not gender:
            gender = "female" if self.rng.next() > 0.5 else "male"

        return ResolvedTemplate(
            faction=faction,
            gender=gender,
            lookup_gender=lookup_gender(gender),
            age=template.age,
            role=template.role,
            tile=template.tile or Tile(),
        )

    def generate(self, template: GenerationTemplate | None = None) -> CharacterRecord:
        """Generate one record. The name is marked used as a side effect."""
        resolved = self.resolve_template(template)
        faction = resolved.faction

        name = self.names.generate_name(faction, resolved.gender, self.rng)
        appearance = generate_appearance(faction, resolved.gender, self.rng)
        if resolved.age is not None:
            appearance.age = resolved.age
        personality = generate_personality(faction, self.rng)
        role = resolved.role or pick_role(faction, self.rng)
        background = generate_background(faction, role, self.rng)
        title = pick_title(faction, self.rng)

        record = CharacterRecord(
            identity=Identity(
                id=record_id(faction, name.full_name),
                name=name.full_name,
                first_name=name.first_name,
                last_name=name.last_name,
                title=title,
                faction=faction,
                role=role,
            ),
            appearance=appearance,
            personality=personality,
            background=background,
            skills=starting_skills(role),
            location=Location(current_tile=resolved.tile, home_location=resolved.tile),
            ai=Behavior(
                aggression=calculate_aggression(personality),
                courage=calculate_courage(personality),
                routine_type=ROUTINES[faction],
            ),
            meta=Meta(
                tags=[faction.value, role],
                generated_by_ai=False,
                created_at=self.clock(),
            ),
        )
        logger.debug("Generated %s (%s %s)", record.name, faction.value, role)
        return record
