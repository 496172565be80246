"""Character preview commands."""

import json
from typing import Optional

import typer
from rich.console import Console

from npcforge.cli.display import (
    display_character,
    display_character_table,
    display_error,
    display_info,
    display_name_stats,
)
from npcforge.cli.runtime import open_world
from npcforge.data.factions import FACTION_ALIASES, Faction, normalize_faction
from npcforge.data.names import NameAllocator
from npcforge.database.connection import get_db_session, init_db
from npcforge.sampling import SeededRandom, coerce_seed
from npcforge.schemas.save import SaveFormatError
from npcforge.schemas.template import GenerationTemplate
from npcforge.services.npc_generator import GenerationPipeline

app = typer.Typer(help="Generate and inspect characters without saving them")
console = Console()


def _check_faction(faction: Optional[str]) -> None:
    if faction and faction.strip().lower() not in FACTION_ALIASES:
        display_info(f"Unknown faction '{faction}', using castaway")


@app.command()
def generate(
    faction: Optional[str] = typer.Option(None, "--faction", "-f", help="Faction or map identifier"),
    gender: Optional[str] = typer.Option(None, "--gender", "-g", help="Gender (drawn if omitted)"),
    role: Optional[str] = typer.Option(None, "--role", "-r", help="Role (drawn if omitted)"),
    age: Optional[int] = typer.Option(None, "--age", help="Fixed age"),
    seed: Optional[str] = typer.Option(None, "--seed", "-s", help="Random seed"),
    count: int = typer.Option(1, "--count", "-n", min=1, max=50, help="Number to generate"),
    as_json: bool = typer.Option(False, "--json", help="Print save-format JSON"),
) -> None:
    """Preview generated characters."""
    _check_faction(faction)
    rng = SeededRandom(coerce_seed(seed))
    pipeline = GenerationPipeline(names=NameAllocator(), rng=rng)
    template = GenerationTemplate(faction=faction, gender=gender, role=role, age=age)
    records = [pipeline.generate(template) for _ in range(count)]

    if as_json:
        console.print_json(json.dumps([record.to_payload() for record in records]))
        return

    if count == 1:
        display_character(records[0])
    else:
        display_character_table(records, title=f"Generated (seed {rng.seed})")
    display_info(f"Seed: {rng.seed}")


@app.command()
def names(
    faction: Optional[str] = typer.Option(None, "--faction", "-f", help="Limit to one faction"),
    slot: Optional[str] = typer.Option(None, "--slot", help="Count names used in a save slot"),
    db_url: Optional[str] = typer.Option(None, "--db", help="Database URL"),
) -> None:
    """Show how much of each faction's name space is used."""
    allocator = NameAllocator()
    if slot:
        init_db(db_url)
        with get_db_session(db_url) as db:
            try:
                world = open_world(db, slot)
            except SaveFormatError as e:
                display_error(str(e))
                raise typer.Exit(1)
            if world is None:
                display_error(f"Slot '{slot}' not found")
                raise typer.Exit(1)
            allocator = world.directory.pipeline.names

    if faction:
        stats = [allocator.stats(normalize_faction(faction))]
    else:
        stats = [allocator.stats(f) for f in Faction]
    display_name_stats(stats)
