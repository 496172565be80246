"""Population and save slot commands."""

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from npcforge.cli.display import (
    display_character,
    display_character_table,
    display_error,
    display_info,
    display_slot_list,
    display_success,
    progress_spinner,
)
from npcforge.cli.runtime import World, dialogue_text_service, new_world, open_world
from npcforge.config import get_settings
from npcforge.database.connection import get_db_session, init_db
from npcforge.llm.factory import get_image_provider
from npcforge.managers.rumor_manager import RumorManager
from npcforge.managers.save_manager import SaveManager
from npcforge.schemas.save import SaveFormatError
from npcforge.schemas.template import GenerationTemplate, Tile
from npcforge.services.portrait_service import PortraitService

app = typer.Typer(help="Populate, inspect and manage saved worlds")
console = Console()

DbOption = typer.Option(None, "--db", help="Database URL (defaults to DATABASE_URL)")


def _require_world(db, slot: str, enrich: bool = False) -> World:
    try:
        world = open_world(db, slot, enrich=enrich)
    except SaveFormatError as e:
        display_error(str(e))
        raise typer.Exit(1)
    if world is None:
        display_error(f"Slot '{slot}' not found")
        raise typer.Exit(1)
    return world


def _parse_tile(value: Optional[str]) -> Optional[Tile]:
    if value is None:
        return None
    try:
        q, r = (int(part) for part in value.split(","))
    except ValueError:
        display_error(f"Tile must be 'q,r', got '{value}'")
        raise typer.Exit(1)
    return Tile(q=q, r=r)


@app.command()
def populate(
    slot: str = typer.Argument(..., help="Save slot to create or extend"),
    count: int = typer.Option(10, "--count", "-n", min=1, help="Characters to spawn"),
    faction: Optional[str] = typer.Option(None, "--faction", "-f", help="Faction for every spawn"),
    tile: Optional[str] = typer.Option(None, "--tile", "-t", help="Spawn tile as q,r"),
    seed: Optional[str] = typer.Option(None, "--seed", "-s", help="World seed for a new slot"),
    enrich: Optional[bool] = typer.Option(None, "--enrich/--no-enrich", help="AI backstories"),
    db_url: Optional[str] = DbOption,
) -> None:
    """Spawn characters into a save slot."""
    spawn_tile = _parse_tile(tile)
    use_ai = get_settings().enrich_on_spawn if enrich is None else enrich
    init_db(db_url)
    with get_db_session(db_url) as db:
        try:
            world = open_world(db, slot, enrich=use_ai)
        except SaveFormatError as e:
            display_error(str(e))
            raise typer.Exit(1)
        if world is None:
            world = new_world(slot, seed=seed, enrich=use_ai)
        elif seed is not None:
            display_info(f"Slot '{slot}' exists; keeping its seed {world.seed}")

        template = GenerationTemplate(faction=faction, tile=spawn_tile)

        async def _spawn_all() -> int:
            spawned = 0
            for _ in range(count):
                if await world.directory.spawn(template, enrich=use_ai) is None:
                    break
                spawned += 1
            return spawned

        with progress_spinner(f"Spawning {count} characters..."):
            spawned = asyncio.run(_spawn_all())

        world.save(db)

    if spawned < count:
        display_info(f"Population cap reached after {spawned} spawns")
    display_success(f"Spawned {spawned} characters into '{slot}' ({len(world.directory)} total)")


@app.command("list")
def list_characters(
    slot: str = typer.Argument(..., help="Save slot"),
    faction: Optional[str] = typer.Option(None, "--faction", "-f", help="Filter by faction"),
    tile: Optional[str] = typer.Option(None, "--tile", "-t", help="Filter by tile q,r"),
    db_url: Optional[str] = DbOption,
) -> None:
    """List characters in a slot."""
    at_tile = _parse_tile(tile)
    init_db(db_url)
    with get_db_session(db_url) as db:
        directory = _require_world(db, slot).directory

    if at_tile is not None:
        records = directory.at_tile(at_tile)
    elif faction:
        records = directory.in_faction(faction)
    else:
        records = directory.all()

    if not records:
        display_info("No characters found")
        return
    display_character_table(records, title=f"Characters in {slot}")


@app.command()
def show(
    slot: str = typer.Argument(..., help="Save slot"),
    npc_id: str = typer.Argument(..., help="Character id"),
    db_url: Optional[str] = DbOption,
) -> None:
    """Show one character in detail."""
    init_db(db_url)
    with get_db_session(db_url) as db:
        record = _require_world(db, slot).directory.get(npc_id)

    if record is None:
        display_error(f"Character '{npc_id}' not found")
        raise typer.Exit(1)
    display_character(record)


@app.command()
def slots(db_url: Optional[str] = DbOption) -> None:
    """List save slots."""
    init_db(db_url)
    with get_db_session(db_url) as db:
        display_slot_list(SaveManager(db).list_slots())


@app.command("export")
def export_slot(
    slot: str = typer.Argument(..., help="Save slot"),
    path: Path = typer.Argument(..., help="Destination JSON file"),
    db_url: Optional[str] = DbOption,
) -> None:
    """Export a slot to a JSON save file."""
    init_db(db_url)
    with get_db_session(db_url) as db:
        exported = SaveManager(db).export_slot(slot, path)

    if not exported:
        display_error(f"Slot '{slot}' not found")
        raise typer.Exit(1)
    display_success(f"Exported '{slot}' to {path}")


@app.command("import")
def import_slot(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON save file"),
    slot: str = typer.Argument(..., help="Slot to write"),
    db_url: Optional[str] = DbOption,
) -> None:
    """Import a JSON save file into a slot (overwrites it)."""
    init_db(db_url)
    try:
        with get_db_session(db_url) as db:
            saved = SaveManager(db).import_file(path, slot)
            count = saved.character_count
    except SaveFormatError as e:
        display_error(str(e))
        raise typer.Exit(1)
    display_success(f"Imported {count} characters into '{slot}'")


@app.command()
def delete(
    slot: str = typer.Argument(..., help="Save slot"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
    db_url: Optional[str] = DbOption,
) -> None:
    """Delete a save slot."""
    if not yes and not typer.confirm(f"Delete slot '{slot}'?"):
        display_info("Cancelled")
        return

    init_db(db_url)
    with get_db_session(db_url) as db:
        deleted = SaveManager(db).delete(slot)

    if not deleted:
        display_error(f"Slot '{slot}' not found")
        raise typer.Exit(1)
    display_success(f"Deleted '{slot}'")


@app.command()
def rumor(
    slot: str = typer.Argument(..., help="Save slot"),
    witness_id: str = typer.Argument(..., help="Character who saw the event"),
    event: str = typer.Argument(..., help="What happened"),
    spread_range: Optional[int] = typer.Option(None, "--range", "-r", min=0, help="Spread range"),
    db_url: Optional[str] = DbOption,
) -> None:
    """Spread a witnessed event to nearby characters."""
    radius = get_settings().rumor_range if spread_range is None else spread_range
    init_db(db_url)
    with get_db_session(db_url) as db:
        world = _require_world(db, slot)
        if witness_id not in world.directory:
            display_error(f"Character '{witness_id}' not found")
            raise typer.Exit(1)

        manager = RumorManager(world.directory, dialogue_text_service())
        with progress_spinner("Spreading rumor..."):
            result = asyncio.run(manager.spread_rumor(event, witness_id, radius))
        world.save(db)

    console.print(f'[bold]Rumor:[/bold] "{result.rumor_text}"')
    if result.violent:
        display_info("Violent event: hearers think less of the player and fear them more")
    display_success(f"{len(result.hearer_ids)} characters heard it")


@app.command()
def portrait(
    slot: str = typer.Argument(..., help="Save slot"),
    npc_id: str = typer.Argument(..., help="Character id"),
    style: Optional[str] = typer.Option(None, "--style", help="Image style"),
    db_url: Optional[str] = DbOption,
) -> None:
    """Generate a portrait for one character."""
    init_db(db_url)
    with get_db_session(db_url) as db:
        world = _require_world(db, slot)
        record = world.directory.get(npc_id)
        if record is None:
            display_error(f"Character '{npc_id}' not found")
            raise typer.Exit(1)

        service = PortraitService(get_image_provider(), style=style or get_settings().image_style)
        with progress_spinner("Rendering portrait..."):
            reference = asyncio.run(service.generate(record))
        world.save(db)

    console.print(reference if len(reference) < 200 else reference[:200] + "...")
    display_success(f"Portrait saved for {record.name}")
