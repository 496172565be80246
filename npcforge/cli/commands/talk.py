"""Interactive dialogue with one character."""

import asyncio
from typing import Optional

import typer
from rich.console import Console

from npcforge.cli.display import display_error, display_info, display_npc_line
from npcforge.cli.runtime import World, dialogue_text_service, open_world
from npcforge.config import get_settings
from npcforge.database.connection import get_db_session, init_db
from npcforge.llm.text_service import TextService
from npcforge.managers.dialogue_manager import DialogueManager
from npcforge.schemas.save import SaveFormatError

console = Console()

QUIT_COMMANDS = {"/quit", "/exit", "/bye"}


async def _conversation(world: World, npc_id: str, text_service: TextService) -> int:
    """Read player lines until a quit command. Returns turns taken."""
    settings = get_settings()
    manager = DialogueManager(
        world.directory,
        text_service,
        max_attempts=settings.dialogue_max_attempts,
        history_limit=settings.conversation_history_limit,
    )
    manager.memory.capacity = settings.memory_capacity
    record = world.directory.get(npc_id)
    manager.start_conversation(npc_id)

    turns = 0
    try:
        while True:
            line = console.input("[bold cyan]You: [/bold cyan]").strip()
            if not line or line.lower() in QUIT_COMMANDS:
                break
            reply = await manager.talk(npc_id, line)
            display_npc_line(record.name, reply.text)
            turns += 1
    finally:
        manager.end_conversation()
    return turns


def talk(
    slot: str = typer.Argument(..., help="Save slot"),
    npc_id: str = typer.Argument(..., help="Character id"),
    db_url: Optional[str] = typer.Option(None, "--db", help="Database URL"),
) -> None:
    """Talk with a character. Type /quit or an empty line to leave."""
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

        record = world.directory.get(npc_id)
        if record is None:
            display_error(f"Character '{npc_id}' not found")
            raise typer.Exit(1)

        display_info(f"Talking with {record.name}, {record.identity.title}. /quit to leave.")
        turns = asyncio.run(_conversation(world, npc_id, dialogue_text_service()))
        if turns:
            world.save(db)

    display_info(f"Conversation ended after {turns} turns")
