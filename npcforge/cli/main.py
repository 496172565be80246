"""Main CLI application."""

import logging

import typer
from rich.logging import RichHandler

from npcforge.cli.commands import npc, talk, world
from npcforge.cli.display import console
from npcforge.config import get_settings

# Create main app
app = typer.Typer(
    name="npcforge",
    help="Procedural NPC generation with relationships, memory and dialogue",
    add_completion=True,
)

# Add sub-commands
app.add_typer(npc.app, name="npc")
app.add_typer(world.app, name="world")
app.command(name="talk")(talk.talk)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level"),
) -> None:
    """npcforge - populate a world with characters who remember you.

    Use 'npcforge world populate <slot>' to create a world, then
    'npcforge talk <slot> <id>' to meet someone.
    """
    level = "DEBUG" if verbose else get_settings().log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()
