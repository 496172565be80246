"""Rich display helpers for CLI output."""

from contextlib import contextmanager

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from npcforge.data.names import NameStats
from npcforge.managers.save_manager import SlotInfo
from npcforge.schemas.character import CharacterRecord
from npcforge.services.derived_metrics import calculate_mood, personality_summary


# Shared console instance
console = Console()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {message}")


def display_success(message: str) -> None:
    console.print(f"[bold green]{message}[/bold green]")


def display_info(message: str) -> None:
    console.print(f"[dim]{message}[/dim]")


def display_character_table(records: list[CharacterRecord], title: str = "Characters") -> None:
    """Tabulate records, one row each."""
    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Name", style="green")
    table.add_column("Faction", style="cyan")
    table.add_column("Role")
    table.add_column("Tile", justify="right")
    table.add_column("Mood")
    table.add_column("AI", justify="center")

    for record in records:
        table.add_row(
            record.id,
            record.name,
            record.faction.value,
            record.identity.role,
            str(record.tile),
            record.state.mood if record.state.is_alive else "[red]dead[/red]",
            "✓" if record.meta.generated_by_ai else "",
        )

    console.print(table)


def display_character(record: CharacterRecord) -> None:
    """Show one record in detail."""
    identity = record.identity
    appearance = record.appearance
    traits = record.personality.traits
    rel = record.relationships.player

    console.print()
    console.print(
        Panel(
            f"[bold]{identity.name}[/bold], {identity.title}\n"
            f"{identity.faction.value} {identity.role} at {record.tile}",
            style="cyan",
        )
    )

    looks = Table(title="Appearance", box=box.ROUNDED, show_header=False)
    looks.add_column("Field", style="cyan")
    looks.add_column("Value")
    looks.add_row("Gender / age", f"{appearance.gender}, {appearance.age}")
    looks.add_row("Height / build", f"{appearance.height}cm, {appearance.build}")
    looks.add_row("Skin", appearance.skin_tone)
    looks.add_row("Hair", f"{appearance.hair_length} {appearance.hair_color}, {appearance.hair_style}")
    looks.add_row("Eyes", appearance.eye_color)
    looks.add_row("Clothing", appearance.clothing)
    looks.add_row("Features", ", ".join(appearance.distinctive_features))
    console.print(looks)

    mind = Table(title="Personality", box=box.ROUNDED, show_header=False)
    mind.add_column("Field", style="cyan")
    mind.add_column("Value")
    mind.add_row(
        "Traits",
        f"O {traits.openness}  C {traits.conscientiousness}  E {traits.extraversion}  "
        f"A {traits.agreeableness}  N {traits.neuroticism}",
    )
    mind.add_row("Summary", str(personality_summary(record.personality)))
    mind.add_row("Quirks", "; ".join(record.personality.quirks))
    mind.add_row("Fears", "; ".join(record.personality.fears))
    mind.add_row("Desires", "; ".join(record.personality.desires))
    console.print(mind)

    if record.background.backstory:
        console.print(Panel(record.background.backstory, title="Backstory", border_style="dim"))

    console.print(
        f"[bold]Player:[/bold] opinion {rel.opinion}, trust {rel.trust}, respect {rel.respect}, "
        f"fear {rel.fear}, romantic {rel.romantic} "
        f"([italic]{record.memory.conversation_phase.value}[/italic], mood {calculate_mood(record)})"
    )
    console.print(f"[bold]Memories:[/bold] {len(record.memory.events)}")
    console.print()


def display_name_stats(stats: list[NameStats]) -> None:
    table = Table(title="Name Space")
    table.add_column("Faction", style="cyan")
    table.add_column("Male", justify="right")
    table.add_column("Female", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Used", justify="right")
    table.add_column("Available", justify="right")
    table.add_column("% Used", justify="right")

    for row in stats:
        table.add_row(
            row.faction.value,
            str(row.male_combinations),
            str(row.female_combinations),
            str(row.total_combinations),
            str(row.used),
            str(row.available),
            f"{row.percent_used:.2f}",
        )

    console.print(table)


def display_slot_list(slots: list[SlotInfo]) -> None:
    if not slots:
        display_info("No save slots")
        return

    table = Table(title="Save Slots")
    table.add_column("Slot", style="green")
    table.add_column("Kind", style="cyan")
    table.add_column("Characters", justify="right")
    table.add_column("Seed")
    table.add_column("Updated")

    for slot in slots:
        table.add_row(
            slot.slot_name,
            slot.kind,
            str(slot.character_count),
            slot.world_seed or "",
            slot.updated_at.strftime("%Y-%m-%d %H:%M"),
        )

    console.print(table)


def display_npc_line(name: str, text: str) -> None:
    console.print(f"[bold green]{name}:[/bold green] {text}")


@contextmanager
def progress_spinner(description: str = "Processing..."):
    """Context manager for spinner during operations.

    Args:
        description: Text to show next to spinner.

    Yields:
        Tuple of (progress, task_id) for optional updates.
    """
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task(description, total=None)
        yield progress, task
