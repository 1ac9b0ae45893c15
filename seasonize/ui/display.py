"""Display functions for catalogue and projection output."""

from typing import TYPE_CHECKING, List

from rich.markup import escape
from rich.tree import Tree

from seasonize.models.season import ChannelStructure, format_episode_code
from seasonize.ui.console import console

if TYPE_CHECKING:
    from seasonize.pipeline.orchestrator import ProcessingStats


def format_video_count(count: int) -> str:
    """
    Format video count with pluralization.

    Args:
        count: Number of videos.

    Returns:
        Formatted string like "5 videos" or "1 video".
    """
    return f"{count} video{'s' if count != 1 else ''}"


def generate_channel_tree(structure: ChannelStructure) -> Tree:
    """
    Build a tree of a channel's seasons and episodes.

    Args:
        structure: Seasoned channel.

    Returns:
        Rich Tree with one node per season and one leaf per episode.
    """
    root = Tree(
        f"📺 [bold cyan]{escape(structure.channel_name)}[/bold cyan] "
        f"[dim]({format_video_count(structure.video_count)})[/dim]"
    )

    for season in structure.seasons:
        season_node = root.add(
            f"📁 [bold]{season.folder_name}[/bold] [dim]{season.year} - "
            f"{format_video_count(len(season))}[/dim]"
        )
        for episode, record in season.episodes():
            season_node.add(
                f"{format_episode_code(season.number, episode)}: "
                f"{escape(record.display_title)} [dim]({record.effective_date:%Y-%m-%d %H:%M:%S})[/dim]"
            )

    return root


def display_structures(structures: List[ChannelStructure]) -> None:
    """
    Display every channel as a series.

    Args:
        structures: Seasoned channels.
    """
    if not structures:
        console.print_warning("No videos found.")
        return

    console.rule("[bold blue]Catalogue[/bold blue]")
    for structure in structures:
        console.print(generate_channel_tree(structure))


def display_summary(stats: "ProcessingStats", dry_run: bool = False) -> None:
    """
    Display final processing summary.

    Args:
        stats: Statistics of the run.
        dry_run: Whether this was a dry run.
    """
    mode_text = "[dim](SIMULATION)[/dim]" if dry_run else ""

    console.rule(f"[bold green]Summary {mode_text}[/bold green]")
    table = console.create_table("Run", ["Item", "Count"])
    table.add_row("Channels", str(stats.channels))
    table.add_row("Seasons", str(stats.seasons))
    table.add_row("Videos", str(stats.videos))
    if dry_run:
        table.add_row("Planned operations", str(stats.simulated))
    else:
        table.add_row("Created", str(stats.created))
        table.add_row("Already present", str(stats.already_present))
    console.print_table(table)
