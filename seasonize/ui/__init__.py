"""User interface components."""

from seasonize.ui.console import ConsoleUI, console
from seasonize.ui.display import (
    format_video_count,
    generate_channel_tree,
    display_structures,
    display_summary,
)

__all__ = [
    "ConsoleUI",
    "console",
    "format_video_count",
    "generate_channel_tree",
    "display_structures",
    "display_summary",
]
