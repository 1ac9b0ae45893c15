"""Console UI wrapper using Rich library."""

from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from seasonize.pipeline.exceptions import SeasonizeError


class ConsoleUI:
    """
    Styled output for run reports.

    Message text is printed literally: yt-dlp names files like
    ``Title [id].info.json`` and brackets must not be read as markup.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """
        Args:
            console: Rich Console to write to (a new one when None).
        """
        self.console = console if console is not None else Console()

    def print(self, *args, **kwargs) -> None:
        """Print to console (delegates to Rich Console, markup allowed)."""
        self.console.print(*args, **kwargs)

    def rule(self, title: str = "", **kwargs) -> None:
        """Print a horizontal rule with optional title."""
        self.console.rule(title, **kwargs)

    def _message(self, style: str, icon: str, message: str) -> None:
        self.console.print(f"[{style}]{icon} {escape(message)}[/{style}]")

    def print_info(self, message: str) -> None:
        self._message("blue", "ℹ️ ", message)

    def print_warning(self, message: str) -> None:
        self._message("yellow", "⚠️ ", message)

    def print_error(self, message: str) -> None:
        self._message("red", "❌", message)

    def print_success(self, message: str) -> None:
        self._message("green", "✓", message)

    def print_failure(self, error: "SeasonizeError") -> None:
        """
        Report the error that stopped a run, with the path involved.

        Args:
            error: Terminal error of the pipeline.
        """
        self.print_error(str(error))
        path = getattr(error, "path", None)
        if path is None and getattr(error, "result", None) is not None:
            path = error.result.path
        if path is not None:
            self.console.print(f"   [dim]at[/dim] [bold]{escape(str(path))}[/bold]")

    def print_settings(
        self,
        title: str,
        rows: Sequence[Tuple[str, object]],
        mode: str = "",
        border_style: str = "blue"
    ) -> None:
        """
        Print run settings as a bordered panel.

        Args:
            title: Panel title.
            rows: (label, value) pairs; values are shown literally.
            mode: Markup describing the run mode, appended last.
            border_style: Border color/style.
        """
        lines = [f"{label}: [cyan]{escape(str(value))}[/cyan]" for label, value in rows]
        if mode:
            lines.append(f"Mode: {mode}")
        self.console.print(Panel("\n".join(lines), title=title, border_style=border_style))

    def create_table(
        self,
        title: str,
        columns: Optional[List[str]] = None
    ) -> Table:
        """
        Create a Rich Table with optional columns.

        Args:
            title: Table title.
            columns: List of column headers.

        Returns:
            Rich Table instance.
        """
        table = Table(title=title, show_header=True, header_style="bold magenta")
        for col in columns or []:
            table.add_column(col)
        return table

    def print_table(self, table: Table) -> None:
        self.console.print(table)


# Global console instance shared by the display functions
console = ConsoleUI()
