"""
Rich terminal output utilities for the docfix CLI.

Provides headers, status lines and tables. Plain mode prints the same
content without colors or markup.
"""

from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table


class RichOutputManager:
    """Manages rich terminal output with a plain-text mode."""

    def __init__(self, use_rich: bool = True):
        """Initialize the output manager."""
        self.use_rich = use_rich
        if use_rich:
            self.console = Console(highlight=False)
        else:
            self.console = Console(
                markup=False, highlight=False, no_color=True, emoji=False, soft_wrap=True
            )

    def print_header(self, title: str, subtitle: Optional[str] = None) -> None:
        """Print a formatted header."""
        if self.use_rich:
            if subtitle:
                header_text = f"[bold blue]{escape(title)}[/bold blue]\n[dim]{escape(subtitle)}[/dim]"
            else:
                header_text = f"[bold blue]{escape(title)}[/bold blue]"

            self.console.print(Panel(header_text, border_style="blue", padding=(0, 2)))
        else:
            self.console.print(f"=== {title} ===")
            if subtitle:
                self.console.print(subtitle)

    def print_success(self, message: str) -> None:
        if self.use_rich:
            self.console.print(f"[green]✓[/green] {escape(message)}")
        else:
            self.console.print(f"✓ {message}")

    def print_warning(self, message: str) -> None:
        if self.use_rich:
            self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")
        else:
            self.console.print(f"⚠ {message}")

    def print_error(self, message: str) -> None:
        if self.use_rich:
            self.console.print(f"[red]✗[/red] {escape(message)}")
        else:
            self.console.print(f"✗ {message}")

    def print_info(self, message: str) -> None:
        if self.use_rich:
            self.console.print(f"[blue]ℹ[/blue] {escape(message)}")
        else:
            self.console.print(f"ℹ {message}")

    def print_changed_file(self, relative_path: str, changed_lines: List[tuple]) -> None:
        """Print a changed file's path followed by its old and new lines."""
        if self.use_rich:
            self.console.print(f"[bold]{escape(relative_path)}[/bold]")
            for old, new in changed_lines:
                if old:
                    self.console.print(f"[red]{escape(old)}[/red]")
                if new:
                    self.console.print(f"[green]{escape(new)}[/green]")
        else:
            self.console.print(relative_path)
            for old, new in changed_lines:
                if old:
                    self.console.print(old)
                if new:
                    self.console.print(new)

    def print_key_values(self, title: str, values: Dict[str, Any]) -> None:
        """Print a two-column table of names and values."""
        if self.use_rich:
            table = Table(title=title, show_header=True, header_style="bold blue")
            table.add_column("Field")
            table.add_column("Value")
            for key, value in values.items():
                table.add_row(escape(str(key)), escape(str(value)))
            self.console.print(table)
        else:
            self.console.print(title)
            self.console.print("-" * len(title))
            width = max((len(str(key)) for key in values), default=0)
            for key, value in values.items():
                self.console.print(f"{str(key).ljust(width)}  {value}")


# Global instance
rich_output = RichOutputManager()


def set_rich_enabled(enabled: bool) -> None:
    """Enable or disable rich output globally."""
    global rich_output
    rich_output = RichOutputManager(use_rich=enabled)


def get_rich_output() -> RichOutputManager:
    """Get the global rich output manager."""
    return rich_output
