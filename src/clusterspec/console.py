"""Rich console utilities for styled terminal output.

All status output goes to stderr so that stdout carries nothing but the
schema document when it is streamed there.
"""

from collections.abc import Generator
from contextlib import contextmanager

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.theme import Theme

# Custom theme with consistent colors
_THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        "highlight": "cyan bold",
        "muted": "dim",
    }
)

# Shared console instance
console = Console(theme=_THEME, stderr=True)


def info(message: str) -> None:
    """Print an informational message.

    Args:
        message: The message to display.

    """
    console.print(f"[info]ℹ[/info] {message}")


def success(message: str) -> None:
    """Print a success message.

    Args:
        message: The message to display.

    """
    console.print(f"[success]✓[/success] {message}")


def warning(message: str) -> None:
    """Print a warning message.

    The message is escaped, so refs and URLs that look like markup are
    shown verbatim.

    Args:
        message: The message to display.

    """
    console.print(f"[warning]⚠[/warning] {escape(message)}")


def error(message: str) -> None:
    """Print an error message.

    The message is escaped, so error text coming from servers or the
    filesystem is shown verbatim.

    Args:
        message: The message to display.

    """
    console.print(f"[error]✗[/error] {escape(message)}")


def action(message: str) -> None:
    """Print an action/progress message.

    Args:
        message: The message to display.

    """
    console.print(f"[info]→[/info] {message}")


def highlight(text: str) -> str:
    """Return text wrapped in highlight markup.

    Args:
        text: The text to highlight.

    Returns:
        Text wrapped in Rich markup for highlighting.

    """
    return f"[highlight]{escape(text)}[/highlight]"


@contextmanager
def spinner(message: str) -> Generator[None, None, None]:
    """Display a spinner while performing an operation.

    Args:
        message: The status message to display.

    Yields:
        None

    """
    with console.status(f"[info]{message}[/info]", spinner="dots"):
        yield


def summary_panel(title: str, items: dict[str, str]) -> None:
    """Print a summary panel with key-value pairs.

    Args:
        title: Title for the panel.
        items: Dictionary of label -> value pairs to display.

    """
    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column(style="cyan")

    for label, value in items.items():
        table.add_row(f"{label}:", escape(value))

    console.print(Panel(table, title=f"[bold]{title}[/bold]", border_style="green"))
