"""Rich progress utilities."""

from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from oxdict.cli.utils.console import error_console


def create_lookup_spinner() -> Progress:
    """Create a transient spinner on stderr, so stdout only carries definitions."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=error_console,
        transient=True,
    )


def lookup_description(expression: str) -> str:
    return f"[info]Looking up[/] {escape(expression)}..."
