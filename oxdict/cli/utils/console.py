"""Rich console configuration and helpers."""

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from oxdict.errors import OxdictError

custom_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red bold",
        "hint": "dim",
    }
)

# Main console for the rendered definitions
console = Console(theme=custom_theme)

# Error console for stderr
error_console = Console(theme=custom_theme, stderr=True)


def print_error(error: OxdictError) -> None:
    """Print a lookup error framed by warning signs on stderr."""
    error_console.print("[warning]⚠[/]")
    error_console.print(f"[error]{escape(error.message)}[/]")
    if error.hint:
        error_console.print(f"[hint]{escape(error.hint)}[/]")
    error_console.print("[warning]⚠[/]")
