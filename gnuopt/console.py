# gnuopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for gnuopt command-line output."""
from rich.console import Console
from rich.theme import Theme

theme = Theme(
    {
        "error": "bold #BF616A",
        "option": "#88C0D0",
        "value": "#A3BE8C",
        "muted": "#4C566A",
    }
)

console = Console(theme=theme, highlight=False, emoji=False)
error_console = Console(theme=theme, stderr=True, highlight=False, emoji=False)
