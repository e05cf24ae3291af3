# Cmdkit CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for cmdkit CLI applications."""
from rich.console import Console
from rich.theme import Theme

CMDKIT_THEME = Theme(
    {
        "cmdkit.title": "bold #81A1C1",
        "cmdkit.label": "#88C0D0",
        "cmdkit.command": "bold #A3BE8C",
        "cmdkit.dim": "#616E88",
        "cmdkit.error": "bold #BF616A",
    }
)

console = Console(color_system="truecolor", theme=CMDKIT_THEME)
