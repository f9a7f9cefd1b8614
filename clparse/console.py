# clparse Command-Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for clparse output.

`console` receives help and version text, `error_console` receives diagnostics.
"""
from rich.console import Console
from rich.theme import Theme

clparse_theme = Theme(
    {
        "clparse.error": "bold red",
        "clparse.option": "cyan",
        "clparse.value": "green",
        "clparse.unset": "dim",
    }
)

console = Console(theme=clparse_theme)
error_console = Console(stderr=True, theme=clparse_theme)
