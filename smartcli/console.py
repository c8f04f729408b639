# SmartCLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for SmartCLI output."""
from rich.console import Console

from smartcli.themes import get_one_theme

console = Console(color_system="truecolor", theme=get_one_theme())
error_console = Console(color_system="truecolor", theme=get_one_theme(), stderr=True)
