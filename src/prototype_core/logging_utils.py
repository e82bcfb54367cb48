# src/prototype_core/logging_utils.py

from datetime import datetime

from rich.console import Console
from rich.text import Text

console = Console()


class PrototypeLogger:
    """Timestamped console logger for CLI commands."""

    def __init__(self, command_name: str):
        self.command_name = command_name
        self.console = console

    def _get_timestamp(self) -> str:
        return datetime.now().strftime("%H:%M:%S")

    def _line(self, label: str, label_style: str, message: str, message_style: str = ""):
        text = Text()
        text.append(f"{self._get_timestamp()} ", style="dim")
        if label:
            text.append(f"{label} ", style=label_style)
        text.append(message, style=message_style)
        self.console.print(text)

    def info(self, message: str, prefix: str = ""):
        self._line(prefix, "cyan", message)

    def success(self, message: str):
        """Logs a success message (green)."""
        self._line("OK", "bold green", message)

    def error(self, message: str):
        """Logs an error (red)."""
        self._line("ERROR", "bold red", message, "red")

    def product(self, rendered: str, title: str = ""):
        """Prints a rendered product block, optionally under a title."""
        if title:
            self.console.print(f"[bold]{title}[/bold]")
        self.console.print(rendered, markup=False, highlight=False)
