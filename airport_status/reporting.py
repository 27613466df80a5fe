"""
Console output for the airport status runners.

All user-facing lines go through a rich Console so tests can capture them by
handing in a Console that writes to a buffer.
"""

from typing import Optional

from rich import box
from rich.console import Console
from rich.panel import Panel

from .models.airport import AirportModel

ROW_FORMAT = "{:<10}{:<20}{:<10}"
DEFAULT_PREFIX_LENGTH = 29


def truncate_message(message: Optional[str], length: int = DEFAULT_PREFIX_LENGTH) -> str:
    """Return at most the first `length` characters of an error message."""
    if not message:
        return ""
    return message[:max(length, 0)]


class StatusReporter:
    """Formats and prints runner output."""

    def __init__(self, console: Optional[Console] = None, prefix_length: int = DEFAULT_PREFIX_LENGTH):
        self.console = console or Console()
        self.prefix_length = prefix_length

    def _line(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def section(self, title: str) -> None:
        """Print a formatted section header."""
        self.console.print()
        self.console.print(Panel(f"[bold cyan]{title}[/bold cyan]", box=box.DOUBLE))

    def header(self) -> None:
        self._line(ROW_FORMAT.format("Code", "Temperature", "Delay"))

    def row(self, airport: AirportModel) -> None:
        self._line(ROW_FORMAT.format(
            airport.code,
            str(airport.weather.first_temperature),
            str(airport.delayed).lower(),
        ))

    def elapsed(self, elapsed_ms: int) -> None:
        self._line(f"Total taken time : {elapsed_ms} milliseconds")

    def delay(self, airport: AirportModel) -> None:
        """Status line printed by a fire-and-forget task."""
        self._line(f"{airport.code} delay: {str(airport.delayed).lower()}")

    def status(self, airport: AirportModel) -> None:
        """Status line printed when a task result is retrieved."""
        self._line(f"{airport.code} {str(airport.delayed).lower()}")

    def task_flag(self, code: str, failed: bool) -> None:
        self._line(f"{code} cancelled: {str(failed).lower()}")

    def caught(self, code: str, error: BaseException) -> str:
        """
        Failure handler for fire-and-forget tasks.

        Returns:
            str: The truncated message that was printed
        """
        message = truncate_message(str(error), self.prefix_length)
        self._line(f"Caught: {code} {message}")
        return message

    def error(self, error: BaseException) -> str:
        """
        Print a failure recovered at the point a task result was retrieved.

        Returns:
            str: The truncated message that was printed
        """
        message = truncate_message(str(error), self.prefix_length)
        self._line(f"Error: {message}")
        return message
