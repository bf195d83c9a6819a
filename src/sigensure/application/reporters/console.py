"""Console reporter: EnsureError → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sigensure.domain.exceptions import (
    ArgumentCountError,
    ArgumentTypeError,
    UnexpectedKeysError,
)

if TYPE_CHECKING:
    from sigensure.domain.exceptions import EnsureError


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        width: Console width in columns (must be positive).
        color: Emit ANSI styles. False = plain text.
        title: Header rule text.
    """

    width: int = 120
    color: bool = False
    title: str = "ENSURE FAILURE"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 1:
            raise ValueError(f"width must be >= 1, got {self.width}")


class ConsoleReporter:
    """Console reporter: renders one ensure failure.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    @property
    def config(self) -> ConsoleConfig:
        return self._config

    def report(self, error: EnsureError) -> str:
        """Format failure as rich formatted string.

        Args:
            error: Failure to format.

        Returns:
            Header, message, and a details table for structured failures.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        console.rule(f"[bold]{escape(self._config.title)}[/bold]")
        console.print(f"[bold red]{type(error).__name__}[/bold red]: {escape(error.message)}")

        details = self._details(error)
        if details:
            console.print(self._render_details(details))

        return output.getvalue()

    def _details(self, error: EnsureError) -> list[tuple[str, str]]:
        """Structured fields of the failure. Empty for plain assertion failures."""
        match error:
            case ArgumentTypeError():
                return [
                    ("argument", error.name),
                    ("expected", error.expected),
                    ("actual", error.actual),
                ]
            case ArgumentCountError():
                return [
                    ("expected", str(error.expected)),
                    ("got", str(error.got)),
                ]
            case UnexpectedKeysError():
                return [
                    ("argument", error.name),
                    ("unexpected", ", ".join(error.keys)),
                ]
        return []

    def _render_details(self, details: list[tuple[str, str]]) -> Table:
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column(style="dim")
        table.add_column()
        for label, value in details:
            table.add_row(label, escape(value))
        return table
