"""Console reporter: Selector → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from selectorkit.domain.model.category import Category

if TYPE_CHECKING:
    from selectorkit.domain.model.selector_parts import SelectorParts
    from selectorkit.presentation.api.builder import Selector


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        width: Console width in columns (must be >= 20).
        show_empty: Show rows for categories without fragments.
        title: Header rule title (must not be empty).
    """

    width: int = 100
    show_empty: bool = False
    title: str = "SELECTOR"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")
        if not self.title:
            raise ValueError("title must not be empty")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, selector: Selector) -> str:
        """Format selector as rich formatted string.

        Args:
            selector: Selector to describe (not consumed).

        Returns:
            Formatted string with header and fragment table.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=True,
            width=self._config.width,
            highlight=False,
        )
        parts = selector.parts

        console.print()
        console.rule(f"[bold]{escape(self._config.title)}[/bold]")
        console.print()
        console.print(f"[bold]Rendered:[/bold] {escape(repr(parts.render()))}")
        console.print()

        if parts.combined is not None:
            console.print("[dim]combined selector, fragments not tracked[/dim]")
        elif parts.is_empty and not self._config.show_empty:
            console.print("[dim]empty selector[/dim]")
        else:
            console.print(self._build_table(parts))

        return output.getvalue()

    def _build_table(self, parts: SelectorParts) -> Table:
        """Build category/fragment table."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("Rank", justify="right")
        table.add_column("Category", style="cyan")
        table.add_column("Fragment", style="green")

        for category in Category:
            values = parts.fragments(category)
            if not values and not self._config.show_empty:
                continue
            rendered = "".join(category.render(v) for v in values)
            table.add_row(str(category.rank), category.label, escape(rendered) or "-")

        return table
