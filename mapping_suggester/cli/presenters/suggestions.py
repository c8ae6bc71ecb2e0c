from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

from ...domain.entities.mapping import MatchType

if TYPE_CHECKING:
    from rich.console import Console

    from ...domain.entities.mapping import MappingReport

_MATCH_STYLES: dict[MatchType, str] = {
    MatchType.EXACT: "green",
    MatchType.SNAKE_CASE: "cyan",
    MatchType.CAMEL_CASE: "cyan",
    MatchType.FUZZY: "yellow",
}


class SuggestionsPresenter:
    pass

    def __init__(self, console: Console) -> None:
        super().__init__()
        self.console = console

    def present(self, report: MappingReport, *, title: str | None = None) -> None:
        self.console.print()
        self.console.print(self._build_table(report, title=title))
        if report.unmapped_required_fields:
            self.console.print(
                "[bold red]Unmapped required fields:[/bold red] "
                + escape(", ".join(report.unmapped_required_fields))
            )
        optional = [
            field_id
            for field_id in report.unmapped_fields
            if field_id not in report.unmapped_required_fields
        ]
        if optional:
            self.console.print(
                "[yellow]Unmapped optional fields:[/yellow] "
                + escape(", ".join(optional))
            )
        if report.unused_columns:
            self.console.print(
                "[dim]Unused columns: "
                + escape(", ".join(report.unused_columns))
                + "[/dim]"
            )

    def _build_table(self, report: MappingReport, *, title: str | None) -> Table:
        table = Table(title=escape(title or "Mapping Suggestions"))
        table.add_column("Field", style="cyan")
        table.add_column("Column")
        table.add_column("Match")
        table.add_column("Confidence", justify="right")
        for suggestion in report.suggestions:
            style = _MATCH_STYLES[suggestion.match_type]
            table.add_row(
                escape(suggestion.target_field_id),
                escape(suggestion.source_column),
                f"[{style}]{suggestion.match_type.label}[/{style}]",
                f"{suggestion.confidence_percent}%",
            )
        return table
