from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import TYPE_CHECKING, override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...domain.entities.mapping import MappingReport, MappingSuggestion


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


@dataclass(slots=True)
class LogContext:
    shape_id: str = ""
    source_name: str = ""


class ConsoleLogger(LoggerPort):
    """Rich console logger.

    Messages are plain text: field ids, column names and file names are
    printed as given, never interpreted as rich markup.
    """

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console()
        self.verbosity = verbosity
        self._context: LogContext | None = None
        self._stats: dict[str, int] = self._empty_stats()

    def set_context(self, **kwargs: str) -> None:
        if self._context is None:
            self._context = LogContext()
        for key, value in kwargs.items():
            if hasattr(self._context, key):
                setattr(self._context, key, value)

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            prefix = self._get_prefix()
            self.console.print(f"{prefix}{escape(message)}")

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            prefix = self._get_prefix()
            self.console.print(f"[dim]{prefix}{escape(message)}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            prefix = self._get_prefix()
            self.console.print(f"[dim cyan]{prefix}{escape(message)}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {escape(message)}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {escape(message)}")

    @override
    def log_shape_loaded(
        self, shape_id: str, field_count: int, required_count: int
    ) -> None:
        self.set_context(shape_id=shape_id)
        self.verbose(
            f"Loaded target shape {shape_id} "
            f"({field_count} fields, {required_count} required)"
        )

    @override
    def log_columns_read(self, source_name: str, column_count: int) -> None:
        self.set_context(source_name=source_name)
        self.verbose(f"Read {column_count} columns from {source_name}")

    @override
    def log_mapping_start(self, field_count: int, column_count: int) -> None:
        self._stats["fields_processed"] += field_count
        self.verbose(f"Matching {field_count} fields against {column_count} columns")

    @override
    def log_field_matched(self, suggestion: MappingSuggestion) -> None:
        self._stats["fields_matched"] += 1
        self.verbose(
            f"  {suggestion.target_field_id} → {suggestion.source_column} "
            f"({suggestion.match_type.label}, {suggestion.confidence:.1%})"
        )

    @override
    def log_field_unmatched(self, field_id: str, *, required: bool) -> None:
        if required:
            self._stats["required_unmatched"] += 1
            self.debug(f"  No column found for required field {field_id}")
        else:
            self.debug(f"  No column found for {field_id}")

    @override
    def log_mapping_summary(self, report: MappingReport) -> None:
        mapped = len(report.suggestions)
        total = mapped + len(report.unmapped_fields)
        self.info(f"Mapped {mapped} of {total} fields")
        if report.unmapped_required_fields:
            missing = ", ".join(report.unmapped_required_fields)
            self.warning(f"Required fields without a column: {missing}")
        if report.unused_columns:
            self.verbose(f"Unused columns: {', '.join(report.unused_columns)}")

    @override
    def log_final_stats(self) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print()
            self.console.print("[dim]Matching Statistics:[/dim]")
            self.console.print(
                f"[dim]  Fields processed: {self._stats['fields_processed']}[/dim]"
            )
            self.console.print(
                f"[dim]  Fields matched: {self._stats['fields_matched']}[/dim]"
            )
            if self._stats["required_unmatched"] > 0:
                self.console.print(
                    "[dim yellow]  Required fields unmatched: "
                    f"{self._stats['required_unmatched']}[/dim yellow]"
                )
            if self._stats["warnings"] > 0:
                self.console.print(
                    f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
                )
            if self._stats["errors"] > 0:
                self.console.print(
                    f"[dim red]  Errors: {self._stats['errors']}[/dim red]"
                )

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    @staticmethod
    def _empty_stats() -> dict[str, int]:
        return {
            "fields_processed": 0,
            "fields_matched": 0,
            "required_unmatched": 0,
            "warnings": 0,
            "errors": 0,
        }

    def _get_prefix(self) -> str:
        if self._context is None or self.verbosity < LogLevel.DEBUG:
            return ""
        parts = [p for p in (self._context.shape_id, self._context.source_name) if p]
        return escape(f"[{':'.join(parts)}] ") if parts else ""
