from __future__ import annotations

from typing import TYPE_CHECKING, override

from ...application.ports.services import LoggerPort

if TYPE_CHECKING:
    from ...domain.entities.mapping import MappingReport, MappingSuggestion


class NullLogger(LoggerPort):
    pass

    @override
    def info(self, message: str) -> None:
        return

    @override
    def success(self, message: str) -> None:
        return

    @override
    def warning(self, message: str) -> None:
        return

    @override
    def error(self, message: str) -> None:
        return

    @override
    def debug(self, message: str) -> None:
        return

    @override
    def verbose(self, message: str) -> None:
        return

    @override
    def log_shape_loaded(
        self, shape_id: str, field_count: int, required_count: int
    ) -> None:
        return

    @override
    def log_columns_read(self, source_name: str, column_count: int) -> None:
        return

    @override
    def log_mapping_start(self, field_count: int, column_count: int) -> None:
        return

    @override
    def log_field_matched(self, suggestion: MappingSuggestion) -> None:
        return

    @override
    def log_field_unmatched(self, field_id: str, *, required: bool) -> None:
        return

    @override
    def log_mapping_summary(self, report: MappingReport) -> None:
        return

    @override
    def log_final_stats(self) -> None:
        return
