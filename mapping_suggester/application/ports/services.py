from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities.mapping import MappingReport, MappingSuggestion


@runtime_checkable
class LoggerPort(Protocol):
    pass

    def info(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...

    def verbose(self, message: str) -> None: ...

    def log_shape_loaded(
        self, shape_id: str, field_count: int, required_count: int
    ) -> None: ...

    def log_columns_read(self, source_name: str, column_count: int) -> None: ...

    def log_mapping_start(self, field_count: int, column_count: int) -> None: ...

    def log_field_matched(self, suggestion: MappingSuggestion) -> None: ...

    def log_field_unmatched(self, field_id: str, *, required: bool) -> None: ...

    def log_mapping_summary(self, report: MappingReport) -> None: ...

    def log_final_stats(self) -> None: ...
