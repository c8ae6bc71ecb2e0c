from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from ...domain.entities.mapping import MappingReport
    from ...domain.entities.target_field import TargetShape


@runtime_checkable
class TargetShapeRepositoryPort(Protocol):
    pass

    def load_shape(self, path: str | Path) -> TargetShape: ...


@runtime_checkable
class ColumnSourcePort(Protocol):
    pass

    def read_columns(self, path: str | Path) -> list[str]: ...


@runtime_checkable
class MappingReportWriterPort(Protocol):
    pass

    def write_report(self, report: MappingReport, path: str | Path) -> Path: ...
