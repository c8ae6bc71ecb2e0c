from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..domain.entities.mapping import MappingReport


def _empty_str_list() -> list[str]:
    return []


@dataclass(slots=True)
class SuggestMappingRequest:
    shape_path: Path
    columns: list[str] = field(default_factory=_empty_str_list)
    columns_path: Path | None = None
    report_path: Path | None = None
    verbose: int = 0


@dataclass(slots=True)
class SuggestMappingResponse:
    success: bool = True
    shape_id: str = ""
    columns: list[str] = field(default_factory=_empty_str_list)
    report: MappingReport | None = None
    report_path: Path | None = None
    error: str | None = None

    @property
    def can_apply(self) -> bool:
        return self.report is not None and self.report.can_apply

    def to_dict(self) -> dict[str, object]:
        result: dict[str, object] = {
            "shape_id": self.shape_id,
            "columns": list(self.columns),
        }
        if self.report is not None:
            result.update(self.report.to_dict())
        if self.report_path is not None:
            result["report_path"] = str(self.report_path)
        return result
