from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

from ...domain.entities.target_field import TargetShape
from ..io.exceptions import DataParseError, DataSourceNotFoundError, TargetShapeLoadError

if TYPE_CHECKING:
    from ...domain.entities.mapping import MappingReport


class MappingReportSaveError(DataParseError):
    pass


def load_target_shape(path: str | Path) -> TargetShape:
    """Load a target shape from a JSON file.

    The document is either a shape object with a ``fields`` list, or a bare
    list of field objects, in which case the file stem becomes the shape id
    and name.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise DataSourceNotFoundError(f"Target shape not found: {file_path}")
    try:
        with file_path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        if isinstance(data, list):
            data = {"id": file_path.stem, "name": file_path.stem, "fields": data}
        return TargetShape.model_validate(data)
    except json.JSONDecodeError as exc:
        raise TargetShapeLoadError(f"Invalid JSON in {file_path}: {exc}") from exc
    except ValidationError as exc:
        raise TargetShapeLoadError(
            f"Invalid target shape in {file_path}: {exc}"
        ) from exc
    except OSError as exc:
        raise TargetShapeLoadError(f"Failed to read {file_path}: {exc}") from exc


def save_mapping_report(report: MappingReport, path: str | Path) -> Path:
    file_path = Path(path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with file_path.open("w", encoding="utf-8") as handle:
            json.dump(report.to_dict(), handle, indent=2)
    except OSError as exc:
        raise MappingReportSaveError(f"Failed to save mapping report: {exc}") from exc
    return file_path


class TargetShapeRepository:
    pass

    def load_shape(self, path: str | Path) -> TargetShape:
        return load_target_shape(path)


class MappingReportWriter:
    pass

    def write_report(self, report: MappingReport, path: str | Path) -> Path:
        return save_mapping_report(report, path)
