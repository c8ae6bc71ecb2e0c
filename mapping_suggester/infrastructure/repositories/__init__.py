"""Repository implementations for loading target shapes and saving reports."""

from .target_shape_repository import (
    MappingReportSaveError,
    MappingReportWriter,
    TargetShapeRepository,
    load_target_shape,
    save_mapping_report,
)

__all__ = [
    "MappingReportSaveError",
    "MappingReportWriter",
    "TargetShapeRepository",
    "load_target_shape",
    "save_mapping_report",
]
