"""Application ports.

Protocols the application layer depends on; infrastructure provides the
concrete adapters.
"""

from .repositories import (
    ColumnSourcePort,
    MappingReportWriterPort,
    TargetShapeRepositoryPort,
)
from .services import LoggerPort

__all__ = [
    "ColumnSourcePort",
    "LoggerPort",
    "MappingReportWriterPort",
    "TargetShapeRepositoryPort",
]
