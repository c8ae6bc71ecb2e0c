from __future__ import annotations

from dataclasses import dataclass
import traceback
from typing import TYPE_CHECKING

from .models import SuggestMappingResponse

if TYPE_CHECKING:
    from ..domain.services.mapping.engine import MappingSuggestionEngine
    from .models import SuggestMappingRequest
    from .ports.repositories import (
        ColumnSourcePort,
        MappingReportWriterPort,
        TargetShapeRepositoryPort,
    )
    from .ports.services import LoggerPort

VERBOSE_TRACEBACK_LEVEL = 2


@dataclass(slots=True)
class SuggestMappingDependencies:
    logger: LoggerPort
    engine: MappingSuggestionEngine
    shape_repository: TargetShapeRepositoryPort
    column_source: ColumnSourcePort
    report_writer: MappingReportWriterPort | None = None


class SuggestMappingUseCase:
    """Load a target shape and import columns, then suggest a mapping.

    Columns come from ``request.columns`` when given, otherwise from the
    header of ``request.columns_path``. Failures are reported on the response
    instead of raised.
    """

    def __init__(self, dependencies: SuggestMappingDependencies) -> None:
        super().__init__()
        self.logger = dependencies.logger
        self._engine = dependencies.engine
        self._shape_repository = dependencies.shape_repository
        self._column_source = dependencies.column_source
        self._report_writer = dependencies.report_writer

    def execute(self, request: SuggestMappingRequest) -> SuggestMappingResponse:
        response = SuggestMappingResponse()
        try:
            shape = self._shape_repository.load_shape(request.shape_path)
            response.shape_id = shape.id
            self.logger.log_shape_loaded(
                shape.id, len(shape.fields), len(shape.required_fields)
            )
            columns = self._resolve_columns(request)
            response.columns = columns
            report = self._engine.build_report(columns, shape.fields)
            response.report = report
            if request.report_path is not None:
                if self._report_writer is None:
                    raise RuntimeError("No report writer configured")
                response.report_path = self._report_writer.write_report(
                    report, request.report_path
                )
                self.logger.success(f"Wrote mapping report to {response.report_path}")
            self.logger.log_final_stats()
        except Exception as exc:
            response.success = False
            response.error = str(exc)
            self.logger.error(str(exc))
            if request.verbose >= VERBOSE_TRACEBACK_LEVEL:
                self.logger.error(traceback.format_exc())
        return response

    def _resolve_columns(self, request: SuggestMappingRequest) -> list[str]:
        if request.columns:
            return list(request.columns)
        if request.columns_path is None:
            raise ValueError("No import columns given")
        columns = self._column_source.read_columns(request.columns_path)
        self.logger.log_columns_read(request.columns_path.name, len(columns))
        return columns
