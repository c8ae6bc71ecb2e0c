from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.suggest_mapping_use_case import (
    SuggestMappingDependencies,
    SuggestMappingUseCase,
)
from ..config import MatcherConfig
from ..domain.services.mapping.engine import MappingSuggestionEngine
from ..domain.services.tokens.registry import create_default_registry
from .io.csv_columns import CSVColumnReader
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.target_shape_repository import (
    MappingReportWriter,
    TargetShapeRepository,
)

if TYPE_CHECKING:
    from ..application.ports.repositories import (
        ColumnSourcePort,
        MappingReportWriterPort,
        TargetShapeRepositoryPort,
    )
    from ..application.ports.services import LoggerPort
    from ..domain.services.tokens.registry import TokenBuilderRegistry


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config: MatcherConfig | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config = config or MatcherConfig()
        self._logger_instance: LoggerPort | None = None
        self._registry_instance: TokenBuilderRegistry | None = None
        self._engine_instance: MappingSuggestionEngine | None = None
        self._shape_repository_instance: TargetShapeRepositoryPort | None = None
        self._column_source_instance: ColumnSourcePort | None = None
        self._report_writer_instance: MappingReportWriterPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_registry(self) -> TokenBuilderRegistry:
        if self._registry_instance is None:
            self._registry_instance = create_default_registry()
        return self._registry_instance

    def create_engine(self) -> MappingSuggestionEngine:
        if self._engine_instance is None:
            self._engine_instance = MappingSuggestionEngine(
                self.create_registry(),
                config=self.config,
                logger=self.create_logger(),
            )
        return self._engine_instance

    def create_shape_repository(self) -> TargetShapeRepositoryPort:
        if self._shape_repository_instance is None:
            self._shape_repository_instance = TargetShapeRepository()
        return self._shape_repository_instance

    def create_column_source(self) -> ColumnSourcePort:
        if self._column_source_instance is None:
            self._column_source_instance = CSVColumnReader()
        return self._column_source_instance

    def create_report_writer(self) -> MappingReportWriterPort:
        if self._report_writer_instance is None:
            self._report_writer_instance = MappingReportWriter()
        return self._report_writer_instance

    def create_suggest_mapping_use_case(self) -> SuggestMappingUseCase:
        dependencies = SuggestMappingDependencies(
            logger=self.create_logger(),
            engine=self.create_engine(),
            shape_repository=self.create_shape_repository(),
            column_source=self.create_column_source(),
            report_writer=self.create_report_writer(),
        )
        return SuggestMappingUseCase(dependencies)

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._registry_instance = None
        self._engine_instance = None
        self._shape_repository_instance = None
        self._column_source_instance = None
        self._report_writer_instance = None

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_registry(self, registry: TokenBuilderRegistry) -> None:
        self._registry_instance = registry
        self._engine_instance = None


def create_default_container(verbose: int = 0) -> DependencyContainer:
    return DependencyContainer(verbose=verbose)
