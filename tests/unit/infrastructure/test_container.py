"""Tests for dependency injection container.

These tests verify the container creates and wires up dependencies,
including singleton reuse, configuration injection and testing overrides.
"""

import pytest
from rich.console import Console

from mapping_suggester.application import SuggestMappingUseCase
from mapping_suggester.application.ports import LoggerPort
from mapping_suggester.config import MatcherConfig
from mapping_suggester.domain.services.tokens import (
    GenericTokenBuilder,
    TokenBuilderRegistry,
)
from mapping_suggester.infrastructure.container import (
    DependencyContainer,
    create_default_container,
)
from mapping_suggester.infrastructure.io.csv_columns import CSVColumnReader
from mapping_suggester.infrastructure.logging import ConsoleLogger, NullLogger


class TestDependencyContainer:
    """Tests for DependencyContainer class."""

    @pytest.fixture
    def container(self) -> DependencyContainer:
        return DependencyContainer(use_null_logger=True)

    def test_console_logger_by_default(self):
        container = DependencyContainer(verbose=2, console=Console())

        logger = container.create_logger()

        assert isinstance(logger, ConsoleLogger)
        assert logger.verbosity == 2
        assert isinstance(logger, LoggerPort)

    def test_null_logger(self, container: DependencyContainer):
        assert isinstance(container.create_logger(), NullLogger)

    def test_singletons_are_reused(self, container: DependencyContainer):
        assert container.create_logger() is container.create_logger()
        assert container.create_registry() is container.create_registry()
        assert container.create_engine() is container.create_engine()
        assert container.create_column_source() is container.create_column_source()

    def test_engine_uses_container_config(self):
        config = MatcherConfig(fuzzy_threshold=0.8)
        container = DependencyContainer(use_null_logger=True, config=config)

        assert container.create_engine().config is config

    def test_engine_uses_container_registry(self, container: DependencyContainer):
        assert container.create_engine().registry is container.create_registry()

    def test_override_registry_rebuilds_engine(self, container: DependencyContainer):
        engine = container.create_engine()
        registry = TokenBuilderRegistry([GenericTokenBuilder()])

        container.override_registry(registry)

        assert container.create_engine() is not engine
        assert container.create_engine().registry is registry

    def test_override_logger(self, container: DependencyContainer):
        logger = NullLogger()
        container.override_logger(logger)

        assert container.create_logger() is logger

    def test_reset_singletons(self, container: DependencyContainer):
        column_source = container.create_column_source()
        container.reset_singletons()

        assert container.create_column_source() is not column_source
        assert isinstance(container.create_column_source(), CSVColumnReader)

    def test_use_case(self, container: DependencyContainer):
        assert isinstance(
            container.create_suggest_mapping_use_case(), SuggestMappingUseCase
        )

    def test_create_default_container(self):
        container = create_default_container(verbose=1)

        assert container.verbose == 1
        assert container.config == MatcherConfig()
