"""Tests for SuggestMappingUseCase."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mapping_suggester.application import (
    SuggestMappingDependencies,
    SuggestMappingRequest,
    SuggestMappingUseCase,
)
from mapping_suggester.domain.services.mapping import MappingSuggestionEngine
from mapping_suggester.infrastructure.io.csv_columns import CSVColumnReader
from mapping_suggester.infrastructure.logging import NullLogger
from mapping_suggester.infrastructure.repositories import (
    MappingReportWriter,
    TargetShapeRepository,
)


class RecordingLogger(NullLogger):
    """NullLogger that keeps error messages and lifecycle calls."""

    def __init__(self) -> None:
        super().__init__()
        self.errors: list[str] = []
        self.events: list[tuple[object, ...]] = []

    def error(self, message: str) -> None:
        self.errors.append(message)

    def log_shape_loaded(
        self, shape_id: str, field_count: int, required_count: int
    ) -> None:
        self.events.append(("shape", shape_id, field_count, required_count))

    def log_columns_read(self, source_name: str, column_count: int) -> None:
        self.events.append(("columns", source_name, column_count))

    def log_final_stats(self) -> None:
        self.events.append(("final_stats",))


@pytest.fixture
def shape_path(tmp_path: Path) -> Path:
    path = tmp_path / "contacts.json"
    path.write_text(
        json.dumps(
            {
                "id": "contacts",
                "name": "Contacts",
                "fields": [
                    {"id": "firstName", "name": "First Name", "required": True},
                    {"id": "email", "name": "Email", "type": "email", "required": True},
                    {"id": "phone", "name": "Phone", "type": "phone", "required": True},
                ],
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def use_case(logger: RecordingLogger) -> SuggestMappingUseCase:
    return SuggestMappingUseCase(
        SuggestMappingDependencies(
            logger=logger,
            engine=MappingSuggestionEngine(),
            shape_repository=TargetShapeRepository(),
            column_source=CSVColumnReader(),
            report_writer=MappingReportWriter(),
        )
    )


class TestSuggestMappingUseCase:
    def test_explicit_columns(self, use_case: SuggestMappingUseCase, shape_path: Path):
        response = use_case.execute(
            SuggestMappingRequest(
                shape_path=shape_path, columns=["first_name", "email", "extra"]
            )
        )

        assert response.success
        assert response.shape_id == "contacts"
        assert response.report is not None
        assert response.report.mapping == {"firstName": "first_name", "email": "email"}
        assert response.report.unmapped_required_fields == ["phone"]
        assert response.report.unused_columns == ["extra"]
        assert response.can_apply is False

    def test_columns_from_csv(
        self, use_case: SuggestMappingUseCase, shape_path: Path, tmp_path: Path
    ):
        csv_path = tmp_path / "export.csv"
        csv_path.write_text("fname,tel,mail\n")

        response = use_case.execute(
            SuggestMappingRequest(shape_path=shape_path, columns_path=csv_path)
        )

        assert response.success
        assert response.columns == ["fname", "tel", "mail"]
        assert response.report is not None
        assert response.report.mapping == {
            "firstName": "fname",
            "email": "mail",
            "phone": "tel",
        }
        assert response.can_apply is True

    def test_writes_report(
        self, use_case: SuggestMappingUseCase, shape_path: Path, tmp_path: Path
    ):
        report_path = tmp_path / "reports" / "mapping.json"

        response = use_case.execute(
            SuggestMappingRequest(
                shape_path=shape_path, columns=["fname"], report_path=report_path
            )
        )

        assert response.report_path == report_path
        data = json.loads(report_path.read_text(encoding="utf-8"))
        assert data["mapping"] == {"firstName": "fname"}

    def test_missing_shape_is_reported(
        self,
        use_case: SuggestMappingUseCase,
        logger: RecordingLogger,
        tmp_path: Path,
    ):
        response = use_case.execute(
            SuggestMappingRequest(shape_path=tmp_path / "missing.json", columns=["a"])
        )

        assert response.success is False
        assert response.report is None
        assert "Target shape not found" in (response.error or "")
        assert logger.errors

    def test_no_columns_is_reported(
        self, use_case: SuggestMappingUseCase, shape_path: Path
    ):
        response = use_case.execute(SuggestMappingRequest(shape_path=shape_path))

        assert response.success is False
        assert response.error == "No import columns given"

    def test_to_dict(self, use_case: SuggestMappingUseCase, shape_path: Path):
        response = use_case.execute(
            SuggestMappingRequest(shape_path=shape_path, columns=["email"])
        )

        data = response.to_dict()

        assert data["shape_id"] == "contacts"
        assert data["columns"] == ["email"]
        assert data["mapping"] == {"email": "email"}
        assert data["can_apply"] is False

    def test_logs_shape_columns_and_final_stats(
        self,
        use_case: SuggestMappingUseCase,
        logger: RecordingLogger,
        shape_path: Path,
        tmp_path: Path,
    ):
        csv_path = tmp_path / "export.csv"
        csv_path.write_text("fname,tel\n")

        use_case.execute(
            SuggestMappingRequest(shape_path=shape_path, columns_path=csv_path)
        )

        assert logger.events == [
            ("shape", "contacts", 3, 3),
            ("columns", "export.csv", 2),
            ("final_stats",),
        ]

    def test_final_stats_skipped_on_failure(
        self,
        use_case: SuggestMappingUseCase,
        logger: RecordingLogger,
        shape_path: Path,
    ):
        use_case.execute(SuggestMappingRequest(shape_path=shape_path))

        assert ("final_stats",) not in logger.events
