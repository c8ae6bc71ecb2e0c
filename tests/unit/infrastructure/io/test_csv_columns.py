"""Unit tests for CSVColumnReader."""

from pathlib import Path

import pytest

from mapping_suggester.application.ports.repositories import ColumnSourcePort
from mapping_suggester.infrastructure.io.csv_columns import (
    ColumnReadOptions,
    CSVColumnReader,
)
from mapping_suggester.infrastructure.io.exceptions import (
    DataParseError,
    DataSourceNotFoundError,
)


class TestCSVColumnReader:
    def test_implements_port(self):
        assert isinstance(CSVColumnReader(), ColumnSourcePort)

    def test_reads_header(self, tmp_path: Path):
        csv_file = tmp_path / "export.csv"
        csv_file.write_text("fname,lname,email\nAda,Lovelace,ada@example.com\n")

        assert CSVColumnReader().read_columns(csv_file) == ["fname", "lname", "email"]

    def test_header_only_file(self, tmp_path: Path):
        csv_file = tmp_path / "header.csv"
        csv_file.write_text("user_id,created_at\n")

        assert CSVColumnReader().read_columns(csv_file) == ["user_id", "created_at"]

    def test_strips_whitespace(self, tmp_path: Path):
        csv_file = tmp_path / "spaced.csv"
        csv_file.write_text(" First Name , Email \n")

        assert CSVColumnReader().read_columns(csv_file) == ["First Name", "Email"]

    def test_keeps_whitespace_when_disabled(self, tmp_path: Path):
        csv_file = tmp_path / "spaced.csv"
        csv_file.write_text(" a ,b\n")
        reader = CSVColumnReader(ColumnReadOptions(strip_headers=False))

        assert reader.read_columns(csv_file) == [" a ", "b"]

    def test_custom_delimiter(self, tmp_path: Path):
        csv_file = tmp_path / "export.tsv"
        csv_file.write_text("id\tname\n1\tx\n")
        reader = CSVColumnReader(ColumnReadOptions(delimiter="\t"))

        assert reader.read_columns(csv_file) == ["id", "name"]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(DataSourceNotFoundError, match="File not found"):
            CSVColumnReader().read_columns(tmp_path / "missing.csv")

    def test_directory_is_rejected(self, tmp_path: Path):
        with pytest.raises(DataSourceNotFoundError, match="Not a file"):
            CSVColumnReader().read_columns(tmp_path)

    def test_empty_file(self, tmp_path: Path):
        csv_file = tmp_path / "empty.csv"
        csv_file.write_text("")

        with pytest.raises(DataParseError, match="empty"):
            CSVColumnReader().read_columns(csv_file)
