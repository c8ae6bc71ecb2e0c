from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from .exceptions import DataParseError, DataSourceNotFoundError


@dataclass(slots=True)
class ColumnReadOptions:
    strip_headers: bool = True
    encoding: str = "utf-8"
    delimiter: str = ","


class CSVColumnReader:
    """Read the header row of a delimited file as import column names."""

    def __init__(self, options: ColumnReadOptions | None = None) -> None:
        super().__init__()
        self.options = options or ColumnReadOptions()

    def read_columns(self, path: str | Path) -> list[str]:
        file_path = Path(path)
        if not file_path.exists():
            raise DataSourceNotFoundError(f"File not found: {file_path}")
        if not file_path.is_file():
            raise DataSourceNotFoundError(f"Not a file: {file_path}")
        try:
            # Header only, no rows are parsed
            frame = pd.read_csv(
                file_path,
                nrows=0,
                dtype=str,
                sep=self.options.delimiter,
                encoding=self.options.encoding,
            )
        except pd.errors.EmptyDataError as e:
            raise DataParseError(f"CSV file is empty: {file_path}") from e
        except pd.errors.ParserError as e:
            raise DataParseError(f"Failed to parse CSV {file_path}: {e}") from e
        except UnicodeDecodeError as e:
            raise DataParseError(
                f"Encoding error reading {file_path}. Try a different encoding: {e}"
            ) from e
        columns = [str(col) for col in frame.columns]
        if self.options.strip_headers:
            columns = [col.strip() for col in columns]
        if not columns:
            raise DataParseError(f"CSV file has no columns: {file_path}")
        return columns
