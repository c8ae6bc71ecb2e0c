"""Infrastructure I/O layer.

Adapters for reading import column headers and the exception hierarchy
shared by the infrastructure packages.
"""

from .csv_columns import ColumnReadOptions, CSVColumnReader
from .exceptions import (
    DataParseError,
    DataSourceError,
    DataSourceNotFoundError,
    MappingSuggesterInfrastructureError,
    TargetShapeLoadError,
)

__all__ = [
    "CSVColumnReader",
    "ColumnReadOptions",
    "DataParseError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "MappingSuggesterInfrastructureError",
    "TargetShapeLoadError",
]
