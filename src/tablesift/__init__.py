"""TableSift — Server-side DataTables backed by search engines."""

from tablesift.adapters.base.adapter import AbstractAdapter, AdapterQuery, ResultSet
from tablesift.adapters.elasticsearch.adapter import ElasticsearchAdapter
from tablesift.columns import AbstractColumn, DateTimeColumn, TextColumn
from tablesift.datatable import DataTable
from tablesift.exceptions import (
    AdapterNotFoundError,
    ConfigurationError,
    DataTableError,
    DateTimeParseError,
    InvalidRequestError,
    MissingDependencyError,
)
from tablesift.models import DataTableResponse, DataTableState

__version__ = "0.1.0"

__all__ = [
    "AbstractAdapter",
    "AbstractColumn",
    "AdapterNotFoundError",
    "AdapterQuery",
    "ConfigurationError",
    "DataTable",
    "DataTableError",
    "DataTableResponse",
    "DataTableState",
    "DateTimeColumn",
    "DateTimeParseError",
    "ElasticsearchAdapter",
    "InvalidRequestError",
    "MissingDependencyError",
    "ResultSet",
    "TextColumn",
    "__version__",
]
