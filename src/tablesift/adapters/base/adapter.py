"""Base data table adapter — Abstract interface for all data sources.

Every data source must implement this interface to feed a DataTable.
The adapter is responsible for:
  1. Validating its configuration options
  2. Preparing a per-request query context (clients, field defaults)
  3. Mapping columns to paths inside the raw result rows
  4. Executing the query and reporting total and filtered counts

``get_data()`` drives these steps and turns raw rows into table rows.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from tablesift.columns.base import Column
from tablesift.models.state import DataTableState

RowTransformer = Callable[[dict[str, Any], Mapping[str, Any]], dict[str, Any]]
"""Table-level hook ``(row, raw_result) -> row`` applied after column mapping."""


class AdapterQuery:
    """Scratch object for a single table request.

    Holds the state, arbitrary per-request values (such as a search
    client) and the row counts filled in by ``get_results()``.
    """

    def __init__(self, state: DataTableState) -> None:
        self.state = state
        self.total_rows: int | None = None
        self.filtered_rows: int | None = None
        self._values: dict[str, Any] = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value


class ResultSet:
    """Counts and lazily produced rows of one table request.

    Rows can be iterated once; iterate again by calling ``get_data()``
    again.
    """

    def __init__(self, rows: Iterator[dict[str, Any]], total_records: int, total_displayed_records: int) -> None:
        self._rows = rows
        self.total_records = total_records
        self.total_displayed_records = total_displayed_records

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return self._rows


class AbstractAdapter(ABC):
    """Abstract base class for data table adapters.

    All adapters must implement:
      - configure(): Validate and store adapter options
      - prepare_query(): Set up the query context before execution
      - map_property_path(): Locate a column's value in a raw row
      - get_results(): Execute the query, fill counts, return raw rows

    Adapters hold configuration only; everything request-specific
    lives on the ``AdapterQuery``.
    """

    @abstractmethod
    def configure(self, options: Mapping[str, Any]) -> None:
        """Validate and store adapter options.

        Raises:
            ConfigurationError: If the options are missing or malformed.
        """

    @abstractmethod
    def prepare_query(self, query: AdapterQuery) -> None:
        """Prepare the query context before results are fetched."""

    @abstractmethod
    def map_property_path(self, query: AdapterQuery, column: Column) -> str | None:
        """Return the dotted path of the column's value in a raw row."""

    @abstractmethod
    def get_results(self, query: AdapterQuery) -> Iterator[Mapping[str, Any]]:
        """Execute the query.

        Implementations must set ``query.total_rows`` and
        ``query.filtered_rows`` before returning.

        Returns:
            A lazy iterator over raw result rows.
        """

    def get_data(self, state: DataTableState, transformer: RowTransformer | None = None) -> ResultSet:
        """Run the full adapter pipeline for a table state.

        Args:
            state: The table state of the current request.
            transformer: Optional hook applied to every mapped row.

        Returns:
            A result set whose rows are mapped lazily.
        """
        query = AdapterQuery(state)
        self.prepare_query(query)
        property_map = [(column, self.map_property_path(query, column)) for column in state.columns]
        results = self.get_results(query)

        def rows() -> Iterator[dict[str, Any]]:
            for result in results:
                row = {
                    column.name: column.transform(read_path(result, path) if path else None, result)
                    for column, path in property_map
                }
                if transformer is not None:
                    row = transformer(row, result)
                yield row

        return ResultSet(rows(), query.total_rows or 0, query.filtered_rows or 0)


def read_path(data: Any, path: str) -> Any:
    """Read a dotted path (``author.name``) from nested mappings.

    A key that itself contains dots wins over the nested lookup.
    Returns ``None`` when any segment is missing.
    """
    if isinstance(data, Mapping) and path in data:
        return data[path]
    value = data
    for key in path.split("."):
        if not isinstance(value, Mapping) or key not in value:
            return None
        value = value[key]
    return value
