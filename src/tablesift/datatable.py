"""DataTable — Column definitions plus an adapter, answering DataTables requests.

Usage::

    table = (
        DataTable("logs", page_length=25, order=[("timestamp", "desc")])
        .add("message", TextColumn, global_searchable=True)
        .add("timestamp", DateTimeColumn, field="@timestamp", format="Y-m-d H:i:s")
        .create_adapter("elasticsearch", {"client": {"hosts": [...]}, "index": "logs-*"})
    )
    response = table.handle_request(request.query_params)
    return response.to_dict()
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from tablesift.adapters.base.adapter import AbstractAdapter, ResultSet, RowTransformer
from tablesift.adapters.base.registry import AdapterRegistry, default_registry
from tablesift.columns.base import AbstractColumn
from tablesift.columns.text import TextColumn
from tablesift.exceptions import ConfigurationError
from tablesift.models.response import DataTableResponse
from tablesift.models.state import DataTableState, Direction

if TYPE_CHECKING:
    from tablesift.config.settings import Settings

logger = logging.getLogger(__name__)


class DataTable:
    """A server-side table definition.

    Args:
        name: Table name, used in log messages.
        page_length: Rows per page when the request does not send ``length``.
        order: Default ordering as ``(column name or index, direction)`` pairs.
        registry: Adapter registry used by ``create_adapter()`` with a name.
        transformer: Optional hook ``(row, raw_result) -> row``.
    """

    def __init__(
        self,
        name: str = "dt",
        *,
        page_length: int = 10,
        order: Sequence[tuple[str | int, Direction]] = (),
        registry: AdapterRegistry | None = None,
        transformer: RowTransformer | None = None,
    ) -> None:
        self.name = name
        self.page_length = page_length
        self.order = list(order)
        self.transformer = transformer
        self._registry = registry
        self._columns: list[AbstractColumn] = []
        self._adapter: AbstractAdapter | None = None

    @classmethod
    def from_settings(cls, settings: Settings, name: str = "dt", **kwargs: Any) -> DataTable:
        """Create a table backed by the Elasticsearch adapter configured in *settings*."""
        table = cls(name, page_length=settings.table.page_length, **kwargs)
        return table.create_adapter("elasticsearch", settings.adapter_options())

    # ── Columns ──────────────────────────────────────────────────────────

    @property
    def columns(self) -> list[AbstractColumn]:
        return list(self._columns)

    def add(self, name: str, column_class: type[AbstractColumn] = TextColumn, **options: Any) -> DataTable:
        """Append a column.

        Raises:
            ConfigurationError: If a column with this name exists or an
                option is invalid.
        """
        if any(column.name == name for column in self._columns):
            raise ConfigurationError(f"There already is a column with name '{name}' in table '{self.name}'")
        self._columns.append(column_class(name, len(self._columns), **options))
        return self

    def get_column(self, key: str | int) -> AbstractColumn:
        """Look up a column by name or index."""
        if isinstance(key, int):
            if 0 <= key < len(self._columns):
                return self._columns[key]
        else:
            for column in self._columns:
                if column.name == key:
                    return column
        raise ConfigurationError(f"Unknown column '{key}' in table '{self.name}'")

    # ── Adapter ──────────────────────────────────────────────────────────

    @property
    def adapter(self) -> AbstractAdapter:
        if self._adapter is None:
            raise ConfigurationError(f"Table '{self.name}' has no adapter. Call create_adapter() first.")
        return self._adapter

    def create_adapter(
        self,
        adapter: str | AbstractAdapter,
        options: Mapping[str, Any] | None = None,
    ) -> DataTable:
        """Attach an adapter, given as a registered name or an instance.

        A named adapter is created and configured with *options*; an
        instance is configured only when *options* are given.
        """
        if isinstance(adapter, str):
            if self._registry is None:
                self._registry = default_registry()
            self._adapter = self._registry.create(adapter, options or {})
        else:
            if options is not None:
                adapter.configure(options)
            self._adapter = adapter
        return self

    # ── Requests ─────────────────────────────────────────────────────────

    def get_state(self, params: Mapping[str, Any]) -> DataTableState:
        """Parse DataTables request parameters into a table state."""
        default_order = [(self.get_column(key), direction) for key, direction in self.order]
        return DataTableState.from_request(
            self._columns,
            params,
            page_length=self.page_length,
            default_order=default_order,
        )

    def get_result_set(self, state: DataTableState) -> ResultSet:
        """Run the adapter for a state; rows are produced lazily."""
        logger.debug(
            "Table %s: start=%d length=%d search=%r order=%s",
            self.name,
            state.start,
            state.length,
            state.global_search,
            [(column.name, direction) for column, direction in state.order_by],
        )
        return self.adapter.get_data(state, self.transformer)

    def handle_request(self, params: Mapping[str, Any]) -> DataTableResponse:
        """Answer a DataTables server-side processing request."""
        state = self.get_state(params)
        result = self.get_result_set(state)
        return DataTableResponse(
            draw=state.draw,
            records_total=result.total_records,
            records_filtered=result.total_displayed_records,
            data=list(result),
        )
