"""Elasticsearch adapter — Serves data tables from Elasticsearch indices (v8+).

Table state is translated into the query DSL:

  - global search   → ``multi_match`` over the globally searchable columns
  - column ordering → one ``sort`` clause per orderable column
  - pagination      → ``from`` / ``size`` when a page length is requested

Each hit's ``_source`` becomes one raw row. The ``elasticsearch`` package
is only needed once a table is actually queried.

Install the optional dependency::

    pip install tablesift[elasticsearch]
    # or: pip install elasticsearch
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tablesift.adapters.base.adapter import AbstractAdapter, AdapterQuery
from tablesift.columns.base import Column
from tablesift.exceptions import ConfigurationError, MissingDependencyError
from tablesift.models.state import DataTableState

logger = logging.getLogger(__name__)


class ElasticsearchOptions(BaseModel):
    """Validated, immutable configuration of an ``ElasticsearchAdapter``."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    client: dict[str, Any] = Field(description="Keyword arguments for the Elasticsearch client")
    index: str | list[str] = Field(description="Index name or list of index names to search")

    @field_validator("index")
    @classmethod
    def _check_index(cls, v: str | list[str]) -> str | list[str]:
        names = [v] if isinstance(v, str) else v
        if not names or not all(names):
            raise ValueError("index must name at least one index")
        return v

    @property
    def indices(self) -> list[str]:
        return [self.index] if isinstance(self.index, str) else list(self.index)


class ElasticsearchAdapter(AbstractAdapter):
    """Data table adapter for Elasticsearch.

    Options:
        client: Mapping of keyword arguments for ``elasticsearch.Elasticsearch``
            (e.g. ``{"hosts": ["http://localhost:9200"], "api_key": "..."}``).
        index: Index name or list of index names.

    Example::

        adapter = ElasticsearchAdapter()
        adapter.configure({"client": {"hosts": ["http://localhost:9200"]}, "index": "logs-*"})
        result = adapter.get_data(state)
    """

    def __init__(self) -> None:
        self._options: ElasticsearchOptions | None = None

    @property
    def options(self) -> ElasticsearchOptions:
        if self._options is None:
            raise ConfigurationError("ElasticsearchAdapter is not configured. Call configure() first.")
        return self._options

    def configure(self, options: Mapping[str, Any]) -> None:
        """Validate and store the ``client`` and ``index`` options."""
        try:
            self._options = ElasticsearchOptions.model_validate(dict(options))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid ElasticsearchAdapter options: {e}") from e

    def prepare_query(self, query: AdapterQuery) -> None:
        """Create the search client and default unset column fields to column names."""
        options = self.options
        try:
            from elasticsearch import Elasticsearch
        except ImportError as e:
            raise MissingDependencyError("Install elasticsearch to use the ElasticsearchAdapter") from e

        query.set("client", Elasticsearch(**options.client))

        for column in query.state.columns:
            if column.field is None:
                column.set_option("field", column.name)

    def map_property_path(self, query: AdapterQuery, column: Column) -> str | None:
        return column.field

    # ── Search ───────────────────────────────────────────────────────────

    def get_results(self, query: AdapterQuery) -> Iterator[Mapping[str, Any]]:
        """Search, record total and filtered counts, and return hit sources."""
        state = query.state
        indices = self.options.indices
        client = query.get("client")

        request = self.build_query(state)
        if state.length > 0:
            request["from"] = state.start
            request["size"] = state.length
        self.apply_ordering(request, state)

        logger.debug("Searching %s: %s", indices, request)
        # Hits and counts are fully fetched here, so the client is released before rows are read.
        try:
            response = client.search(index=indices, track_total_hits=True, **_to_client_kwargs(request))
            if "query" in request:
                count = client.count(index=indices, query=request["query"])
            else:
                count = client.count(index=indices)
        finally:
            client.close()

        total = response["hits"]["total"]
        query.total_rows = int(total["value"] if isinstance(total, Mapping) else total)
        query.filtered_rows = int(count["count"])

        logger.debug("Search returned %d total, %d filtered", query.total_rows, query.filtered_rows)
        return (hit.get("_source", {}) for hit in response["hits"]["hits"])

    def build_query(self, state: DataTableState) -> dict[str, Any]:
        """Build the search body for the state's global search.

        An empty body matches all documents.
        """
        body: dict[str, Any] = {}
        if state.global_search:
            fields = [column.field for column in state.columns if column.is_global_searchable()]
            body["query"] = {
                "multi_match": {
                    "query": state.global_search,
                    "fields": fields,
                }
            }
        return body

    def apply_ordering(self, body: dict[str, Any], state: DataTableState) -> None:
        """Append a sort clause for every orderable column in the requested order."""
        for column, direction in state.order_by:
            order_field = column.order_field
            if column.is_orderable() and order_field:
                body.setdefault("sort", []).append({order_field: {"order": direction}})


def _to_client_kwargs(body: Mapping[str, Any]) -> dict[str, Any]:
    """Rename body keys that clash with Python keywords (``from`` → ``from_``)."""
    return {("from_" if key == "from" else key): value for key, value in body.items()}
