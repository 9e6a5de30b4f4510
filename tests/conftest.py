"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from tablesift.columns import DateTimeColumn, TextColumn
from tablesift.columns.base import AbstractColumn
from tablesift.config.settings import Settings


def make_search_response(sources: list[dict[str, Any]], total: int) -> dict[str, Any]:
    """Build an Elasticsearch search response body."""
    return {
        "took": 3,
        "timed_out": False,
        "hits": {
            "total": {"value": total, "relation": "eq"},
            "max_score": 1.0,
            "hits": [
                {"_index": "products", "_id": str(i), "_score": 1.0, "_source": source}
                for i, source in enumerate(sources)
            ],
        },
    }


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        elasticsearch={"client": {"hosts": ["http://localhost:9200"]}, "index": "products"},
    )


@pytest.fixture
def columns() -> list[AbstractColumn]:
    """Product table columns: name, sku, price, created."""
    return [
        TextColumn("name", 0),
        TextColumn("sku", 1, field="code", global_searchable=False),
        TextColumn("price", 2, searchable=False, order_field="price_cents"),
        DateTimeColumn("created", 3, field="created_at", format="Y-m-d"),
    ]


@pytest.fixture
def products() -> list[dict[str, Any]]:
    """100 product documents as stored in the index."""
    return [
        {
            "name": f"Product {i:03d}",
            "code": f"SKU-{i:03d}",
            "price": f"{i}.99",
            "price_cents": i * 100 + 99,
            "created_at": f"2024-01-{i % 28 + 1:02d}T10:00:00Z",
        }
        for i in range(100)
    ]


@pytest.fixture
def es_client(products: list[dict[str, Any]]) -> MagicMock:
    """Elasticsearch client mock paging through ``products``."""

    def search(index: Any, track_total_hits: bool = False, from_: int = 0, size: int = 10, **kwargs: Any) -> dict:
        return make_search_response(products[from_ : from_ + size], len(products))

    client = MagicMock(name="Elasticsearch()")
    client.search.side_effect = search
    client.count.return_value = {"count": len(products), "_shards": {"total": 1}}
    return client


@pytest.fixture
def es_module(es_client: MagicMock) -> Iterator[MagicMock]:
    """Stand-in ``elasticsearch`` module whose client class returns ``es_client``."""
    module = MagicMock(name="elasticsearch")
    module.Elasticsearch.return_value = es_client
    with patch.dict("sys.modules", {"elasticsearch": module}):
        yield module


@pytest.fixture
def search_response() -> Callable[[list[dict[str, Any]], int], dict[str, Any]]:
    return make_search_response
