"""Integration test fixtures — Elasticsearch with seeded product documents.

Expects a cluster at localhost:9200, e.g.::

    docker run -p 9200:9200 -e discovery.type=single-node -e xpack.security.enabled=false \
        docker.elastic.co/elasticsearch/elasticsearch:8.13.0

Tests are skipped when the cluster is not reachable.
"""

from __future__ import annotations

import time
from typing import Any

import pytest

ES_HOST = "http://localhost:9200"
INDEX = "tablesift-test-products"

MOCK_DOCUMENTS: list[dict[str, Any]] = [
    {
        "name": f"{kind} {i:03d}",
        "code": f"SKU-{i:03d}",
        "price_cents": 1000 + i * 25,
        "created_at": f"2024-{i % 12 + 1:02d}-{i % 28 + 1:02d}T08:30:00Z",
    }
    for i, kind in enumerate(["Solar panel", "Wind turbine", "Battery pack", "Inverter"] * 25)
]


def _wait_for_cluster(client: Any, timeout: float = 30.0) -> bool:
    """Block until the cluster answers a ping, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if client.ping():
            return True
        time.sleep(2)
    return False


@pytest.fixture(scope="session")
def elasticsearch_ready() -> str:
    """Ensure Elasticsearch is running and seeded."""
    elasticsearch = pytest.importorskip("elasticsearch")
    client = elasticsearch.Elasticsearch(hosts=[ES_HOST])
    if not _wait_for_cluster(client):
        client.close()
        pytest.skip(f"Elasticsearch not available at {ES_HOST}")

    client.options(ignore_status=404).indices.delete(index=INDEX)
    client.indices.create(
        index=INDEX,
        mappings={
            "properties": {
                "name": {"type": "text", "fields": {"raw": {"type": "keyword"}}},
                "code": {"type": "keyword"},
                "price_cents": {"type": "integer"},
                "created_at": {"type": "date"},
            }
        },
    )
    for i, doc in enumerate(MOCK_DOCUMENTS):
        client.index(index=INDEX, id=str(i), document=doc)
    client.indices.refresh(index=INDEX)
    client.close()
    return ES_HOST
