"""Adapter layer — Pluggable data sources for tables.

Built-in adapters:
  - elasticsearch: Elasticsearch v8+ (multi_match global search, field sorting)

Implement ``AbstractAdapter`` to connect your own data source.
"""
