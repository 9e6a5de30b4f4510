"""Elasticsearch data table adapter."""

from tablesift.adapters.elasticsearch.adapter import ElasticsearchAdapter, ElasticsearchOptions

__all__ = ["ElasticsearchAdapter", "ElasticsearchOptions"]
