"""Base adapter interface — Abstract classes for data table sources."""

from tablesift.adapters.base.adapter import AbstractAdapter, AdapterQuery, ResultSet
from tablesift.adapters.base.registry import AdapterRegistry, default_registry

__all__ = ["AbstractAdapter", "AdapterQuery", "AdapterRegistry", "ResultSet", "default_registry"]
