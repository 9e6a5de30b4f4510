"""Data models for table state and responses."""

from tablesift.models.response import DataTableResponse
from tablesift.models.state import DataTableState, Direction

__all__ = ["DataTableResponse", "DataTableState", "Direction"]
