"""Column types for data tables.

Built-in columns:
  - TextColumn: plain text, HTML-escaped by default
  - DateTimeColumn: date/time values rendered with a configurable format

Subclass ``AbstractColumn`` and implement ``normalize()`` to add your own.
"""

from tablesift.columns.base import AbstractColumn, Column, ColumnOptions
from tablesift.columns.dates import DateTimeColumn
from tablesift.columns.text import TextColumn

__all__ = ["AbstractColumn", "Column", "ColumnOptions", "DateTimeColumn", "TextColumn"]
