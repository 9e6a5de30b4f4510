"""Date/time column — Normalizes timestamps into formatted strings."""

from __future__ import annotations

from datetime import UTC, date, datetime, time
from typing import Any

from pydantic import Field

from tablesift.columns.base import AbstractColumn, ColumnOptions
from tablesift.columns.formatting import format_datetime
from tablesift.exceptions import DateTimeParseError


class DateTimeOptions(ColumnOptions):
    format: str = Field(default="c", description="PHP date()-style output format")
    null_value: str = Field(default="", description="Output used when the value is missing")


class DateTimeColumn(AbstractColumn):
    """Column displaying date/time values.

    Values that are not ``datetime``/``date`` objects are converted to
    strings and parsed as ISO-8601 (a trailing ``Z`` is accepted). Naive
    values are taken to be UTC.

    Example::

        column = DateTimeColumn("created", format="Y-m-d H:i")
        column.normalize("2024-01-02T03:04:05Z")  # '2024-01-02 03:04'
    """

    options_model = DateTimeOptions

    def normalize(self, value: Any) -> str:
        if value is None:
            return self.options.null_value
        return format_datetime(self._to_datetime(value), self.options.format)

    @staticmethod
    def _to_datetime(value: Any) -> datetime:
        if isinstance(value, datetime):
            parsed = value
        elif isinstance(value, date):
            parsed = datetime.combine(value, time())
        else:
            text = str(value).strip()
            if text.endswith(("Z", "z")):
                text = text[:-1] + "+00:00"
            try:
                parsed = datetime.fromisoformat(text)
            except ValueError as e:
                raise DateTimeParseError(f"Cannot parse '{value}' as a date/time") from e

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return parsed
