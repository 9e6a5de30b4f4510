"""Text column — Plain string output, HTML-escaped unless ``raw``."""

from __future__ import annotations

import html
from typing import Any

from pydantic import Field

from tablesift.columns.base import AbstractColumn, ColumnOptions


class TextOptions(ColumnOptions):
    raw: bool = Field(default=False, description="Skip HTML escaping of the value")


class TextColumn(AbstractColumn):
    """Column rendering its value as text."""

    options_model = TextOptions

    def normalize(self, value: Any) -> str:
        text = "" if value is None else str(value)
        return text if self.options.raw else html.escape(text, quote=True)
