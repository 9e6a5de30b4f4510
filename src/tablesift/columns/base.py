"""Base column — Option handling and value pipeline shared by all column types.

A column describes one field of a table: where its value comes from
(``field``), how it is sorted (``order_field``), whether it takes part in
the global search, and how a raw value becomes display output:

  1. ``data``: callable ``(row, value)`` or a fallback for ``None`` values
  2. ``normalize()``: type-specific conversion, implemented per column
  3. ``render``: callable ``(value, row)`` or a ``str.format`` template
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, ClassVar, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tablesift.exceptions import ConfigurationError


class ColumnOptions(BaseModel):
    """Options common to every column type."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True, arbitrary_types_allowed=True)

    label: str | None = Field(default=None, description="Display label (defaults to the column name)")
    field: str | None = Field(default=None, description="Backing field name in the result rows")
    data: Any = Field(default=None, description="Callable (row, value) or fallback for missing values")
    render: Callable[..., Any] | str | None = Field(default=None, description="Callable (value, row) or format template")
    order_field: str | None = Field(default=None, description="Field used for sorting (defaults to field)")
    orderable: bool | None = Field(default=None, description="Explicit orderable flag")
    searchable: bool | None = Field(default=None, description="Explicit searchable flag")
    global_searchable: bool | None = Field(default=None, description="Explicit global-search flag")
    visible: bool = Field(default=True, description="Whether the column is displayed")
    class_name: str | None = Field(default=None, description="CSS class applied to the column cells")


@runtime_checkable
class Column(Protocol):
    """What adapters and tables rely on from a column."""

    name: str

    @property
    def field(self) -> str | None: ...

    @property
    def order_field(self) -> str | None: ...

    def is_orderable(self) -> bool: ...

    def is_global_searchable(self) -> bool: ...

    def set_option(self, key: str, value: Any) -> None: ...

    def normalize(self, value: Any) -> Any: ...

    def transform(self, value: Any, row: Mapping[str, Any]) -> Any: ...


class AbstractColumn(ABC):
    """Shared implementation of the ``Column`` protocol.

    Subclasses declare their options model in ``options_model`` and
    implement ``normalize()``.

    Args:
        name: Column name, also the key of the column in output rows.
        index: Position of the column in its table.
        **options: Column options, validated against ``options_model``.

    Raises:
        ConfigurationError: If an option is unknown or has the wrong type.
    """

    options_model: ClassVar[type[ColumnOptions]] = ColumnOptions

    def __init__(self, name: str, index: int = 0, **options: Any) -> None:
        self.name = name
        self.index = index
        try:
            self.options = self.options_model(**options)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid options for column '{name}': {e}") from e

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, field={self.field!r})"

    def set_option(self, key: str, value: Any) -> None:
        """Change a single option after construction."""
        if key not in self.options_model.model_fields:
            raise ConfigurationError(f"Unknown option '{key}' for column '{self.name}'")
        try:
            setattr(self.options, key, value)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid value for option '{key}' of column '{self.name}': {e}") from e

    # ── Options ──────────────────────────────────────────────────────────

    @property
    def label(self) -> str:
        return self.options.label if self.options.label is not None else self.name

    @property
    def field(self) -> str | None:
        return self.options.field

    @property
    def order_field(self) -> str | None:
        return self.options.order_field if self.options.order_field is not None else self.field

    @property
    def class_name(self) -> str | None:
        return self.options.class_name

    def is_visible(self) -> bool:
        return self.options.visible

    def is_orderable(self) -> bool:
        if self.options.orderable is not None:
            return self.options.orderable
        return self.order_field is not None

    def is_searchable(self) -> bool:
        if self.options.searchable is not None:
            return self.options.searchable
        return self.field is not None

    def is_global_searchable(self) -> bool:
        if self.options.global_searchable is not None:
            return self.options.global_searchable
        return self.is_searchable()

    # ── Value pipeline ───────────────────────────────────────────────────

    @abstractmethod
    def normalize(self, value: Any) -> Any:
        """Convert a raw value to its display form."""

    def transform(self, value: Any, row: Mapping[str, Any]) -> Any:
        """Run a raw value through ``data``, ``normalize()`` and ``render``.

        Args:
            value: The raw value read from the row, or ``None``.
            row: The complete raw row, passed to callables as context.
        """
        data = self.options.data
        if callable(data):
            value = data(row, value)
        elif value is None:
            value = data
        return self.render(self.normalize(value), row)

    def render(self, value: Any, row: Mapping[str, Any]) -> Any:
        render = self.options.render
        if callable(render):
            return render(value, row)
        if isinstance(render, str):
            return render.format(value)
        return value
