"""Table state — Pagination, global search and ordering of one table request."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from tablesift.exceptions import InvalidRequestError

Direction = Literal["asc", "desc"]

_DIRECTIONS: tuple[str, ...] = ("asc", "desc")


class DataTableState(BaseModel):
    """State of a data table for a single rendering request.

    Owned by the table; adapters only read it.

    ``length`` of zero or less sends no pagination bounds; the backend's
    default page size applies.

    Built directly, invalid values raise pydantic's ``ValidationError``;
    ``from_request()`` reports malformed request parameters as
    ``InvalidRequestError``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    columns: tuple[Any, ...] = Field(default=(), description="All columns of the table, in definition order")
    draw: int = Field(default=0, description="DataTables draw counter, echoed in the response")
    start: int = Field(default=0, ge=0, description="Offset of the first row to return")
    length: int = Field(default=-1, description="Page length; <= 0 sends no bounds and the backend default applies")
    global_search: str = Field(default="", description="Free-text search applied across columns")
    order_by: tuple[tuple[Any, Direction], ...] = Field(default=(), description="(column, direction) pairs")

    @classmethod
    def from_request(
        cls,
        columns: Sequence[Any],
        params: Mapping[str, Any],
        *,
        page_length: int = 10,
        default_order: Sequence[tuple[Any, Direction]] = (),
    ) -> DataTableState:
        """Build a state from DataTables request parameters.

        Parameters are read from a flat mapping as sent by the DataTables
        client in a query string or form body: ``draw``, ``start``,
        ``length``, ``search[value]``, ``order[0][column]``,
        ``order[0][dir]``, ...

        Args:
            columns: The table's columns; ``order[i][column]`` indexes into it.
            params: The request parameters.
            page_length: Length used when the request has none.
            default_order: Ordering used when the request has none.

        Returns:
            The parsed state.

        Raises:
            InvalidRequestError: If a parameter is malformed or references
                an unknown column.
        """
        start = _int_param(params, "start", 0)
        if start < 0:
            raise InvalidRequestError(f"Parameter 'start' must not be negative, got {start}")

        order_by: list[tuple[Any, Direction]] = []
        i = 0
        while f"order[{i}][column]" in params:
            index = _int_param(params, f"order[{i}][column]", 0)
            if not 0 <= index < len(columns):
                raise InvalidRequestError(f"Order references unknown column index {index}")
            direction = str(params.get(f"order[{i}][dir]") or "asc").lower()
            if direction not in _DIRECTIONS:
                raise InvalidRequestError(f"Invalid order direction '{direction}'")
            order_by.append((columns[index], direction))  # type: ignore[arg-type]
            i += 1

        return cls(
            columns=tuple(columns),
            draw=_int_param(params, "draw", 0),
            start=start,
            length=_int_param(params, "length", page_length),
            global_search=str(params.get("search[value]") or ""),
            order_by=tuple(order_by) if order_by else tuple(default_order),
        )


def _int_param(params: Mapping[str, Any], key: str, default: int) -> int:
    raw = params.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except (TypeError, ValueError) as e:
        raise InvalidRequestError(f"Parameter '{key}' must be an integer, got {raw!r}") from e
