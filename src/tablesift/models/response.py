"""Response model — The JSON body DataTables expects from the server."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DataTableResponse(BaseModel):
    """Server-side processing reply for one draw of a table.

    Field names follow Python conventions; ``to_dict()`` produces the
    camelCase keys the DataTables client reads.
    """

    model_config = ConfigDict(populate_by_name=True)

    draw: int = Field(default=0, description="Echo of the request draw counter")
    records_total: int = Field(default=0, alias="recordsTotal", description="Total number of matching records")
    records_filtered: int = Field(
        default=0, alias="recordsFiltered", description="Matching records before pagination"
    )
    data: list[dict[str, Any]] = Field(default_factory=list, description="Rows of the current page")
    error: str | None = Field(default=None, description="Error message shown by the client")

    def to_dict(self) -> dict[str, Any]:
        """Serialize with DataTables key names, omitting an empty error."""
        return self.model_dump(by_alias=True, exclude_none=True)
