from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from blogspy_table.app.config import TableSettings
from blogspy_table.app.errors import config_error_from_validation


class TableOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    page_size: int = Field(default=10, ge=1)
    searchable: bool = True
    search_placeholder: str = "Search..."
    selectable: bool = False
    empty_message: str = "No data available"
    loading_message: str = "Loading..."
    loading: bool = False

    @classmethod
    def from_settings(cls, settings: TableSettings, **overrides: Any) -> "TableOptions":
        values: dict[str, Any] = {
            "page_size": settings.DEFAULT_PAGE_SIZE,
            "search_placeholder": settings.SEARCH_PLACEHOLDER,
            "empty_message": settings.EMPTY_MESSAGE,
            "loading_message": settings.LOADING_MESSAGE,
        }
        values.update(overrides)
        return build_options(None, **values)


def build_options(options: TableOptions | None = None, **overrides: Any) -> TableOptions:
    base = options.model_dump() if options is not None else {}
    base.update(overrides)
    try:
        return TableOptions(**base)
    except ValidationError as exc:
        raise config_error_from_validation(exc, source="table options") from exc


class PaginationMeta(BaseModel):
    current_page: int
    total_pages: int
    page_size: int
    total_items: int
