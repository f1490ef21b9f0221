from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from blogspy_table.app.domain.models.column import ColumnDef
from blogspy_table.app.domain.models.row import Row, RowId
from blogspy_table.app.schemas import PaginationMeta
from blogspy_table.app.ui.listing_view import SortDirection
from blogspy_table.app.ui.pagination import PaginationControls


class TableViewStatus(str, Enum):
    LOADING = "loading"
    EMPTY = "empty"
    READY = "ready"


def resolve_view_status(*, loading: bool, has_rows: bool) -> TableViewStatus:
    if loading:
        return TableViewStatus.LOADING
    if not has_rows:
        return TableViewStatus.EMPTY
    return TableViewStatus.READY


@dataclass(frozen=True)
class TableView:
    """Everything a renderer needs to draw one frame of a table."""

    status: TableViewStatus
    message: str | None
    columns: list[ColumnDef]
    page_rows: list[Row]
    selected_ids: frozenset[RowId]
    selectable: bool
    all_selected: bool
    searchable: bool
    search_text: str
    search_placeholder: str
    sort_key: str | None
    sort_direction: SortDirection
    pagination: PaginationMeta
    controls: PaginationControls
    range_summary: str | None
    selection_summary: str | None
    actions_label: str | None

    def sort_indicator(self, column: ColumnDef) -> str | None:
        if not column.sortable or column.key != self.sort_key:
            return None
        return self.sort_direction.value
