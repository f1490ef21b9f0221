from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from blogspy_table.app.application.actions import BulkAction, BulkActionMenu
from blogspy_table.app.application.state.query_state import (
    Intent,
    Navigate,
    QueryState,
    ReplaceSelection,
    Reset,
    SetSearch,
    ToggleSort,
    reduce,
)
from blogspy_table.app.config import TableSettings, load_settings
from blogspy_table.app.domain.models.column import ColumnDef, sortable_keys
from blogspy_table.app.domain.models.row import Row, RowId, row_id
from blogspy_table.app.infrastructure.logging.logger import get_logger, log_event
from blogspy_table.app.schemas import PaginationMeta, TableOptions, build_options
from blogspy_table.app.ui import selection
from blogspy_table.app.ui.filters import SearchDebouncer, filter_rows
from blogspy_table.app.ui.listing_view import sort_rows
from blogspy_table.app.ui.pagination import PageSlice, page_range_summary, paginate, pagination_controls
from blogspy_table.app.ui.view_state import TableView, resolve_view_status

SelectionCallback = Callable[[list[Row]], Any]
RowClickCallback = Callable[[Row], Any]


@dataclass(frozen=True)
class Derived:
    filtered: Sequence[Row]
    ordered: Sequence[Row]
    page: PageSlice


def _pagination_meta(page: PageSlice) -> PaginationMeta:
    return PaginationMeta(
        current_page=page.page,
        total_pages=page.total_pages,
        page_size=page.page_size,
        total_items=page.total_items,
    )


class DataTable:
    """In-memory table engine: search, sort, paginate and select over caller rows.

    Derived data is recomputed from ``rows`` and the current ``QueryState`` on
    every read. The only cross-call mutable value is the query state itself,
    swapped under a lock on each transition.
    """

    def __init__(
        self,
        rows: Sequence[Row],
        columns: Sequence[ColumnDef],
        options: TableOptions | None = None,
        *,
        actions: Sequence[BulkAction] = (),
        on_selection_change: SelectionCallback | None = None,
        on_row_click: RowClickCallback | None = None,
        name: str = "data_table",
        logger: logging.Logger | None = None,
        search_debounce_ms: int = 0,
        **option_overrides: Any,
    ) -> None:
        self.name = name
        self.columns = tuple(columns)
        self.options = build_options(options, **option_overrides)
        self.menu = BulkActionMenu(actions)
        self.on_selection_change = on_selection_change
        self.on_row_click = on_row_click
        self.logger = logger or get_logger("blogspy_table.data_table")
        self._rows: tuple[Row, ...] = tuple(rows)
        self._sortable = sortable_keys(list(self.columns))
        self._state = QueryState()
        self._lock = threading.RLock()
        self.search_debounce_ms = search_debounce_ms

    @classmethod
    def from_settings(
        cls,
        rows: Sequence[Row],
        columns: Sequence[ColumnDef],
        settings: TableSettings | None = None,
        **kwargs: Any,
    ) -> "DataTable":
        settings = settings or load_settings()
        option_keys = set(TableOptions.model_fields)
        overrides = {key: kwargs.pop(key) for key in list(kwargs) if key in option_keys}
        options = TableOptions.from_settings(settings, **overrides)
        logger = kwargs.pop("logger", None) or get_logger("blogspy_table.data_table", settings.LOG_LEVEL)
        kwargs.setdefault("search_debounce_ms", settings.SEARCH_DEBOUNCE_MS)
        return cls(rows, columns, options, logger=logger, **kwargs)

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    @property
    def state(self) -> QueryState:
        return self._state

    def _log(self, action: str, outcome: str = "ok", **context: object) -> None:
        log_event(self.logger, module=self.name, action=action, outcome=outcome, **context)

    def _derive(self, state: QueryState) -> Derived:
        filtered = filter_rows(self._rows, state.search_text)
        ordered = sort_rows(filtered, state.sort_key, state.sort_direction)
        page = paginate(ordered, self.options.page_size, state.current_page)
        return Derived(filtered=filtered, ordered=ordered, page=page)

    def _dispatch(self, intent: Intent) -> QueryState:
        with self._lock:
            total_pages = self._derive(self._state).page.total_pages
            self._state = reduce(self._state, intent, total_pages=total_pages)
            return self._state

    # query transitions

    def search(self, text: str) -> None:
        state = self._dispatch(SetSearch(text))
        self._log("search", matches=len(self._derive(state).filtered))

    def search_debouncer(self, wait_ms: int | None = None) -> SearchDebouncer:
        """Debouncer that applies the last of a burst of search terms to this table."""
        return SearchDebouncer(self.search, self.search_debounce_ms if wait_ms is None else wait_ms)

    def sort_by(self, key: str) -> None:
        if key not in self._sortable:
            self._log("sort", outcome="ignored", sort_key=key)
            return
        state = self._dispatch(ToggleSort(key))
        self._log("sort", sort_key=state.sort_key, sort_direction=state.sort_direction.value)

    def first_page(self) -> None:
        self._navigate("first")

    def prev_page(self) -> None:
        self._navigate("prev")

    def next_page(self) -> None:
        self._navigate("next")

    def last_page(self) -> None:
        self._navigate("last")

    def goto_page(self, page: int) -> None:
        self._navigate("goto", page)

    def _navigate(self, target: str, page: int | None = None) -> None:
        state = self._dispatch(Navigate(target, page))
        self._log("page", target=target, current_page=state.current_page)

    def set_data(self, rows: Sequence[Row]) -> None:
        """Replace the dataset and pull the current page back into range."""
        with self._lock:
            self._rows = tuple(rows)
            self._dispatch(Navigate("clamp"))
        self._log("set_data", rows=len(self._rows))

    def set_loading(self, loading: bool) -> None:
        self.options = build_options(self.options, loading=loading)

    def reset(self) -> None:
        with self._lock:
            had_selection = bool(self._state.selected_ids)
            self._dispatch(Reset())
        self._log("reset")
        if had_selection:
            self._notify_selection(frozenset())

    # derived data

    @property
    def filtered_rows(self) -> list[Row]:
        return list(self._derive(self._state).filtered)

    @property
    def sorted_rows(self) -> list[Row]:
        return list(self._derive(self._state).ordered)

    @property
    def page_rows(self) -> list[Row]:
        return self._derive(self._state).page.rows

    @property
    def current_page(self) -> int:
        return self._state.current_page

    @property
    def total_pages(self) -> int:
        return self._derive(self._state).page.total_pages

    @property
    def pagination(self) -> PaginationMeta:
        return _pagination_meta(self._derive(self._state).page)

    # selection

    @property
    def selected_ids(self) -> frozenset[RowId]:
        return self._state.selected_ids

    @property
    def all_selected(self) -> bool:
        state = self._state
        return selection.all_visible_selected(self._derive(state).page.rows, state.selected_ids)

    def is_selected(self, row: Row) -> bool:
        identity = row_id(row)
        return identity is not None and identity in self._state.selected_ids

    def selected_rows(self) -> list[Row]:
        return selection.rows_for_ids(self._rows, self._state.selected_ids)

    def toggle_row(self, identity: RowId | None) -> None:
        if identity is None:
            self._log("select", outcome="ignored")
            return
        self._update_selection(lambda state: selection.toggle_id(state.selected_ids, identity))

    def toggle_all_visible(self, checked: bool) -> None:
        self._update_selection(
            lambda state: selection.toggle_all_visible(state.selected_ids, self._derive(state).page.rows, checked)
        )

    def clear_selection(self) -> None:
        self._update_selection(lambda state: frozenset())

    def _update_selection(self, compute: Callable[[QueryState], frozenset[RowId]]) -> None:
        with self._lock:
            before = self._state.selected_ids
            after = compute(self._state)
            if after == before:
                return
            self._dispatch(ReplaceSelection(after))
        self._log("select", selected=len(after))
        self._notify_selection(after)

    def _notify_selection(self, selected_ids: frozenset[RowId]) -> None:
        if self.on_selection_change is not None:
            self.on_selection_change(selection.rows_for_ids(self._rows, selected_ids))

    # outbound events

    def click_row(self, row: Row) -> None:
        if self.on_row_click is not None:
            self.on_row_click(row)

    def run_action(self, label: str) -> bool:
        action = self.menu.find(label)
        selected = self.selected_rows()
        if not selected:
            self._log("bulk_action", outcome="blocked", label=label)
            return False
        self._log("bulk_action", label=label, selected=len(selected))
        action.on_click(selected)
        return True

    # rendering snapshot

    def view(self) -> TableView:
        state = self._state
        derived = self._derive(state)
        page = derived.page
        status = resolve_view_status(loading=self.options.loading, has_rows=bool(page.rows))
        message = {
            "loading": self.options.loading_message,
            "empty": self.options.empty_message,
        }.get(status.value)
        selected_visible = selection.rows_for_ids(derived.filtered, state.selected_ids)
        selected_count = len(selection.rows_for_ids(self._rows, state.selected_ids))
        show_menu = self.menu.is_visible(selectable=self.options.selectable, selected_count=selected_count)
        return TableView(
            status=status,
            message=message,
            columns=list(self.columns),
            page_rows=page.rows,
            selected_ids=state.selected_ids,
            selectable=self.options.selectable,
            all_selected=selection.all_visible_selected(page.rows, state.selected_ids),
            searchable=self.options.searchable,
            search_text=state.search_text,
            search_placeholder=self.options.search_placeholder,
            sort_key=state.sort_key,
            sort_direction=state.sort_direction,
            pagination=_pagination_meta(page),
            controls=pagination_controls(page.page, page.total_pages),
            range_summary=page_range_summary(page.page, page.page_size, page.total_items),
            selection_summary=selection.selection_summary(len(selected_visible), page.total_items),
            actions_label=self.menu.label(selected_count) if show_menu else None,
        )
