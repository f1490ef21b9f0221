"""Query state for one table and the reducer that moves it between states.

Every transition returns a new ``QueryState``; nothing is mutated in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Union

from blogspy_table.app.domain.models.row import RowId
from blogspy_table.app.ui import pagination
from blogspy_table.app.ui.listing_view import SortDirection


@dataclass(frozen=True)
class QueryState:
    search_text: str = ""
    sort_key: str | None = None
    sort_direction: SortDirection = SortDirection.ASC
    current_page: int = 1
    selected_ids: frozenset[RowId] = field(default_factory=frozenset)


@dataclass(frozen=True)
class SetSearch:
    text: str


@dataclass(frozen=True)
class ToggleSort:
    key: str


@dataclass(frozen=True)
class Navigate:
    target: str
    page: int | None = None


@dataclass(frozen=True)
class ReplaceSelection:
    selected_ids: frozenset[RowId]


@dataclass(frozen=True)
class Reset:
    pass


Intent = Union[SetSearch, ToggleSort, Navigate, ReplaceSelection, Reset]

_NAVIGATORS = {
    "first": pagination.first_page,
    "prev": pagination.prev_page,
    "next": pagination.next_page,
    "last": pagination.last_page,
    "goto": pagination.goto_page,
    "clamp": pagination.clamp_page,
}


def reduce(state: QueryState, intent: Intent, *, total_pages: int = 0) -> QueryState:
    if isinstance(intent, SetSearch):
        if intent.text == state.search_text:
            return state
        return replace(state, search_text=intent.text, current_page=1)

    if isinstance(intent, ToggleSort):
        if intent.key == state.sort_key:
            return replace(state, sort_direction=state.sort_direction.toggled())
        return replace(state, sort_key=intent.key, sort_direction=SortDirection.ASC)

    if isinstance(intent, Navigate):
        navigator = _NAVIGATORS.get(intent.target)
        if navigator is None:
            raise ValueError(f"Unknown navigation target: {intent.target}")
        page = intent.page if intent.page is not None else state.current_page
        return replace(state, current_page=navigator(page, total_pages))

    if isinstance(intent, ReplaceSelection):
        return replace(state, selected_ids=frozenset(intent.selected_ids))

    if isinstance(intent, Reset):
        return QueryState()

    raise TypeError(f"Unsupported intent: {intent!r}")
