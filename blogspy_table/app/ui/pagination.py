from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from blogspy_table.app.domain.models.row import Row
from blogspy_table.app.errors import TableConfigError


@dataclass(frozen=True)
class PageSlice:
    rows: list[Row]
    page: int
    page_size: int
    total_pages: int
    total_items: int


@dataclass(frozen=True)
class PaginationControls:
    visible: bool
    can_first: bool
    can_prev: bool
    can_next: bool
    can_last: bool


def _require_page_size(page_size: int) -> None:
    if page_size < 1:
        raise TableConfigError(code="INVALID_PAGE_SIZE", message=f"page_size must be >= 1, got {page_size}")


def total_pages_for(total_items: int, page_size: int) -> int:
    _require_page_size(page_size)
    return -(-total_items // page_size)


def paginate(rows: Sequence[Row], page_size: int, current_page: int) -> PageSlice:
    """Slice ``rows`` into the requested page without clamping ``current_page``.

    Pages outside ``[1, total_pages]`` yield an empty slice.
    """
    total_items = len(rows)
    total_pages = total_pages_for(total_items, page_size)
    if current_page < 1:
        page_rows: list[Row] = []
    else:
        start = (current_page - 1) * page_size
        page_rows = list(rows[start : start + page_size])
    return PageSlice(
        rows=page_rows,
        page=current_page,
        page_size=page_size,
        total_pages=total_pages,
        total_items=total_items,
    )


def clamp_page(page: int, total_pages: int) -> int:
    return max(1, min(page, total_pages))


def first_page(page: int, total_pages: int) -> int:
    return 1


def prev_page(page: int, total_pages: int) -> int:
    return clamp_page(page - 1, total_pages)


def next_page(page: int, total_pages: int) -> int:
    return clamp_page(page + 1, total_pages)


def last_page(page: int, total_pages: int) -> int:
    return max(1, total_pages)


def goto_page(page: int, total_pages: int) -> int:
    return clamp_page(page, total_pages)


def pagination_controls(page: int, total_pages: int) -> PaginationControls:
    return PaginationControls(
        visible=total_pages > 1,
        can_first=page > 1,
        can_prev=page > 1,
        can_next=page < total_pages,
        can_last=page < total_pages,
    )


def page_range_summary(page: int, page_size: int, total_items: int) -> str | None:
    if total_items <= 0:
        return None
    start = (page - 1) * page_size + 1
    end = min(page * page_size, total_items)
    return f"Showing {start} to {end} of {total_items} results"
