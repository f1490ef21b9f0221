from __future__ import annotations

from collections.abc import Iterable, Sequence

from blogspy_table.app.domain.models.row import Row, RowId, row_id


def toggle_id(selected: frozenset[RowId], identity: RowId | None) -> frozenset[RowId]:
    if identity is None:
        return selected
    if identity in selected:
        return selected - {identity}
    return selected | {identity}


def visible_ids(page_rows: Iterable[Row]) -> list[RowId]:
    return [identity for identity in (row_id(row) for row in page_rows) if identity is not None]


def toggle_all_visible(selected: frozenset[RowId], page_rows: Sequence[Row], checked: bool) -> frozenset[RowId]:
    """Add every identified row on the page, or clear the whole selection."""
    if not checked:
        return frozenset()
    return selected | frozenset(visible_ids(page_rows))


def all_visible_selected(page_rows: Sequence[Row], selected: frozenset[RowId]) -> bool:
    ids = visible_ids(page_rows)
    if not ids:
        return False
    return all(identity in selected for identity in ids)


def rows_for_ids(rows: Iterable[Row], selected: frozenset[RowId]) -> list[Row]:
    if not selected:
        return []
    return [row for row in rows if row_id(row) in selected]


def selection_summary(selected_count: int, total_items: int) -> str | None:
    if selected_count <= 0:
        return None
    return f"{selected_count} of {total_items} selected"
