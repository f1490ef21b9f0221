from __future__ import annotations

from blogspy_table.app.domain.models.column import Align, ColumnDef
from blogspy_table.app.domain.models.row import row_id
from blogspy_table.app.ui.listing_view import render_cell
from blogspy_table.app.ui.view_state import TableView, TableViewStatus

_ARROWS = {"asc": "^", "desc": "v", None: ""}


def _checkbox(checked: bool) -> str:
    return "[x]" if checked else "[ ]"


def _align(text: str, width: int, align: Align) -> str:
    if align is Align.RIGHT:
        return text.rjust(width)
    if align is Align.CENTER:
        return text.center(width)
    return text.ljust(width)


def _header(view: TableView, column: ColumnDef) -> str:
    arrow = _ARROWS[view.sort_indicator(column)]
    return f"{column.header} {arrow}".rstrip()


def format_table(title: str, view: TableView) -> str:
    lines = [title]
    if view.searchable:
        lines.append(f"Search: {view.search_text or view.search_placeholder}")
    if view.actions_label:
        lines.append(view.actions_label)

    headers = [_header(view, column) for column in view.columns]
    if view.status is not TableViewStatus.READY:
        lines.append(" | ".join(headers))
        lines.append(f"({view.message})")
        return "\n".join(lines)

    cells = [
        [str(render_cell(column, row, index)) for column in view.columns]
        for index, row in enumerate(view.page_rows)
    ]
    widths = [
        max([len(headers[idx])] + [len(line[idx]) for line in cells])
        for idx in range(len(view.columns))
    ]
    prefix = f"{_checkbox(view.all_selected)} | " if view.selectable else ""
    lines.append(prefix + " | ".join(headers[idx].ljust(widths[idx]) for idx in range(len(headers))))
    lines.append("-+-".join("-" * width for width in ([3] if view.selectable else []) + widths))
    for row, line in zip(view.page_rows, cells):
        identity = row_id(row)
        marker = f"{_checkbox(identity is not None and identity in view.selected_ids)} | " if view.selectable else ""
        lines.append(
            marker
            + " | ".join(_align(text, widths[idx], view.columns[idx].align) for idx, text in enumerate(line))
        )

    if view.controls.visible:
        controls = view.controls
        buttons = " ".join(
            label if enabled else f"({label})"
            for label, enabled in (
                ("<<", controls.can_first),
                ("<", controls.can_prev),
                (">", controls.can_next),
                (">>", controls.can_last),
            )
        )
        meta = view.pagination
        lines.append(f"{view.range_summary}  Page {meta.current_page} of {meta.total_pages}  {buttons}")
    if view.selection_summary:
        lines.append(view.selection_summary)
    return "\n".join(lines)


def print_table(title: str, view: TableView) -> None:
    print(f"\n{format_table(title, view)}")
