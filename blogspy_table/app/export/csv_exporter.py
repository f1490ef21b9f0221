from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path

from blogspy_table.app.application.data_table import DataTable
from blogspy_table.app.config import load_settings
from blogspy_table.app.domain.models.row import get_field
from blogspy_table.app.infrastructure.logging.logger import log_event
from blogspy_table.app.ui.listing_view import display_value


def export_current_view(table: DataTable, *, output_dir: str | None = None) -> Path:
    """Write every filtered and sorted row (all pages) of ``table`` to a CSV file."""
    destination = Path(output_dir or load_settings().EXPORT_DIR)
    destination.mkdir(parents=True, exist_ok=True)

    now = datetime.now().astimezone()
    timestamp = now.strftime("%Y%m%d_%H%M%S")
    path = destination / f"{table.name}_{timestamp}.csv"

    state = table.state
    rows = table.sorted_rows
    headers = [column.header for column in table.columns]
    with path.open("w", newline="", encoding="utf-8-sig") as handle:
        handle.write(f"# timestamp_local: {now.isoformat()}\n")
        handle.write(f"# table: {table.name}\n")
        handle.write(f"# search: {state.search_text or 'N/A'}\n")
        handle.write(f"# sort: {state.sort_key or 'N/A'} {state.sort_direction.value}\n")
        writer = csv.writer(handle)
        writer.writerow(headers)
        for row in rows:
            writer.writerow([display_value(get_field(row, column.key)) for column in table.columns])

    log_event(table.logger, module=table.name, action="export", rows=len(rows), path=str(path))
    return path
