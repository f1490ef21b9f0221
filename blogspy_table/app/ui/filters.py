from __future__ import annotations

import math
import threading
from collections.abc import Sequence
from typing import Any, Callable

from blogspy_table.app.domain.models.row import Row, row_values


def stringify_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def row_matches(row: Row, needle: str) -> bool:
    return any(needle in stringify_value(value).lower() for value in row_values(row))


def filter_rows(rows: Sequence[Row], search_text: str) -> Sequence[Row]:
    """Keep rows where any own field contains ``search_text``, ignoring case.

    An empty search returns ``rows`` itself.
    """
    if not search_text:
        return rows
    needle = search_text.lower()
    return [row for row in rows if row_matches(row, needle)]


class SearchDebouncer:
    """Coalesce fast keystrokes so only the last term within ``wait_ms`` is applied.

    ``submit`` never blocks: each call cancels the pending timer and starts a
    new one. With ``wait_ms <= 0`` terms are applied immediately.
    """

    def __init__(
        self,
        apply: Callable[[str], None],
        wait_ms: int = 350,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ) -> None:
        self.apply = apply
        self.wait_ms = wait_ms
        self._timer_factory = timer_factory
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()

    def submit(self, term: str) -> None:
        if self.wait_ms <= 0:
            self.apply(term)
            return
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            timer = self._timer_factory(self.wait_ms / 1000, self.apply, args=(term,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    @property
    def pending(self) -> bool:
        timer = self._timer
        return timer is not None and timer.is_alive()
