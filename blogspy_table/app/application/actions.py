from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from blogspy_table.app.domain.models.row import Row
from blogspy_table.app.errors import UnknownActionError


@dataclass(frozen=True)
class BulkAction:
    label: str
    on_click: Callable[[list[Row]], Any]
    icon: str | None = None


class BulkActionMenu:
    def __init__(self, actions: Sequence[BulkAction] = ()) -> None:
        self.actions = list(actions)

    def is_visible(self, *, selectable: bool, selected_count: int) -> bool:
        return selectable and bool(self.actions) and selected_count > 0

    def label(self, selected_count: int) -> str:
        return f"Actions ({selected_count})"

    def find(self, label: str) -> BulkAction:
        for action in self.actions:
            if action.label == label:
                return action
        raise UnknownActionError(
            code="UNKNOWN_ACTION",
            message=f"No bulk action labelled {label!r}",
            details={"available": [action.label for action in self.actions]},
        )
