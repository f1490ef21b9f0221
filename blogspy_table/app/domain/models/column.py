from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Align(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


CellRenderer = Callable[[Any, Any, int], Any]


@dataclass(frozen=True)
class ColumnDef:
    key: str
    header: str
    sortable: bool = False
    align: Align = Align.LEFT
    width: str | None = None
    render: CellRenderer | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", str(self.key))
        object.__setattr__(self, "align", Align(self.align))


def sortable_keys(columns: list[ColumnDef]) -> set[str]:
    return {column.key for column in columns if column.sortable}
