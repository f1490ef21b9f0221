from __future__ import annotations

import math
from collections.abc import Sequence
from enum import Enum
from functools import cmp_to_key, lru_cache
from numbers import Real
from typing import Any

from pyuca import Collator

from blogspy_table.app.domain.models.column import ColumnDef
from blogspy_table.app.domain.models.row import FieldValue, Row, get_field
from blogspy_table.app.ui.filters import stringify_value

EMPTY_VALUE = "-"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


def collation_key(text: str) -> tuple[int, ...]:
    """Unicode collation key, so accented letters sort beside their base letter."""
    return _collator().sort_key(text)


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return not math.isnan(value)


def compare_values(left: FieldValue, right: FieldValue) -> int:
    # Numeric order only when both sides are numbers; any other pair compares as text.
    if is_numeric(left.value) and is_numeric(right.value):
        return (left.value > right.value) - (left.value < right.value)
    left_text = stringify_value(left.value).lower()
    right_text = stringify_value(right.value).lower()
    left_key = collation_key(left_text)
    right_key = collation_key(right_text)
    return (left_key > right_key) - (left_key < right_key)


def sort_rows(rows: Sequence[Row], sort_key: str | None, direction: SortDirection | str = SortDirection.ASC) -> Sequence[Row]:
    if not sort_key:
        return rows
    sign = -1 if SortDirection(direction) is SortDirection.DESC else 1

    def _compare(left: Row, right: Row) -> int:
        return sign * compare_values(get_field(left, sort_key), get_field(right, sort_key))

    return sorted(rows, key=cmp_to_key(_compare))


def display_value(value: FieldValue | Any) -> str:
    if isinstance(value, FieldValue):
        if not value.present:
            return EMPTY_VALUE
        value = value.value
    if value is None:
        return EMPTY_VALUE
    return stringify_value(value)


def render_cell(column: ColumnDef, row: Row, index: int) -> Any:
    field = get_field(row, column.key)
    if column.render is not None:
        return column.render(field.value, row, index)
    return display_value(field)
