"""Row access contract shared by every pipeline stage.

Rows are caller-owned records of arbitrary shape: plain mappings, pydantic
models, dataclass instances or simple objects. The engine only reads them.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from pydantic import BaseModel

Row = Any
RowId = Union[str, int]
ID_FIELD = "id"


@dataclass(frozen=True)
class FieldValue:
    present: bool
    value: Any = None

    @classmethod
    def of(cls, value: Any) -> "FieldValue":
        return cls(present=True, value=value)

    def or_else(self, default: Any) -> Any:
        return self.value if self.present else default


MISSING = FieldValue(present=False)


def as_mapping(row: Row) -> Mapping[str, Any]:
    """Return the row's own fields as a read-only mapping."""
    if isinstance(row, Mapping):
        return row
    if isinstance(row, BaseModel):
        return dict(row)
    if dataclasses.is_dataclass(row) and not isinstance(row, type):
        return {item.name: getattr(row, item.name) for item in dataclasses.fields(row)}
    if hasattr(row, "__dict__"):
        return vars(row)
    return {}


def get_field(row: Row, key: str) -> FieldValue:
    fields = as_mapping(row)
    if key not in fields:
        return MISSING
    return FieldValue.of(fields[key])


def row_values(row: Row) -> list[Any]:
    return list(as_mapping(row).values())


def row_id(row: Row) -> RowId | None:
    value = get_field(row, ID_FIELD).value
    if isinstance(value, bool):
        return None
    if isinstance(value, (str, int)):
        return value
    return None

