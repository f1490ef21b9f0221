from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TableError(Exception):
    code: str
    message: str
    details: object | None = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class TableConfigError(TableError, ValueError):
    """Invalid settings or table options."""


class UnknownActionError(TableError, LookupError):
    """Bulk action label not registered on the table."""


def config_error_from_validation(exc: Exception, *, source: str) -> TableConfigError:
    errors = []
    for error in getattr(exc, "errors", lambda: [])():
        loc = ".".join(str(item) for item in error.get("loc", ())) or None
        errors.append({"field": loc, "message": error.get("msg", "Invalid value"), "type": error.get("type")})
    fields = ", ".join(item["field"] for item in errors if item["field"]) or "unknown"
    return TableConfigError(
        code="INVALID_CONFIG",
        message=f"Invalid {source}: {fields}",
        details={"errors": errors},
    )
