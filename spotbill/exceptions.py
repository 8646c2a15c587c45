from __future__ import annotations
from typing import Optional


class BillError(Exception): ...


class IngestError(BillError): ...


class TariffError(BillError): ...


class ConfigError(BillError): ...


class ParseError(BillError):
    """A row field that could not be turned into a date, hour or number."""

    def __init__(
        self,
        message: str,
        *,
        row: Optional[int] = None,
        field: Optional[str] = None,
        value: Optional[str] = None,
    ):
        super().__init__(message)
        self.row = row
        self.field = field
        self.value = value

    def __str__(self) -> str:
        where = []
        if self.row is not None:
            where.append(f"row {self.row}")
        if self.field:
            where.append(f"field {self.field!r}")
        if self.value is not None:
            where.append(f"value {self.value!r}")
        base = super().__str__()
        return f"{base} ({', '.join(where)})" if where else base


def require(condition: bool, message: str, exc: type[BillError] = BillError):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
