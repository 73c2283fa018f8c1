"""Errors raised by the RBAC package."""

from enum import Enum
from typing import Iterable, Type


class RBACConsistencyError(RuntimeError):
    """Raised when a derived table does not cover its enumeration exactly."""

    def __init__(
        self,
        table: str,
        missing: Iterable = (),
        unknown: Iterable = (),
        empty: Iterable = (),
    ):
        self.table = table
        self.missing = sorted(str(m) for m in missing)
        self.unknown = sorted(str(u) for u in unknown)
        self.empty = sorted(str(e) for e in empty)
        parts = []
        if self.missing:
            parts.append(f"missing: {', '.join(self.missing)}")
        if self.unknown:
            parts.append(f"unknown: {', '.join(self.unknown)}")
        if self.empty:
            parts.append(f"empty: {', '.join(self.empty)}")
        super().__init__(f"Inconsistent table {table} ({'; '.join(parts)})")


def require_exhaustive(table: dict, enum_cls: Type[Enum], table_name: str) -> dict:
    """Check that ``table`` is keyed by exactly the members of ``enum_cls``.

    Returns the table unchanged so it can wrap a module-level definition.
    """
    expected = set(enum_cls)
    keys = set(table)
    if keys != expected:
        raise RBACConsistencyError(
            table_name,
            missing=[m.value for m in expected - keys],
            unknown=[getattr(k, "value", k) for k in keys - expected],
        )
    return table
