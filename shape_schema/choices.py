"""
choices.py - enum, literal and union schemas.

Fixed-value matching and first-match-wins alternation.  All three fail fast
with a single issue.
"""

from __future__ import annotations

from typing import Any, Sequence

from .errors import ValidationError
from .schema import Schema, _require_schema
from .utils import _is_number, _json_literal, _strict_equal

__all__ = [
    "EnumSchema",
    "LiteralSchema",
    "UnionSchema",
]


class EnumSchema(Schema[str]):
    def __init__(self, values: Sequence[str]):
        if isinstance(values, str):
            raise TypeError("enum values must be a sequence of strings, not a string")
        values = tuple(values)
        if not values:
            raise ValueError("enum requires at least one value")
        bad = [v for v in values if not isinstance(v, str)]
        if bad:
            raise TypeError(f"enum values must be strings, got {bad!r}")
        self._values = values

    @property
    def values(self) -> tuple[str, ...]:
        return self._values

    def parse(self, value: Any, path: str = "") -> str:
        if not isinstance(value, str) or value not in self._values:
            self._fail(path, f"Expected one of: {', '.join(self._values)}")
        return value

    def describe(self) -> dict[str, Any]:
        return {"type": "string", "enum": list(self._values)}


class LiteralSchema(Schema[Any]):
    """Match one fixed JSON scalar by type and value."""

    def __init__(self, value: str | int | float | bool | None):
        if not (value is None or isinstance(value, (str, bool)) or _is_number(value)):
            raise TypeError(f"literal must be a JSON scalar, got {type(value).__name__}")
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def parse(self, value: Any, path: str = "") -> Any:
        if not _strict_equal(value, self._value):
            self._fail(path, f"Expected literal {_json_literal(self._value)}")
        return value

    def describe(self) -> dict[str, Any]:
        return {"const": self._value}


class UnionSchema(Schema[Any]):
    """Return the result of the first member that accepts the value.

    Member failures are discarded; when every member rejects the value a
    single generic issue is raised.
    """

    def __init__(self, members: Sequence[Schema]):
        members = tuple(_require_schema(m, "union member") for m in members)
        if not members:
            raise ValueError("union requires at least one member schema")
        self._members = members

    @property
    def members(self) -> tuple[Schema, ...]:
        return self._members

    def parse(self, value: Any, path: str = "") -> Any:
        for member in self._members:
            try:
                return member.parse(value, path)
            except ValidationError:
                continue
        self._fail(path, "Value does not match any type in the union")

    def describe(self) -> dict[str, Any]:
        return {"oneOf": [m.describe() for m in self._members]}