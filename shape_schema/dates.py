"""
dates.py - date-time strings parsed into aware ``datetime`` values.

Construction goes through :class:`pandas.Timestamp`, so both plain dates
(``2024-01-15``) and full ISO-8601 stamps are accepted.  Values without an
offset are taken as UTC; the parsed result is always a UTC-aware
:class:`datetime.datetime`.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any

from .errors import ValidationError
from .schema import Schema
from .utils import _iso, _to_datetime, _to_timestamp

__all__ = ["DateSchema"]


def _boundary(value: Any):
    ts = _to_timestamp(value)
    if ts is None:
        raise ValueError(f"date bound is not a valid date: {value!r}")
    return ts


class DateSchema(Schema[_dt.datetime]):
    def __init__(self) -> None:
        self._checks: tuple[tuple[str, Any], ...] = ()

    def min(self, bound: Any) -> "DateSchema":
        """Require instants on or after *bound* (str, date, datetime or Timestamp)."""
        return self._evolve(_checks=self._checks + (("min", _boundary(bound)),))

    def max(self, bound: Any) -> "DateSchema":
        """Require instants on or before *bound*."""
        return self._evolve(_checks=self._checks + (("max", _boundary(bound)),))

    def parse(self, value: Any, path: str = "") -> _dt.datetime:
        if not isinstance(value, str):
            self._fail(path, "Expected date string")
        ts = _to_timestamp(value)
        if ts is None:
            self._fail(path, "Invalid date")
        for kind, bound in self._checks:
            if kind == "min" and ts < bound:
                raise ValidationError.single(path, f"Date must be on or after {_iso(bound)}")
            if kind == "max" and ts > bound:
                raise ValidationError.single(path, f"Date must be on or before {_iso(bound)}")
        return _to_datetime(ts)

    def describe(self) -> dict[str, Any]:
        return {"type": "string", "format": "date-time"}
