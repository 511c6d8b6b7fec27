"""
utils.py – shared, low-level helpers for the shape-schema package.

This module consolidates common helpers for:
- Path building (dotted / bracketed issue addresses)
- Type checking (JSON-ish runtime kinds)
- Canonical string rendering for coercion and messages
- Date construction and ISO-8601 formatting
"""

from __future__ import annotations

import datetime as _dt
import json
import math
import numbers
from collections.abc import Mapping
from typing import Any

import pandas as pd

# --------------------------------------------------------------------------- #
# Path Helpers                                                                #
# --------------------------------------------------------------------------- #

def _child_path(path: str, key: Any) -> str:
    """Address of *key* below *path* (bare key at the root)."""
    return f"{path}.{key}" if path else str(key)


def _index_path(path: str, index: int) -> str:
    return f"{path}[{index}]"


# --------------------------------------------------------------------------- #
# Type Checking Helpers                                                       #
# --------------------------------------------------------------------------- #

def _is_number(value: Any) -> bool:
    """True for real numbers that are not booleans and not NaN."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return not math.isnan(value)


def _is_integral(value: numbers.Real) -> bool:
    if isinstance(value, numbers.Integral):
        return True
    return math.isfinite(value) and float(value).is_integer()


def _is_sequence(value: Any) -> bool:
    """Array-like input: lists and tuples only."""
    return isinstance(value, (list, tuple))


def _is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def _strict_equal(a: Any, b: Any) -> bool:
    """Equality across type *and* value (``True`` never equals ``1``)."""
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, numbers.Real) and isinstance(b, numbers.Real):
        return a == b
    return type(a) is type(b) and a == b


# --------------------------------------------------------------------------- #
# Rendering                                                                   #
# --------------------------------------------------------------------------- #

def _canonical_str(value: Any) -> str:
    """Canonical text of a boolean or number (``true``, ``42``, ``3.5``)."""
    if value is True:   return "true"
    if value is False:  return "false"
    if isinstance(value, numbers.Integral):
        return str(int(value))
    f = float(value)
    if math.isnan(f):
        return "NaN"
    if math.isinf(f):
        return "Infinity" if f > 0 else "-Infinity"
    if f.is_integer() and abs(f) < 1e21:
        return str(int(f))
    return repr(f)


def _json_literal(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


# --------------------------------------------------------------------------- #
# Date Helpers                                                                #
# --------------------------------------------------------------------------- #

_RELATIVE_WORDS = frozenset({"now", "today", "nat"})

def _to_timestamp(value: Any) -> pd.Timestamp | None:
    """Return *value* as a UTC ``pd.Timestamp``, or None if it is not a date.

    Naive values are interpreted as UTC; aware values are converted.
    """
    if isinstance(value, str) and value.strip().lower() in _RELATIVE_WORDS:
        return None
    try:
        ts = pd.Timestamp(value)
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(ts):
        return None
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


def _iso(ts: pd.Timestamp) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, ``Z`` suffix."""
    ts = ts.tz_convert("UTC") if ts.tzinfo is not None else ts
    return ts.strftime("%Y-%m-%dT%H:%M:%S.") + f"{ts.microsecond // 1000:03d}Z"


def _to_datetime(ts: pd.Timestamp) -> _dt.datetime:
    return ts.floor("us").to_pydatetime()


# --------------------------------------------------------------------------- #
# Builder Argument Checks                                                     #
# --------------------------------------------------------------------------- #

def _non_negative_int(n: Any, what: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise ValueError(f"{what} must be a non-negative int, got {n!r}")
    return n
