"""
primitives.py - string, number and boolean schemas plus coercing variants.

Primitive schemas fail fast: the type check runs first, then every attached
constraint in attachment order, and the first failure raises.  The coercing
variants widen the accepted *input* before the same checks run, which is how
string-only transports (query strings, route params) produce typed values.
"""

from __future__ import annotations

import numbers
import re
from typing import Any

from .errors import ValidationError
from .schema import Schema
from .utils import _canonical_str, _is_integral, _is_number, _non_negative_int

__all__ = [
    "StringSchema",
    "NumberSchema",
    "BooleanSchema",
    "CoercedStringSchema",
    "CoercedNumberSchema",
    "CoercedBooleanSchema",
]


def _bound(n: Any) -> numbers.Real:
    if not _is_number(n):
        raise TypeError(f"numeric bound must be a real number, got {n!r}")
    return n


# --------------------------------------------------------------------------- #
# String                                                                      #
# --------------------------------------------------------------------------- #

class StringSchema(Schema[str]):
    def __init__(self) -> None:
        self._checks: tuple[tuple[str, Any], ...] = ()

    def min(self, n: int) -> "StringSchema":
        return self._evolve(_checks=self._checks + (("min", _non_negative_int(n, "length bound")),))

    def max(self, n: int) -> "StringSchema":
        return self._evolve(_checks=self._checks + (("max", _non_negative_int(n, "length bound")),))

    def pattern(self, regex: str | re.Pattern) -> "StringSchema":
        """Require a full-string match of *regex*."""
        if isinstance(regex, str):
            regex = re.compile(regex)
        elif not isinstance(regex, re.Pattern):
            raise TypeError(f"pattern expects str or re.Pattern, got {type(regex).__name__}")
        return self._evolve(_checks=self._checks + (("pattern", regex),))

    def parse(self, value: Any, path: str = "") -> str:
        if not isinstance(value, str):
            self._fail(path, "Expected string")
        for kind, arg in self._checks:
            if kind == "min" and len(value) < arg:
                raise ValidationError.single(path, f"String must be at least {arg} characters")
            if kind == "max" and len(value) > arg:
                raise ValidationError.single(path, f"String must be at most {arg} characters")
            if kind == "pattern" and arg.fullmatch(value) is None:
                raise ValidationError.single(path, f"String must match pattern {arg.pattern}")
        return value

    def describe(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"type": "string"}
        for kind, arg in self._checks:
            if kind == "min":       doc["minLength"] = arg
            elif kind == "max":     doc["maxLength"] = arg
            elif kind == "pattern": doc["pattern"] = arg.pattern
        return doc


# --------------------------------------------------------------------------- #
# Number                                                                      #
# --------------------------------------------------------------------------- #

class NumberSchema(Schema[float]):
    def __init__(self) -> None:
        self._checks: tuple[tuple[str, Any], ...] = ()

    def min(self, n: numbers.Real) -> "NumberSchema":
        return self._evolve(_checks=self._checks + (("min", _bound(n)),))

    def max(self, n: numbers.Real) -> "NumberSchema":
        return self._evolve(_checks=self._checks + (("max", _bound(n)),))

    def integer(self) -> "NumberSchema":
        return self._evolve(_checks=self._checks + (("integer", None),))

    def parse(self, value: Any, path: str = "") -> float:
        if not _is_number(value):
            self._fail(path, "Expected number")
        for kind, arg in self._checks:
            if kind == "min" and value < arg:
                raise ValidationError.single(path, f"Number must be at least {_canonical_str(arg)}")
            if kind == "max" and value > arg:
                raise ValidationError.single(path, f"Number must be at most {_canonical_str(arg)}")
            if kind == "integer" and not _is_integral(value):
                raise ValidationError.single(path, "Number must be an integer")
        return value

    def describe(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"type": "number"}
        for kind, arg in self._checks:
            if kind == "min":       doc["minimum"] = arg
            elif kind == "max":     doc["maximum"] = arg
            elif kind == "integer": doc["type"] = "integer"
        return doc


# --------------------------------------------------------------------------- #
# Boolean                                                                     #
# --------------------------------------------------------------------------- #

class BooleanSchema(Schema[bool]):
    def parse(self, value: Any, path: str = "") -> bool:
        if not isinstance(value, bool):
            self._fail(path, "Expected boolean")
        return value

    def describe(self) -> dict[str, Any]:
        return {"type": "boolean"}


# --------------------------------------------------------------------------- #
# Coercing variants                                                           #
# --------------------------------------------------------------------------- #

class CoercedStringSchema(StringSchema):
    """Accept numbers and booleans, rendered in canonical text form."""

    def parse(self, value: Any, path: str = "") -> str:
        if isinstance(value, numbers.Real):
            value = _canonical_str(value)
        return super().parse(value, path)


class CoercedNumberSchema(NumberSchema):
    """Accept numeric text; surrounding whitespace is ignored."""

    def parse(self, value: Any, path: str = "") -> float:
        if isinstance(value, str):
            text = value.strip()
            if not text or "_" in text or not text.isascii():
                self._fail(path, "Expected number")
            try:
                value = int(text)
            except ValueError:
                try:
                    value = float(text)
                except ValueError:
                    self._fail(path, "Expected number")
        return super().parse(value, path)


_TRUE_WORDS = frozenset({"true", "1"})
_FALSE_WORDS = frozenset({"false", "0", ""})

class CoercedBooleanSchema(BooleanSchema):
    """Accept ``true``/``1`` and ``false``/``0``/empty text, case-insensitive."""

    def parse(self, value: Any, path: str = "") -> bool:
        if isinstance(value, str):
            word = value.lower()
            if word in _TRUE_WORDS:
                return True
            if word in _FALSE_WORDS:
                return False
            self._fail(path, "Expected boolean")
        return super().parse(value, path)
