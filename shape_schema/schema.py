"""
schema.py - the abstract schema contract and its modifier wrappers
=================================================================

Every schema variant implements two capabilities:

``parse(value, path="")``
    Return the accepted (possibly transformed) value or raise
    :class:`~shape_schema.errors.ValidationError` carrying issues anchored at
    *path* or deeper.

``describe()``
    Return a JSON-Schema-like ``dict`` for documentation tooling.  Reads
    schema metadata only and never raises.

Schemas are immutable.  Builder methods (``min``, ``max``, ``with_message``,
...) return a *new* node, so a schema may be shared freely between threads
once built.

Modifiers defined here wrap exactly one inner schema:

* :class:`OptionalSchema` - ``MISSING`` passes through, else delegate.
* :class:`NullableSchema` - ``None`` passes through, else delegate.
* :class:`TransformSchema` - delegate, then map the result through a function.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

from .errors import ValidationError

__all__ = [
    "MISSING",
    "Schema",
    "OptionalSchema",
    "NullableSchema",
    "TransformSchema",
]

T = TypeVar("T")
U = TypeVar("U")


class _Missing:
    """Marker for an absent value (an object key that was not supplied)."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Missing":
        return self

    def __deepcopy__(self, memo: dict) -> "_Missing":
        return self

    def __reduce__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


# --------------------------------------------------------------------------- #
# Abstract base                                                               #
# --------------------------------------------------------------------------- #

class Schema(ABC, Generic[T]):
    """Base class of every schema node."""

    _message: str | None = None

    @abstractmethod
    def parse(self, value: Any, path: str = "") -> T:
        ...

    @abstractmethod
    def describe(self) -> dict[str, Any]:
        ...

    # builder -----------------------------------------------------------------
    def _evolve(self, **attrs: Any):
        """Return a shallow copy of this node with *attrs* replaced."""
        clone = copy.copy(self)
        clone.__dict__.update(attrs)
        return clone

    def with_message(self, message: str):
        """Replace the default message for this node's own type failure.

        Constraint failures and nested child failures keep their messages.
        """
        if not isinstance(message, str):
            raise TypeError(f"message must be a str, got {type(message).__name__}")
        return self._evolve(_message=message)

    def optional(self) -> "OptionalSchema[T]":
        return OptionalSchema(self)

    def nullable(self) -> "NullableSchema[T]":
        return NullableSchema(self)

    def transform(self, fn: Callable[[T], U]) -> "TransformSchema[T, U]":
        return TransformSchema(self, fn)

    @property
    def is_optional(self) -> bool:
        """True when an object field using this schema may be omitted."""
        return False

    # failure -----------------------------------------------------------------
    def _fail(self, path: str, default: str):
        raise ValidationError.single(
            path, self._message if self._message is not None else default
        )


def _require_schema(schema: Any, what: str) -> Schema:
    if not isinstance(schema, Schema):
        raise TypeError(f"{what} must be a Schema, got {type(schema).__name__}")
    return schema


# --------------------------------------------------------------------------- #
# Modifiers                                                                   #
# --------------------------------------------------------------------------- #

class _Wrapper(Schema[T]):
    def __init__(self, inner: Schema):
        self._inner = _require_schema(inner, "wrapped value")

    @property
    def inner(self) -> Schema:
        return self._inner


class OptionalSchema(_Wrapper[T]):
    def parse(self, value: Any, path: str = "") -> T:
        if value is MISSING:
            return MISSING
        return self._inner.parse(value, path)

    def describe(self) -> dict[str, Any]:
        return self._inner.describe()

    @property
    def is_optional(self) -> bool:
        return True


class NullableSchema(_Wrapper[T]):
    def parse(self, value: Any, path: str = "") -> T:
        if value is None:
            return None
        return self._inner.parse(value, path)

    def describe(self) -> dict[str, Any]:
        return {"oneOf": [self._inner.describe(), {"type": "null"}]}

    @property
    def is_optional(self) -> bool:
        return self._inner.is_optional


class TransformSchema(_Wrapper[U], Generic[T, U]):
    """Validate through *inner*, then return ``fn(result)``.

    Errors raised inside *fn* are not caught.
    """

    def __init__(self, inner: Schema[T], fn: Callable[[T], U]):
        super().__init__(inner)
        if not callable(fn):
            raise TypeError("transform expects a callable")
        self._fn = fn

    def parse(self, value: Any, path: str = "") -> U:
        result = self._inner.parse(value, path)
        if result is MISSING:
            return MISSING
        return self._fn(result)

    def describe(self) -> dict[str, Any]:
        return self._inner.describe()

    @property
    def is_optional(self) -> bool:
        return self._inner.is_optional
