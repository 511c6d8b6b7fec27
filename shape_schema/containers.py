"""
containers.py - array, object and record schemas.

Containers recurse into their child schemas and *aggregate*: every element,
field or entry is attempted, and all child issues are raised together in one
:class:`ValidationError`.  Only the container's own shape and length checks
fail fast.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

from .errors import Issue, ValidationError
from .schema import MISSING, Schema, _require_schema
from .utils import _child_path, _index_path, _is_mapping, _is_sequence, _non_negative_int

__all__ = [
    "ArraySchema",
    "ObjectSchema",
    "RecordSchema",
]


def _collect(steps: Iterable[tuple[Any, Callable[[], Any]]]) -> list[tuple[Any, Any]]:
    """Run every ``(key, thunk)`` step, gathering issues instead of stopping.

    Returns ``(key, value)`` pairs when no step failed; otherwise raises one
    :class:`ValidationError` with all issues in step order.
    """
    issues: list[Issue] = []
    results: list[tuple[Any, Any]] = []
    for key, step in steps:
        try:
            results.append((key, step()))
        except ValidationError as exc:
            issues.extend(exc.issues)
    if issues:
        raise ValidationError(issues)
    return results


# --------------------------------------------------------------------------- #
# Array                                                                       #
# --------------------------------------------------------------------------- #

class ArraySchema(Schema[list]):
    def __init__(self, item: Schema):
        self._item = _require_schema(item, "array item")
        self._checks: tuple[tuple[str, int], ...] = ()

    @property
    def item(self) -> Schema:
        return self._item

    def min(self, n: int) -> "ArraySchema":
        return self._evolve(_checks=self._checks + (("min", _non_negative_int(n, "item count")),))

    def max(self, n: int) -> "ArraySchema":
        return self._evolve(_checks=self._checks + (("max", _non_negative_int(n, "item count")),))

    def parse(self, value: Any, path: str = "") -> list:
        if not _is_sequence(value):
            self._fail(path, "Expected array")
        for kind, n in self._checks:
            if kind == "min" and len(value) < n:
                raise ValidationError.single(path, f"Array must have at least {n} items")
            if kind == "max" and len(value) > n:
                raise ValidationError.single(path, f"Array must have at most {n} items")

        item = self._item
        pairs = _collect(
            (i, lambda i=i, v=v: item.parse(v, _index_path(path, i)))
            for i, v in enumerate(value)
        )
        return [v for _, v in pairs]

    def describe(self) -> dict[str, Any]:
        doc: dict[str, Any] = {"type": "array", "items": self._item.describe()}
        for kind, n in self._checks:
            if kind == "min":   doc["minItems"] = n
            elif kind == "max": doc["maxItems"] = n
        return doc


# --------------------------------------------------------------------------- #
# Object                                                                      #
# --------------------------------------------------------------------------- #

class ObjectSchema(Schema[dict]):
    """Validate a mapping field-by-field against a fixed *shape*.

    Unknown keys are dropped and the output is always a new ``dict``; fields
    whose parsed value is ``MISSING`` are left out.
    """

    def __init__(self, shape: Mapping[str, Schema]):
        if not _is_mapping(shape):
            raise TypeError(f"object shape must be a mapping, got {type(shape).__name__}")
        self._shape = MappingProxyType(
            {k: _require_schema(s, f"field {k!r}") for k, s in shape.items()}
        )

    @property
    def shape(self) -> Mapping[str, Schema]:
        return self._shape

    def parse(self, value: Any, path: str = "") -> dict:
        if not _is_mapping(value):
            self._fail(path, "Expected object")
        pairs = _collect(
            (key, lambda key=key, s=s: s.parse(value.get(key, MISSING), _child_path(path, key)))
            for key, s in self._shape.items()
        )
        return {k: v for k, v in pairs if v is not MISSING}

    def describe(self) -> dict[str, Any]:
        properties = {k: s.describe() for k, s in self._shape.items()}
        required = [k for k, s in self._shape.items() if not s.is_optional]
        doc: dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            doc["required"] = required
        return doc


# --------------------------------------------------------------------------- #
# Record                                                                      #
# --------------------------------------------------------------------------- #

class RecordSchema(Schema[dict]):
    """Validate every value of an arbitrary mapping against one schema."""

    def __init__(self, value_schema: Schema):
        self._value = _require_schema(value_schema, "record value")

    @property
    def value_schema(self) -> Schema:
        return self._value

    def parse(self, value: Any, path: str = "") -> dict:
        if not _is_mapping(value):
            self._fail(path, "Expected object")
        schema = self._value
        pairs = _collect(
            (key, lambda key=key, v=v: schema.parse(v, _child_path(path, key)))
            for key, v in value.items()
        )
        return dict(pairs)

    def describe(self) -> dict[str, Any]:
        return {"type": "object", "additionalProperties": self._value.describe()}
