"""
builders.py - factory functions used to compose schemas.

    >>> import shape_schema as ss
    >>> point = ss.object({"x": ss.number(), "y": ss.number()})
    >>> point.parse({"x": 1, "y": 2, "z": 3})
    {'x': 1, 'y': 2}
"""

from __future__ import annotations

from typing import Mapping, Sequence

from .choices import EnumSchema, LiteralSchema, UnionSchema
from .containers import ArraySchema, ObjectSchema, RecordSchema
from .dates import DateSchema
from .primitives import BooleanSchema, NumberSchema, StringSchema
from .schema import Schema

__all__ = [
    "string", "number", "boolean",
    "array", "object", "record",
    "enum", "literal", "union",
    "date",
]


def string() -> StringSchema:
    return StringSchema()


def number() -> NumberSchema:
    return NumberSchema()


def boolean() -> BooleanSchema:
    return BooleanSchema()


def array(item: Schema) -> ArraySchema:
    return ArraySchema(item)


def object(shape: Mapping[str, Schema]) -> ObjectSchema:  # noqa: A001
    return ObjectSchema(shape)


def record(value_schema: Schema) -> RecordSchema:
    return RecordSchema(value_schema)


def enum(values: Sequence[str]) -> EnumSchema:
    return EnumSchema(values)


def literal(value: str | int | float | bool | None) -> LiteralSchema:
    return LiteralSchema(value)


def union(members: Sequence[Schema]) -> UnionSchema:
    return UnionSchema(members)


def date() -> DateSchema:
    return DateSchema()
